# Generated manually for taxonomy models

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('organizations', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='DataSubjectCategory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True)),
                ('is_vulnerable', models.BooleanField(default=False)),
                ('vulnerability_reason', models.TextField(blank=True)),
                ('suggests_dpia', models.BooleanField(default=False)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('organization', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='data_subject_categories', to='organizations.organization')),
            ],
            options={
                'verbose_name': 'Data Subject Category',
                'verbose_name_plural': 'Data Subject Categories',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='DataCategory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True)),
                ('sensitivity', models.CharField(choices=[('PUBLIC', 'Public'), ('INTERNAL', 'Internal'), ('CONFIDENTIAL', 'Confidential'), ('RESTRICTED', 'Restricted')], default='INTERNAL', max_length=20)),
                ('is_special_category', models.BooleanField(default=False, help_text='GDPR Art. 9 special category')),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('organization', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='data_categories', to='organizations.organization')),
            ],
            options={
                'verbose_name': 'Data Category',
                'verbose_name_plural': 'Data Categories',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Purpose',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True)),
                ('category', models.CharField(blank=True, max_length=100)),
                ('scope', models.CharField(choices=[('INTERNAL', 'Internal'), ('EXTERNAL', 'External'), ('BOTH', 'Both')], default='INTERNAL', max_length=20)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('organization', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='purposes', to='organizations.organization')),
            ],
            options={
                'verbose_name': 'Purpose',
                'verbose_name_plural': 'Purposes',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='LegalBasis',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('basis_type', models.CharField(choices=[('CONSENT', 'Consent'), ('CONTRACT', 'Contract'), ('LEGAL_OBLIGATION', 'Legal Obligation'), ('VITAL_INTERESTS', 'Vital Interests'), ('PUBLIC_TASK', 'Public Task'), ('LEGITIMATE_INTERESTS', 'Legitimate Interests')], max_length=30)),
                ('name', models.CharField(max_length=255)),
                ('framework', models.CharField(default='GDPR', max_length=50)),
                ('requires_consent', models.BooleanField(default=False)),
                ('consent_mechanism', models.TextField(blank=True)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('organization', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='legal_bases', to='organizations.organization')),
            ],
            options={
                'verbose_name': 'Legal Basis',
                'verbose_name_plural': 'Legal Bases',
                'ordering': ['name'],
            },
        ),
    ]
