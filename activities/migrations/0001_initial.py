# Generated manually for processing activity models

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('organizations', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='DataProcessingActivity',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True)),
                ('risk_level', models.CharField(blank=True, choices=[('LOW', 'Low'), ('MEDIUM', 'Medium'), ('HIGH', 'High'), ('CRITICAL', 'Critical')], max_length=20, null=True)),
                ('requires_dpia', models.BooleanField(blank=True, help_text='Empty until assessed', null=True)),
                ('dpia_status', models.CharField(blank=True, choices=[('NOT_STARTED', 'Not Started'), ('IN_PROGRESS', 'In Progress'), ('UNDER_REVIEW', 'Under Review'), ('APPROVED', 'Approved'), ('OUTDATED', 'Outdated')], max_length=20, null=True)),
                ('retention_period_value', models.PositiveIntegerField(blank=True, null=True)),
                ('retention_period_unit', models.CharField(blank=True, choices=[('DAYS', 'Days'), ('MONTHS', 'Months'), ('YEARS', 'Years')], max_length=10, null=True)),
                ('retention_justification', models.TextField(blank=True)),
                ('status', models.CharField(choices=[('DRAFT', 'Draft'), ('UNDER_REVIEW', 'Under Review'), ('ACTIVE', 'Active'), ('SUSPENDED', 'Suspended'), ('ARCHIVED', 'Archived')], default='DRAFT', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('organization', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='processing_activities', to='organizations.organization')),
            ],
            options={
                'verbose_name': 'Data Processing Activity',
                'verbose_name_plural': 'Data Processing Activities',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['organization', 'status'], name='activity_org_status_idx')],
            },
        ),
    ]
