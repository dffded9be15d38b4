# Generated manually for recipient models

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('organizations', '0001_initial'),
        ('reference', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ExternalOrganization',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('legal_name', models.CharField(max_length=255)),
                ('trading_name', models.CharField(blank=True, max_length=255)),
                ('website', models.URLField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('organization', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='external_organizations', to='organizations.organization')),
                ('headquarters_country', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='headquartered_organizations', to='reference.country')),
            ],
            options={
                'verbose_name': 'External Organization',
                'verbose_name_plural': 'External Organizations',
                'ordering': ['legal_name'],
            },
        ),
        migrations.CreateModel(
            name='Recipient',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('recipient_type', models.CharField(choices=[('PROCESSOR', 'Processor'), ('SUB_PROCESSOR', 'Sub-processor'), ('JOINT_CONTROLLER', 'Joint Controller'), ('THIRD_PARTY', 'Third Party'), ('INTERNAL_DEPARTMENT', 'Internal Department'), ('PUBLIC_AUTHORITY', 'Public Authority')], default='PROCESSOR', max_length=30)),
                ('purpose', models.TextField(blank=True)),
                ('description', models.TextField(blank=True)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('organization', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='recipients', to='organizations.organization')),
                ('external_organization', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='recipients', to='recipients.externalorganization')),
                ('parent_recipient', models.ForeignKey(blank=True, help_text='Set for sub-processors', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='sub_recipients', to='recipients.recipient')),
            ],
            options={
                'verbose_name': 'Recipient',
                'verbose_name_plural': 'Recipients',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['organization', 'recipient_type'], name='recipient_org_type_idx')],
            },
        ),
        migrations.CreateModel(
            name='RecipientProcessingLocation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('service', models.CharField(max_length=255)),
                ('location_role', models.CharField(choices=[('HOSTING', 'Hosting'), ('PROCESSING', 'Processing'), ('BOTH', 'Hosting and Processing')], default='PROCESSING', max_length=20)),
                ('is_active', models.BooleanField(default=True, help_text='Cleared on soft delete')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('organization', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='recipient_processing_locations', to='organizations.organization')),
                ('recipient', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='processing_locations', to='recipients.recipient')),
                ('country', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='recipient_processing_locations', to='reference.country')),
                ('transfer_mechanism', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='recipient_processing_locations', to='reference.transfermechanism')),
            ],
            options={
                'verbose_name': 'Recipient Processing Location',
                'verbose_name_plural': 'Recipient Processing Locations',
                'ordering': ['recipient', 'service'],
                'indexes': [
                    models.Index(fields=['organization', 'is_active'], name='recip_loc_org_active_idx'),
                    models.Index(fields=['recipient', 'is_active'], name='recip_loc_recip_active_idx'),
                ],
            },
        ),
    ]
