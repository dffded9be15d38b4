# Generated manually for digital asset models

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('organizations', '0001_initial'),
        ('reference', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='DigitalAsset',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True)),
                ('asset_type', models.CharField(choices=[('DATABASE', 'Database'), ('APPLICATION', 'Application'), ('CLOUD_SERVICE', 'Cloud Service'), ('FILE_STORAGE', 'File Storage'), ('ANALYTICS_PLATFORM', 'Analytics Platform'), ('OTHER', 'Other')], default='APPLICATION', max_length=30)),
                ('hosting_detail', models.CharField(blank=True, help_text='e.g. AWS eu-west-1', max_length=255)),
                ('url', models.URLField(blank=True)),
                ('contains_personal_data', models.BooleanField(default=True)),
                ('integration_status', models.CharField(choices=[('NOT_INTEGRATED', 'Not Integrated'), ('MANUAL_ONLY', 'Manual Only'), ('CONNECTED', 'Connected'), ('FAILED', 'Failed')], default='NOT_INTEGRATED', max_length=20)),
                ('last_scanned_at', models.DateTimeField(blank=True, null=True)),
                ('discovered_via', models.CharField(blank=True, max_length=100)),
                ('metadata', models.JSONField(blank=True, default=dict)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('organization', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='digital_assets', to='organizations.organization')),
                ('primary_hosting_country', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='hosted_assets', to='reference.country')),
                ('technical_owner', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='technically_owned_assets', to=settings.AUTH_USER_MODEL)),
                ('business_owner', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='business_owned_assets', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Digital Asset',
                'verbose_name_plural': 'Digital Assets',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['organization', 'name'], name='asset_org_name_idx')],
            },
        ),
        migrations.CreateModel(
            name='AssetProcessingLocation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('service', models.CharField(help_text='Service or component running at this location', max_length=255)),
                ('location_role', models.CharField(choices=[('HOSTING', 'Hosting'), ('PROCESSING', 'Processing'), ('BOTH', 'Hosting and Processing')], default='PROCESSING', max_length=20)),
                ('is_active', models.BooleanField(default=True, help_text='Cleared on soft delete')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('organization', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='asset_processing_locations', to='organizations.organization')),
                ('digital_asset', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='processing_locations', to='assets.digitalasset')),
                ('country', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='asset_processing_locations', to='reference.country')),
                ('transfer_mechanism', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='asset_processing_locations', to='reference.transfermechanism')),
            ],
            options={
                'verbose_name': 'Asset Processing Location',
                'verbose_name_plural': 'Asset Processing Locations',
                'ordering': ['digital_asset', 'service'],
                'indexes': [
                    models.Index(fields=['organization', 'is_active'], name='asset_loc_org_active_idx'),
                    models.Index(fields=['digital_asset', 'is_active'], name='asset_loc_asset_active_idx'),
                ],
            },
        ),
    ]
