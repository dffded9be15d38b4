# Generated manually for change tracking models

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('organizations', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ComponentChangeLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('component_type', models.CharField(choices=[('DigitalAsset', 'Digital Asset'), ('AssetProcessingLocation', 'Asset Processing Location'), ('RecipientProcessingLocation', 'Recipient Processing Location'), ('DataProcessingActivity', 'Data Processing Activity'), ('TransferMechanism', 'Transfer Mechanism'), ('DataSubjectCategory', 'Data Subject Category'), ('DataCategory', 'Data Category'), ('Purpose', 'Purpose'), ('LegalBasis', 'Legal Basis'), ('Recipient', 'Recipient')], help_text='Kind of component that changed', max_length=50)),
                ('component_id', models.BigIntegerField(help_text='ID of the component that changed')),
                ('change_type', models.CharField(choices=[('CREATED', 'Created'), ('UPDATED', 'Updated'), ('RESTORED', 'Restored'), ('DELETED', 'Deleted')], max_length=20)),
                ('field_changed', models.CharField(blank=True, help_text='Empty for whole-entity transitions', max_length=100, null=True)),
                ('old_value', models.JSONField(blank=True, help_text='Snapshot before the change', null=True)),
                ('new_value', models.JSONField(blank=True, help_text='Snapshot after the change', null=True)),
                ('change_reason', models.TextField(blank=True, null=True)),
                ('changed_at', models.DateTimeField(auto_now_add=True)),
                ('organization', models.ForeignKey(help_text='Organization the changed component belongs to', on_delete=django.db.models.deletion.CASCADE, related_name='change_logs', to='organizations.organization')),
                ('changed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='component_changes', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Component Change Log',
                'verbose_name_plural': 'Component Change Logs',
                'ordering': ['-changed_at', '-id'],
                'indexes': [
                    models.Index(fields=['organization', 'component_type', 'component_id', 'changed_at'], name='change_log_component_idx'),
                    models.Index(fields=['changed_at'], name='change_log_changed_at_idx'),
                    models.Index(fields=['organization', 'changed_at'], name='change_log_org_time_idx'),
                ],
            },
        ),
    ]
