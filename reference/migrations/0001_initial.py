# Generated manually for reference data models

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Country',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('iso_code', models.CharField(help_text='ISO 3166-1 alpha-2', max_length=2, unique=True)),
                ('iso_code3', models.CharField(help_text='ISO 3166-1 alpha-3', max_length=3, unique=True)),
                ('gdpr_status', models.JSONField(blank=True, default=list, help_text='Status tags such as EU, EEA, ADEQUATE or THIRD')),
                ('is_active', models.BooleanField(default=True)),
            ],
            options={
                'verbose_name': 'Country',
                'verbose_name_plural': 'Countries',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='TransferMechanism',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('code', models.CharField(max_length=50, unique=True)),
                ('description', models.TextField(blank=True)),
                ('gdpr_article', models.CharField(help_text='e.g. Art. 46(2)(c)', max_length=50)),
                ('category', models.CharField(choices=[('ADEQUACY', 'Adequacy Decision'), ('SAFEGUARD', 'Appropriate Safeguard'), ('DEROGATION', 'Derogation'), ('NONE', 'None')], default='SAFEGUARD', max_length=20)),
                ('requires_supplementary_measures', models.BooleanField(default=False)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Transfer Mechanism',
                'verbose_name_plural': 'Transfer Mechanisms',
                'ordering': ['name'],
            },
        ),
    ]
