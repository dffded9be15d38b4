"""
Management command to seed countries and transfer mechanisms.

Reference rows are global and loaded in bulk, so change tracking is
switched off for the duration.
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from change_tracking.switches import tracking_disabled
from core.constants import GdprStatus, TransferMechanismCategory
from reference.models import Country, TransferMechanism


EU = [GdprStatus.EU, GdprStatus.EEA]

COUNTRIES = [
    {'name': 'Austria', 'iso_code': 'AT', 'iso_code3': 'AUT', 'gdpr_status': EU},
    {'name': 'Belgium', 'iso_code': 'BE', 'iso_code3': 'BEL', 'gdpr_status': EU},
    {'name': 'Denmark', 'iso_code': 'DK', 'iso_code3': 'DNK', 'gdpr_status': EU},
    {'name': 'Finland', 'iso_code': 'FI', 'iso_code3': 'FIN', 'gdpr_status': EU},
    {'name': 'France', 'iso_code': 'FR', 'iso_code3': 'FRA', 'gdpr_status': EU},
    {'name': 'Germany', 'iso_code': 'DE', 'iso_code3': 'DEU', 'gdpr_status': EU},
    {'name': 'Ireland', 'iso_code': 'IE', 'iso_code3': 'IRL', 'gdpr_status': EU},
    {'name': 'Italy', 'iso_code': 'IT', 'iso_code3': 'ITA', 'gdpr_status': EU},
    {'name': 'Netherlands', 'iso_code': 'NL', 'iso_code3': 'NLD', 'gdpr_status': EU},
    {'name': 'Poland', 'iso_code': 'PL', 'iso_code3': 'POL', 'gdpr_status': EU},
    {'name': 'Spain', 'iso_code': 'ES', 'iso_code3': 'ESP', 'gdpr_status': EU},
    {'name': 'Sweden', 'iso_code': 'SE', 'iso_code3': 'SWE', 'gdpr_status': EU},
    {'name': 'Iceland', 'iso_code': 'IS', 'iso_code3': 'ISL', 'gdpr_status': [GdprStatus.EEA]},
    {'name': 'Norway', 'iso_code': 'NO', 'iso_code3': 'NOR', 'gdpr_status': [GdprStatus.EEA]},
    {'name': 'Switzerland', 'iso_code': 'CH', 'iso_code3': 'CHE', 'gdpr_status': [GdprStatus.ADEQUATE]},
    {'name': 'United Kingdom', 'iso_code': 'GB', 'iso_code3': 'GBR', 'gdpr_status': [GdprStatus.ADEQUATE]},
    {'name': 'Japan', 'iso_code': 'JP', 'iso_code3': 'JPN', 'gdpr_status': [GdprStatus.ADEQUATE]},
    {'name': 'Canada', 'iso_code': 'CA', 'iso_code3': 'CAN', 'gdpr_status': [GdprStatus.ADEQUATE]},
    {'name': 'United States', 'iso_code': 'US', 'iso_code3': 'USA', 'gdpr_status': [GdprStatus.THIRD]},
    {'name': 'India', 'iso_code': 'IN', 'iso_code3': 'IND', 'gdpr_status': [GdprStatus.THIRD]},
    {'name': 'Australia', 'iso_code': 'AU', 'iso_code3': 'AUS', 'gdpr_status': [GdprStatus.THIRD]},
    {'name': 'Brazil', 'iso_code': 'BR', 'iso_code3': 'BRA', 'gdpr_status': [GdprStatus.THIRD]},
    {'name': 'Singapore', 'iso_code': 'SG', 'iso_code3': 'SGP', 'gdpr_status': [GdprStatus.THIRD]},
]

TRANSFER_MECHANISMS = [
    {
        'code': 'ADEQUACY',
        'name': 'Adequacy Decision',
        'gdpr_article': 'Art. 45',
        'category': TransferMechanismCategory.ADEQUACY,
        'description': 'Commission decision that the destination ensures an adequate level of protection',
    },
    {
        'code': 'SCC',
        'name': 'Standard Contractual Clauses',
        'gdpr_article': 'Art. 46(2)(c)',
        'category': TransferMechanismCategory.SAFEGUARD,
        'requires_supplementary_measures': True,
    },
    {
        'code': 'BCR',
        'name': 'Binding Corporate Rules',
        'gdpr_article': 'Art. 47',
        'category': TransferMechanismCategory.SAFEGUARD,
        'requires_supplementary_measures': True,
    },
    {
        'code': 'DPF',
        'name': 'EU-US Data Privacy Framework',
        'gdpr_article': 'Art. 45',
        'category': TransferMechanismCategory.ADEQUACY,
    },
    {
        'code': 'EXPLICIT_CONSENT',
        'name': 'Explicit Consent',
        'gdpr_article': 'Art. 49(1)(a)',
        'category': TransferMechanismCategory.DEROGATION,
    },
    {
        'code': 'CONTRACT_PERFORMANCE',
        'name': 'Performance of a Contract',
        'gdpr_article': 'Art. 49(1)(b)',
        'category': TransferMechanismCategory.DEROGATION,
    },
]


class Command(BaseCommand):
    help = 'Seed countries and transfer mechanisms (idempotent, untracked)'

    def handle(self, *args, **options):
        self.stdout.write('Seeding reference data...')

        with tracking_disabled(), transaction.atomic():
            created = 0
            for data in COUNTRIES:
                _, was_created = Country.objects.update_or_create(
                    iso_code=data['iso_code'],
                    defaults=data
                )
                created += was_created
            self.stdout.write(self.style.SUCCESS(f'Countries: {created} created, {len(COUNTRIES) - created} updated'))

            created = 0
            for data in TRANSFER_MECHANISMS:
                _, was_created = TransferMechanism.objects.update_or_create(
                    code=data['code'],
                    defaults=data
                )
                created += was_created
            self.stdout.write(self.style.SUCCESS(
                f'Transfer mechanisms: {created} created, {len(TRANSFER_MECHANISMS) - created} updated'
            ))

        self.stdout.write(self.style.SUCCESS('Reference data ready'))
