from django.db import models

from core.constants import LocationRole, RecipientType
from organizations.models import Organization
from reference.models import Country, TransferMechanism


class ExternalOrganization(models.Model):
    """Third-party legal entity (vendor, partner, authority)"""
    organization = models.ForeignKey(Organization, on_delete=models.CASCADE, related_name='external_organizations')
    legal_name = models.CharField(max_length=255)
    trading_name = models.CharField(max_length=255, blank=True)
    headquarters_country = models.ForeignKey(
        Country,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='headquartered_organizations'
    )
    website = models.URLField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['legal_name']
        verbose_name = "External Organization"
        verbose_name_plural = "External Organizations"

    def __str__(self):
        return self.trading_name or self.legal_name


class Recipient(models.Model):
    """Anyone personal data is disclosed to"""
    organization = models.ForeignKey(Organization, on_delete=models.CASCADE, related_name='recipients')
    name = models.CharField(max_length=255)
    recipient_type = models.CharField(max_length=30, choices=RecipientType.CHOICES, default=RecipientType.PROCESSOR)
    external_organization = models.ForeignKey(
        ExternalOrganization,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='recipients'
    )
    purpose = models.TextField(blank=True)
    description = models.TextField(blank=True)
    parent_recipient = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sub_recipients',
        help_text="Set for sub-processors"
    )
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        verbose_name = "Recipient"
        verbose_name_plural = "Recipients"
        indexes = [
            models.Index(fields=['organization', 'recipient_type'], name='recipient_org_type_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.get_recipient_type_display()})"


class RecipientProcessingLocation(models.Model):
    """Where a recipient hosts or processes the data it receives"""
    organization = models.ForeignKey(Organization, on_delete=models.CASCADE, related_name='recipient_processing_locations')
    recipient = models.ForeignKey(Recipient, on_delete=models.CASCADE, related_name='processing_locations')
    service = models.CharField(max_length=255)
    location_role = models.CharField(max_length=20, choices=LocationRole.CHOICES, default=LocationRole.PROCESSING)
    country = models.ForeignKey(Country, on_delete=models.PROTECT, related_name='recipient_processing_locations')
    transfer_mechanism = models.ForeignKey(
        TransferMechanism,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='recipient_processing_locations'
    )
    is_active = models.BooleanField(default=True, help_text="Cleared on soft delete")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['recipient', 'service']
        verbose_name = "Recipient Processing Location"
        verbose_name_plural = "Recipient Processing Locations"
        indexes = [
            models.Index(fields=['organization', 'is_active'], name='recip_loc_org_active_idx'),
            models.Index(fields=['recipient', 'is_active'], name='recip_loc_recip_active_idx'),
        ]

    def __str__(self):
        return f"{self.recipient.name} - {self.service} ({self.country.iso_code})"
