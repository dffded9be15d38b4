from django.db import models
from django.conf import settings

from core.constants import AssetType, IntegrationStatus, LocationRole
from organizations.models import Organization
from reference.models import Country, TransferMechanism


class DigitalAsset(models.Model):
    """System, database or service that stores or processes personal data"""
    organization = models.ForeignKey(Organization, on_delete=models.CASCADE, related_name='digital_assets')
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    asset_type = models.CharField(max_length=30, choices=AssetType.CHOICES, default=AssetType.APPLICATION)
    primary_hosting_country = models.ForeignKey(
        Country,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='hosted_assets'
    )
    hosting_detail = models.CharField(max_length=255, blank=True, help_text="e.g. AWS eu-west-1")
    url = models.URLField(blank=True)
    technical_owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='technically_owned_assets'
    )
    business_owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='business_owned_assets'
    )
    contains_personal_data = models.BooleanField(default=True)
    integration_status = models.CharField(
        max_length=20,
        choices=IntegrationStatus.CHOICES,
        default=IntegrationStatus.NOT_INTEGRATED
    )
    last_scanned_at = models.DateTimeField(null=True, blank=True)
    discovered_via = models.CharField(max_length=100, blank=True)
    metadata = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        verbose_name = "Digital Asset"
        verbose_name_plural = "Digital Assets"
        indexes = [
            models.Index(fields=['organization', 'name'], name='asset_org_name_idx'),
        ]

    def __str__(self):
        return self.name


class AssetProcessingLocation(models.Model):
    """Where a digital asset's data is hosted or processed"""
    organization = models.ForeignKey(Organization, on_delete=models.CASCADE, related_name='asset_processing_locations')
    digital_asset = models.ForeignKey(DigitalAsset, on_delete=models.CASCADE, related_name='processing_locations')
    service = models.CharField(max_length=255, help_text="Service or component running at this location")
    location_role = models.CharField(max_length=20, choices=LocationRole.CHOICES, default=LocationRole.PROCESSING)
    country = models.ForeignKey(Country, on_delete=models.PROTECT, related_name='asset_processing_locations')
    transfer_mechanism = models.ForeignKey(
        TransferMechanism,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='asset_processing_locations'
    )
    is_active = models.BooleanField(default=True, help_text="Cleared on soft delete")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['digital_asset', 'service']
        verbose_name = "Asset Processing Location"
        verbose_name_plural = "Asset Processing Locations"
        indexes = [
            models.Index(fields=['organization', 'is_active'], name='asset_loc_org_active_idx'),
            models.Index(fields=['digital_asset', 'is_active'], name='asset_loc_asset_active_idx'),
        ]

    def __str__(self):
        return f"{self.digital_asset.name} - {self.service} ({self.country.iso_code})"
