"""
Global reference data shared by every organization.
"""
from django.db import models

from core.constants import GdprStatus, TransferMechanismCategory


class Country(models.Model):
    """Country with its GDPR classification"""
    name = models.CharField(max_length=100)
    iso_code = models.CharField(max_length=2, unique=True, help_text="ISO 3166-1 alpha-2")
    iso_code3 = models.CharField(max_length=3, unique=True, help_text="ISO 3166-1 alpha-3")
    gdpr_status = models.JSONField(
        default=list,
        blank=True,
        help_text="Status tags such as EU, EEA, ADEQUATE or THIRD"
    )
    is_active = models.BooleanField(default=True)

    class Meta:
        ordering = ['name']
        verbose_name = "Country"
        verbose_name_plural = "Countries"

    def __str__(self):
        return f"{self.name} ({self.iso_code})"

    @property
    def is_third_country(self):
        return GdprStatus.THIRD in (self.gdpr_status or [])


class TransferMechanism(models.Model):
    """Legal instrument for transfers to third countries (GDPR Chapter V)"""
    name = models.CharField(max_length=255)
    code = models.CharField(max_length=50, unique=True)
    description = models.TextField(blank=True)
    gdpr_article = models.CharField(max_length=50, help_text="e.g. Art. 46(2)(c)")
    category = models.CharField(
        max_length=20,
        choices=TransferMechanismCategory.CHOICES,
        default=TransferMechanismCategory.SAFEGUARD
    )
    requires_supplementary_measures = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        verbose_name = "Transfer Mechanism"
        verbose_name_plural = "Transfer Mechanisms"

    def __str__(self):
        return f"{self.name} ({self.gdpr_article})"
