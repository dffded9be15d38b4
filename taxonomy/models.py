"""
Classification vocabularies used by processing activities.

Rows with no organization are system-defined and shared by every tenant.
"""
from django.db import models

from core.constants import LegalBasisType, PurposeScope, Sensitivity
from organizations.models import Organization


class DataSubjectCategory(models.Model):
    """Group of people whose data is processed (customers, employees, minors...)"""
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='data_subject_categories'
    )
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    is_vulnerable = models.BooleanField(default=False)
    vulnerability_reason = models.TextField(blank=True)
    suggests_dpia = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        verbose_name = "Data Subject Category"
        verbose_name_plural = "Data Subject Categories"

    def __str__(self):
        return self.name


class DataCategory(models.Model):
    """Kind of personal data (contact details, health data...)"""
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='data_categories'
    )
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    sensitivity = models.CharField(max_length=20, choices=Sensitivity.CHOICES, default=Sensitivity.INTERNAL)
    is_special_category = models.BooleanField(default=False, help_text="GDPR Art. 9 special category")
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        verbose_name = "Data Category"
        verbose_name_plural = "Data Categories"

    def __str__(self):
        return self.name


class Purpose(models.Model):
    """Why personal data is processed"""
    organization = models.ForeignKey(Organization, on_delete=models.CASCADE, related_name='purposes')
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=100, blank=True)
    scope = models.CharField(max_length=20, choices=PurposeScope.CHOICES, default=PurposeScope.INTERNAL)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        verbose_name = "Purpose"
        verbose_name_plural = "Purposes"

    def __str__(self):
        return self.name


class LegalBasis(models.Model):
    """Lawful basis for processing (GDPR Art. 6)"""
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='legal_bases'
    )
    basis_type = models.CharField(max_length=30, choices=LegalBasisType.CHOICES)
    name = models.CharField(max_length=255)
    framework = models.CharField(max_length=50, default='GDPR')
    requires_consent = models.BooleanField(default=False)
    consent_mechanism = models.TextField(blank=True)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        verbose_name = "Legal Basis"
        verbose_name_plural = "Legal Bases"

    def __str__(self):
        return f"{self.name} ({self.framework})"
