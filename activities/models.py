from django.db import models

from core.constants import ActivityStatus, DpiaStatus, RetentionUnit, RiskLevel
from organizations.models import Organization


class DataProcessingActivity(models.Model):
    """Entry in the record of processing activities (GDPR Art. 30)"""
    organization = models.ForeignKey(Organization, on_delete=models.CASCADE, related_name='processing_activities')
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)

    # Risk and DPIA
    risk_level = models.CharField(max_length=20, choices=RiskLevel.CHOICES, null=True, blank=True)
    requires_dpia = models.BooleanField(null=True, blank=True, help_text="Empty until assessed")
    dpia_status = models.CharField(max_length=20, choices=DpiaStatus.CHOICES, null=True, blank=True)

    # Retention
    retention_period_value = models.PositiveIntegerField(null=True, blank=True)
    retention_period_unit = models.CharField(max_length=10, choices=RetentionUnit.CHOICES, null=True, blank=True)
    retention_justification = models.TextField(blank=True)

    status = models.CharField(max_length=20, choices=ActivityStatus.CHOICES, default=ActivityStatus.DRAFT)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        verbose_name = "Data Processing Activity"
        verbose_name_plural = "Data Processing Activities"
        indexes = [
            models.Index(fields=['organization', 'status'], name='activity_org_status_idx'),
        ]

    def __str__(self):
        return self.name
