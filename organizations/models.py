from django.db import models

from core.constants import OrganizationPlan


class Organization(models.Model):
    """Multi-tenant organization - every compliance record belongs to one"""
    name = models.CharField(max_length=255, help_text="Organization name")
    slug = models.SlugField(max_length=100, unique=True)
    plan = models.CharField(max_length=20, choices=OrganizationPlan.CHOICES, default=OrganizationPlan.FREE)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Organization"
        verbose_name_plural = "Organizations"
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.get_plan_display()})"
