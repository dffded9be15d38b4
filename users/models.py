from django.contrib.auth.models import AbstractUser
from django.db import models

from core.constants import UserRole
from organizations.models import Organization


class User(AbstractUser):
    """Custom User model - Admin/Member of an organization"""
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name='users',
        null=True,
        blank=True,
        help_text="Organization this user works in (empty for platform staff)"
    )
    role = models.CharField(max_length=20, choices=UserRole.CHOICES, default=UserRole.MEMBER)

    class Meta:
        verbose_name = "User"
        verbose_name_plural = "Users"

    def __str__(self):
        return f"{self.username} ({self.get_role_display()})"

    @property
    def is_org_admin(self):
        return self.role == UserRole.ADMIN
