"""
Component Change Log Model

IMMUTABLE: entries cannot be edited or deleted after creation.
Each row records one tracked transition of a compliance component along
with denormalized before/after snapshots.
"""

from django.db import models
from django.conf import settings
from django.core.exceptions import PermissionDenied

from core.constants import ChangeType, ComponentType


# ============================================================================
# CUSTOM MANAGER AND QUERYSET
# ============================================================================

class ComponentChangeLogQuerySet(models.QuerySet):
    """Custom queryset for change log entries with filtering helpers"""

    def for_organization(self, organization_id):
        return self.filter(organization_id=organization_id)

    def for_component(self, component_type, component_id):
        """Filter entries for one component"""
        return self.filter(component_type=component_type, component_id=component_id)

    def for_field(self, field_name):
        return self.filter(field_changed=field_name)

    def of_type(self, change_type):
        return self.filter(change_type=change_type)

    def by_user(self, user_id):
        return self.filter(changed_by_id=user_id)

    def changed_between(self, start, end):
        return self.filter(changed_at__gte=start, changed_at__lte=end)

    def since(self, when):
        return self.filter(changed_at__gte=when)

    def chronological(self):
        """Oldest first; id breaks ties between entries of one write"""
        return self.order_by('changed_at', 'id')

    def recent(self, limit=50):
        return self.order_by('-changed_at', '-id')[:limit]


class ComponentChangeLogManager(models.Manager):
    """Custom manager for change log entries"""

    def get_queryset(self):
        return ComponentChangeLogQuerySet(self.model, using=self._db)

    def for_organization(self, organization_id):
        return self.get_queryset().for_organization(organization_id)

    def for_component(self, component_type, component_id):
        return self.get_queryset().for_component(component_type, component_id)

    def recent(self, limit=50):
        return self.get_queryset().recent(limit)


# ============================================================================
# CHANGE LOG MODEL
# ============================================================================

class ComponentChangeLog(models.Model):
    """
    Append-only record of a change to a tracked component.

    - CREATED: old_value is empty, field_changed is empty
    - UPDATED: one row per changed field, each with the full snapshots
    - RESTORED / DELETED: one row, field_changed is empty
    """

    organization = models.ForeignKey(
        'organizations.Organization',
        on_delete=models.CASCADE,
        related_name='change_logs',
        help_text="Organization the changed component belongs to"
    )

    component_type = models.CharField(
        max_length=50,
        choices=ComponentType.CHOICES,
        help_text="Kind of component that changed"
    )

    component_id = models.BigIntegerField(help_text="ID of the component that changed")

    change_type = models.CharField(max_length=20, choices=ChangeType.CHOICES)

    field_changed = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        help_text="Empty for whole-entity transitions"
    )

    old_value = models.JSONField(null=True, blank=True, help_text="Snapshot before the change")
    new_value = models.JSONField(null=True, blank=True, help_text="Snapshot after the change")

    changed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='component_changes'
    )

    change_reason = models.TextField(null=True, blank=True)

    changed_at = models.DateTimeField(auto_now_add=True)

    objects = ComponentChangeLogManager()

    class Meta:
        verbose_name = "Component Change Log"
        verbose_name_plural = "Component Change Logs"
        ordering = ['-changed_at', '-id']
        indexes = [
            models.Index(
                fields=['organization', 'component_type', 'component_id', 'changed_at'],
                name='change_log_component_idx'
            ),
            models.Index(fields=['changed_at'], name='change_log_changed_at_idx'),
            models.Index(fields=['organization', 'changed_at'], name='change_log_org_time_idx'),
        ]

    def __str__(self):
        field = f".{self.field_changed}" if self.field_changed else ""
        return f"{self.change_type} {self.component_type} #{self.component_id}{field}"

    def save(self, *args, **kwargs):
        """Only allow creation, not updates"""
        if self.pk is not None:
            raise PermissionDenied(
                "Change log entries are immutable and cannot be modified after creation."
            )
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise PermissionDenied(
            "Change log entries are immutable and cannot be deleted."
        )

    @property
    def changed_by_display(self):
        if self.changed_by:
            return self.changed_by.get_full_name() or self.changed_by.username
        return "System"
