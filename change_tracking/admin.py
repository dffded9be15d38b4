"""
Change Log Admin - READ ONLY

Entries are immutable and cannot be edited or deleted via admin.
"""

import json

from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html

from change_tracking.models import ComponentChangeLog


@admin.register(ComponentChangeLog)
class ComponentChangeLogAdmin(admin.ModelAdmin):
    """
    Read-only admin for change log entries.
    """

    list_display = [
        'id',
        'changed_at',
        'organization',
        'changed_by_link',
        'change_type',
        'component_type',
        'component_id',
        'field_changed',
    ]

    list_filter = [
        'change_type',
        'component_type',
        'changed_at',
        ('organization', admin.RelatedOnlyFieldListFilter),
    ]

    search_fields = [
        'field_changed',
        'change_reason',
        'changed_by__username',
    ]

    readonly_fields = [
        'organization',
        'component_type',
        'component_id',
        'change_type',
        'field_changed',
        'old_value_display',
        'new_value_display',
        'changed_by',
        'change_reason',
        'changed_at',
    ]

    fieldsets = (
        ('Change', {
            'fields': ('component_type', 'component_id', 'change_type', 'field_changed')
        }),
        ('Attribution', {
            'fields': ('organization', 'changed_by', 'change_reason', 'changed_at')
        }),
        ('Snapshots', {
            'fields': ('old_value_display', 'new_value_display'),
            'classes': ('collapse',)
        }),
    )

    date_hierarchy = 'changed_at'

    ordering = ['-changed_at']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def get_actions(self, request):
        """Disable bulk actions"""
        actions = super().get_actions(request)
        if 'delete_selected' in actions:
            del actions['delete_selected']
        return actions

    @admin.display(description='Changed by')
    def changed_by_link(self, obj):
        if obj.changed_by:
            url = reverse('admin:users_user_change', args=[obj.changed_by.id])
            return format_html('<a href="{}">{}</a>', url, obj.changed_by.username)
        return "System"

    def _json_display(self, value):
        if value is None:
            return "-"
        return format_html('<pre>{}</pre>', json.dumps(value, indent=2))

    @admin.display(description='Before')
    def old_value_display(self, obj):
        return self._json_display(obj.old_value)

    @admin.display(description='After')
    def new_value_display(self, obj):
        return self._json_display(obj.new_value)
