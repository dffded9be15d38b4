"""
Change Log Serializers
"""

from rest_framework import serializers
from change_tracking.models import ComponentChangeLog


class ComponentChangeLogSerializer(serializers.ModelSerializer):
    """
    Serializer for ComponentChangeLog.

    Read-only: entries are never created or edited through the API.
    """

    changed_by_display = serializers.CharField(read_only=True)
    changed_by_username = serializers.CharField(source='changed_by.username', read_only=True, allow_null=True)
    change_type_display = serializers.CharField(source='get_change_type_display', read_only=True)
    component_type_display = serializers.CharField(source='get_component_type_display', read_only=True)

    class Meta:
        model = ComponentChangeLog
        fields = [
            'id',
            'organization',
            'component_type',
            'component_type_display',
            'component_id',
            'change_type',
            'change_type_display',
            'field_changed',
            'old_value',
            'new_value',
            'changed_by',
            'changed_by_username',
            'changed_by_display',
            'change_reason',
            'changed_at',
        ]
        read_only_fields = fields


class ComponentChangeLogSummarySerializer(serializers.ModelSerializer):
    """
    Lightweight serializer without the snapshots.
    """

    changed_by_display = serializers.CharField(read_only=True)

    class Meta:
        model = ComponentChangeLog
        fields = [
            'id',
            'component_type',
            'component_id',
            'change_type',
            'field_changed',
            'changed_by_display',
            'changed_at',
        ]
        read_only_fields = fields
