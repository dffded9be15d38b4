"""
Change Log Query Helpers

Read-side shortcuts over ComponentChangeLog. Every helper takes the
organization id and never returns another tenant's entries.
"""

from django.db.models import Count

from change_tracking.models import ComponentChangeLog


def get_component_change_history(component_type, component_id, organization_id):
    """
    Full history of one component, oldest first.

    Example:
        history = get_component_change_history(
            'AssetProcessingLocation', location.id, request.user.organization_id
        )
    """
    return (
        ComponentChangeLog.objects
        .for_organization(organization_id)
        .for_component(component_type, component_id)
        .select_related('changed_by')
        .chronological()
    )


def get_field_history(component_type, component_id, field_name, organization_id):
    """History of a single tracked field, oldest first"""
    return get_component_change_history(
        component_type, component_id, organization_id
    ).for_field(field_name)


def get_recent_changes(organization_id, limit=50):
    """Most recent entries across the organization, newest first"""
    return (
        ComponentChangeLog.objects
        .for_organization(organization_id)
        .select_related('changed_by')
        .recent(limit)
    )


def get_changes_for_user(user_id, organization_id, component_type=None, limit=100):
    queryset = ComponentChangeLog.objects.for_organization(organization_id).by_user(user_id)
    if component_type:
        queryset = queryset.filter(component_type=component_type)
    return queryset.recent(limit)


def get_changes_by_component_type(component_type, organization_id, change_type=None, limit=100):
    queryset = ComponentChangeLog.objects.for_organization(organization_id).filter(
        component_type=component_type
    )
    if change_type:
        queryset = queryset.of_type(change_type)
    return queryset.recent(limit)


def get_change_stats_by_type(organization_id):
    """Entry count per component kind, e.g. {'Purpose': 4, 'Recipient': 1}"""
    return dict(
        ComponentChangeLog.objects
        .for_organization(organization_id)
        .order_by()
        .values_list('component_type')
        .annotate(count=Count('id'))
    )


def has_changes_since(organization_id, since, component_types=None):
    """
    Whether anything changed after `since`. Used to flag generated
    documents (ROPA, DPIA exports) as stale.
    """
    queryset = ComponentChangeLog.objects.for_organization(organization_id).filter(
        changed_at__gt=since
    )
    if component_types:
        queryset = queryset.filter(component_type__in=component_types)
    return queryset.exists()
