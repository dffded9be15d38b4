"""
Custom filters for multi-tenant data
"""
from rest_framework import filters


class OrganizationFilterBackend(filters.BaseFilterBackend):
    """
    Filter queryset to only show objects belonging to the user's organization
    """

    def filter_queryset(self, request, queryset, view):
        """Filter by organization"""
        user = request.user
        if user and user.is_authenticated and getattr(user, 'organization_id', None):
            return queryset.filter(organization_id=user.organization_id)
        return queryset.none()
