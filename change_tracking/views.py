"""
Change Log API Views

Read-only access to the change log, scoped to the user's organization.
"""

from datetime import datetime, time, timedelta, timezone as dt_timezone

from django.db.models import Count
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime
from rest_framework import filters, status, viewsets
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from api.filters import OrganizationFilterBackend
from change_tracking.models import ComponentChangeLog
from change_tracking.serializers import (
    ComponentChangeLogSerializer,
    ComponentChangeLogSummarySerializer,
)
from core.constants import ChangeType


def _parse_when(value, param):
    """Accept a full ISO timestamp or a bare date (midnight UTC)"""
    try:
        parsed = parse_datetime(value)
        day = parse_date(value) if parsed is None else None
    except ValueError:
        parsed = day = None
    if parsed is None:
        if day is None:
            raise ValidationError({param: 'Expected an ISO 8601 date or datetime'})
        parsed = datetime.combine(day, time.min)
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, dt_timezone.utc)
    return parsed


def _parse_int(value, param):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError({param: 'Expected an integer'})


class ComponentChangeLogViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only ViewSet for change log entries.

    Query params (list):
    - component_type, component_id, change_type, field, user
    - since / until: ISO date or datetime bounds on changed_at
    """

    serializer_class = ComponentChangeLogSerializer
    permission_classes = [IsAuthenticated]
    filter_backends = [OrganizationFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['component_type', 'field_changed', 'change_reason']
    ordering_fields = ['changed_at', 'component_type', 'change_type']
    ordering = ['-changed_at', '-id']

    def get_queryset(self):
        queryset = ComponentChangeLog.objects.select_related('changed_by')
        params = self.request.query_params

        if params.get('component_type'):
            queryset = queryset.filter(component_type=params['component_type'])
        if params.get('component_id'):
            queryset = queryset.filter(
                component_id=_parse_int(params['component_id'], 'component_id')
            )
        if params.get('change_type'):
            queryset = queryset.of_type(params['change_type'])
        if params.get('field'):
            queryset = queryset.for_field(params['field'])
        if params.get('user'):
            queryset = queryset.by_user(_parse_int(params['user'], 'user'))
        if params.get('since'):
            queryset = queryset.filter(changed_at__gte=_parse_when(params['since'], 'since'))
        if params.get('until'):
            queryset = queryset.filter(changed_at__lte=_parse_when(params['until'], 'until'))

        return queryset

    @action(detail=False, methods=['get'])
    def component_trail(self, request):
        """
        Full history of one component, oldest first.

        Example: GET /api/change-tracking/logs/component_trail/?component_type=Purpose&component_id=12
        """
        component_type = request.query_params.get('component_type')
        component_id = request.query_params.get('component_id')

        if not component_type or not component_id:
            return Response(
                {'detail': 'Both component_type and component_id are required'},
                status=status.HTTP_400_BAD_REQUEST
            )

        queryset = self.filter_queryset(self.get_queryset()).order_by('changed_at', 'id')
        serializer = self.get_serializer(queryset, many=True)

        return Response({
            'component_type': component_type,
            'component_id': int(component_id),
            'trail': serializer.data,
            'count': len(serializer.data)
        })

    @action(detail=False, methods=['get'])
    def stats(self, request):
        """
        Totals by change type and component kind, plus activity in the last 24 hours.
        """
        queryset = self.filter_queryset(self.get_queryset()).order_by()

        by_change_type = dict(
            queryset.values_list('change_type').annotate(count=Count('id'))
        )
        by_component_type = dict(
            queryset.values_list('component_type').annotate(count=Count('id'))
        )

        recent_threshold = timezone.now() - timedelta(hours=24)
        recent_count = queryset.filter(changed_at__gte=recent_threshold).count()

        return Response({
            'total_changes': queryset.count(),
            'by_change_type': by_change_type,
            'by_component_type': by_component_type,
            'recent_24h': recent_count,
        })


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def change_summary(request):
    """
    Quick change summary for the dashboard.

    Returns:
    - Total entries in the organization
    - Entries today
    - Latest deletions and restorations
    """
    user = request.user

    if not getattr(user, 'organization_id', None):
        return Response({'detail': 'User organization not found'}, status=400)

    logs = ComponentChangeLog.objects.for_organization(user.organization_id)

    today = timezone.now().date()
    changes_today = logs.filter(changed_at__date=today).count()

    lifecycle_changes = logs.filter(
        change_type__in=[ChangeType.DELETED, ChangeType.RESTORED]
    ).select_related('changed_by').order_by('-changed_at', '-id')[:10]

    return Response({
        'total_changes': logs.count(),
        'changes_today': changes_today,
        'recent_lifecycle_changes': ComponentChangeLogSummarySerializer(lifecycle_changes, many=True).data,
    })
