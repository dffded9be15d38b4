"""
Health Check Endpoints for Compliance Hub

- /health/        liveness (is the process up?)
- /health/ready/  readiness: database reachable, change log readable,
                  and the current change-tracking configuration
"""

import time
import logging
from django.conf import settings
from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.views.decorators.http import require_GET
from django.views.decorators.csrf import csrf_exempt

from change_tracking.models import ComponentChangeLog
from change_tracking.switches import is_tracking_disabled

logger = logging.getLogger(__name__)


@csrf_exempt
@require_GET
def health_check(request):
    """
    Basic health check - returns 200 if app is running.
    Used by load balancers and container orchestration.
    """
    return JsonResponse({
        'status': 'healthy',
        'timestamp': time.time(),
    })


def _timed(check):
    start = time.time()
    result = check()
    return result, round((time.time() - start) * 1000, 2)


def _change_tracking_status():
    config = getattr(settings, 'CHANGE_TRACKING', {})
    return {
        'enabled': not is_tracking_disabled(),
        'atomic_audit': config.get('ATOMIC_AUDIT', True),
        'fanout_warning_threshold': config.get('FANOUT_WARNING_THRESHOLD'),
    }


@csrf_exempt
@require_GET
def readiness_check(request):
    """
    Readiness check. Returns 503 when the database or the change log table
    can't be reached. A disabled tracker is reported, not failed: seeding
    jobs switch it off on purpose.
    """
    checks = {
        'database': {'status': False, 'latency_ms': None},
        'change_log': {'status': False, 'latency_ms': None},
        'change_tracking': _change_tracking_status(),
    }
    errors = []

    def ping():
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
            cursor.fetchone()

    try:
        _, latency = _timed(ping)
        checks['database'] = {'status': True, 'latency_ms': latency}
    except DatabaseError as e:
        errors.append(f'Database: {e}')
        logger.error(f'Readiness check - Database error: {e}')

    try:
        latest, latency = _timed(
            lambda: ComponentChangeLog.objects.order_by('-changed_at').values_list('changed_at', flat=True).first()
        )
        checks['change_log'] = {
            'status': True,
            'latency_ms': latency,
            'latest_change_at': latest.isoformat() if latest else None,
        }
    except DatabaseError as e:
        errors.append(f'Change log: {e}')
        logger.error(f'Readiness check - Change log error: {e}')

    if not checks['change_tracking']['enabled']:
        logger.warning('Readiness check - change tracking is disabled')

    ready = checks['database']['status'] and checks['change_log']['status']

    return JsonResponse({
        'status': 'ready' if ready else 'not_ready',
        'timestamp': time.time(),
        'checks': checks,
        'errors': errors or None,
    }, status=200 if ready else 503)


def get_health_urls():
    """
    Returns URL patterns for health endpoints.
    Add to your urls.py:
        from common.health import get_health_urls
        urlpatterns += get_health_urls()
    """
    from django.urls import path

    return [
        path('health/', health_check, name='health_check'),
        path('health/ready/', readiness_check, name='readiness_check'),
    ]
