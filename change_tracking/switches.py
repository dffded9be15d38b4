"""
Process-wide off switch for change tracking.

Used by seeding and bulk import jobs. Checked on every tracked call, so
flipping it takes effect immediately.
"""
import os
import threading
from contextlib import contextmanager

from django.conf import settings


ENV_VAR = 'DISABLE_CHANGE_TRACKING'

_override = threading.local()


def is_tracking_disabled():
    if getattr(_override, 'disabled', False):
        return True
    if getattr(settings, 'CHANGE_TRACKING', {}).get('DISABLED', False):
        return True
    return os.environ.get(ENV_VAR, '').lower() == 'true'


@contextmanager
def tracking_disabled():
    """
    Suspend tracking for the current thread.

    Usage:
        with tracking_disabled():
            seed_reference_data()
    """
    previous = getattr(_override, 'disabled', False)
    _override.disabled = True
    try:
        yield
    finally:
        _override.disabled = previous
