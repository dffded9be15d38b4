"""
Change tracking attribution middleware.

Attaches `request.change_tracking_context` so views can hand it straight
to a ChangeTracker:

    tracker = ChangeTracker(request.change_tracking_context)
"""

import logging
import re

from django.utils.functional import SimpleLazyObject

from change_tracking.context import ChangeTrackingContext

logger = logging.getLogger(__name__)


class ChangeTrackingContextMiddleware:
    """
    Builds the context lazily, on first access. DRF authenticates JWT
    requests inside the view, after middleware has run, and sets the user
    on the underlying request, so the context sees that user too.
    """

    REASON_HEADER = 'HTTP_X_CHANGE_REASON'

    # Paths that never write tracked components
    EXEMPT_PATHS = [
        r'^/health/',
        r'^/static/',
        r'^/media/',
    ]

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if not self._is_exempt_path(request.path):
            reason = request.META.get(self.REASON_HEADER) or None
            request.change_tracking_context = SimpleLazyObject(
                lambda: self._build_context(request, reason)
            )
        return self.get_response(request)

    def _build_context(self, request, reason):
        context = ChangeTrackingContext.from_request(request, reason=reason)
        if context.user_id is not None and context.organization_id is None:
            logger.warning(
                f"User #{context.user_id} has no organization; tracked writes will need one from the entity"
            )
        return context

    def _is_exempt_path(self, path):
        for pattern in self.EXEMPT_PATHS:
            if re.match(pattern, path):
                return True
        return False
