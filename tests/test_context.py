from dataclasses import FrozenInstanceError

import pytest
from django.contrib.auth.models import AnonymousUser
from django.test import RequestFactory

from change_tracking.context import ChangeTrackingContext
from common.middleware import ChangeTrackingContextMiddleware


def test_context_is_frozen():
    context = ChangeTrackingContext(user_id=1, organization_id=2)

    with pytest.raises(FrozenInstanceError):
        context.user_id = 3


def test_with_reason_keeps_attribution():
    context = ChangeTrackingContext(user_id=1, organization_id=2).with_reason('Annual review')

    assert context == ChangeTrackingContext(1, 2, 'Annual review')


@pytest.mark.django_db
def test_from_request_uses_authenticated_user(user):
    request = RequestFactory().get('/')
    request.user = user

    context = ChangeTrackingContext.from_request(request, reason='DPA signed')

    assert context.user_id == user.id
    assert context.organization_id == user.organization_id
    assert context.change_reason == 'DPA signed'


def test_from_request_for_anonymous_user():
    request = RequestFactory().get('/')
    request.user = AnonymousUser()

    assert ChangeTrackingContext.from_request(request) == ChangeTrackingContext()


@pytest.mark.django_db
class TestMiddleware:

    def run(self, request):
        seen = {}

        def view(req):
            seen['context'] = getattr(req, 'change_tracking_context', None)
            return {}

        ChangeTrackingContextMiddleware(view)(request)
        return seen['context']

    def test_attaches_context_for_user(self, user):
        request = RequestFactory().post('/api/', HTTP_X_CHANGE_REASON='Vendor switch')
        request.user = user

        context = self.run(request)

        assert context.user_id == user.id
        assert context.organization_id == user.organization_id
        assert context.change_reason == 'Vendor switch'

    def test_user_set_after_middleware_is_seen(self, user):
        request = RequestFactory().get('/api/')
        request.user = AnonymousUser()

        context = self.run(request)
        request.user = user

        assert context.user_id == user.id

    def test_exempt_paths_get_no_context(self):
        request = RequestFactory().get('/health/')
        request.user = AnonymousUser()

        assert self.run(request) is None
