from unittest import mock

import pytest
from django.db import DatabaseError

from change_tracking.switches import tracking_disabled


def test_liveness(client):
    response = client.get('/health/')

    assert response.status_code == 200
    assert response.json()['status'] == 'healthy'
    assert 'X-Request-ID' in response


def test_request_id_is_passed_through(client):
    response = client.get('/health/', HTTP_X_REQUEST_ID='abc123')

    assert response['X-Request-ID'] == 'abc123'


@pytest.mark.django_db
class TestReadiness:

    def test_ready_reports_tracking_configuration(self, client, tracker, organization):
        tracker.repository('Purpose').create(organization=organization, name='Marketing')

        response = client.get('/health/ready/')

        body = response.json()
        assert response.status_code == 200
        assert body['status'] == 'ready'
        assert body['checks']['change_log']['latest_change_at'] is not None
        assert body['checks']['change_tracking'] == {
            'enabled': True,
            'atomic_audit': True,
            'fanout_warning_threshold': 5,
        }

    def test_disabled_tracking_is_reported_but_still_ready(self, client):
        with tracking_disabled():
            response = client.get('/health/ready/')

        assert response.status_code == 200
        assert response.json()['checks']['change_tracking']['enabled'] is False

    def test_unreadable_change_log_is_not_ready(self, client):
        with mock.patch(
            'common.health.ComponentChangeLog.objects.order_by',
            side_effect=DatabaseError('no such table: change_tracking_componentchangelog'),
        ):
            response = client.get('/health/ready/')

        body = response.json()
        assert response.status_code == 503
        assert body['status'] == 'not_ready'
        assert body['checks']['change_log']['status'] is False
        assert 'Change log' in body['errors'][0]
