"""
Read-only change log API under /api/change-tracking/.
"""
import pytest

from change_tracking.context import ChangeTrackingContext
from change_tracking.models import ComponentChangeLog
from change_tracking.tracker import ChangeTracker
from core.constants import ChangeType, ComponentType
from taxonomy.models import Purpose

LOGS_URL = '/api/change-tracking/logs/'


@pytest.fixture
def purpose(tracker, organization):
    purposes = tracker.repository(Purpose)
    purpose = purposes.create(organization=organization, name='Marketing')
    purposes.update(purpose.id, name='Direct marketing', description='Email campaigns')
    return purpose


@pytest.fixture
def foreign_purpose(other_user, other_organization):
    tracker = ChangeTracker(ChangeTrackingContext(other_user.id, other_organization.id))
    return tracker.repository(Purpose).create(organization=other_organization, name='Payroll')


@pytest.mark.django_db
class TestChangeLogList:

    def test_requires_authentication(self, api_client):
        response = api_client.get(LOGS_URL)

        assert response.status_code == 401

    def test_lists_only_own_organization(self, auth_client, purpose, foreign_purpose, organization):
        response = auth_client.get(LOGS_URL)

        assert response.status_code == 200
        assert response.data['count'] == 3
        assert {row['organization'] for row in response.data['results']} == {organization.id}

    def test_newest_first_with_snapshots(self, auth_client, purpose):
        response = auth_client.get(LOGS_URL)

        first = response.data['results'][0]
        assert first['change_type'] == ChangeType.UPDATED
        assert first['field_changed'] == 'description'
        assert first['new_value']['description'] == 'Email campaigns'
        assert first['changed_by_display'] == 'Dana Officer'

    @pytest.mark.parametrize('params, expected', [
        ({'change_type': 'CREATED'}, 1),
        ({'field': 'name'}, 1),
        ({'component_type': 'Purpose'}, 3),
        ({'component_type': 'Recipient'}, 0),
        ({'since': '2000-01-01'}, 3),
        ({'until': '2000-01-01'}, 0),
    ])
    def test_filters(self, auth_client, purpose, params, expected):
        response = auth_client.get(LOGS_URL, params)

        assert response.status_code == 200
        assert response.data['count'] == expected

    def test_filter_by_component_and_user(self, auth_client, purpose, user):
        response = auth_client.get(LOGS_URL, {'component_id': purpose.id, 'user': user.id})

        assert response.data['count'] == 3

    @pytest.mark.parametrize('params', [
        {'component_id': 'abc'},
        {'user': 'me'},
        {'since': 'yesterday'},
    ])
    def test_bad_parameters_are_rejected(self, auth_client, params):
        response = auth_client.get(LOGS_URL, params)

        assert response.status_code == 400

    def test_user_without_organization_sees_nothing(self, api_client, purpose, django_user_model):
        staff = django_user_model.objects.create_user(username='staff', password='secret-pass-123')
        api_client.force_authenticate(user=staff)

        response = api_client.get(LOGS_URL)

        assert response.data['count'] == 0

    def test_is_read_only(self, auth_client, purpose):
        entry = ComponentChangeLog.objects.first()

        assert auth_client.post(LOGS_URL, {}).status_code == 405
        assert auth_client.delete(f'{LOGS_URL}{entry.id}/').status_code == 405
        assert ComponentChangeLog.objects.count() == 3


@pytest.mark.django_db
class TestChangeLogDetail:

    def test_retrieve(self, auth_client, purpose):
        entry = ComponentChangeLog.objects.for_component(ComponentType.PURPOSE, purpose.id).first()

        response = auth_client.get(f'{LOGS_URL}{entry.id}/')

        assert response.status_code == 200
        assert response.data['id'] == entry.id

    def test_other_tenant_entry_is_not_found(self, auth_client, foreign_purpose):
        entry = ComponentChangeLog.objects.get(component_id=foreign_purpose.id)

        response = auth_client.get(f'{LOGS_URL}{entry.id}/')

        assert response.status_code == 404


@pytest.mark.django_db
class TestComponentTrail:

    def test_trail_is_chronological(self, auth_client, purpose):
        response = auth_client.get(
            f'{LOGS_URL}component_trail/',
            {'component_type': 'Purpose', 'component_id': purpose.id}
        )

        assert response.status_code == 200
        assert response.data['count'] == 3
        assert [row['field_changed'] for row in response.data['trail']] == [None, 'name', 'description']

    def test_requires_both_parameters(self, auth_client, purpose):
        response = auth_client.get(f'{LOGS_URL}component_trail/', {'component_type': 'Purpose'})

        assert response.status_code == 400


@pytest.mark.django_db
def test_stats(auth_client, purpose, foreign_purpose):
    response = auth_client.get(f'{LOGS_URL}stats/')

    assert response.status_code == 200
    assert response.data['total_changes'] == 3
    assert response.data['by_change_type'] == {'CREATED': 1, 'UPDATED': 2}
    assert response.data['by_component_type'] == {'Purpose': 3}
    assert response.data['recent_24h'] == 3


@pytest.mark.django_db
def test_summary(auth_client, tracker, purpose):
    tracker.repository(Purpose).update(purpose.id, is_active=False)

    response = auth_client.get('/api/change-tracking/summary/')

    assert response.status_code == 200
    assert response.data['total_changes'] == 4
    assert response.data['changes_today'] == 4
    [lifecycle] = response.data['recent_lifecycle_changes']
    assert lifecycle['change_type'] == ChangeType.DELETED


@pytest.mark.django_db
def test_summary_requires_organization(api_client, django_user_model):
    staff = django_user_model.objects.create_user(username='staff', password='secret-pass-123')
    api_client.force_authenticate(user=staff)

    response = api_client.get('/api/change-tracking/summary/')

    assert response.status_code == 400


@pytest.mark.django_db
def test_jwt_login(api_client, user):
    response = api_client.post('/api/auth/login/', {'username': 'dpo', 'password': 'secret-pass-123'})

    assert response.status_code == 200
    assert 'access' in response.data
