"""
Shared fixtures: two tenants, reference data and a tracker per tenant.
"""
import pytest
from rest_framework.test import APIClient

from change_tracking.context import ChangeTrackingContext
from change_tracking.tracker import ChangeTracker
from core.constants import GdprStatus, TransferMechanismCategory, UserRole
from organizations.models import Organization
from reference.models import Country, TransferMechanism
from users.models import User


@pytest.fixture(autouse=True)
def tracking_enabled(monkeypatch, settings):
    """Start every test with tracking on, whatever the shell says"""
    monkeypatch.delenv('DISABLE_CHANGE_TRACKING', raising=False)
    settings.CHANGE_TRACKING = {
        'DISABLED': False,
        'ATOMIC_AUDIT': True,
        'FANOUT_WARNING_THRESHOLD': 5,
    }


@pytest.fixture
def organization(db):
    return Organization.objects.create(name='Acme GmbH', slug='acme')


@pytest.fixture
def other_organization(db):
    return Organization.objects.create(name='Globex Ltd', slug='globex')


@pytest.fixture
def user(organization):
    return User.objects.create_user(
        username='dpo',
        password='secret-pass-123',
        first_name='Dana',
        last_name='Officer',
        organization=organization,
        role=UserRole.ADMIN,
    )


@pytest.fixture
def other_user(other_organization):
    return User.objects.create_user(
        username='outsider',
        password='secret-pass-123',
        organization=other_organization,
    )


@pytest.fixture
def france(db):
    return Country.objects.create(
        name='France', iso_code='FR', iso_code3='FRA', gdpr_status=[GdprStatus.EU, GdprStatus.EEA]
    )


@pytest.fixture
def united_states(db):
    return Country.objects.create(
        name='United States', iso_code='US', iso_code3='USA', gdpr_status=[GdprStatus.THIRD]
    )


@pytest.fixture
def scc(db):
    return TransferMechanism.objects.create(
        name='Standard Contractual Clauses',
        code='SCC',
        gdpr_article='Art. 46(2)(c)',
        category=TransferMechanismCategory.SAFEGUARD,
        requires_supplementary_measures=True,
    )


@pytest.fixture
def context(user):
    return ChangeTrackingContext(user_id=user.id, organization_id=user.organization_id)


@pytest.fixture
def tracker(context):
    return ChangeTracker(context)


@pytest.fixture
def anonymous_tracker():
    return ChangeTracker()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def auth_client(api_client, user):
    api_client.force_authenticate(user=user)
    return api_client
