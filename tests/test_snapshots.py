import datetime
import decimal
import uuid

from core.constants import ComponentType
from change_tracking import snapshots


FRANCE = {'id': 1, 'name': 'France', 'iso_code': 'FR', 'iso_code3': 'FRA', 'gdpr_status': ['EU', 'EEA'], 'is_active': True}
SCC = {'id': 7, 'name': 'Standard Contractual Clauses', 'code': 'SCC', 'gdpr_article': 'Art. 46(2)(c)', 'category': 'SAFEGUARD'}


def location_state(**overrides):
    state = {
        'id': 10,
        'organization_id': 3,
        'digital_asset_id': 4,
        'service': 'Primary DB',
        'country_id': 1,
        'transfer_mechanism_id': None,
        'location_role': 'HOSTING',
        'is_active': True,
        'country': FRANCE,
        'transfer_mechanism': None,
    }
    state.update(overrides)
    return state


def test_default_snapshot_only_has_registered_fields():
    state = {'id': 5, 'name': 'Marketing', 'description': '', 'category': 'Sales', 'scope': 'INTERNAL',
             'is_active': True, 'organization_id': 3, 'created_at': '2024-01-01T00:00:00+00:00'}

    snapshot = snapshots.build(ComponentType.PURPOSE, state)

    assert snapshot == {'name': 'Marketing', 'description': '', 'category': 'Sales', 'scope': 'INTERNAL', 'is_active': True}


def test_location_snapshot_flattens_country():
    snapshot = snapshots.build(ComponentType.ASSET_PROCESSING_LOCATION, location_state())

    assert snapshot['country'] == {'id': 1, 'name': 'France', 'iso_code': 'FR', 'gdpr_status': ['EU', 'EEA']}
    assert 'service' not in snapshot


def test_missing_transfer_mechanism_is_written_as_none():
    snapshot = snapshots.build(ComponentType.RECIPIENT_PROCESSING_LOCATION, location_state())

    assert 'transfer_mechanism' in snapshot
    assert snapshot['transfer_mechanism'] is None


def test_transfer_mechanism_is_flattened():
    state = location_state(transfer_mechanism_id=7, transfer_mechanism=SCC)

    snapshot = snapshots.build(ComponentType.ASSET_PROCESSING_LOCATION, state)

    assert snapshot['transfer_mechanism'] == {
        'id': 7, 'name': 'Standard Contractual Clauses', 'code': 'SCC', 'gdpr_article': 'Art. 46(2)(c)'
    }


def test_build_does_not_mutate_state():
    state = location_state()
    original = dict(state)

    snapshots.build(ComponentType.ASSET_PROCESSING_LOCATION, state)

    assert state == original


def test_values_are_normalized_to_json_types():
    moment = datetime.datetime(2024, 5, 1, 12, 30, tzinfo=datetime.timezone.utc)
    token = uuid.UUID('12345678-1234-5678-1234-567812345678')

    assert snapshots.to_json_value(moment) == '2024-05-01T12:30:00+00:00'
    assert snapshots.to_json_value(datetime.date(2024, 5, 1)) == '2024-05-01'
    assert snapshots.to_json_value(decimal.Decimal('1.50')) == '1.50'
    assert snapshots.to_json_value(token) == '12345678-1234-5678-1234-567812345678'
    assert snapshots.to_json_value({'seen': [moment]}) == {'seen': ['2024-05-01T12:30:00+00:00']}


def test_relation_cached_as_missing_is_left_out():
    from assets.models import AssetProcessingLocation

    instance = AssetProcessingLocation(service='Backups', transfer_mechanism_id=99999)
    field = AssetProcessingLocation._meta.get_field('transfer_mechanism')
    field.set_cached_value(instance, None)

    state = snapshots.entity_state(instance, related=('transfer_mechanism',))

    assert state['transfer_mechanism_id'] == 99999
    assert 'transfer_mechanism' not in state
