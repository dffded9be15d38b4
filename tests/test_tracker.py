"""
Tracked create/update through ChangeTracker repositories.
"""
import datetime

import pytest
from django.db import DatabaseError, IntegrityError

from assets.models import AssetProcessingLocation, DigitalAsset
from change_tracking.context import ChangeTrackingContext
from change_tracking.models import ComponentChangeLog
from change_tracking.tracker import ChangeTracker, TrackedRepository
from core.constants import ChangeType, ComponentType, LocationRole
from core.exceptions import (
    AttributionError,
    ConfigurationError,
    LogWriteError,
    NotFoundError,
    UnderlyingWriteError,
)
from organizations.models import Organization
from reference.models import TransferMechanism
from taxonomy.models import DataCategory, Purpose


@pytest.fixture
def asset(organization, france):
    return DigitalAsset.objects.create(organization=organization, name='CRM', primary_hosting_country=france)


@pytest.fixture
def location(organization, asset, france):
    return AssetProcessingLocation.objects.create(
        organization=organization,
        digital_asset=asset,
        service='Primary DB',
        location_role=LocationRole.HOSTING,
        country=france,
    )


@pytest.fixture
def locations(tracker):
    return tracker.repository(AssetProcessingLocation)


def entries_for(component_type, component_id):
    return list(ComponentChangeLog.objects.for_component(component_type, component_id).chronological())


class TestRepositoryLookup:

    def test_by_model_and_by_kind_tag(self, tracker):
        by_model = tracker.repository(Purpose)
        by_tag = tracker.repository(ComponentType.PURPOSE)

        assert isinstance(by_model, TrackedRepository)
        assert by_model.model is by_tag.model is Purpose
        assert by_tag.component_type == 'Purpose'

    def test_untracked_model_is_rejected(self, tracker):
        with pytest.raises(ConfigurationError):
            tracker.repository(Organization)

    def test_unknown_kind_is_rejected(self, tracker):
        with pytest.raises(ConfigurationError):
            tracker.repository('Invoice')


@pytest.mark.django_db
class TestTrackedCreate:

    def test_writes_one_created_entry(self, locations, organization, asset, france, user):
        location = locations.create(
            organization=organization,
            digital_asset=asset,
            service='Analytics',
            country=france,
        )

        [entry] = entries_for(ComponentType.ASSET_PROCESSING_LOCATION, location.id)
        assert entry.change_type == ChangeType.CREATED
        assert entry.old_value is None
        assert entry.field_changed is None
        assert entry.organization_id == organization.id
        assert entry.changed_by_id == user.id
        assert entry.new_value['country'] == {
            'id': france.id, 'name': 'France', 'iso_code': 'FR', 'gdpr_status': ['EU', 'EEA']
        }
        assert entry.new_value['transfer_mechanism'] is None
        assert entry.new_value['location_role'] == LocationRole.PROCESSING

    def test_returns_saved_instance(self, tracker, organization):
        purpose = tracker.repository(Purpose).create(organization=organization, name='Marketing')

        assert purpose.pk is not None
        assert Purpose.objects.get(pk=purpose.pk).name == 'Marketing'

    def test_global_row_is_attributed_to_context_organization(self, tracker, organization):
        mechanism = tracker.repository(TransferMechanism).create(
            name='Binding Corporate Rules', code='BCR', gdpr_article='Art. 47'
        )

        [entry] = entries_for(ComponentType.TRANSFER_MECHANISM, mechanism.id)
        assert entry.organization_id == organization.id

    def test_entity_organization_wins_over_context(self, user, other_organization):
        tracker = ChangeTracker(ChangeTrackingContext(user_id=user.id, organization_id=user.organization_id))

        purpose = tracker.repository(Purpose).create(organization=other_organization, name='Billing')

        [entry] = entries_for(ComponentType.PURPOSE, purpose.id)
        assert entry.organization_id == other_organization.id

    def test_no_attribution_fails_before_writing(self, anonymous_tracker, db):
        with pytest.raises(AttributionError):
            anonymous_tracker.repository(TransferMechanism).create(
                name='Binding Corporate Rules', code='BCR', gdpr_article='Art. 47'
            )

        assert not TransferMechanism.objects.filter(code='BCR').exists()
        assert ComponentChangeLog.objects.count() == 0

    def test_without_context_user_and_reason_are_empty(self, anonymous_tracker, organization):
        purpose = anonymous_tracker.repository(Purpose).create(organization=organization, name='Support')

        [entry] = entries_for(ComponentType.PURPOSE, purpose.id)
        assert entry.changed_by is None
        assert entry.change_reason is None

    def test_change_reason_is_recorded(self, context, organization):
        tracker = ChangeTracker(context.with_reason('New vendor onboarding'))

        purpose = tracker.repository(Purpose).create(organization=organization, name='Vendor management')

        [entry] = entries_for(ComponentType.PURPOSE, purpose.id)
        assert entry.change_reason == 'New vendor onboarding'

    def test_failed_write_is_wrapped_and_not_logged(self, tracker, scc):
        with pytest.raises(UnderlyingWriteError) as excinfo:
            tracker.repository(TransferMechanism).create(
                name='Duplicate', code='SCC', gdpr_article='Art. 46'
            )

        assert isinstance(excinfo.value.original, IntegrityError)
        assert excinfo.value.__cause__ is excinfo.value.original
        assert ComponentChangeLog.objects.count() == 0


@pytest.mark.django_db
class TestTrackedUpdate:

    def test_single_field_change(self, locations, location, scc):
        locations.update(location.id, transfer_mechanism_id=scc.id)

        [entry] = entries_for(ComponentType.ASSET_PROCESSING_LOCATION, location.id)
        assert entry.change_type == ChangeType.UPDATED
        assert entry.field_changed == 'transfer_mechanism_id'
        assert entry.old_value['transfer_mechanism'] is None
        assert entry.new_value['transfer_mechanism'] == {
            'id': scc.id, 'name': 'Standard Contractual Clauses', 'code': 'SCC', 'gdpr_article': 'Art. 46(2)(c)'
        }

    def test_one_entry_per_changed_field_in_registry_order(self, locations, location, united_states, scc):
        locations.update(
            location.id,
            location_role=LocationRole.BOTH,
            transfer_mechanism_id=scc.id,
            country_id=united_states.id,
        )

        entries = entries_for(ComponentType.ASSET_PROCESSING_LOCATION, location.id)
        assert [e.field_changed for e in entries] == ['country_id', 'transfer_mechanism_id', 'location_role']
        assert all(e.change_type == ChangeType.UPDATED for e in entries)
        assert len({str(e.old_value) for e in entries}) == 1
        assert len({str(e.new_value) for e in entries}) == 1

    def test_untracked_change_writes_nothing(self, locations, location):
        updated = locations.update(location.id, service='Read replica')

        assert updated.service == 'Read replica'
        assert AssetProcessingLocation.objects.get(pk=location.id).service == 'Read replica'
        assert entries_for(ComponentType.ASSET_PROCESSING_LOCATION, location.id) == []

    def test_same_value_writes_nothing(self, locations, location):
        locations.update(location.id, location_role=location.location_role)

        assert entries_for(ComponentType.ASSET_PROCESSING_LOCATION, location.id) == []

    def test_soft_delete_is_a_single_entry(self, locations, location):
        locations.update(location.id, is_active=False, location_role=LocationRole.BOTH)

        [entry] = entries_for(ComponentType.ASSET_PROCESSING_LOCATION, location.id)
        assert entry.change_type == ChangeType.DELETED
        assert entry.field_changed is None
        assert entry.old_value['is_active'] is True
        assert entry.new_value['is_active'] is False

    def test_restore_takes_precedence_over_field_changes(self, locations, location, united_states, scc):
        AssetProcessingLocation.objects.filter(pk=location.id).update(is_active=False)

        locations.update(
            location.id,
            is_active=True,
            country_id=united_states.id,
            transfer_mechanism_id=scc.id,
        )

        [entry] = entries_for(ComponentType.ASSET_PROCESSING_LOCATION, location.id)
        assert entry.change_type == ChangeType.RESTORED
        assert entry.field_changed is None
        assert entry.new_value['country']['iso_code'] == 'US'

    def test_missing_entity_raises_not_found(self, locations, db):
        with pytest.raises(NotFoundError) as excinfo:
            locations.update(999999, location_role=LocationRole.BOTH)

        assert excinfo.value.resource_type == 'AssetProcessingLocation'
        assert ComponentChangeLog.objects.count() == 0

    def test_kind_without_active_flag_logs_every_field(self, tracker, asset):
        scanned = datetime.datetime(2024, 5, 1, 12, 30, tzinfo=datetime.timezone.utc)

        tracker.repository(DigitalAsset).update(
            asset.id,
            last_scanned_at=scanned,
            metadata={'vendor': 'Acme Cloud'},
        )

        entries = entries_for(ComponentType.DIGITAL_ASSET, asset.id)
        assert [e.field_changed for e in entries] == ['last_scanned_at', 'metadata']
        assert entries[0].new_value['last_scanned_at'] == '2024-05-01T12:30:00+00:00'
        assert entries[0].old_value['last_scanned_at'] is None
        assert entries[1].new_value['metadata'] == {'vendor': 'Acme Cloud'}

    def test_system_row_update_is_attributed_to_context(self, tracker, organization):
        category = DataCategory.objects.create(name='Contact details')

        tracker.repository(DataCategory).update(category.id, is_special_category=True)

        [entry] = entries_for(ComponentType.DATA_CATEGORY, category.id)
        assert entry.organization_id == organization.id

    def test_system_row_update_without_context_fails(self, anonymous_tracker, db):
        category = DataCategory.objects.create(name='Contact details')

        with pytest.raises(AttributionError):
            anonymous_tracker.repository(DataCategory).update(category.id, is_special_category=True)

        assert DataCategory.objects.get(pk=category.id).is_special_category is False


@pytest.mark.django_db
class TestLogWriteFailure:

    @pytest.fixture
    def broken_log(self, monkeypatch):
        def fail(*args, **kwargs):
            raise DatabaseError('disk I/O error')
        monkeypatch.setattr(ComponentChangeLog, 'save', fail)

    def test_rolls_back_entity_write_by_default(self, locations, location, broken_log):
        with pytest.raises(LogWriteError) as excinfo:
            locations.update(location.id, location_role=LocationRole.BOTH)

        assert excinfo.value.component_type == 'AssetProcessingLocation'
        assert excinfo.value.component_id == location.id
        assert isinstance(excinfo.value.__cause__, DatabaseError)
        assert AssetProcessingLocation.objects.get(pk=location.id).location_role == LocationRole.HOSTING

    def test_keeps_entity_write_when_audit_is_not_atomic(self, settings, locations, location, broken_log):
        settings.CHANGE_TRACKING = {**settings.CHANGE_TRACKING, 'ATOMIC_AUDIT': False}

        with pytest.raises(LogWriteError):
            locations.update(location.id, location_role=LocationRole.BOTH)

        assert AssetProcessingLocation.objects.get(pk=location.id).location_role == LocationRole.BOTH

    def test_create_is_rolled_back(self, tracker, organization, broken_log):
        with pytest.raises(LogWriteError):
            tracker.repository(Purpose).create(organization=organization, name='Analytics')

        assert not Purpose.objects.filter(name='Analytics').exists()


@pytest.mark.django_db
class TestUpdateWriteFailure:

    def test_failed_update_is_wrapped_and_not_logged(self, tracker, organization):
        purpose = Purpose.objects.create(organization=organization, name='Marketing')

        with pytest.raises(UnderlyingWriteError) as excinfo:
            tracker.repository(Purpose).update(purpose.id, name=None)

        assert excinfo.value.__cause__ is excinfo.value.original
        assert entries_for(ComponentType.PURPOSE, purpose.id) == []
        assert Purpose.objects.get(pk=purpose.id).name == 'Marketing'


@pytest.mark.django_db(transaction=True)
class TestDanglingForeignKey:
    """Foreign keys are checked inside the tracked write, not at commit"""

    def test_create_with_unknown_reference_is_wrapped(self, locations, organization, asset, france):
        with pytest.raises(UnderlyingWriteError) as excinfo:
            locations.create(
                organization=organization,
                digital_asset=asset,
                service='Backups',
                country=france,
                transfer_mechanism_id=99999,
            )

        assert isinstance(excinfo.value.original, IntegrityError)
        assert not AssetProcessingLocation.objects.filter(service='Backups').exists()
        assert ComponentChangeLog.objects.count() == 0

    def test_update_with_unknown_reference_is_wrapped(self, locations, location, france):
        with pytest.raises(UnderlyingWriteError) as excinfo:
            locations.update(location.id, country_id=99999)

        assert isinstance(excinfo.value.original, IntegrityError)
        assert AssetProcessingLocation.objects.get(pk=location.id).country_id == france.id
        assert entries_for('AssetProcessingLocation', location.id) == []
