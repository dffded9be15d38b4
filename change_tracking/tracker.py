"""
Change tracker.

Wraps create/update for tracked component kinds so every write leaves a
trail in ComponentChangeLog without the calling feature doing anything.

Usage:
    tracker = ChangeTracker(ChangeTrackingContext.from_request(request))
    locations = tracker.repository(AssetProcessingLocation)
    locations.update(location_id, transfer_mechanism_id=scc.id)
"""
from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, connections, transaction

from core.constants import ChangeType
from core.exceptions import (
    AttributionError,
    ConfigurationError,
    LogWriteError,
    NotFoundError,
    UnderlyingWriteError,
)
from core.repositories import BaseRepository
from core.services import BaseService
from change_tracking import registry, snapshots
from change_tracking.classifier import classify
from change_tracking.context import ChangeTrackingContext
from change_tracking.models import ComponentChangeLog
from change_tracking.signals import change_logged
from change_tracking.switches import is_tracking_disabled


class TrackedRepository(BaseRepository):
    """
    Repository whose create/update record change log entries.
    Every other BaseRepository method behaves as usual and is never tracked.
    """

    def __init__(self, model, component_type, tracker):
        super().__init__(model)
        self.component_type = component_type
        self.tracker = tracker
        self.related = registry.related(component_type)

    def create(self, **kwargs):
        if is_tracking_disabled():
            return super().create(**kwargs)

        instance = self.model(**kwargs)
        organization_id = self.tracker.resolve_organization(self.component_type, instance)

        def write():
            self._save(instance, force_insert=True)
            saved = self._fetch(instance.pk)
            return saved, organization_id, None, snapshots.entity_state(saved, self.related)

        return self._run_tracked(write)

    def update(self, id, **kwargs):
        if is_tracking_disabled():
            return super().update(id, **kwargs)

        def write():
            instance = self._fetch_for_update(id)
            if instance is None:
                raise NotFoundError(resource_type=self.component_type, resource_id=id)
            before = snapshots.entity_state(instance, self.related)
            organization_id = self.tracker.resolve_organization(self.component_type, instance)

            for key, value in kwargs.items():
                setattr(instance, key, value)
            self._save(instance)

            saved = self._fetch(id)
            return saved, organization_id, before, snapshots.entity_state(saved, self.related)

        return self._run_tracked(write)

    def _run_tracked(self, write):
        if self.tracker.atomic_audit:
            with transaction.atomic():
                instance, organization_id, before, after = write()
                change_type, fan_out = self.tracker.record(
                    self.component_type, instance.pk, organization_id, before, after
                )
        else:
            with transaction.atomic():
                instance, organization_id, before, after = write()
            with transaction.atomic():
                change_type, fan_out = self.tracker.record(
                    self.component_type, instance.pk, organization_id, before, after
                )

        self.tracker.announce(self.component_type, instance.pk, change_type, fan_out)
        return instance

    def _save(self, instance, **kwargs):
        try:
            instance.save(**kwargs)
            # Foreign keys are deferred; surface a dangling id here, not at commit
            connections[instance._state.db].check_constraints(table_names=[self.model._meta.db_table])
        except (DatabaseError, DjangoValidationError) as exc:
            self.tracker.log_error(
                "Tracked write failed",
                error=exc,
                component_type=self.component_type,
                component_id=instance.pk,
            )
            raise UnderlyingWriteError(original=exc) from exc

    def _fetch(self, id):
        return self.model.objects.select_related(*self.related).get(pk=id)

    def _fetch_for_update(self, id):
        return (
            self.model.objects
            .select_for_update(of=('self',))
            .select_related(*self.related)
            .filter(pk=id)
            .first()
        )


class ChangeTracker(BaseService):
    """Records change log entries for writes made through its repositories"""

    def __init__(self, context=None):
        super().__init__()
        self.context = context or ChangeTrackingContext()

    @property
    def config(self):
        return getattr(settings, 'CHANGE_TRACKING', {})

    @property
    def atomic_audit(self):
        return self.config.get('ATOMIC_AUDIT', True)

    def repository(self, kind_or_model):
        """Tracked repository for a kind tag or a model class"""
        if isinstance(kind_or_model, str):
            component_type = kind_or_model
            model = registry.model_for(component_type)
        else:
            model = kind_or_model
            component_type = model.__name__

        if model is None or not registry.is_tracked(component_type):
            raise ConfigurationError(
                f"{component_type} is not a tracked component",
                code='untracked_component'
            )
        return TrackedRepository(model, component_type, self)

    def resolve_organization(self, component_type, instance):
        """
        The entity's own organization, else the context's. Raises
        AttributionError when neither is known, before anything is written.
        """
        organization_id = getattr(instance, 'organization_id', None)
        if organization_id is None:
            organization_id = self.context.organization_id
        if organization_id is None:
            self.log_error(
                "Change can't be attributed to an organization",
                component_type=component_type,
                component_id=instance.pk,
            )
            raise AttributionError(
                details={'component_type': component_type, 'component_id': instance.pk}
            )
        return organization_id

    def record(self, component_type, component_id, organization_id, before, after):
        """
        Classify a write and store its entries.
        Returns the change type and how many entries were written.
        """
        classification = classify(component_type, before, after)
        if classification.is_noop:
            return classification.change_type, 0

        old_value = snapshots.build(component_type, before) if before is not None else None
        new_value = snapshots.build(component_type, after)

        if classification.change_type in ChangeType.WHOLE_ENTITY:
            changed_fields = [None]
        else:
            changed_fields = classification.fields

        try:
            for field_name in changed_fields:
                ComponentChangeLog.objects.create(
                    organization_id=organization_id,
                    component_type=component_type,
                    component_id=component_id,
                    change_type=classification.change_type,
                    field_changed=field_name,
                    old_value=old_value,
                    new_value=new_value,
                    changed_by_id=self.context.user_id,
                    change_reason=self.context.change_reason,
                )
        except DatabaseError as exc:
            self.log_error(
                "Change log entry could not be written",
                error=exc,
                component_type=component_type,
                component_id=component_id,
            )
            raise LogWriteError(component_type=component_type, component_id=component_id) from exc

        self.log_info(
            f"{classification.change_type} {component_type} #{component_id}",
            fields=list(classification.fields),
            user_id=self.context.user_id,
        )
        return classification.change_type, len(changed_fields)

    def announce(self, component_type, component_id, change_type, fan_out):
        """Notify receivers. Receiver errors are logged, not raised."""
        responses = change_logged.send_robust(
            sender=self.__class__,
            component_type=component_type,
            component_id=component_id,
            change_type=change_type,
            fan_out=fan_out,
        )
        for receiver, response in responses:
            if isinstance(response, Exception):
                self.log_error(
                    f"change_logged receiver {getattr(receiver, '__qualname__', receiver)} failed",
                    error=response,
                    component_type=component_type,
                    component_id=component_id,
                )
