"""
Snapshot builders.

A snapshot is a plain JSON-compatible dict describing one entity at the
moment a change was logged. Location snapshots copy the country and
transfer mechanism details in, so the entry still reads correctly after
those rows are renamed or removed.
"""
import datetime
import decimal
import uuid

from core.constants import ComponentType
from change_tracking import registry


COUNTRY_SNAPSHOT_FIELDS = ('id', 'name', 'iso_code', 'gdpr_status')
TRANSFER_MECHANISM_SNAPSHOT_FIELDS = ('id', 'name', 'code', 'gdpr_article')


def to_json_value(value):
    """Normalize a model value to what a JSON column will hand back"""
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, (decimal.Decimal, uuid.UUID)):
        return str(value)
    if isinstance(value, dict):
        return {str(k): to_json_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    return value


def entity_state(instance, related=()):
    """
    Plain dict of an instance's concrete fields keyed by attname.

    Each name in `related` adds a nested dict of that relation's fields,
    but only when the relation is already cached on the instance, so this
    never issues a query. A null foreign key yields None; a relation cached
    as missing (dangling id) is left out.
    """
    state = {
        field.attname: to_json_value(getattr(instance, field.attname))
        for field in instance._meta.concrete_fields
    }
    for name in related:
        field = instance._meta.get_field(name)
        if getattr(instance, field.attname) is None:
            state[name] = None
        elif field.is_cached(instance):
            related_instance = field.get_cached_value(instance)
            if related_instance is not None:
                state[name] = entity_state(related_instance)
    return state


def _pick(row, keys):
    return {key: row.get(key) for key in keys}


def default_snapshot(component_type, state):
    return {
        name: state[name]
        for name in registry.fields(component_type)
        if name in state
    }


def location_snapshot(component_type, state):
    snapshot = default_snapshot(component_type, state)

    country = state.get('country')
    if country:
        snapshot['country'] = _pick(country, COUNTRY_SNAPSHOT_FIELDS)

    mechanism = state.get('transfer_mechanism')
    if mechanism:
        snapshot['transfer_mechanism'] = _pick(mechanism, TRANSFER_MECHANISM_SNAPSHOT_FIELDS)
    elif state.get('transfer_mechanism_id') is None:
        snapshot['transfer_mechanism'] = None

    return snapshot


BUILDERS = {
    ComponentType.ASSET_PROCESSING_LOCATION: location_snapshot,
    ComponentType.RECIPIENT_PROCESSING_LOCATION: location_snapshot,
}


def build(component_type, state):
    """Build the snapshot for a kind from a state dict. Pure; never touches the database."""
    builder = BUILDERS.get(component_type, default_snapshot)
    return builder(component_type, state)
