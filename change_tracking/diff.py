"""
Field-diff detection over tracked fields.
"""
from change_tracking import registry


def diff(component_type, before, after):
    """
    Names of tracked fields whose value differs between two states, in
    registry order. A field missing from either state is skipped.
    """
    return tuple(
        name for name in registry.fields(component_type)
        if name in before and name in after and before[name] != after[name]
    )
