"""
Classifies a before/after pair into the change type to log.
"""
from dataclasses import dataclass

from core.constants import ChangeType
from change_tracking import registry
from change_tracking.diff import diff


@dataclass(frozen=True)
class Classification:
    change_type: str
    fields: tuple = ()

    @property
    def is_noop(self):
        """An update that touched no tracked field writes no entry"""
        return self.change_type == ChangeType.UPDATED and not self.fields


def classify(component_type, before, after):
    if before is None:
        return Classification(ChangeType.CREATED)

    flag = registry.active_flag(component_type)
    if flag is not None:
        was_active = before.get(flag)
        is_active = after.get(flag)
        # Soft delete / restore win over any field edits made in the same write
        if was_active is False and is_active is True:
            return Classification(ChangeType.RESTORED)
        if was_active is True and is_active is False:
            return Classification(ChangeType.DELETED)

    return Classification(ChangeType.UPDATED, diff(component_type, before, after))
