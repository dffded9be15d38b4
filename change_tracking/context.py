"""
Attribution carried alongside a tracked write.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ChangeTrackingContext:
    user_id: Optional[int] = None
    organization_id: Optional[int] = None
    change_reason: Optional[str] = None

    @classmethod
    def from_request(cls, request, reason=None):
        """Context for the authenticated user of a request; empty for anonymous requests"""
        user = getattr(request, 'user', None)
        if user is None or not user.is_authenticated:
            return cls(change_reason=reason)
        return cls(
            user_id=user.pk,
            organization_id=getattr(user, 'organization_id', None),
            change_reason=reason,
        )

    def with_reason(self, reason):
        return ChangeTrackingContext(self.user_id, self.organization_id, reason)
