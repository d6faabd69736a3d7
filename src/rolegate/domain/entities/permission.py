"""Permission entity - atomic (resource, action) capability."""

from dataclasses import dataclass
from uuid import UUID

from rolegate.domain.value_objects.permission_key import PermissionKey


@dataclass(frozen=True)
class Permission:
    """Permission - resource and action, keyed canonically as resource:action."""

    id: UUID
    resource: str
    action: str
    description: str = ""

    @property
    def key(self) -> str:
        return str(PermissionKey(self.resource, self.action))
