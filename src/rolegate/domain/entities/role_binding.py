"""RoleBinding entity - user holds role, optionally within a workspace."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class RoleBinding:
    """Assignment of role to user. (user_id, role_id, workspace_id) is unique."""

    user_id: str
    role_id: UUID
    created_at: datetime
    workspace_id: UUID | None = None
    created_by: str | None = None

    def same_slot(self, user_id: str, role_id: UUID, workspace_id: UUID | None) -> bool:
        """True if this binding occupies the given uniqueness slot."""
        return (
            self.user_id == user_id
            and self.role_id == role_id
            and self.workspace_id == workspace_id
        )
