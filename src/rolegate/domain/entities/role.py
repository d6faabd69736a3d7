"""Role entity for RBAC."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Role:
    """Role - named bundle of permissions, global when workspace_id is None."""

    id: UUID
    name: str
    description: str
    workspace_id: UUID | None = None
