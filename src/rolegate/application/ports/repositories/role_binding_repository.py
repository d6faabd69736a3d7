"""Role binding repository port."""

from typing import Protocol
from uuid import UUID

from rolegate.domain.entities import RoleBinding


class RoleBindingRepository(Protocol):
    """Port for user_role persistence."""

    async def list_for_user(self, user_id: str) -> list[RoleBinding]: ...

    async def get(
        self, user_id: str, role_id: UUID, workspace_id: UUID | None
    ) -> RoleBinding | None: ...

    async def create(self, binding: RoleBinding) -> RoleBinding:
        """Insert binding. Existing (user, role, workspace) rows are left untouched."""
        ...

    async def delete(
        self, user_id: str, role_id: UUID, workspace_id: UUID | None
    ) -> bool:
        """Delete binding, return whether a row was removed."""
        ...
