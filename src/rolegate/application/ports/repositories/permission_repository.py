"""Permission repository port."""

from typing import Protocol
from uuid import UUID

from rolegate.domain.entities import Permission


class PermissionRepository(Protocol):
    """Port for permission catalog access."""

    async def list_for_role(self, role_id: UUID) -> list[Permission]: ...

    async def check_server_side(
        self,
        user_id: str,
        resource: str,
        action: str,
        workspace_id: UUID | None = None,
    ) -> bool: ...
