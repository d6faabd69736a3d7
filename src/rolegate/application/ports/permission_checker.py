"""Permission checker port - point check for one (resource, action)."""

from typing import Protocol
from uuid import UUID


class PermissionChecker(Protocol):
    """Port for checking a single permission of a user."""

    async def check(
        self,
        user_id: str,
        resource: str,
        action: str,
        workspace_id: UUID | None = None,
    ) -> bool: ...
