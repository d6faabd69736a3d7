"""Permission checker implementation - delegates to has_permission() in storage."""

import logging
from uuid import UUID

logger = logging.getLogger(__name__)


class RoleGatePermissionChecker:
    """Point check for one (resource, action), optionally within a workspace.

    With no workspace every binding counts, which agrees with the permission
    set reported by ResolveIdentityUseCase. With a workspace only global
    bindings and bindings to that workspace count. Storage errors deny.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def check(
        self,
        user_id: str,
        resource: str,
        action: str,
        workspace_id: UUID | None = None,
    ) -> bool:
        """Check if user holds resource:action."""
        if not user_id:
            return False
        try:
            async with self._uow_factory() as uow:
                return await uow.permissions.check_server_side(
                    user_id, resource, action, workspace_id
                )
        except Exception:
            logger.exception(
                "Permission check failed for user %s on %s:%s", user_id, resource, action
            )
            return False
