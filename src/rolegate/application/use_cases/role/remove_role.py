"""Remove role use case."""

from uuid import UUID

from rolegate.application.ports import PermissionChecker
from rolegate.application.use_cases.role.assign_role import (
    MANAGE_ACTION,
    MANAGE_RESOURCE,
)
from rolegate.domain.exceptions import NotFound, PermissionDenied


class RemoveRoleUseCase:
    """Remove role binding from user."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(
        self,
        actor_id: str,
        user_id: str,
        role_name: str,
        workspace_id: UUID | None = None,
    ) -> None:
        """Remove the (user, role, workspace) binding. Actor must hold user:manage.

        A global binding is only removed when workspace_id is None, and a
        workspace binding only for its own workspace.
        """
        can_manage = await self._permission_checker.check(
            actor_id, MANAGE_RESOURCE, MANAGE_ACTION, workspace_id
        )
        if not can_manage:
            raise PermissionDenied("User does not have user:manage permission")

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_name(role_name)
            if not role:
                raise NotFound(f"Role not found: {role_name}")
            deleted = await uow.role_bindings.delete(user_id, role.id, workspace_id)
            if not deleted:
                raise NotFound(f"Role binding not found: {user_id}/{role_name}")
