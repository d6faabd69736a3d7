"""Assign role use case."""

from datetime import UTC, datetime
from uuid import UUID

from rolegate.application.ports import PermissionChecker
from rolegate.domain.entities import RoleBinding
from rolegate.domain.exceptions import NotFound, PermissionDenied

MANAGE_RESOURCE = "user"
MANAGE_ACTION = "manage"


class AssignRoleUseCase:
    """Assign role to user, globally or within a workspace."""

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
    ) -> RoleBinding:
        """Bind role to user. Actor must hold user:manage. Idempotent."""
        can_manage = await self._permission_checker.check(
            actor_id, MANAGE_RESOURCE, MANAGE_ACTION, workspace_id
        )
        if not can_manage:
            raise PermissionDenied("User does not have user:manage permission")

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_name(role_name)
            if not role:
                raise NotFound(f"Role not found: {role_name}")

            existing = await uow.role_bindings.get(user_id, role.id, workspace_id)
            if existing:
                return existing

            binding = RoleBinding(
                user_id=user_id,
                role_id=role.id,
                workspace_id=workspace_id,
                created_at=datetime.now(UTC),
                created_by=actor_id,
            )
            return await uow.role_bindings.create(binding)
