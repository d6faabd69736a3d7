"""Assign default role use case - run once when a user signs up."""

import logging
from datetime import UTC, datetime

from rolegate.domain.entities import RoleBinding
from rolegate.domain.value_objects import RoleName

logger = logging.getLogger(__name__)


class AssignDefaultRoleUseCase:
    """Bind the default global role to a newly registered user."""

    def __init__(
        self,
        unit_of_work_factory: type,
        default_role: str = RoleName.USER,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._default_role = default_role

    async def execute(self, user_id: str) -> RoleBinding | None:
        """Return the binding, or None when the default role is not in the catalog."""
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_name(self._default_role)
            if not role:
                logger.warning(
                    "Default role %r missing from catalog; user %s left without roles",
                    self._default_role,
                    user_id,
                )
                return None

            existing = await uow.role_bindings.get(user_id, role.id, None)
            if existing:
                return existing

            return await uow.role_bindings.create(
                RoleBinding(
                    user_id=user_id,
                    role_id=role.id,
                    created_at=datetime.now(UTC),
                )
            )
