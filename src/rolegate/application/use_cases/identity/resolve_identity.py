"""Resolve identity use case - flatten a user's roles into permissions."""

import logging
from uuid import UUID

from rolegate.domain.entities import Permission, Role
from rolegate.domain.value_objects import ResolvedIdentity

logger = logging.getLogger(__name__)


class ResolveIdentityUseCase:
    """Resolve role names and permission keys held by a user.

    Storage errors never reach the caller: the result degrades to an empty
    set, which every decision predicate treats as "no access".
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def resolve_roles(self, user_id: str) -> list[Role]:
        """Roles held by user in any workspace, one per name."""
        try:
            async with self._uow_factory() as uow:
                bound = await uow.roles.list_for_user(user_id)
        except Exception:
            logger.exception("Role resolution failed for user %s", user_id)
            return []
        return _unique_roles(role for role, _ in bound)

    async def resolve_permissions(self, user_id: str) -> list[Permission]:
        """Permissions granted through any held role, one per key."""
        try:
            async with self._uow_factory() as uow:
                return await self._permissions_for_user(uow, user_id)
        except Exception:
            logger.exception("Permission resolution failed for user %s", user_id)
            return []

    async def execute(self, user_id: str) -> ResolvedIdentity:
        """Resolve roles and permissions together."""
        try:
            async with self._uow_factory() as uow:
                bound = await uow.roles.list_for_user(user_id)
                permissions = await self._permissions_for_user(uow, user_id, bound)
        except Exception:
            logger.exception("Identity resolution failed for user %s", user_id)
            return ResolvedIdentity.empty()

        identity = ResolvedIdentity.of(
            roles=(role.name for role, _ in bound),
            permissions=(p.key for p in permissions),
        )
        if identity.is_empty:
            logger.info("User %s has no roles", user_id)
        return identity

    async def _permissions_for_user(
        self,
        uow,
        user_id: str,
        bound: list[tuple[Role, UUID | None]] | None = None,
    ) -> list[Permission]:
        if bound is None:
            bound = await uow.roles.list_for_user(user_id)
        role_ids: list[UUID] = []
        for role, _ in bound:
            if role.id not in role_ids:
                role_ids.append(role.id)

        by_key: dict[str, Permission] = {}
        for role_id in role_ids:
            for permission in await uow.permissions.list_for_role(role_id):
                by_key.setdefault(permission.key, permission)
        return list(by_key.values())


def _unique_roles(roles) -> list[Role]:
    by_name: dict[str, Role] = {}
    for role in roles:
        by_name.setdefault(role.name, role)
    return sorted(by_name.values(), key=lambda r: r.name)
