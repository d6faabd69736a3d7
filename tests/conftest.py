"""Pytest fixtures for RoleGate tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from rolegate.domain.entities import Permission, Role, RoleBinding


# --- Fake repositories ---


class FakeRoleBindingRepository:
    """In-memory user_role table with the (user, role, workspace) unique key."""

    def __init__(self) -> None:
        self._rows: list[RoleBinding] = []

    async def list_for_user(self, user_id: str) -> list[RoleBinding]:
        return [b for b in self._rows if b.user_id == user_id]

    async def get(
        self, user_id: str, role_id: UUID, workspace_id: UUID | None
    ) -> RoleBinding | None:
        for b in self._rows:
            if b.same_slot(user_id, role_id, workspace_id):
                return b
        return None

    async def create(self, binding: RoleBinding) -> RoleBinding:
        existing = await self.get(binding.user_id, binding.role_id, binding.workspace_id)
        if existing:
            return existing
        self._rows.append(binding)
        return binding

    async def delete(
        self, user_id: str, role_id: UUID, workspace_id: UUID | None
    ) -> bool:
        before = len(self._rows)
        self._rows = [
            b for b in self._rows if not b.same_slot(user_id, role_id, workspace_id)
        ]
        return len(self._rows) < before

    @property
    def rows(self) -> list[RoleBinding]:
        return list(self._rows)


class FakeRoleRepository:
    """In-memory role repository joined to the fake bindings."""

    def __init__(self, bindings: FakeRoleBindingRepository) -> None:
        self._by_id: dict[UUID, Role] = {}
        self._by_name: dict[str, Role] = {}
        self._bindings = bindings

    async def get_by_id(self, role_id: UUID) -> Role | None:
        return self._by_id.get(role_id)

    async def get_by_name(self, name: str) -> Role | None:
        return self._by_name.get(name)

    async def list_all(self) -> list[Role]:
        return sorted(self._by_id.values(), key=lambda r: r.name)

    async def list_for_user(self, user_id: str) -> list[tuple[Role, UUID | None]]:
        return [
            (self._by_id[b.role_id], b.workspace_id)
            for b in await self._bindings.list_for_user(user_id)
            if b.role_id in self._by_id
        ]

    def add_role(self, role: Role) -> None:
        """Helper to add role for tests."""
        self._by_id[role.id] = role
        self._by_name[role.name] = role


class FakePermissionRepository:
    """In-memory permission catalog and role_permission grants."""

    def __init__(self, bindings: FakeRoleBindingRepository) -> None:
        self._grants: dict[UUID, list[Permission]] = {}
        self._bindings = bindings

    async def list_for_role(self, role_id: UUID) -> list[Permission]:
        return list(self._grants.get(role_id, []))

    async def check_server_side(
        self,
        user_id: str,
        resource: str,
        action: str,
        workspace_id: UUID | None = None,
    ) -> bool:
        for b in await self._bindings.list_for_user(user_id):
            if workspace_id is not None and b.workspace_id not in (None, workspace_id):
                continue
            for p in self._grants.get(b.role_id, []):
                if p.resource == resource and p.action == action:
                    return True
        return False

    def grant(self, role: Role, *keys: str) -> None:
        """Helper to grant resource:action keys to role."""
        for key in keys:
            resource, action = key.split(":", 1)
            self._grants.setdefault(role.id, []).append(
                Permission(id=uuid4(), resource=resource, action=action)
            )


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.role_bindings = FakeRoleBindingRepository()
        self.roles = FakeRoleRepository(self.role_bindings)
        self.permissions = FakePermissionRepository(self.role_bindings)

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass

    def add_role(self, name: str, *keys: str, description: str = "") -> Role:
        """Helper: create role and grant permission keys to it."""
        role = Role(id=uuid4(), name=name, description=description or name.title())
        self.roles.add_role(role)
        self.permissions.grant(role, *keys)
        return role

    def bind(
        self, user_id: str, role_name: str, workspace_id: UUID | None = None
    ) -> RoleBinding:
        """Helper: bind a catalog role to user without awaiting."""
        role = self.roles._by_name[role_name]
        binding = RoleBinding(
            user_id=user_id,
            role_id=role.id,
            workspace_id=workspace_id,
            created_at=datetime.now(UTC),
        )
        self.role_bindings._rows.append(binding)
        return binding


def seeded_uow() -> FakeUnitOfWork:
    """UoW with the default catalog: admin, user and premium roles."""
    uow = FakeUnitOfWork()
    uow.add_role(
        "admin",
        "proposal:create",
        "proposal:read",
        "proposal:update",
        "proposal:delete",
        "proposal:export",
        "user:manage",
    )
    uow.add_role(
        "user", "proposal:create", "proposal:read", "proposal:update", "proposal:delete"
    )
    uow.add_role("premium", "proposal:read", "proposal:export", "ai_analysis:create")
    return uow


def factory_for(uow: FakeUnitOfWork):
    """Factory that yields the same UoW for every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


def failing_factory(exc: Exception | None = None):
    """Factory whose UoW blows up on entry, like an unreachable database."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        raise exc or ConnectionError("database unavailable")
        yield  # pragma: no cover

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Seeded in-memory UnitOfWork for each test."""
    return seeded_uow()


@pytest.fixture
def uow_factory(fake_uow):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return factory_for(fake_uow)


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - returns True by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.check.return_value = True
    return mock
