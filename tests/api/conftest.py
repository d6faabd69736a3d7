"""Fixtures for API tests."""

import falcon
import falcon.asgi
import pytest
from falcon.testing import TestClient

from rolegate.application.use_cases.identity.resolve_identity import (
    ResolveIdentityUseCase,
)
from rolegate.application.use_cases.role.assign_default_role import (
    AssignDefaultRoleUseCase,
)
from rolegate.application.use_cases.role.assign_role import AssignRoleUseCase
from rolegate.application.use_cases.role.remove_role import RemoveRoleUseCase
from rolegate.infrastructure.auth.keycloak_provider import OIDCUser
from rolegate.infrastructure.permission.permission_checker import (
    RoleGatePermissionChecker,
)
from rolegate.interfaces.api.app import create_app
from rolegate.interfaces.api.middleware.access_gate import (
    AccessGateMiddleware,
    default_access_rules,
)
from rolegate.interfaces.api.middleware.auth import AuthMiddleware
from rolegate.interfaces.api.resources.me import MeResource
from rolegate.interfaces.api.resources.role_bindings import (
    SignupRoleResource,
    UserRoleResource,
    UserRolesResource,
)

PROTECTED_PREFIXES = ["/dashboard", "/admin", "/api/proposals"]


class FakeKeycloakProvider:
    """Accepts tokens of the form 'token-<user_id>'; 'enriched-<user_id>' carries claims."""

    def __init__(self) -> None:
        self.claims: dict[str, dict] = {}

    def decode_token(self, token: str) -> OIDCUser | None:
        kind, _, user_id = token.partition("-")
        if not user_id or kind not in ("token", "enriched"):
            return None
        claims = {"sub": user_id, "active": True}
        if kind == "enriched":
            claims.update(self.claims.get(user_id, {}))
        return OIDCUser(
            user_id=user_id,
            email=f"{user_id}@example.com",
            username=user_id,
            claims=claims,
        )


class CountingResource:
    """Downstream handler that records whether it ran."""

    def __init__(self) -> None:
        self.calls = 0

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        self.calls += 1
        resp.media = {"path": req.path}


def auth(user_id: str, kind: str = "token") -> dict[str, str]:
    return {"Authorization": f"Bearer {kind}-{user_id}"}


@pytest.fixture
def keycloak() -> FakeKeycloakProvider:
    return FakeKeycloakProvider()


@pytest.fixture
def downstream() -> CountingResource:
    return CountingResource()


@pytest.fixture
def seeded(fake_uow):
    """Catalog plus bindings: 'plain' is a user, 'boss' is an admin."""
    fake_uow.bind("plain", "user")
    fake_uow.bind("boss", "admin")
    return fake_uow


@pytest.fixture
def app(seeded, uow_factory, keycloak, downstream):
    """Falcon ASGI app with real middleware over the in-memory store."""
    permission_checker = RoleGatePermissionChecker(uow_factory)
    resolve_identity = ResolveIdentityUseCase(uow_factory)
    access_gate = AccessGateMiddleware(
        rules=default_access_rules(PROTECTED_PREFIXES, "/admin"),
        resolve_identity=resolve_identity,
    )
    app = create_app(
        middleware=[AuthMiddleware(keycloak), access_gate],
        me_resource=MeResource(permission_checker),
        user_roles_resource=UserRolesResource(
            uow_factory,
            permission_checker,
            AssignRoleUseCase(uow_factory, permission_checker),
        ),
        user_role_resource=UserRoleResource(
            RemoveRoleUseCase(uow_factory, permission_checker)
        ),
        signup_role_resource=SignupRoleResource(AssignDefaultRoleUseCase(uow_factory)),
    )
    app.add_route("/dashboard", downstream)
    app.add_route("/admin/users", downstream)
    app.add_route("/administrators", downstream)
    app.add_route("/public/info", downstream)
    return app


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
