"""Application entry point and composition root."""

from rolegate import __version__
from rolegate.application.identity_store import IdentityStore, IdentitySync
from rolegate.application.use_cases.identity.resolve_identity import (
    ResolveIdentityUseCase,
)
from rolegate.application.use_cases.role.assign_default_role import (
    AssignDefaultRoleUseCase,
)
from rolegate.application.use_cases.role.assign_role import AssignRoleUseCase
from rolegate.application.use_cases.role.remove_role import RemoveRoleUseCase
from rolegate.config import Settings, get_settings
from rolegate.infrastructure.auth.keycloak_provider import KeycloakProvider
from rolegate.infrastructure.identity.json_snapshot_storage import (
    JsonFileSnapshotStorage,
)
from rolegate.infrastructure.permission.permission_checker import (
    RoleGatePermissionChecker,
)
from rolegate.infrastructure.persistence.postgres.connection import create_pool
from rolegate.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from rolegate.interfaces.api.app import create_app
from rolegate.interfaces.api.middleware.access_gate import (
    AccessGateMiddleware,
    default_access_rules,
)
from rolegate.interfaces.api.middleware.auth import AuthMiddleware
from rolegate.interfaces.api.middleware.cors import CORSMiddleware
from rolegate.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from rolegate.interfaces.api.resources.me import MeResource
from rolegate.interfaces.api.resources.role_bindings import (
    SignupRoleResource,
    UserRoleResource,
    UserRolesResource,
)
from rolegate.logging_config import configure_logging


def main() -> None:
    """CLI entry point."""
    print(f"RoleGate v{__version__}")


def create_rolegate_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)
    pool = create_pool(settings.database_url)
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )

    permission_checker = RoleGatePermissionChecker(uow_factory)
    resolve_identity = ResolveIdentityUseCase(unit_of_work_factory=uow_factory)
    assign_role = AssignRoleUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    remove_role = RemoveRoleUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    assign_default_role = AssignDefaultRoleUseCase(
        unit_of_work_factory=uow_factory,
        default_role=settings.default_role,
    )

    access_gate = AccessGateMiddleware(
        rules=default_access_rules(
            settings.protected_prefix_list, settings.admin_prefix
        ),
        resolve_identity=resolve_identity,
        sign_in_path=settings.sign_in_path,
        forbidden_path=settings.forbidden_path,
    )

    return create_app(
        middleware=[
            CORSMiddleware(settings.cors_origin_list),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
            access_gate,
        ],
        me_resource=MeResource(permission_checker),
        user_roles_resource=UserRolesResource(
            uow_factory, permission_checker, assign_role
        ),
        user_role_resource=UserRoleResource(remove_role),
        signup_role_resource=SignupRoleResource(assign_default_role),
        forbidden_path=settings.forbidden_path,
        unit_of_work_factory=uow_factory,
    )


def create_identity_sync(
    unit_of_work_factory, settings: Settings | None = None
) -> IdentitySync:
    """Identity cache for a client process, persisted at identity_cache_path."""
    settings = settings or get_settings()
    store = IdentityStore(JsonFileSnapshotStorage(settings.identity_cache_path))
    return IdentitySync(store, ResolveIdentityUseCase(unit_of_work_factory))


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_rolegate_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
