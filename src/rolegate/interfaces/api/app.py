"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from rolegate.interfaces.api.resources.forbidden import ForbiddenResource
from rolegate.interfaces.api.resources.health import HealthResource
from rolegate.interfaces.api.resources.me import MeResource
from rolegate.interfaces.api.resources.role_bindings import (
    SignupRoleResource,
    UserRoleResource,
    UserRolesResource,
)

logger = logging.getLogger(__name__)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log unhandled errors and return a bare 500."""
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    middleware: list,
    me_resource: MeResource,
    user_roles_resource: UserRolesResource,
    user_role_resource: UserRoleResource,
    signup_role_resource: SignupRoleResource,
    forbidden_path: str = "/403",
    unit_of_work_factory=None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware)
    app.add_error_handler(Exception, handle_unexpected_error)

    health = HealthResource(unit_of_work_factory)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/me", me_resource)
    app.add_route("/v1/me/permissions/check", me_resource, suffix="check")
    app.add_route("/v1/users/{user_id}/roles", user_roles_resource)
    app.add_route("/v1/users/{user_id}/roles/{role_name}", user_role_resource)
    app.add_route("/v1/users/{user_id}/signup-role", signup_role_resource)
    app.add_route(forbidden_path, ForbiddenResource())
    return app
