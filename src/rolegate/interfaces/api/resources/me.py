"""Current user API resources."""

from uuid import UUID

import falcon.asgi

from rolegate.application.ports import PermissionChecker
from rolegate.domain.value_objects import ResolvedIdentity


class MeResource:
    """GET /v1/me - roles and permissions of the caller."""

    def __init__(self, permission_checker: PermissionChecker) -> None:
        self._permission_checker = permission_checker

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Return the caller's resolved identity."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        identity = getattr(req.context, "identity", None) or ResolvedIdentity.empty()
        resp.media = {
            "user_id": user.user_id,
            "email": user.email,
            **identity.to_claims(),
        }
        resp.status = falcon.HTTP_200

    async def on_get_check(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """GET /v1/me/permissions/check?resource=&action=&workspace_id= - point check."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        resource = req.get_param("resource")
        action = req.get_param("action")
        if not resource or not action:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "resource and action are required"}
            return

        workspace_param = req.get_param("workspace_id")
        try:
            workspace_id = UUID(workspace_param) if workspace_param else None
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid workspace ID"}
            return

        allowed = await self._permission_checker.check(
            user.user_id, resource, action, workspace_id
        )
        resp.media = {
            "permission": f"{resource}:{action}",
            "workspace_id": workspace_param,
            "allowed": allowed,
        }
        resp.status = falcon.HTTP_200
