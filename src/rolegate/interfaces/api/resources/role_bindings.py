"""Role binding API resources."""

from uuid import UUID

import falcon.asgi

from rolegate.application.use_cases.role.assign_default_role import (
    AssignDefaultRoleUseCase,
)
from rolegate.application.use_cases.role.assign_role import (
    MANAGE_ACTION,
    MANAGE_RESOURCE,
    AssignRoleUseCase,
)
from rolegate.application.use_cases.role.remove_role import RemoveRoleUseCase
from rolegate.domain.entities import RoleBinding
from rolegate.domain.exceptions import NotFound, PermissionDenied


def _parse_workspace(value) -> UUID | None:
    if value in (None, ""):
        return None
    return UUID(str(value))


def _binding_media(binding: RoleBinding, role_name: str) -> dict:
    return {
        "user_id": binding.user_id,
        "role": role_name,
        "workspace_id": str(binding.workspace_id) if binding.workspace_id else None,
        "created_at": binding.created_at.isoformat(),
    }


class UserRolesResource:
    """GET/POST /v1/users/{user_id}/roles - list and assign roles."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker,
        assign_role: AssignRoleUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._assign = assign_role

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        """List role bindings of user."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        if user.user_id != user_id:
            can_manage = await self._permission_checker.check(
                user.user_id, MANAGE_RESOURCE, MANAGE_ACTION
            )
            if not can_manage:
                resp.status = falcon.HTTP_403
                resp.media = {"error": "Permission denied"}
                return

        async with self._uow_factory() as uow:
            bindings = await uow.role_bindings.list_for_user(user_id)
            items = []
            for b in bindings:
                role = await uow.roles.get_by_id(b.role_id)
                items.append(_binding_media(b, role.name if role else "unknown"))

        resp.media = {"items": items}
        resp.status = falcon.HTTP_200

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        """Assign role to user."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await req.get_media()
            role_name = body["role"]
            workspace_id = _parse_workspace(body.get("workspace_id"))
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid workspace ID"}
            return

        try:
            binding = await self._assign.execute(
                user.user_id, user_id, role_name, workspace_id
            )
            resp.media = _binding_media(binding, role_name)
            resp.status = falcon.HTTP_201
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}


class UserRoleResource:
    """DELETE /v1/users/{user_id}/roles/{role_name} - remove role."""

    def __init__(self, remove_role: RemoveRoleUseCase) -> None:
        self._remove = remove_role

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
        role_name: str,
    ) -> None:
        """Remove role binding; ?workspace_id= targets a workspace binding."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            workspace_id = _parse_workspace(req.get_param("workspace_id"))
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid workspace ID"}
            return

        try:
            await self._remove.execute(user.user_id, user_id, role_name, workspace_id)
            resp.status = falcon.HTTP_204
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}


class SignupRoleResource:
    """POST /v1/users/{user_id}/signup-role - default role for a new account."""

    def __init__(self, assign_default_role: AssignDefaultRoleUseCase) -> None:
        self._assign_default = assign_default_role

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        """Users may only claim their own default role."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return
        if user.user_id != user_id:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        binding = await self._assign_default.execute(user_id)
        if binding is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Default role not configured"}
            return
        resp.media = {
            "user_id": binding.user_id,
            "role_id": str(binding.role_id),
            "created_at": binding.created_at.isoformat(),
        }
        resp.status = falcon.HTTP_201
