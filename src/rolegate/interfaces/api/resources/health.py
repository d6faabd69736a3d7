"""Health check endpoints."""

import logging

import falcon.asgi

logger = logging.getLogger(__name__)


class HealthResource:
    """Liveness, and readiness against the role catalog."""

    def __init__(self, unit_of_work_factory=None) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - the catalog is reachable and seeded."""
        if self._uow_factory is None:
            resp.media = {"status": "ready"}
            resp.status = falcon.HTTP_200
            return
        try:
            async with self._uow_factory() as uow:
                roles = await uow.roles.list_all()
        except Exception:
            logger.exception("Readiness check failed")
            resp.media = {"status": "unavailable"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready", "roles": len(roles)}
        resp.status = falcon.HTTP_200
