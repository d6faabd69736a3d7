"""Forbidden page - static, carries no authorization logic."""

import falcon.asgi


class ForbiddenResource:
    """GET /403 - shown after an authenticated request is denied."""

    def __init__(self, home_path: str = "/") -> None:
        self._home_path = home_path

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.status = falcon.HTTP_403
        resp.media = {
            "title": "403 Forbidden",
            "description": "You need additional permissions to view this page.",
            "actions": [
                {"id": "back", "label": "Go back"},
                {"id": "home", "label": "Go home", "href": self._home_path},
            ],
        }
