"""Health check endpoints."""

from collections.abc import Callable

import falcon.asgi


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, content_dir_exists: Callable[[], bool] | None = None) -> None:
        self._content_dir_exists = content_dir_exists

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (content directory present)."""
        if self._content_dir_exists is not None and not self._content_dir_exists():
            resp.media = {"status": "unavailable", "reason": "content directory missing"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
