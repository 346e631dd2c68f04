"""Health check endpoints."""

import falcon.asgi

from gdprauthz.application.services import PermissionCatalog


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, catalog: PermissionCatalog) -> None:
        self._catalog = catalog

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (catalog loaded)."""
        if not len(self._catalog):
            resp.media = {"status": "not ready", "permissions": 0}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready", "permissions": len(self._catalog)}
        resp.status = falcon.HTTP_200
