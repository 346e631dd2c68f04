"""Permission catalog API resources."""

import falcon.asgi

from gdprauthz.application.services import PermissionCatalog


class PermissionCatalogResource:
    """GET /v1/permissions and /v1/permissions/categories - read-only catalog."""

    def __init__(self, catalog: PermissionCatalog) -> None:
        self._catalog = catalog

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List catalog permissions, optionally for one category."""
        category = req.get_param("category")
        perms = self._catalog.by_category(category) if category else self._catalog.list()
        resp.media = {
            "items": [
                {
                    "id": p.id,
                    "resource": p.resource,
                    "action": p.action,
                    "category": p.category,
                    "name": p.name,
                    "description": p.description,
                }
                for p in perms
            ]
        }
        resp.status = falcon.HTTP_200

    async def on_get_categories(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {
            "items": [
                {
                    "id": c.id,
                    "name": c.name,
                    "color": c.color,
                    "icon": c.icon,
                    "permissions_count": len(self._catalog.by_category(c.id)),
                }
                for c in self._catalog.categories()
            ]
        }
        resp.status = falcon.HTTP_200
