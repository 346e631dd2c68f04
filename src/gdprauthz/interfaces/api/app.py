"""Falcon ASGI application."""

import logging
from dataclasses import dataclass

import falcon
import falcon.asgi
from falcon.asgi import App

from gdprauthz.interfaces.api.resources.catalog import PermissionCatalogResource
from gdprauthz.interfaces.api.resources.effective_permissions import (
    EffectivePermissionsResource,
)
from gdprauthz.interfaces.api.resources.health import HealthResource
from gdprauthz.interfaces.api.resources.role_permissions import RolePermissionsResource
from gdprauthz.interfaces.api.resources.subject_permissions import (
    SubjectPermissionResource,
    SubjectPermissionsResource,
)

logger = logging.getLogger(__name__)

SUBJECT_PATH = "/v1/tenants/{tenant_id}/subjects/{subject_id}"


@dataclass
class ApiResources:
    health: HealthResource
    catalog: PermissionCatalogResource
    effective_permissions: EffectivePermissionsResource
    subject_permissions: SubjectPermissionsResource
    subject_permission: SubjectPermissionResource
    role_permissions: RolePermissionsResource


async def handle_unexpected_error(req, resp, ex, params):
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(resources: ApiResources, middleware: list | None = None) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)

    app.add_route("/v1/health", resources.health)
    app.add_route("/v1/health/ready", resources.health, suffix="ready")
    app.add_route("/v1/permissions", resources.catalog)
    app.add_route("/v1/permissions/categories", resources.catalog, suffix="categories")
    app.add_route(f"{SUBJECT_PATH}/effective-permissions", resources.effective_permissions)
    app.add_route(f"{SUBJECT_PATH}/permissions", resources.subject_permissions)
    for command in ("grant", "revoke", "toggle"):
        app.add_route(
            f"{SUBJECT_PATH}/permissions/{command}",
            resources.subject_permissions,
            suffix=command,
        )
    app.add_route(f"{SUBJECT_PATH}/permissions/{{permission_id}}", resources.subject_permission)
    app.add_route("/v1/roles/{role}/permissions", resources.role_permissions)
    app.add_route(
        "/v1/roles/{role}/permissions/toggle", resources.role_permissions, suffix="toggle"
    )
    return app
