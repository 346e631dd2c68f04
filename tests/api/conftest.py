"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from gdprauthz.application.services import PlatformPolicy
from gdprauthz.application.use_cases.authorization.get_effective_permissions import (
    GetEffectivePermissionsUseCase,
)
from gdprauthz.application.use_cases.permission.get_subject_permissions import (
    GetSubjectPermissionsUseCase,
)
from gdprauthz.application.use_cases.role.get_role_permissions import GetRolePermissionsUseCase
from gdprauthz.domain.value_objects import AccountRole
from gdprauthz.infrastructure.permission.permission_checker import GdprPermissionChecker
from gdprauthz.interfaces.api.app import ApiResources, create_app
from gdprauthz.interfaces.api.middleware.auth import RequestUser
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


class AuthBypassMiddleware:
    """Middleware that sets context.user for testing.

    ``X-Test-User`` picks the subject (default ``admin-1``), ``X-Test-Role``
    the account role; ``X-Test-Anonymous`` leaves the request unauthenticated.
    """

    async def process_request(self, req, resp):
        if req.get_header("X-Test-Anonymous"):
            req.context.user = None
            return
        req.context.user = RequestUser(
            user_id=req.get_header("X-Test-User") or "admin-1",
            account_role=AccountRole(req.get_header("X-Test-Role") or "user"),
        )


@pytest.fixture
def app(
    catalog, resolver, loader, uow_factory, grant, revoke, toggle, clear, set_role, toggle_role
):
    """Falcon ASGI app over the in-memory store."""
    checker = GdprPermissionChecker(loader, resolver, PlatformPolicy())
    resources = ApiResources(
        health=HealthResource(catalog),
        catalog=PermissionCatalogResource(catalog),
        effective_permissions=EffectivePermissionsResource(
            GetEffectivePermissionsUseCase(loader, resolver), checker
        ),
        subject_permissions=SubjectPermissionsResource(
            GetSubjectPermissionsUseCase(loader, resolver), grant, revoke, toggle, checker
        ),
        subject_permission=SubjectPermissionResource(clear, checker),
        role_permissions=RolePermissionsResource(
            GetRolePermissionsUseCase(uow_factory, catalog), set_role, toggle_role, checker
        ),
    )
    return create_app(resources, middleware=[AuthBypassMiddleware()])


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
