"""Application entry point and composition root."""

import logging

import falcon
import falcon.asgi

from gdprauthz import __version__
from gdprauthz.application.services import EffectivePermissionResolver, PlatformPolicy
from gdprauthz.application.use_cases.authorization.get_effective_permissions import (
    GetEffectivePermissionsUseCase,
)
from gdprauthz.application.use_cases.bootstrap.bootstrap_authorization import (
    BootstrapAuthorizationUseCase,
)
from gdprauthz.application.use_cases.permission.clear_override import ClearOverrideUseCase
from gdprauthz.application.use_cases.permission.get_subject_permissions import (
    GetSubjectPermissionsUseCase,
)
from gdprauthz.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from gdprauthz.application.use_cases.permission.revoke_permission import RevokePermissionUseCase
from gdprauthz.application.use_cases.permission.toggle_user_permission import (
    ToggleUserPermissionUseCase,
)
from gdprauthz.application.use_cases.role.get_role_permissions import GetRolePermissionsUseCase
from gdprauthz.application.use_cases.role.set_role_permission import SetRolePermissionUseCase
from gdprauthz.application.use_cases.role.toggle_role_permission import (
    ToggleRolePermissionUseCase,
)
from gdprauthz.config import Settings, get_settings
from gdprauthz.infrastructure.audit.sinks import UnitOfWorkAuditSink
from gdprauthz.infrastructure.auth.keycloak_provider import KeycloakProvider
from gdprauthz.infrastructure.permission.permission_checker import GdprPermissionChecker
from gdprauthz.infrastructure.permission.snapshot_loader import RepositorySnapshotLoader
from gdprauthz.infrastructure.persistence.memory.store import InMemoryAuthorizationStore
from gdprauthz.infrastructure.persistence.memory.unit_of_work import create_memory_uow_factory
from gdprauthz.infrastructure.persistence.postgres.connection import create_pool
from gdprauthz.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from gdprauthz.infrastructure.seed.loader import load_seed
from gdprauthz.interfaces.api.app import ApiResources, create_app
from gdprauthz.interfaces.api.middleware.auth import AuthMiddleware
from gdprauthz.interfaces.api.middleware.lifespan import LifespanMiddleware
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
from gdprauthz.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point - serve the API."""
    settings = get_settings()
    setup_logging(settings)
    logger.info("gdpr-authz v%s (%s)", __version__, settings.environment)
    run_server(settings)


def create_gdprauthz_app(settings: Settings | None = None) -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    seed = load_seed(settings.seed_file)
    catalog = seed.build_catalog()

    pool = None
    if settings.storage_backend == "postgres":
        pool = create_pool(settings.database_url)
        uow_factory = create_uow_factory(pool)
    else:
        uow_factory = create_memory_uow_factory(InMemoryAuthorizationStore())

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )

    resolver = EffectivePermissionResolver(catalog)
    snapshot_loader = RepositorySnapshotLoader(uow_factory)
    permission_checker = GdprPermissionChecker(snapshot_loader, resolver, PlatformPolicy())
    audit_sink = UnitOfWorkAuditSink(uow_factory)

    bootstrap = BootstrapAuthorizationUseCase(
        unit_of_work_factory=uow_factory,
        catalog=catalog,
        role_defaults=seed.role_default_grants(catalog),
    )
    grant_permission = GrantPermissionUseCase(
        unit_of_work_factory=uow_factory,
        catalog=catalog,
        audit_sink=audit_sink,
    )
    revoke_permission = RevokePermissionUseCase(
        unit_of_work_factory=uow_factory,
        catalog=catalog,
        audit_sink=audit_sink,
    )
    toggle_user_permission = ToggleUserPermissionUseCase(
        unit_of_work_factory=uow_factory,
        catalog=catalog,
        grant_permission=grant_permission,
        revoke_permission=revoke_permission,
    )
    clear_override = ClearOverrideUseCase(
        unit_of_work_factory=uow_factory,
        catalog=catalog,
        audit_sink=audit_sink,
    )
    set_role_permission = SetRolePermissionUseCase(
        unit_of_work_factory=uow_factory,
        catalog=catalog,
        audit_sink=audit_sink,
    )
    toggle_role_permission = ToggleRolePermissionUseCase(
        unit_of_work_factory=uow_factory,
        catalog=catalog,
        set_role_permission=set_role_permission,
    )

    resources = ApiResources(
        health=HealthResource(catalog),
        catalog=PermissionCatalogResource(catalog),
        effective_permissions=EffectivePermissionsResource(
            GetEffectivePermissionsUseCase(snapshot_loader, resolver), permission_checker
        ),
        subject_permissions=SubjectPermissionsResource(
            GetSubjectPermissionsUseCase(snapshot_loader, resolver),
            grant_permission,
            revoke_permission,
            toggle_user_permission,
            permission_checker,
        ),
        subject_permission=SubjectPermissionResource(clear_override, permission_checker),
        role_permissions=RolePermissionsResource(
            GetRolePermissionsUseCase(uow_factory, catalog),
            set_role_permission,
            toggle_role_permission,
            permission_checker,
        ),
    )
    return create_app(
        resources,
        middleware=[
            falcon.CORSMiddleware(allow_origins=settings.cors_origin_list or "*"),
            LifespanMiddleware(bootstrap, pool),
            AuthMiddleware(keycloak),
        ],
    )


def run_server(settings: Settings | None = None) -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = settings or get_settings()
    app = create_gdprauthz_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
