"""Pytest fixtures for gdpr-authz tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from gdprauthz.application.services import EffectivePermissionResolver, PermissionCatalog
from gdprauthz.application.use_cases.bootstrap.bootstrap_authorization import (
    BootstrapAuthorizationUseCase,
)
from gdprauthz.application.use_cases.permission.clear_override import ClearOverrideUseCase
from gdprauthz.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from gdprauthz.application.use_cases.permission.revoke_permission import RevokePermissionUseCase
from gdprauthz.application.use_cases.permission.toggle_user_permission import (
    ToggleUserPermissionUseCase,
)
from gdprauthz.application.use_cases.role.set_role_permission import SetRolePermissionUseCase
from gdprauthz.application.use_cases.role.toggle_role_permission import (
    ToggleRolePermissionUseCase,
)
from gdprauthz.domain.entities import AuditEvent
from gdprauthz.domain.value_objects import Role
from gdprauthz.infrastructure.permission.snapshot_loader import RepositorySnapshotLoader
from gdprauthz.infrastructure.persistence.memory.store import InMemoryAuthorizationStore
from gdprauthz.infrastructure.persistence.memory.unit_of_work import create_memory_uow_factory
from gdprauthz.infrastructure.seed.loader import SeedDocument, load_seed


class FakeClock:
    """Deterministic clock; every call advances one second."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


class RecordingAuditSink:
    """Audit sink that keeps events in memory."""

    def __init__(self) -> None:
        self.events: list[AuditEvent] = []

    async def record(self, event: AuditEvent) -> None:
        self.events.append(event)


class FailingAuditSink:
    async def record(self, event: AuditEvent) -> None:
        raise RuntimeError("audit backend down")


def seed_role_defaults(store: InMemoryAuthorizationStore, seed: SeedDocument, catalog: PermissionCatalog) -> None:
    """Install seed role defaults directly into the store (no event loop needed)."""
    from gdprauthz.domain.entities import RoleDefault

    for role, ids in seed.role_default_grants(catalog).items():
        for pid in ids:
            store.role_defaults[(role, pid)] = RoleDefault(role=role, permission_id=pid, granted=True)


@pytest.fixture
def seed() -> SeedDocument:
    return load_seed()


@pytest.fixture
def catalog(seed: SeedDocument) -> PermissionCatalog:
    return seed.build_catalog()


@pytest.fixture
def resolver(catalog: PermissionCatalog) -> EffectivePermissionResolver:
    return EffectivePermissionResolver(catalog)


@pytest.fixture
def store(seed: SeedDocument, catalog: PermissionCatalog) -> InMemoryAuthorizationStore:
    """Store with seeded role defaults and a few memberships in tenant ``acme``."""
    store = InMemoryAuthorizationStore()
    seed_role_defaults(store, seed, catalog)
    store.add_membership("collab-1", "acme", Role.COLLABORATOR)
    store.add_membership("admin-1", "acme", Role.ADMIN)
    store.add_membership("admin-2", "acme", Role.ADMIN)
    store.add_membership("owner-1", "acme", Role.OWNER)
    return store


@pytest.fixture
def uow_factory(store: InMemoryAuthorizationStore):
    return create_memory_uow_factory(store)


@pytest.fixture
def loader(uow_factory) -> RepositorySnapshotLoader:
    return RepositorySnapshotLoader(uow_factory)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def audit_sink() -> RecordingAuditSink:
    return RecordingAuditSink()


@pytest.fixture
def grant(uow_factory, catalog, audit_sink, clock) -> GrantPermissionUseCase:
    return GrantPermissionUseCase(
        unit_of_work_factory=uow_factory, catalog=catalog, audit_sink=audit_sink, clock=clock
    )


@pytest.fixture
def revoke(uow_factory, catalog, audit_sink, clock) -> RevokePermissionUseCase:
    return RevokePermissionUseCase(
        unit_of_work_factory=uow_factory, catalog=catalog, audit_sink=audit_sink, clock=clock
    )


@pytest.fixture
def toggle(uow_factory, catalog, grant, revoke) -> ToggleUserPermissionUseCase:
    return ToggleUserPermissionUseCase(
        unit_of_work_factory=uow_factory,
        catalog=catalog,
        grant_permission=grant,
        revoke_permission=revoke,
    )


@pytest.fixture
def clear(uow_factory, catalog, audit_sink, clock) -> ClearOverrideUseCase:
    return ClearOverrideUseCase(
        unit_of_work_factory=uow_factory, catalog=catalog, audit_sink=audit_sink, clock=clock
    )


@pytest.fixture
def set_role(uow_factory, catalog, audit_sink, clock) -> SetRolePermissionUseCase:
    return SetRolePermissionUseCase(
        unit_of_work_factory=uow_factory, catalog=catalog, audit_sink=audit_sink, clock=clock
    )


@pytest.fixture
def toggle_role(uow_factory, catalog, set_role) -> ToggleRolePermissionUseCase:
    return ToggleRolePermissionUseCase(
        unit_of_work_factory=uow_factory, catalog=catalog, set_role_permission=set_role
    )


@pytest.fixture
def bootstrap(uow_factory, catalog, seed) -> BootstrapAuthorizationUseCase:
    return BootstrapAuthorizationUseCase(
        unit_of_work_factory=uow_factory,
        catalog=catalog,
        role_defaults=seed.role_default_grants(catalog),
    )
