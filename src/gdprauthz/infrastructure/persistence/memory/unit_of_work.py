"""In-memory Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from gdprauthz.infrastructure.persistence.memory.audit_log_repository import (
    InMemoryAuditLogRepository,
)
from gdprauthz.infrastructure.persistence.memory.membership_repository import (
    InMemoryMembershipRepository,
)
from gdprauthz.infrastructure.persistence.memory.role_default_repository import (
    InMemoryRoleDefaultRepository,
)
from gdprauthz.infrastructure.persistence.memory.store import InMemoryAuthorizationStore
from gdprauthz.infrastructure.persistence.memory.subject_override_repository import (
    InMemorySubjectOverrideRepository,
)


class InMemoryUnitOfWork:
    """Writes apply immediately; commit and rollback are no-ops."""

    def __init__(self, store: InMemoryAuthorizationStore) -> None:
        self._role_defaults = InMemoryRoleDefaultRepository(store)
        self._overrides = InMemorySubjectOverrideRepository(store)
        self._memberships = InMemoryMembershipRepository(store)
        self._audit_log = InMemoryAuditLogRepository(store)

    @property
    def role_defaults(self) -> InMemoryRoleDefaultRepository:
        return self._role_defaults

    @property
    def overrides(self) -> InMemorySubjectOverrideRepository:
        return self._overrides

    @property
    def memberships(self) -> InMemoryMembershipRepository:
        return self._memberships

    @property
    def audit_log(self) -> InMemoryAuditLogRepository:
        return self._audit_log

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def create_memory_uow_factory(store: InMemoryAuthorizationStore) -> object:
    """Create UnitOfWork factory (async context manager) over a shared store."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[InMemoryUnitOfWork]:
        yield InMemoryUnitOfWork(store)

    return factory
