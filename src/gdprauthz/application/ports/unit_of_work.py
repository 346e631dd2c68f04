"""Unit of Work port - repository access per operation."""

from collections.abc import AsyncIterator
from typing import Protocol

from gdprauthz.application.ports.repositories import (
    AuditLogRepository,
    MembershipRepository,
    RoleDefaultRepository,
    SubjectOverrideRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def role_defaults(self) -> RoleDefaultRepository: ...

    @property
    def overrides(self) -> SubjectOverrideRepository: ...

    @property
    def memberships(self) -> MembershipRepository: ...

    @property
    def audit_log(self) -> AuditLogRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
