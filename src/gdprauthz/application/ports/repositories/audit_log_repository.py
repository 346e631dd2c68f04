"""Audit log repository port."""

from typing import Protocol

from gdprauthz.domain.entities import AuditEvent


class AuditLogRepository(Protocol):
    """Append-only store for audit events."""

    async def append(self, event: AuditEvent) -> None: ...
