"""Audit sink port - fire-and-forget record of administration commands."""

from typing import Protocol

from gdprauthz.domain.entities import AuditEvent


class AuditSink(Protocol):
    """External collaborator that stores audit events. No read path."""

    async def record(self, event: AuditEvent) -> None: ...
