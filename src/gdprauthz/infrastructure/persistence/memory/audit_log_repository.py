"""In-memory AuditLogRepository."""

from gdprauthz.domain.entities import AuditEvent
from gdprauthz.infrastructure.persistence.memory.store import InMemoryAuthorizationStore


class InMemoryAuditLogRepository:
    def __init__(self, store: InMemoryAuthorizationStore) -> None:
        self._store = store

    async def append(self, event: AuditEvent) -> None:
        self._store.audit_events.append(event)
