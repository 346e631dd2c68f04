"""In-memory MembershipRepository."""

from gdprauthz.domain.entities import TenantMembership
from gdprauthz.infrastructure.persistence.memory.store import InMemoryAuthorizationStore


class InMemoryMembershipRepository:
    def __init__(self, store: InMemoryAuthorizationStore) -> None:
        self._store = store

    async def get(self, subject_id: str, tenant_id: str) -> TenantMembership | None:
        return self._store.memberships.get((subject_id, tenant_id))

    async def list_for_tenant(self, tenant_id: str) -> list[TenantMembership]:
        return [m for m in self._store.memberships.values() if m.tenant_id == tenant_id]
