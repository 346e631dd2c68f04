"""In-memory SubjectOverrideRepository."""

from gdprauthz.domain.entities import SubjectOverride
from gdprauthz.infrastructure.persistence.memory.store import InMemoryAuthorizationStore


class InMemorySubjectOverrideRepository:
    """Override store backed by a dict keyed by (subject, tenant, permission)."""

    def __init__(self, store: InMemoryAuthorizationStore) -> None:
        self._store = store

    async def get_override(
        self, subject_id: str, tenant_id: str, permission_id: str
    ) -> SubjectOverride | None:
        return self._store.overrides.get((subject_id, tenant_id, permission_id))

    async def list_for_subject(self, subject_id: str, tenant_id: str) -> list[SubjectOverride]:
        return sorted(
            (
                o
                for o in self._store.overrides.values()
                if o.subject_id == subject_id and o.tenant_id == tenant_id
            ),
            key=lambda o: o.permission_id,
        )

    async def list_for_tenant(self, tenant_id: str) -> list[SubjectOverride]:
        return sorted(
            (o for o in self._store.overrides.values() if o.tenant_id == tenant_id),
            key=lambda o: (o.subject_id, o.permission_id),
        )

    async def list_permission_ids(self) -> set[str]:
        return {o.permission_id for o in self._store.overrides.values()}

    async def set_override(self, override: SubjectOverride) -> SubjectOverride:
        existing = self._store.overrides.get(override.key)
        if existing is not None and existing.changed_at > override.changed_at:
            return existing
        self._store.overrides[override.key] = override
        return override

    async def delete_override(self, subject_id: str, tenant_id: str, permission_id: str) -> bool:
        return self._store.overrides.pop((subject_id, tenant_id, permission_id), None) is not None
