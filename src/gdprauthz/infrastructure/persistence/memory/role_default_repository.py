"""In-memory RoleDefaultRepository."""

from datetime import UTC, datetime

from gdprauthz.domain.entities import RoleDefault
from gdprauthz.domain.value_objects import Role
from gdprauthz.infrastructure.persistence.memory.store import InMemoryAuthorizationStore


class InMemoryRoleDefaultRepository:
    """Role default table backed by a dict."""

    def __init__(self, store: InMemoryAuthorizationStore) -> None:
        self._store = store

    async def is_default_granted(self, role: Role, permission_id: str) -> bool:
        row = self._store.role_defaults.get((role, permission_id))
        return row.granted if row else False

    async def granted_for_role(self, role: Role) -> frozenset[str]:
        return frozenset(
            row.permission_id
            for row in self._store.role_defaults.values()
            if row.role == role and row.granted
        )

    async def list_for_role(self, role: Role) -> list[RoleDefault]:
        rows = [row for row in self._store.role_defaults.values() if row.role == role]
        return sorted(rows, key=lambda r: r.permission_id)

    async def list_all(self) -> list[RoleDefault]:
        return sorted(
            self._store.role_defaults.values(),
            key=lambda r: (r.role.rank, r.permission_id),
        )

    async def set_default(self, role: Role, permission_id: str, granted: bool) -> RoleDefault:
        row = RoleDefault(
            role=role,
            permission_id=permission_id,
            granted=granted,
            updated_at=datetime.now(UTC),
        )
        self._store.role_defaults[(role, permission_id)] = row
        return row
