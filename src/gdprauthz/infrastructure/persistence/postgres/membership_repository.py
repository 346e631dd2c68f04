"""PostgreSQL tenant membership repository implementation."""

from psycopg import AsyncConnection

from gdprauthz.domain.entities import TenantMembership
from gdprauthz.domain.value_objects import Role

_COLUMNS = "subject_id, tenant_id, role, wildcard, joined_at"


def _row_to_membership(r: tuple) -> TenantMembership:
    return TenantMembership(
        subject_id=r[0], tenant_id=r[1], role=Role(r[2]), wildcard=r[3], joined_at=r[4]
    )


class PostgresMembershipRepository:
    """Read-only view of ``tenant_membership``, written by the tenancy subsystem."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, subject_id: str, tenant_id: str) -> TenantMembership | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM tenant_membership WHERE subject_id = %s AND tenant_id = %s",
            (subject_id, tenant_id),
        )
        r = await cur.fetchone()
        return _row_to_membership(r) if r else None

    async def list_for_tenant(self, tenant_id: str) -> list[TenantMembership]:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM tenant_membership WHERE tenant_id = %s ORDER BY subject_id",
            (tenant_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_membership(r) for r in rows]
