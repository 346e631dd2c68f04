"""PostgreSQL subject override repository implementation."""

from psycopg import AsyncConnection

from gdprauthz.domain.entities import SubjectOverride

_COLUMNS = "subject_id, tenant_id, permission_id, granted, reason, changed_at, changed_by"


def _row_to_override(r: tuple) -> SubjectOverride:
    return SubjectOverride(
        subject_id=r[0],
        tenant_id=r[1],
        permission_id=r[2],
        granted=r[3],
        reason=r[4],
        changed_at=r[5],
        changed_by=r[6],
    )


class PostgresSubjectOverrideRepository:
    """Overrides in ``subject_permission_override``, one row per key."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_override(
        self, subject_id: str, tenant_id: str, permission_id: str
    ) -> SubjectOverride | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM subject_permission_override "
            "WHERE subject_id = %s AND tenant_id = %s AND permission_id = %s",
            (subject_id, tenant_id, permission_id),
        )
        r = await cur.fetchone()
        return _row_to_override(r) if r else None

    async def list_for_subject(self, subject_id: str, tenant_id: str) -> list[SubjectOverride]:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM subject_permission_override "
            "WHERE subject_id = %s AND tenant_id = %s ORDER BY permission_id",
            (subject_id, tenant_id),
        )
        rows = await cur.fetchall()
        return [_row_to_override(r) for r in rows]

    async def list_for_tenant(self, tenant_id: str) -> list[SubjectOverride]:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM subject_permission_override "
            "WHERE tenant_id = %s ORDER BY subject_id, permission_id",
            (tenant_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_override(r) for r in rows]

    async def list_permission_ids(self) -> set[str]:
        cur = await self._conn.execute(
            "SELECT DISTINCT permission_id FROM subject_permission_override"
        )
        rows = await cur.fetchall()
        return {r[0] for r in rows}

    async def set_override(self, override: SubjectOverride) -> SubjectOverride:
        """Upsert; a row with a newer changed_at is left in place and returned."""
        cur = await self._conn.execute(
            f"""
            INSERT INTO subject_permission_override ({_COLUMNS})
            VALUES (%s, %s, %s, %s, %s, %s, %s)
            ON CONFLICT (subject_id, tenant_id, permission_id)
            DO UPDATE SET
                granted = EXCLUDED.granted,
                reason = EXCLUDED.reason,
                changed_at = EXCLUDED.changed_at,
                changed_by = EXCLUDED.changed_by
            WHERE subject_permission_override.changed_at <= EXCLUDED.changed_at
            RETURNING {_COLUMNS}
            """,
            (
                override.subject_id,
                override.tenant_id,
                override.permission_id,
                override.granted,
                override.reason,
                override.changed_at,
                override.changed_by,
            ),
        )
        r = await cur.fetchone()
        if r:
            return _row_to_override(r)
        # Conflict lost to a newer write; RETURNING yields nothing.
        live = await self.get_override(
            override.subject_id, override.tenant_id, override.permission_id
        )
        return live or override

    async def delete_override(self, subject_id: str, tenant_id: str, permission_id: str) -> bool:
        cur = await self._conn.execute(
            "DELETE FROM subject_permission_override "
            "WHERE subject_id = %s AND tenant_id = %s AND permission_id = %s",
            (subject_id, tenant_id, permission_id),
        )
        return cur.rowcount > 0
