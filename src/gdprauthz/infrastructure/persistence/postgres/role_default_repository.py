"""PostgreSQL role default repository implementation."""

from psycopg import AsyncConnection

from gdprauthz.domain.entities import RoleDefault
from gdprauthz.domain.value_objects import Role

_COLUMNS = "role, permission_id, granted, updated_at"


def _row_to_default(r: tuple) -> RoleDefault:
    return RoleDefault(role=Role(r[0]), permission_id=r[1], granted=r[2], updated_at=r[3])


class PostgresRoleDefaultRepository:
    """Role default table in ``role_permission_default``."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def is_default_granted(self, role: Role, permission_id: str) -> bool:
        cur = await self._conn.execute(
            "SELECT granted FROM role_permission_default WHERE role = %s AND permission_id = %s",
            (role.value, permission_id),
        )
        r = await cur.fetchone()
        return bool(r[0]) if r else False

    async def granted_for_role(self, role: Role) -> frozenset[str]:
        cur = await self._conn.execute(
            "SELECT permission_id FROM role_permission_default WHERE role = %s AND granted",
            (role.value,),
        )
        rows = await cur.fetchall()
        return frozenset(r[0] for r in rows)

    async def list_for_role(self, role: Role) -> list[RoleDefault]:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role_permission_default WHERE role = %s ORDER BY permission_id",
            (role.value,),
        )
        rows = await cur.fetchall()
        return [_row_to_default(r) for r in rows]

    async def list_all(self) -> list[RoleDefault]:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role_permission_default ORDER BY role, permission_id"
        )
        rows = await cur.fetchall()
        return [_row_to_default(r) for r in rows]

    async def set_default(self, role: Role, permission_id: str, granted: bool) -> RoleDefault:
        cur = await self._conn.execute(
            f"""
            INSERT INTO role_permission_default (role, permission_id, granted, updated_at)
            VALUES (%s, %s, %s, now())
            ON CONFLICT (role, permission_id)
            DO UPDATE SET granted = EXCLUDED.granted, updated_at = EXCLUDED.updated_at
            RETURNING {_COLUMNS}
            """,
            (role.value, permission_id, granted),
        )
        r = await cur.fetchone()
        return _row_to_default(r)
