"""PostgreSQL audit log repository implementation."""

from psycopg import AsyncConnection

from gdprauthz.domain.entities import AuditEvent


class PostgresAuditLogRepository:
    """Append-only ``permission_audit_log``."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def append(self, event: AuditEvent) -> None:
        await self._conn.execute(
            """
            INSERT INTO permission_audit_log
                (id, type, actor, subject_id, tenant_id, role, permission_id,
                 granted, reason, created_at)
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
            """,
            (
                event.id,
                event.type.value,
                event.actor,
                event.subject_id,
                event.tenant_id,
                event.role.value if event.role else None,
                event.permission_id,
                event.granted,
                event.reason,
                event.timestamp,
            ),
        )
