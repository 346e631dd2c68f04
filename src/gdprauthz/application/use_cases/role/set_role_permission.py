"""Set role permission use case."""

import logging
from collections.abc import Callable
from datetime import datetime

from gdprauthz.application.dto import RoleDefaultsSlice
from gdprauthz.application.ports import AuditSink
from gdprauthz.application.services.audit import emit_audit_event
from gdprauthz.application.services.catalog import PermissionCatalog
from gdprauthz.application.use_cases.permission.set_override import utc_now
from gdprauthz.domain.entities import AuditEvent
from gdprauthz.domain.value_objects import AuditEventType, Role

logger = logging.getLogger(__name__)


class SetRolePermissionUseCase:
    """Set the default of one permission for a role. Idempotent."""

    def __init__(
        self,
        unit_of_work_factory: type,
        catalog: PermissionCatalog,
        audit_sink: AuditSink,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._catalog = catalog
        self._audit = audit_sink
        self._clock = clock

    async def execute(
        self,
        role: str | Role,
        permission_id: str,
        granted: bool,
        actor_id: str | None = None,
    ) -> RoleDefaultsSlice:
        role = Role.parse(role)
        pid = self._catalog.canonicalize(permission_id)
        async with self._uow_factory() as uow:
            await uow.role_defaults.set_default(role, pid, granted)
            granted_ids = await uow.role_defaults.granted_for_role(role)

        logger.info("Role %s default for %s set to %s by %s", role.value, pid, granted, actor_id)
        await emit_audit_event(
            self._audit,
            AuditEvent(
                type=AuditEventType.ROLE_PERMISSION_CHANGED,
                actor=actor_id,
                role=role,
                permission_id=pid,
                granted=granted,
                reason=f"Role default {'granted' if granted else 'revoked'}",
                timestamp=self._clock(),
            ),
        )
        return slice_for(role, self._catalog, granted_ids)


def slice_for(role: Role, catalog: PermissionCatalog, granted_ids: frozenset[str]) -> RoleDefaultsSlice:
    return RoleDefaultsSlice(
        role=role,
        permissions={pid: pid in granted_ids for pid in catalog.ids()},
    )
