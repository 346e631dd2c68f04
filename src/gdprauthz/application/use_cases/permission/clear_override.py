"""Clear override use case - hand a permission back to the role default."""

import logging
from collections.abc import Callable
from datetime import datetime

from gdprauthz.application.dto import PermissionStatusView
from gdprauthz.application.ports import AuditSink
from gdprauthz.application.services.audit import emit_audit_event
from gdprauthz.application.services.catalog import PermissionCatalog
from gdprauthz.application.use_cases.permission.set_override import utc_now
from gdprauthz.domain.entities import AuditEvent
from gdprauthz.domain.exceptions import ValidationError
from gdprauthz.domain.value_objects import AuditEventType

logger = logging.getLogger(__name__)


class ClearOverrideUseCase:
    """Delete the live override so the pair resolves from the role default again."""

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
        subject_id: str,
        tenant_id: str,
        permission_id: str,
        actor_id: str,
        reason: str | None = None,
    ) -> PermissionStatusView:
        """Clearing an absent override is a no-op and emits nothing."""
        if not subject_id or not tenant_id:
            raise ValidationError("Subject and tenant are required")
        pid = self._catalog.canonicalize(permission_id)
        async with self._uow_factory() as uow:
            deleted = await uow.overrides.delete_override(subject_id, tenant_id, pid)
            membership = await uow.memberships.get(subject_id, tenant_id)
            default_granted = (
                await uow.role_defaults.is_default_granted(membership.role, pid)
                if membership
                else False
            )

        if deleted:
            logger.info(
                "Cleared override %s for subject %s in tenant %s by %s",
                pid,
                subject_id,
                tenant_id,
                actor_id,
            )
            await emit_audit_event(
                self._audit,
                AuditEvent(
                    type=AuditEventType.PERMISSION_OVERRIDE_CLEARED,
                    actor=actor_id,
                    subject_id=subject_id,
                    tenant_id=tenant_id,
                    permission_id=pid,
                    granted=None,
                    reason=(reason or "").strip() or "Override cleared",
                    timestamp=self._clock(),
                ),
            )
        return PermissionStatusView.build(subject_id, tenant_id, pid, None, default_granted)
