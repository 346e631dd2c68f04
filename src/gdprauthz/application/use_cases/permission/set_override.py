"""Shared write path for explicit grant and revoke."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from gdprauthz.application.dto import PermissionStatusView
from gdprauthz.application.ports import AuditSink
from gdprauthz.application.services.audit import emit_audit_event
from gdprauthz.application.services.catalog import PermissionCatalog
from gdprauthz.domain.entities import AuditEvent, SubjectOverride
from gdprauthz.domain.exceptions import ValidationError
from gdprauthz.domain.value_objects import AuditEventType

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


class SetOverrideUseCase:
    """Upsert one explicit override and emit one audit event.

    Subclasses fix ``granted`` and the audit event type.
    """

    granted: bool
    event_type: AuditEventType
    default_reason: str

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
        reason: str | None,
        actor_id: str,
    ) -> PermissionStatusView:
        if not subject_id or not tenant_id:
            raise ValidationError("Subject and tenant are required")
        pid = self._catalog.canonicalize(permission_id)
        reason = (reason or "").strip() or self.default_reason

        override = SubjectOverride(
            subject_id=subject_id,
            tenant_id=tenant_id,
            permission_id=pid,
            granted=self.granted,
            reason=reason,
            changed_at=self._clock(),
            changed_by=actor_id,
        )
        async with self._uow_factory() as uow:
            live = await uow.overrides.set_override(override)
            membership = await uow.memberships.get(subject_id, tenant_id)
            default_granted = (
                await uow.role_defaults.is_default_granted(membership.role, pid)
                if membership
                else False
            )

        if live != override:
            # A newer write already holds the key; nothing changed.
            logger.debug(
                "%s %s for subject %s in tenant %s by %s lost to a write at %s",
                self.event_type.value,
                pid,
                subject_id,
                tenant_id,
                actor_id,
                live.changed_at.isoformat(),
            )
            return PermissionStatusView.build(subject_id, tenant_id, pid, live, default_granted)

        logger.info(
            "%s %s for subject %s in tenant %s by %s",
            self.event_type.value,
            pid,
            subject_id,
            tenant_id,
            actor_id,
        )
        await emit_audit_event(
            self._audit,
            AuditEvent(
                type=self.event_type,
                actor=actor_id,
                subject_id=subject_id,
                tenant_id=tenant_id,
                permission_id=pid,
                granted=self.granted,
                reason=reason,
                timestamp=override.changed_at,
            ),
        )
        return PermissionStatusView.build(subject_id, tenant_id, pid, live, default_granted)
