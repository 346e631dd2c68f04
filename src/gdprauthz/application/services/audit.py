"""Audit emission helper shared by administration commands."""

import logging

from gdprauthz.application.ports import AuditSink
from gdprauthz.domain.entities import AuditEvent

logger = logging.getLogger(__name__)


async def emit_audit_event(sink: AuditSink, event: AuditEvent) -> None:
    """Hand the event to the sink. A failing sink never undoes the committed write."""
    try:
        await sink.record(event)
    except Exception:
        logger.exception(
            "Audit sink failed for %s on %s (actor=%s)",
            event.type.value,
            event.permission_id,
            event.actor,
        )
