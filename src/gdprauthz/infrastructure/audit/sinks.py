"""Audit sinks - where administration commands send their events."""

import logging

from gdprauthz.domain.entities import AuditEvent

logger = logging.getLogger(__name__)


class UnitOfWorkAuditSink:
    """Appends events to the audit log table in their own unit of work."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def record(self, event: AuditEvent) -> None:
        async with self._uow_factory() as uow:
            await uow.audit_log.append(event)
        logger.debug("Audit event %s recorded for %s", event.type.value, event.permission_id)


class LoggingAuditSink:
    """Writes events to the ``gdprauthz.audit`` logger only."""

    def __init__(self, logger_name: str = "gdprauthz.audit") -> None:
        self._logger = logging.getLogger(logger_name)

    async def record(self, event: AuditEvent) -> None:
        self._logger.info("audit %s", event.type.value, extra={"audit": event.to_dict()})
