"""Unit tests for audit sinks."""

import logging
from datetime import UTC, datetime

import pytest

from gdprauthz.domain.entities import AuditEvent
from gdprauthz.domain.value_objects import AuditEventType, Role
from gdprauthz.infrastructure.audit.sinks import LoggingAuditSink, UnitOfWorkAuditSink


@pytest.fixture
def event() -> AuditEvent:
    return AuditEvent(
        type=AuditEventType.ROLE_PERMISSION_CHANGED,
        actor="root",
        permission_id="logs.view",
        granted=False,
        reason="Role default revoked",
        timestamp=datetime(2026, 2, 1, tzinfo=UTC),
        role=Role.ADMIN,
    )


@pytest.mark.asyncio
async def test_unit_of_work_sink_appends(uow_factory, store, event) -> None:
    await UnitOfWorkAuditSink(uow_factory).record(event)
    assert store.audit_events == [event]


@pytest.mark.asyncio
async def test_logging_sink(event, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="gdprauthz.audit"):
        await LoggingAuditSink().record(event)
    record = caplog.records[-1]
    assert record.getMessage() == "audit role_permission_changed"
    assert record.audit["role"] == "admin"
