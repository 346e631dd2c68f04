"""Application ports - interfaces for external adapters."""

from gdprauthz.application.ports.audit_sink import AuditSink
from gdprauthz.application.ports.snapshot_loader import SnapshotLoader
from gdprauthz.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AuditSink",
    "SnapshotLoader",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
