"""Audit event emitted by every administration command."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from gdprauthz.domain.value_objects import AuditEventType, Role


@dataclass(frozen=True)
class AuditEvent:
    """Who changed which permission, for whom, and when."""

    type: AuditEventType
    actor: str | None
    permission_id: str
    granted: bool | None
    reason: str
    timestamp: datetime
    subject_id: str | None = None
    tenant_id: str | None = None
    role: Role | None = None
    id: UUID = field(default_factory=uuid4)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "type": self.type.value,
            "actor": self.actor,
            "subject": self.subject_id,
            "tenant": self.tenant_id,
            "role": self.role.value if self.role else None,
            "permission_id": self.permission_id,
            "granted": self.granted,
            "reason": self.reason,
            "timestamp": self.timestamp.isoformat(),
        }
