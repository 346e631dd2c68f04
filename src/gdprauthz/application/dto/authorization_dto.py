"""Authorization DTOs."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from gdprauthz.domain.entities import SubjectOverride
from gdprauthz.domain.value_objects import PermissionStatus, Role


@dataclass
class EffectivePermissionSet:
    """Resolved permissions of a subject in a tenant. Never persisted."""

    subject_id: str
    tenant_id: str
    role: Role | None
    wildcard: bool
    permissions: dict[str, bool] = field(default_factory=dict)

    @property
    def granted(self) -> list[str]:
        return sorted(pid for pid, ok in self.permissions.items() if ok)

    def to_dict(self) -> dict[str, Any]:
        return {
            "subject": self.subject_id,
            "tenant": self.tenant_id,
            "role": self.role.value if self.role else None,
            "wildcard": self.wildcard,
            "permissions": dict(self.permissions),
        }


@dataclass(frozen=True)
class ModuleAccess:
    """Read/write access to a module."""

    can_read: bool
    can_write: bool


@dataclass
class PermissionStatusView:
    """Status of one (subject, permission) pair after a read or a command."""

    subject_id: str
    tenant_id: str
    permission_id: str
    status: PermissionStatus
    reason: str | None = None
    changed_at: datetime | None = None
    changed_by: str | None = None

    @classmethod
    def build(
        cls,
        subject_id: str,
        tenant_id: str,
        permission_id: str,
        override: SubjectOverride | None,
        default_granted: bool,
    ) -> "PermissionStatusView":
        status = PermissionStatus.of(
            override.granted if override else None, default_granted
        )
        return cls(
            subject_id=subject_id,
            tenant_id=tenant_id,
            permission_id=permission_id,
            status=status,
            reason=override.reason if override else None,
            changed_at=override.changed_at if override else None,
            changed_by=override.changed_by if override else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "subject": self.subject_id,
            "tenant": self.tenant_id,
            "permission_id": self.permission_id,
            "status": self.status.value,
            "reason": self.reason,
            "changed_at": self.changed_at.isoformat() if self.changed_at else None,
            "changed_by": self.changed_by,
        }


@dataclass
class RoleDefaultsSlice:
    """Default grants of one role over the whole catalog."""

    role: Role
    permissions: dict[str, bool] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role.value, "permissions": dict(self.permissions)}
