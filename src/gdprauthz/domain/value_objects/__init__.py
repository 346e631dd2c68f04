"""Domain value objects."""

from gdprauthz.domain.value_objects.audit_event_type import AuditEventType
from gdprauthz.domain.value_objects.permission_id import PermissionId, canonical_permission_id
from gdprauthz.domain.value_objects.permission_status import PermissionStatus
from gdprauthz.domain.value_objects.role import AccountRole, Role

__all__ = [
    "AccountRole",
    "AuditEventType",
    "PermissionId",
    "PermissionStatus",
    "Role",
    "canonical_permission_id",
]
