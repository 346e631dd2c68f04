"""Domain entities."""

from gdprauthz.domain.entities.audit_event import AuditEvent
from gdprauthz.domain.entities.authorization_snapshot import AuthorizationSnapshot
from gdprauthz.domain.entities.membership import TenantMembership
from gdprauthz.domain.entities.permission import Permission, PermissionCategory
from gdprauthz.domain.entities.role_default import RoleDefault
from gdprauthz.domain.entities.subject_override import SubjectOverride

__all__ = [
    "AuditEvent",
    "AuthorizationSnapshot",
    "Permission",
    "PermissionCategory",
    "RoleDefault",
    "SubjectOverride",
    "TenantMembership",
]
