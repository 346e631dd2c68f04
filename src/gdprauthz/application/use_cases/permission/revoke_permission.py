"""Revoke permission use case."""

from gdprauthz.application.use_cases.permission.set_override import SetOverrideUseCase
from gdprauthz.domain.value_objects import AuditEventType


class RevokePermissionUseCase(SetOverrideUseCase):
    """Explicitly revoke a permission from a subject in a tenant, whatever the role default."""

    granted = False
    event_type = AuditEventType.PERMISSION_REVOKED
    default_reason = "Permission revoked manually"
