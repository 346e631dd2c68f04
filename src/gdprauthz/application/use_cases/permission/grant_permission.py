"""Grant permission use case."""

from gdprauthz.application.use_cases.permission.set_override import SetOverrideUseCase
from gdprauthz.domain.value_objects import AuditEventType


class GrantPermissionUseCase(SetOverrideUseCase):
    """Explicitly grant a permission to a subject in a tenant, whatever the role default."""

    granted = True
    event_type = AuditEventType.PERMISSION_GRANTED
    default_reason = "Permission granted manually"
