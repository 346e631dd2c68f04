"""Repository ports."""

from gdprauthz.application.ports.repositories.audit_log_repository import AuditLogRepository
from gdprauthz.application.ports.repositories.membership_repository import (
    MembershipRepository,
)
from gdprauthz.application.ports.repositories.role_default_repository import (
    RoleDefaultRepository,
)
from gdprauthz.application.ports.repositories.subject_override_repository import (
    SubjectOverrideRepository,
)

__all__ = [
    "AuditLogRepository",
    "MembershipRepository",
    "RoleDefaultRepository",
    "SubjectOverrideRepository",
]
