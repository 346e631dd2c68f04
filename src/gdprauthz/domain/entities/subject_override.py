"""Subject override entity - explicit per-subject grant or revoke."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class SubjectOverride:
    """Explicit grant/revoke for one subject, tenant and permission.

    At most one live override exists per ``key``; writes replace it.
    """

    subject_id: str
    tenant_id: str
    permission_id: str
    granted: bool
    reason: str
    changed_at: datetime
    changed_by: str

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.subject_id, self.tenant_id, self.permission_id)
