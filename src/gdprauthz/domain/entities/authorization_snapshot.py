"""Already-fetched authorization state for one subject in one tenant."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from gdprauthz.domain.entities.membership import TenantMembership
from gdprauthz.domain.entities.subject_override import SubjectOverride


@dataclass(frozen=True)
class AuthorizationSnapshot:
    """Membership, role defaults of the membership's role and the subject's overrides.

    Resolution is a read-only fold over this object; it never fetches.
    """

    subject_id: str
    tenant_id: str
    membership: TenantMembership | None
    role_defaults: frozenset[str] = frozenset()
    overrides: Mapping[str, SubjectOverride] = field(default_factory=dict)

    @property
    def wildcard(self) -> bool:
        return self.membership is not None and self.membership.wildcard

    def override_for(self, permission_id: str) -> SubjectOverride | None:
        return self.overrides.get(permission_id)

    def default_for(self, permission_id: str) -> bool:
        return permission_id in self.role_defaults
