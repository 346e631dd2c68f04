"""Process-local state shared by the in-memory repositories."""

from dataclasses import dataclass, field

from gdprauthz.domain.entities import AuditEvent, RoleDefault, SubjectOverride, TenantMembership
from gdprauthz.domain.value_objects import Role


@dataclass
class InMemoryAuthorizationStore:
    """Tables of the authorization model, keyed like their PostgreSQL counterparts."""

    role_defaults: dict[tuple[Role, str], RoleDefault] = field(default_factory=dict)
    overrides: dict[tuple[str, str, str], SubjectOverride] = field(default_factory=dict)
    memberships: dict[tuple[str, str], TenantMembership] = field(default_factory=dict)
    audit_events: list[AuditEvent] = field(default_factory=list)

    def add_membership(
        self,
        subject_id: str,
        tenant_id: str,
        role: Role | str,
        wildcard: bool | None = None,
    ) -> TenantMembership:
        """Register a membership. ``wildcard`` defaults to True for owners."""
        role = Role.parse(role)
        membership = TenantMembership(
            subject_id=subject_id,
            tenant_id=tenant_id,
            role=role,
            wildcard=role is Role.OWNER if wildcard is None else wildcard,
        )
        self.memberships[(subject_id, tenant_id)] = membership
        return membership
