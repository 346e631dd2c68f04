"""Tenant membership entity, owned by the tenancy subsystem."""

from dataclasses import dataclass
from datetime import datetime

from gdprauthz.domain.value_objects import Role


@dataclass
class TenantMembership:
    """Subject's role inside a tenant. ``wildcard`` grants every permission."""

    subject_id: str
    tenant_id: str
    role: Role
    wildcard: bool = False
    joined_at: datetime | None = None
