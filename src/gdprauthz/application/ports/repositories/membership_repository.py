"""Tenant membership repository port (read-only for authorization)."""

from typing import Protocol

from gdprauthz.domain.entities import TenantMembership


class MembershipRepository(Protocol):
    """Port for reading tenant memberships."""

    async def get(self, subject_id: str, tenant_id: str) -> TenantMembership | None: ...

    async def list_for_tenant(self, tenant_id: str) -> list[TenantMembership]: ...
