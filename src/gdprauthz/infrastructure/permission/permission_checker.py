"""Actor permission checks for administration endpoints."""

from gdprauthz.application.ports import SnapshotLoader
from gdprauthz.application.services import AccessGate, EffectivePermissionResolver, PlatformPolicy
from gdprauthz.domain.value_objects import AccountRole

MANAGE_PERMISSIONS = "permissions.manage"
MANAGE_ROLES = "roles.manage"


class GdprPermissionChecker:
    """Decides whether an actor may administer permissions.

    Subject overrides need ``permissions.manage`` inside the tenant, or the
    same permission platform-wide. Role defaults are global and need the
    platform permission ``roles.manage``.
    """

    def __init__(
        self,
        snapshot_loader: SnapshotLoader,
        resolver: EffectivePermissionResolver,
        platform_policy: PlatformPolicy,
    ) -> None:
        self._loader = snapshot_loader
        self._resolver = resolver
        self._platform = platform_policy

    async def can_manage_subjects(
        self, actor_id: str, account_role: AccountRole | None, tenant_id: str
    ) -> bool:
        if self._platform.allows(account_role, MANAGE_PERMISSIONS):
            return True
        gate = AccessGate(self._resolver, self._loader)
        await gate.load(actor_id, tenant_id)
        return gate.has_permission(actor_id, tenant_id, MANAGE_PERMISSIONS)

    async def can_read_subject(
        self, actor_id: str, account_role: AccountRole | None, tenant_id: str, subject_id: str
    ) -> bool:
        if actor_id == subject_id:
            return True
        return await self.can_manage_subjects(actor_id, account_role, tenant_id)

    def can_manage_roles(self, account_role: AccountRole | None) -> bool:
        return self._platform.allows(account_role, MANAGE_ROLES)
