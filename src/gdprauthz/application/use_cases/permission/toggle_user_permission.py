"""Toggle user permission use case - the legacy two-state switch."""

from gdprauthz.application.dto import PermissionStatusView
from gdprauthz.application.services.catalog import PermissionCatalog
from gdprauthz.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from gdprauthz.application.use_cases.permission.revoke_permission import (
    RevokePermissionUseCase,
)
from gdprauthz.domain.value_objects import PermissionStatus


class ToggleUserPermissionUseCase:
    """Grant when the status is ``none`` or ``revoked``, revoke otherwise.

    Always writes an explicit override, so the pair never returns to
    ``inherited`` or ``none``. Use ClearOverrideUseCase for that.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        catalog: PermissionCatalog,
        grant_permission: GrantPermissionUseCase,
        revoke_permission: RevokePermissionUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._catalog = catalog
        self._grant = grant_permission
        self._revoke = revoke_permission

    async def execute(
        self,
        subject_id: str,
        tenant_id: str,
        permission_id: str,
        actor_id: str,
        reason: str | None = None,
    ) -> PermissionStatusView:
        pid = self._catalog.canonicalize(permission_id)
        async with self._uow_factory() as uow:
            override = await uow.overrides.get_override(subject_id, tenant_id, pid)
            membership = await uow.memberships.get(subject_id, tenant_id)
            default_granted = (
                await uow.role_defaults.is_default_granted(membership.role, pid)
                if membership
                else False
            )

        current = PermissionStatus.of(override.granted if override else None, default_granted)
        command = (
            self._grant
            if current in (PermissionStatus.NONE, PermissionStatus.REVOKED)
            else self._revoke
        )
        return await command.execute(subject_id, tenant_id, pid, reason, actor_id)
