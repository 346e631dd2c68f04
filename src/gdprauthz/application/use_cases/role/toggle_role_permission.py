"""Toggle role permission use case."""

from gdprauthz.application.dto import RoleDefaultsSlice
from gdprauthz.application.services.catalog import PermissionCatalog
from gdprauthz.application.use_cases.role.set_role_permission import SetRolePermissionUseCase
from gdprauthz.domain.value_objects import Role


class ToggleRolePermissionUseCase:
    """Flip the default of one permission for a role."""

    def __init__(
        self,
        unit_of_work_factory: type,
        catalog: PermissionCatalog,
        set_role_permission: SetRolePermissionUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._catalog = catalog
        self._set = set_role_permission

    async def execute(
        self,
        role: str | Role,
        permission_id: str,
        actor_id: str | None = None,
    ) -> RoleDefaultsSlice:
        role = Role.parse(role)
        pid = self._catalog.canonicalize(permission_id)
        async with self._uow_factory() as uow:
            current = await uow.role_defaults.is_default_granted(role, pid)
        return await self._set.execute(role, pid, not current, actor_id)
