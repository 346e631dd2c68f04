"""Get role permissions use case."""

from gdprauthz.application.dto import RoleDefaultsSlice
from gdprauthz.application.services.catalog import PermissionCatalog
from gdprauthz.application.use_cases.role.set_role_permission import slice_for
from gdprauthz.domain.value_objects import Role


class GetRolePermissionsUseCase:
    """Default grants of a role over the whole catalog."""

    def __init__(self, unit_of_work_factory: type, catalog: PermissionCatalog) -> None:
        self._uow_factory = unit_of_work_factory
        self._catalog = catalog

    async def execute(self, role: str | Role) -> RoleDefaultsSlice:
        role = Role.parse(role)
        async with self._uow_factory() as uow:
            granted_ids = await uow.role_defaults.granted_for_role(role)
        return slice_for(role, self._catalog, granted_ids)
