"""Role default repository port."""

from typing import Protocol

from gdprauthz.domain.entities import RoleDefault
from gdprauthz.domain.value_objects import Role


class RoleDefaultRepository(Protocol):
    """Port for the role -> permission default table."""

    async def is_default_granted(self, role: Role, permission_id: str) -> bool: ...

    async def granted_for_role(self, role: Role) -> frozenset[str]: ...

    async def list_for_role(self, role: Role) -> list[RoleDefault]: ...

    async def list_all(self) -> list[RoleDefault]: ...

    async def set_default(self, role: Role, permission_id: str, granted: bool) -> RoleDefault: ...
