"""Role default assignment entity."""

from dataclasses import dataclass
from datetime import datetime

from gdprauthz.domain.value_objects import Role


@dataclass
class RoleDefault:
    """Baseline grant of a permission for every subject holding ``role``."""

    role: Role
    permission_id: str
    granted: bool
    updated_at: datetime | None = None
