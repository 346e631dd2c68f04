"""Permission catalog entries."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PermissionCategory:
    """Grouping of catalog permissions for administration screens."""

    id: str
    name: str
    color: str = "#6B7280"
    icon: str = "Shield"


@dataclass(frozen=True)
class Permission:
    """Catalog entry - an atomic capability ``resource.action``."""

    id: str
    category: str
    name: str
    description: str = ""

    @property
    def resource(self) -> str:
        return self.id.partition(".")[0]

    @property
    def action(self) -> str:
        return self.id.partition(".")[2]
