"""Seed document loading and validation."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from gdprauthz.application.services.catalog import PermissionCatalog
from gdprauthz.domain.entities import Permission, PermissionCategory
from gdprauthz.domain.exceptions import ConfigurationError
from gdprauthz.domain.value_objects import Role
from gdprauthz.infrastructure.seed.default_seed import DEFAULT_SEED

logger = logging.getLogger(__name__)

ALL_PERMISSIONS = "*"


class CategorySeed(BaseModel):
    id: str
    name: str
    color: str = "#6B7280"
    icon: str = "Shield"


class PermissionSeed(BaseModel):
    id: str
    category: str
    name: str
    description: str = ""


class SeedDocument(BaseModel):
    """Catalog and role defaults installed at bootstrap.

    ``role_defaults`` maps a role to the ids it is granted; ``"*"`` stands
    for every catalog permission.
    """

    categories: list[CategorySeed] = Field(default_factory=list)
    permissions: list[PermissionSeed]
    role_defaults: dict[Role, list[str]] = Field(default_factory=dict)

    def build_catalog(self) -> PermissionCatalog:
        return PermissionCatalog(
            [
                Permission(id=p.id, category=p.category, name=p.name, description=p.description)
                for p in self.permissions
            ],
            [
                PermissionCategory(id=c.id, name=c.name, color=c.color, icon=c.icon)
                for c in self.categories
            ],
        )

    def role_default_grants(self, catalog: PermissionCatalog) -> dict[Role, frozenset[str]]:
        grants: dict[Role, frozenset[str]] = {}
        for role, ids in self.role_defaults.items():
            if ALL_PERMISSIONS in ids:
                grants[role] = frozenset(catalog.ids())
            else:
                grants[role] = frozenset(ids)
        return grants


def load_seed(path: str | Path | None = None) -> SeedDocument:
    """Load a JSON seed file, or the built-in seed when ``path`` is None.

    Raises ConfigurationError if the file is missing, not JSON, or invalid.
    """
    if path is None:
        raw = DEFAULT_SEED
    else:
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read seed file {path}: {e}") from e
        logger.info("Loaded permission seed from %s", path)
    try:
        return SeedDocument.model_validate(raw)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid permission seed: {e}") from e
