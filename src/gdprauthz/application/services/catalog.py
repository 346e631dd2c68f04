"""Permission catalog - static registry of permission ids and categories."""

from __future__ import annotations

from collections.abc import Iterable

from gdprauthz.domain.entities import Permission, PermissionCategory
from gdprauthz.domain.exceptions import ConfigurationError, ValidationError
from gdprauthz.domain.value_objects import PermissionId, canonical_permission_id


class PermissionCatalog:
    """Read-only registry built once per process (or per test) from a seed.

    Construction fails with ``ConfigurationError`` on duplicate ids, ids that are
    not in ``resource.action`` form, or permissions pointing at unknown categories.
    """

    def __init__(
        self,
        permissions: Iterable[Permission],
        categories: Iterable[PermissionCategory] = (),
    ) -> None:
        self._categories: dict[str, PermissionCategory] = {}
        for category in categories:
            if category.id in self._categories:
                raise ConfigurationError(f"Duplicate permission category: {category.id}")
            self._categories[category.id] = category

        self._by_id: dict[str, Permission] = {}
        for perm in permissions:
            try:
                canonical = canonical_permission_id(perm.id)
            except ValidationError as e:
                raise ConfigurationError(f"Malformed catalog permission {perm.id!r}: {e}") from e
            if canonical != perm.id:
                raise ConfigurationError(
                    f"Catalog permission {perm.id!r} is not canonical (expected {canonical!r})"
                )
            if perm.id in self._by_id:
                raise ConfigurationError(f"Duplicate permission id: {perm.id}")
            if perm.category not in self._categories:
                if self._categories:
                    raise ConfigurationError(
                        f"Permission {perm.id} references unknown category {perm.category!r}"
                    )
                self._categories[perm.category] = PermissionCategory(
                    id=perm.category, name=perm.category
                )
            self._by_id[perm.id] = perm

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, permission_id: object) -> bool:
        return isinstance(permission_id, str) and permission_id in self._by_id

    def list(self) -> list[Permission]:
        return list(self._by_id.values())

    def ids(self) -> list[str]:
        return list(self._by_id)

    def by_category(self, category: str) -> list[Permission]:
        return [p for p in self._by_id.values() if p.category == category]

    def categories(self) -> list[PermissionCategory]:
        return list(self._categories.values())

    def exists(self, permission_id: str) -> bool:
        return permission_id in self._by_id

    def get(self, permission_id: str) -> Permission | None:
        return self._by_id.get(permission_id)

    def canonicalize(self, value: str | PermissionId, action: str | None = None) -> str:
        """Canonical id of a catalog permission.

        Raises ValidationError if the input is malformed or not in the catalog.
        """
        permission_id = canonical_permission_id(value, action)
        if permission_id not in self._by_id:
            raise ValidationError(f"Unknown permission: {permission_id}")
        return permission_id

    def require(self, permission_ids: Iterable[str]) -> None:
        """Fail fast if any referenced permission is outside the catalog."""
        unknown = sorted(set(permission_ids) - self._by_id.keys())
        if unknown:
            raise ConfigurationError(
                f"Permissions referenced outside the catalog: {', '.join(unknown)}"
            )
