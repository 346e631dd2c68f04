"""Effective permission resolution.

Precedence, strictest first:

1. permission outside the catalog -> deny
2. no membership in the tenant -> deny
3. wildcard membership (owner) -> allow, whatever overrides say
4. live subject override -> its ``granted`` value
5. role default of the membership's role
"""

from gdprauthz.application.dto import EffectivePermissionSet, ModuleAccess, PermissionStatusView
from gdprauthz.application.services.catalog import PermissionCatalog
from gdprauthz.domain.entities import AuthorizationSnapshot
from gdprauthz.domain.value_objects import PermissionId, PermissionStatus, canonical_permission_id


class EffectivePermissionResolver:
    """Pure, synchronous fold over an already-loaded AuthorizationSnapshot."""

    def __init__(self, catalog: PermissionCatalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> PermissionCatalog:
        return self._catalog

    def resolve(
        self,
        snapshot: AuthorizationSnapshot,
        permission: str | PermissionId,
        action: str | None = None,
    ) -> bool:
        """Resolve one permission. Raises ValidationError on malformed input only."""
        permission_id = canonical_permission_id(permission, action)
        return self._resolve_canonical(snapshot, permission_id)

    def _resolve_canonical(self, snapshot: AuthorizationSnapshot, permission_id: str) -> bool:
        if not self._catalog.exists(permission_id):
            return False
        if snapshot.membership is None:
            return False
        if snapshot.wildcard:
            return True
        override = snapshot.override_for(permission_id)
        if override is not None:
            return override.granted
        return snapshot.default_for(permission_id)

    def check_module_access(self, snapshot: AuthorizationSnapshot, module: str) -> ModuleAccess:
        return ModuleAccess(
            can_read=self.resolve(snapshot, module, "read"),
            can_write=self.resolve(snapshot, module, "write"),
        )

    def status(
        self, snapshot: AuthorizationSnapshot, permission: str | PermissionId
    ) -> PermissionStatus:
        permission_id = canonical_permission_id(permission)
        override = snapshot.override_for(permission_id)
        return PermissionStatus.of(
            override.granted if override else None,
            snapshot.default_for(permission_id),
        )

    def status_views(self, snapshot: AuthorizationSnapshot) -> list[PermissionStatusView]:
        """Status of every catalog permission, catalog order."""
        return [
            PermissionStatusView.build(
                snapshot.subject_id,
                snapshot.tenant_id,
                perm.id,
                snapshot.override_for(perm.id),
                snapshot.default_for(perm.id),
            )
            for perm in self._catalog.list()
        ]

    def effective_permissions(self, snapshot: AuthorizationSnapshot) -> EffectivePermissionSet:
        membership = snapshot.membership
        return EffectivePermissionSet(
            subject_id=snapshot.subject_id,
            tenant_id=snapshot.tenant_id,
            role=membership.role if membership else None,
            wildcard=snapshot.wildcard,
            permissions={
                pid: self._resolve_canonical(snapshot, pid) for pid in self._catalog.ids()
            },
        )
