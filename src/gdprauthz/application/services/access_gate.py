"""Access gate - the permission check surface used by the rest of the application."""

import logging

from gdprauthz.application.dto import EffectivePermissionSet, ModuleAccess
from gdprauthz.application.ports import SnapshotLoader
from gdprauthz.application.services.resolver import EffectivePermissionResolver
from gdprauthz.domain.entities import AuthorizationSnapshot
from gdprauthz.domain.exceptions import ValidationError
from gdprauthz.domain.value_objects import canonical_permission_id

logger = logging.getLogger(__name__)


class AccessGate:
    """Wraps the resolver with input canonicalization and a per-session snapshot cache.

    Checks never raise. Until ``load()`` has completed for a (subject, tenant)
    pair every check answers ``False``, the same answer as an explicit denial.

    Usage::

        gate = AccessGate(resolver, loader)
        await gate.load("user-1", "acme")
        gate.has_permission("user-1", "acme", "records", "write")
        gate.has_permission("user-1", "acme", "records.write")  # same answer
    """

    def __init__(self, resolver: EffectivePermissionResolver, loader: SnapshotLoader) -> None:
        self._resolver = resolver
        self._loader = loader
        self._snapshots: dict[tuple[str, str], AuthorizationSnapshot] = {}

    async def load(self, subject_id: str, tenant_id: str) -> AuthorizationSnapshot:
        """Fetch and cache state for the pair. Calling again refreshes it."""
        snapshot = await self._loader.load(subject_id, tenant_id)
        self._snapshots[(subject_id, tenant_id)] = snapshot
        return snapshot

    def is_loaded(self, subject_id: str, tenant_id: str) -> bool:
        return (subject_id, tenant_id) in self._snapshots

    def invalidate(self, subject_id: str | None = None, tenant_id: str | None = None) -> None:
        """Drop cached snapshots matching the given subject and/or tenant (all if neither)."""
        for key in list(self._snapshots):
            if subject_id is not None and key[0] != subject_id:
                continue
            if tenant_id is not None and key[1] != tenant_id:
                continue
            del self._snapshots[key]

    def has_permission(
        self,
        subject_id: str,
        tenant_id: str,
        module_or_id: str,
        action: str | None = None,
    ) -> bool:
        try:
            permission_id = canonical_permission_id(module_or_id, action)
        except ValidationError as e:
            logger.warning(
                "Malformed permission check %r/%r for subject %s in tenant %s: %s",
                module_or_id,
                action,
                subject_id,
                tenant_id,
                e,
            )
            return False

        snapshot = self._snapshots.get((subject_id, tenant_id))
        if snapshot is None:
            logger.debug(
                "Permission %s checked before load for subject %s in tenant %s",
                permission_id,
                subject_id,
                tenant_id,
            )
            return False
        return self._resolver.resolve(snapshot, permission_id)

    def check_module_access(self, subject_id: str, tenant_id: str, module: str) -> ModuleAccess:
        return ModuleAccess(
            can_read=self.has_permission(subject_id, tenant_id, module, "read"),
            can_write=self.has_permission(subject_id, tenant_id, module, "write"),
        )

    def effective_permissions(self, subject_id: str, tenant_id: str) -> EffectivePermissionSet | None:
        snapshot = self._snapshots.get((subject_id, tenant_id))
        if snapshot is None:
            return None
        return self._resolver.effective_permissions(snapshot)
