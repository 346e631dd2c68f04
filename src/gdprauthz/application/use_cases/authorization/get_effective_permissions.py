"""Effective permissions use case."""

from gdprauthz.application.dto import EffectivePermissionSet
from gdprauthz.application.ports import SnapshotLoader
from gdprauthz.application.services.resolver import EffectivePermissionResolver


class GetEffectivePermissionsUseCase:
    """Resolve every catalog permission for a subject from a single fetch."""

    def __init__(self, snapshot_loader: SnapshotLoader, resolver: EffectivePermissionResolver) -> None:
        self._loader = snapshot_loader
        self._resolver = resolver

    async def execute(self, subject_id: str, tenant_id: str) -> EffectivePermissionSet:
        snapshot = await self._loader.load(subject_id, tenant_id)
        return self._resolver.effective_permissions(snapshot)
