"""Read the status of a subject's permissions in a tenant."""

from gdprauthz.application.dto import PermissionStatusView
from gdprauthz.application.ports import SnapshotLoader
from gdprauthz.application.services.resolver import EffectivePermissionResolver


class GetSubjectPermissionsUseCase:
    """Status (granted / revoked / inherited / none) of every catalog permission."""

    def __init__(self, snapshot_loader: SnapshotLoader, resolver: EffectivePermissionResolver) -> None:
        self._loader = snapshot_loader
        self._resolver = resolver

    async def execute(
        self, subject_id: str, tenant_id: str, *, explicit_only: bool = False
    ) -> list[PermissionStatusView]:
        snapshot = await self._loader.load(subject_id, tenant_id)
        views = self._resolver.status_views(snapshot)
        if explicit_only:
            views = [v for v in views if v.status.is_explicit]
        return views
