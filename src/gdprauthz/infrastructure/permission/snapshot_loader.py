"""Snapshot loader backed by the repositories."""

from gdprauthz.domain.entities import AuthorizationSnapshot


class RepositorySnapshotLoader:
    """Loads membership, role defaults and overrides in one unit of work."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def load(self, subject_id: str, tenant_id: str) -> AuthorizationSnapshot:
        async with self._uow_factory() as uow:
            membership = await uow.memberships.get(subject_id, tenant_id)
            if membership is None:
                return AuthorizationSnapshot(subject_id, tenant_id, None)
            role_defaults = await uow.role_defaults.granted_for_role(membership.role)
            overrides = await uow.overrides.list_for_subject(subject_id, tenant_id)
        return AuthorizationSnapshot(
            subject_id=subject_id,
            tenant_id=tenant_id,
            membership=membership,
            role_defaults=role_defaults,
            overrides={o.permission_id: o for o in overrides},
        )
