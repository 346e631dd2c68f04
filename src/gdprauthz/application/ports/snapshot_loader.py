"""Snapshot loader port - the single fetch behind authorization checks."""

from typing import Protocol

from gdprauthz.domain.entities import AuthorizationSnapshot


class SnapshotLoader(Protocol):
    """Loads membership, role defaults and overrides for a subject in a tenant."""

    async def load(self, subject_id: str, tenant_id: str) -> AuthorizationSnapshot: ...
