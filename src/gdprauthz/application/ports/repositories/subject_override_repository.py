"""Subject override repository port."""

from typing import Protocol

from gdprauthz.domain.entities import SubjectOverride


class SubjectOverrideRepository(Protocol):
    """Port for per-subject explicit grants and revokes."""

    async def get_override(
        self, subject_id: str, tenant_id: str, permission_id: str
    ) -> SubjectOverride | None: ...

    async def list_for_subject(self, subject_id: str, tenant_id: str) -> list[SubjectOverride]: ...

    async def list_for_tenant(self, tenant_id: str) -> list[SubjectOverride]: ...

    async def list_permission_ids(self) -> set[str]: ...

    async def set_override(self, override: SubjectOverride) -> SubjectOverride:
        """Upsert by key. Returns the live row; an older ``changed_at`` never replaces a newer one."""
        ...

    async def delete_override(self, subject_id: str, tenant_id: str, permission_id: str) -> bool: ...
