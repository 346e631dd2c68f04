"""Unit tests for administration use cases."""

import asyncio
import logging
from datetime import UTC, datetime

import pytest

from gdprauthz.application.services import AccessGate
from gdprauthz.application.use_cases.authorization.get_effective_permissions import (
    GetEffectivePermissionsUseCase,
)
from gdprauthz.application.use_cases.permission.get_subject_permissions import (
    GetSubjectPermissionsUseCase,
)
from gdprauthz.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from gdprauthz.application.use_cases.permission.revoke_permission import RevokePermissionUseCase
from gdprauthz.application.use_cases.role.get_role_permissions import GetRolePermissionsUseCase
from gdprauthz.domain.entities import SubjectOverride
from gdprauthz.domain.exceptions import ValidationError
from gdprauthz.domain.value_objects import AuditEventType, PermissionStatus, Role

from tests.conftest import FailingAuditSink


async def _has(resolver, loader, subject, tenant, *args) -> bool:
    gate = AccessGate(resolver, loader)
    await gate.load(subject, tenant)
    return gate.has_permission(subject, tenant, *args)


class TestScenarios:
    @pytest.mark.asyncio
    async def test_grant_gives_collaborator_write_access(self, resolver, loader, grant) -> None:
        assert await _has(resolver, loader, "collab-1", "acme", "records", "read") is True
        assert await _has(resolver, loader, "collab-1", "acme", "records", "write") is False

        await grant.execute("collab-1", "acme", "records.write", "temp access", "admin-1")

        assert await _has(resolver, loader, "collab-1", "acme", "records", "write") is True

    @pytest.mark.asyncio
    async def test_wildcard_wins_over_revoke(self, resolver, loader, revoke) -> None:
        view = await revoke.execute("owner-1", "acme", "billing.delete", "no", "admin-1")
        assert view.status is PermissionStatus.REVOKED
        assert await _has(resolver, loader, "owner-1", "acme", "billing.delete") is True

    @pytest.mark.asyncio
    async def test_role_toggle_keeps_explicit_grants(
        self, resolver, loader, grant, toggle_role
    ) -> None:
        await grant.execute("admin-2", "acme", "view:logs", "auditor", "owner-1")

        slice_ = await toggle_role.execute("admin", "view:logs", "root")

        assert slice_.permissions["logs.view"] is False
        assert await _has(resolver, loader, "admin-2", "acme", "logs.view") is True
        assert await _has(resolver, loader, "admin-1", "acme", "logs.view") is False


class TestGrantRevoke:
    @pytest.mark.asyncio
    async def test_grant_returns_status_and_emits_event(self, grant, audit_sink, clock) -> None:
        view = await grant.execute("collab-1", "acme", "write:records", None, "admin-1")

        assert view.permission_id == "records.write"
        assert view.status is PermissionStatus.GRANTED
        assert view.reason == "Permission granted manually"
        assert view.changed_by == "admin-1"
        assert view.changed_at == clock.now
        assert [e.type for e in audit_sink.events] == [AuditEventType.PERMISSION_GRANTED]
        event = audit_sink.events[0]
        assert (event.subject_id, event.tenant_id, event.actor) == ("collab-1", "acme", "admin-1")
        assert event.granted is True

    @pytest.mark.asyncio
    async def test_revoke_default_reason(self, revoke, audit_sink) -> None:
        view = await revoke.execute("collab-1", "acme", "records.read", "  ", "admin-1")
        assert view.status is PermissionStatus.REVOKED
        assert view.reason == "Permission revoked manually"
        assert audit_sink.events[0].type is AuditEventType.PERMISSION_REVOKED
        assert audit_sink.events[0].granted is False

    @pytest.mark.asyncio
    async def test_grant_is_idempotent(self, grant, resolver, loader, store) -> None:
        for _ in range(3):
            await grant.execute("collab-1", "acme", "records.write", "again", "admin-1")
        assert len([k for k in store.overrides if k[0] == "collab-1"]) == 1
        assert await _has(resolver, loader, "collab-1", "acme", "records.write") is True

    @pytest.mark.asyncio
    async def test_unknown_permission_is_rejected(self, grant, audit_sink, store) -> None:
        with pytest.raises(ValidationError, match="Unknown permission"):
            await grant.execute("collab-1", "acme", "reports.export", "x", "admin-1")
        with pytest.raises(ValidationError):
            await grant.execute("collab-1", "acme", "records", "x", "admin-1")
        assert audit_sink.events == []
        assert store.overrides == {}

    @pytest.mark.asyncio
    async def test_missing_subject_or_tenant_is_rejected(self, grant) -> None:
        with pytest.raises(ValidationError):
            await grant.execute("", "acme", "records.write", "x", "admin-1")

    @pytest.mark.asyncio
    async def test_failing_audit_sink_does_not_undo_write(
        self, uow_factory, catalog, clock, store, caplog
    ) -> None:
        grant = GrantPermissionUseCase(
            unit_of_work_factory=uow_factory,
            catalog=catalog,
            audit_sink=FailingAuditSink(),
            clock=clock,
        )
        with caplog.at_level(logging.ERROR):
            view = await grant.execute("collab-1", "acme", "records.write", "x", "admin-1")

        assert view.status is PermissionStatus.GRANTED
        assert store.overrides[("collab-1", "acme", "records.write")].granted is True
        assert "Audit sink failed" in caplog.text


class TestLastWriteWins:
    @pytest.mark.asyncio
    async def test_later_timestamp_wins(self, grant, revoke, store) -> None:
        await grant.execute("collab-1", "acme", "records.write", "first", "admin-1")
        await revoke.execute("collab-1", "acme", "records.write", "second", "admin-2")

        live = store.overrides[("collab-1", "acme", "records.write")]
        assert live.granted is False
        assert live.changed_by == "admin-2"

    @pytest.mark.asyncio
    async def test_older_write_does_not_replace_newer(self, uow_factory, clock) -> None:
        newer_at = clock()
        older_at = clock.now.replace(year=2025)
        async with uow_factory() as uow:
            await uow.overrides.set_override(
                SubjectOverride("collab-1", "acme", "records.write", True, "new", newer_at, "a")
            )
            live = await uow.overrides.set_override(
                SubjectOverride("collab-1", "acme", "records.write", False, "old", older_at, "b")
            )
            stored = await uow.overrides.get_override("collab-1", "acme", "records.write")

        assert live.changed_at == newer_at
        assert stored.granted is True
        assert stored.reason == "new"

    @pytest.mark.asyncio
    async def test_stale_grant_changes_nothing_and_emits_no_event(
        self, uow_factory, catalog, store, audit_sink
    ) -> None:
        revoked_at = datetime(2026, 6, 1, tzinfo=UTC)
        store.overrides[("collab-1", "acme", "records.read")] = SubjectOverride(
            "collab-1", "acme", "records.read", False, "newer", revoked_at, "admin-2"
        )
        stale_grant = GrantPermissionUseCase(
            unit_of_work_factory=uow_factory,
            catalog=catalog,
            audit_sink=audit_sink,
            clock=lambda: datetime(2026, 1, 1, tzinfo=UTC),
        )

        view = await stale_grant.execute("collab-1", "acme", "records.read", "old", "admin-1")

        assert view.status is PermissionStatus.REVOKED
        assert view.changed_at == revoked_at
        assert store.overrides[("collab-1", "acme", "records.read")].granted is False
        assert audit_sink.events == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("grant_is_later", [True, False])
    async def test_concurrent_grant_and_revoke_keep_later_timestamp(
        self, uow_factory, catalog, store, audit_sink, grant_is_later
    ) -> None:
        early = datetime(2026, 5, 1, 9, 0, tzinfo=UTC)
        late = datetime(2026, 5, 1, 9, 0, 1, tzinfo=UTC)
        grant = GrantPermissionUseCase(
            unit_of_work_factory=uow_factory,
            catalog=catalog,
            audit_sink=audit_sink,
            clock=lambda: late if grant_is_later else early,
        )
        revoke = RevokePermissionUseCase(
            unit_of_work_factory=uow_factory,
            catalog=catalog,
            audit_sink=audit_sink,
            clock=lambda: early if grant_is_later else late,
        )

        await asyncio.gather(
            grant.execute("collab-1", "acme", "records.write", "g", "admin-1"),
            revoke.execute("collab-1", "acme", "records.write", "r", "admin-2"),
        )

        live = store.overrides[("collab-1", "acme", "records.write")]
        assert live.changed_at == late
        assert live.granted is grant_is_later
        assert [e.granted for e in audit_sink.events if e.timestamp == late] == [grant_is_later]


class TestToggle:
    @pytest.mark.asyncio
    async def test_toggle_cycle_never_returns_to_inherited(self, toggle) -> None:
        # records.read is a collaborator default: inherited -> revoked -> granted
        first = await toggle.execute("collab-1", "acme", "records.read", "admin-1")
        second = await toggle.execute("collab-1", "acme", "records.read", "admin-1")
        third = await toggle.execute("collab-1", "acme", "records.read", "admin-1")

        assert first.status is PermissionStatus.REVOKED
        assert second.status is PermissionStatus.GRANTED
        assert third.status is PermissionStatus.REVOKED

    @pytest.mark.asyncio
    async def test_toggle_from_none_grants(self, toggle, audit_sink) -> None:
        first = await toggle.execute("collab-1", "acme", "records.write", "admin-1")
        second = await toggle.execute("collab-1", "acme", "records.write", "admin-1")

        assert first.status is PermissionStatus.GRANTED
        assert first.reason == "Permission granted manually"
        assert second.status is PermissionStatus.REVOKED
        assert second.reason == "Permission revoked manually"
        assert [e.type for e in audit_sink.events] == [
            AuditEventType.PERMISSION_GRANTED,
            AuditEventType.PERMISSION_REVOKED,
        ]


class TestClearOverride:
    @pytest.mark.asyncio
    async def test_clear_returns_to_inherited(self, revoke, clear, resolver, loader, audit_sink) -> None:
        await revoke.execute("collab-1", "acme", "records.read", "x", "admin-1")
        assert await _has(resolver, loader, "collab-1", "acme", "records.read") is False

        view = await clear.execute("collab-1", "acme", "records.read", "admin-1")

        assert view.status is PermissionStatus.INHERITED
        assert await _has(resolver, loader, "collab-1", "acme", "records.read") is True
        assert audit_sink.events[-1].type is AuditEventType.PERMISSION_OVERRIDE_CLEARED
        assert audit_sink.events[-1].granted is None

    @pytest.mark.asyncio
    async def test_clear_returns_to_none(self, grant, clear) -> None:
        await grant.execute("collab-1", "acme", "records.write", "x", "admin-1")
        view = await clear.execute("collab-1", "acme", "records.write", "admin-1")
        assert view.status is PermissionStatus.NONE

    @pytest.mark.asyncio
    async def test_clear_absent_override_is_silent_noop(self, clear, audit_sink) -> None:
        view = await clear.execute("collab-1", "acme", "records.read", "admin-1")
        assert view.status is PermissionStatus.INHERITED
        assert audit_sink.events == []

    @pytest.mark.asyncio
    async def test_missing_subject_or_tenant_is_rejected(self, clear, grant, store) -> None:
        await grant.execute("collab-1", "acme", "records.write", "x", "admin-1")
        with pytest.raises(ValidationError):
            await clear.execute("", "acme", "records.write", "admin-1")
        with pytest.raises(ValidationError):
            await clear.execute("collab-1", "", "records.write", "admin-1")
        assert ("collab-1", "acme", "records.write") in store.overrides


class TestRolePermissions:
    @pytest.mark.asyncio
    async def test_toggle_flips_and_emits(self, toggle_role, audit_sink) -> None:
        off = await toggle_role.execute("admin", "logs.view", "root")
        on = await toggle_role.execute(Role.ADMIN, "logs.view", "root")

        assert off.permissions["logs.view"] is False
        assert on.permissions["logs.view"] is True
        assert [e.type for e in audit_sink.events] == [AuditEventType.ROLE_PERMISSION_CHANGED] * 2
        assert audit_sink.events[0].role is Role.ADMIN
        assert audit_sink.events[0].subject_id is None

    @pytest.mark.asyncio
    async def test_set_is_idempotent(self, set_role, uow_factory) -> None:
        await set_role.execute("collaborator", "records.write", True)
        result = await set_role.execute("collaborator", "records.write", True)

        assert result.permissions["records.write"] is True
        async with uow_factory() as uow:
            rows = await uow.role_defaults.list_for_role(Role.COLLABORATOR)
        assert len([r for r in rows if r.permission_id == "records.write"]) == 1

    @pytest.mark.asyncio
    async def test_unknown_role_or_permission(self, set_role) -> None:
        with pytest.raises(ValidationError, match="Unknown role"):
            await set_role.execute("janitor", "records.read", True)
        with pytest.raises(ValidationError):
            await set_role.execute("admin", "records.purge", True)

    @pytest.mark.asyncio
    async def test_get_role_permissions(self, uow_factory, catalog) -> None:
        result = await GetRolePermissionsUseCase(uow_factory, catalog).execute("collaborator")
        assert set(result.permissions) == set(catalog.ids())
        assert result.permissions["records.read"] is True
        assert result.permissions["records.write"] is False


class TestReads:
    @pytest.mark.asyncio
    async def test_effective_permissions(self, loader, resolver) -> None:
        result = await GetEffectivePermissionsUseCase(loader, resolver).execute("owner-1", "acme")
        assert result.role is Role.OWNER
        assert result.wildcard is True
        assert all(result.permissions.values())

    @pytest.mark.asyncio
    async def test_subject_permissions_explicit_only(self, loader, resolver, grant) -> None:
        await grant.execute("collab-1", "acme", "records.write", "x", "admin-1")
        use_case = GetSubjectPermissionsUseCase(loader, resolver)

        all_views = await use_case.execute("collab-1", "acme")
        explicit = await use_case.execute("collab-1", "acme", explicit_only=True)

        assert len(all_views) == len(resolver.catalog)
        assert [(v.permission_id, v.status) for v in explicit] == [
            ("records.write", PermissionStatus.GRANTED)
        ]
