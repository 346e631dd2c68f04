"""Subject permission override API resources."""

import falcon.asgi

from gdprauthz.application.use_cases.permission.clear_override import ClearOverrideUseCase
from gdprauthz.application.use_cases.permission.get_subject_permissions import (
    GetSubjectPermissionsUseCase,
)
from gdprauthz.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from gdprauthz.application.use_cases.permission.revoke_permission import RevokePermissionUseCase
from gdprauthz.application.use_cases.permission.toggle_user_permission import (
    ToggleUserPermissionUseCase,
)
from gdprauthz.domain.exceptions import ValidationError
from gdprauthz.infrastructure.permission.permission_checker import GdprPermissionChecker


async def _authorize_manager(
    req: falcon.asgi.Request,
    resp: falcon.asgi.Response,
    permission_checker: GdprPermissionChecker,
    tenant_id: str,
):
    """Return the request user if they may manage permissions in the tenant, else None."""
    user = getattr(req.context, "user", None)
    if not user:
        resp.status = falcon.HTTP_401
        resp.media = {"error": "Unauthorized"}
        return None
    if not await permission_checker.can_manage_subjects(user.user_id, user.account_role, tenant_id):
        resp.status = falcon.HTTP_403
        resp.media = {"error": "Permission denied"}
        return None
    return user


async def _read_body(req: falcon.asgi.Request) -> tuple[str, str | None]:
    body = await req.get_media()
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    permission_id = body["permission_id"]
    if not isinstance(permission_id, str):
        raise ValidationError("permission_id must be a string")
    return permission_id, body.get("reason")


class SubjectPermissionsResource:
    """Per-subject overrides under /v1/tenants/{tenant_id}/subjects/{subject_id}/permissions.

    GET lists the status of every catalog permission (``?explicit=true`` keeps
    only granted/revoked overrides). POST ``/grant``, ``/revoke`` and
    ``/toggle`` take ``{permission_id, reason}``.
    """

    def __init__(
        self,
        get_subject_permissions: GetSubjectPermissionsUseCase,
        grant_permission: GrantPermissionUseCase,
        revoke_permission: RevokePermissionUseCase,
        toggle_user_permission: ToggleUserPermissionUseCase,
        permission_checker: GdprPermissionChecker,
    ) -> None:
        self._get = get_subject_permissions
        self._grant = grant_permission
        self._revoke = revoke_permission
        self._toggle = toggle_user_permission
        self._permission_checker = permission_checker

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        tenant_id: str,
        subject_id: str,
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return
        allowed = await self._permission_checker.can_read_subject(
            user.user_id, user.account_role, tenant_id, subject_id
        )
        if not allowed:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        explicit_only = req.get_param_as_bool("explicit") or False
        views = await self._get.execute(subject_id, tenant_id, explicit_only=explicit_only)
        resp.media = {"items": [v.to_dict() for v in views]}
        resp.status = falcon.HTTP_200

    async def on_post_grant(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, tenant_id: str, subject_id: str
    ) -> None:
        """Explicitly grant a permission to the subject."""
        await self._run_command(req, resp, tenant_id, subject_id, self._grant.execute)

    async def on_post_revoke(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, tenant_id: str, subject_id: str
    ) -> None:
        """Explicitly revoke a permission from the subject."""
        await self._run_command(req, resp, tenant_id, subject_id, self._revoke.execute)

    async def on_post_toggle(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, tenant_id: str, subject_id: str
    ) -> None:
        """Legacy toggle: grant when none/revoked, revoke otherwise."""
        user = await _authorize_manager(req, resp, self._permission_checker, tenant_id)
        if not user:
            return
        try:
            permission_id, reason = await _read_body(req)
            view = await self._toggle.execute(
                subject_id, tenant_id, permission_id, user.user_id, reason=reason
            )
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.media = view.to_dict()
        resp.status = falcon.HTTP_200

    async def _run_command(self, req, resp, tenant_id: str, subject_id: str, command) -> None:
        user = await _authorize_manager(req, resp, self._permission_checker, tenant_id)
        if not user:
            return
        try:
            permission_id, reason = await _read_body(req)
            view = await command(subject_id, tenant_id, permission_id, reason, user.user_id)
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.media = view.to_dict()
        resp.status = falcon.HTTP_200


class SubjectPermissionResource:
    """DELETE /v1/tenants/{tenant_id}/subjects/{subject_id}/permissions/{permission_id}.

    Clears the override so the permission follows the role default again.
    """

    def __init__(
        self,
        clear_override: ClearOverrideUseCase,
        permission_checker: GdprPermissionChecker,
    ) -> None:
        self._clear = clear_override
        self._permission_checker = permission_checker

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        tenant_id: str,
        subject_id: str,
        permission_id: str,
    ) -> None:
        user = await _authorize_manager(req, resp, self._permission_checker, tenant_id)
        if not user:
            return
        try:
            view = await self._clear.execute(
                subject_id, tenant_id, permission_id, user.user_id, reason=req.get_param("reason")
            )
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.media = view.to_dict()
        resp.status = falcon.HTTP_200
