"""Effective permissions API resource."""

import falcon.asgi

from gdprauthz.application.use_cases.authorization.get_effective_permissions import (
    GetEffectivePermissionsUseCase,
)
from gdprauthz.infrastructure.permission.permission_checker import GdprPermissionChecker


class EffectivePermissionsResource:
    """GET /v1/tenants/{tenant_id}/subjects/{subject_id}/effective-permissions.

    An unknown membership is not an error: every permission resolves to
    false and ``role`` is null.
    """

    def __init__(
        self,
        get_effective_permissions: GetEffectivePermissionsUseCase,
        permission_checker: GdprPermissionChecker,
    ) -> None:
        self._get_effective = get_effective_permissions
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

        result = await self._get_effective.execute(subject_id, tenant_id)
        resp.media = result.to_dict()
        resp.status = falcon.HTTP_200
