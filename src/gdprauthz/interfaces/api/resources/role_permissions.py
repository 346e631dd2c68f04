"""Role default permission API resources."""

import falcon.asgi

from gdprauthz.application.use_cases.role.get_role_permissions import GetRolePermissionsUseCase
from gdprauthz.application.use_cases.role.set_role_permission import SetRolePermissionUseCase
from gdprauthz.application.use_cases.role.toggle_role_permission import (
    ToggleRolePermissionUseCase,
)
from gdprauthz.domain.exceptions import ValidationError
from gdprauthz.infrastructure.permission.permission_checker import GdprPermissionChecker


class RolePermissionsResource:
    """GET/PUT /v1/roles/{role}/permissions and POST .../toggle."""

    def __init__(
        self,
        get_role_permissions: GetRolePermissionsUseCase,
        set_role_permission: SetRolePermissionUseCase,
        toggle_role_permission: ToggleRolePermissionUseCase,
        permission_checker: GdprPermissionChecker,
    ) -> None:
        self._get = get_role_permissions
        self._set = set_role_permission
        self._toggle = toggle_role_permission
        self._permission_checker = permission_checker

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role: str) -> None:
        """Role default slice over the whole catalog."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return
        try:
            result = await self._get.execute(role)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.media = result.to_dict()
        resp.status = falcon.HTTP_200

    async def on_put(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role: str) -> None:
        """Set one default: body ``{permission_id, granted}``."""
        user = self._authorize(req, resp)
        if not user:
            return
        try:
            body = await req.get_media()
            permission_id = body["permission_id"]
            granted = body["granted"]
            if not isinstance(granted, bool):
                raise ValidationError("granted must be a boolean")
            result = await self._set.execute(role, permission_id, granted, user.user_id)
        except (KeyError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.media = result.to_dict()
        resp.status = falcon.HTTP_200

    async def on_post_toggle(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role: str
    ) -> None:
        """Flip one default: body ``{permission_id}``."""
        user = self._authorize(req, resp)
        if not user:
            return
        try:
            body = await req.get_media()
            result = await self._toggle.execute(role, body["permission_id"], user.user_id)
        except (KeyError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.media = result.to_dict()
        resp.status = falcon.HTTP_200

    def _authorize(self, req: falcon.asgi.Request, resp: falcon.asgi.Response):
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return None
        if not self._permission_checker.can_manage_roles(user.account_role):
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return None
        return user
