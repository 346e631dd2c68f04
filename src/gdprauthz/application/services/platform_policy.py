"""Platform-wide permissions derived from the global account role.

Kept apart from the per-tenant resolver: these grants never depend on a
tenant membership and cannot be overridden per subject.
"""

from gdprauthz.domain.value_objects import AccountRole

_ADMIN_PERMISSIONS = frozenset(
    {
        "admin.view",
        "company.manage",
        "users.manage",
        "analytics.view",
        "settings.manage",
        "prompts.manage",
        "documents.write",
    }
)

PLATFORM_ROLE_PERMISSIONS: dict[AccountRole, frozenset[str]] = {
    AccountRole.USER: frozenset(),
    AccountRole.ADMIN: _ADMIN_PERMISSIONS,
    AccountRole.SUPER_ADMIN: _ADMIN_PERMISSIONS
    | {
        "system.manage",
        "roles.manage",
        "logs.view",
        "security.manage",
        "any.delete",
        "permissions.manage",
    },
}

ROUTE_PERMISSIONS: dict[str, str] = {
    "/admin": "admin.view",
    "/analytics": "analytics.view",
    "/system": "system.manage",
    "/logs": "logs.view",
}


class PlatformPolicy:
    """Answers platform-wide checks for an account role."""

    def __init__(self, role_permissions: dict[AccountRole, frozenset[str]] | None = None) -> None:
        self._role_permissions = role_permissions or PLATFORM_ROLE_PERMISSIONS

    def allows(self, account_role: AccountRole | None, permission_id: str) -> bool:
        if account_role is None:
            return False
        return permission_id in self._role_permissions.get(account_role, frozenset())

    def can_access_route(self, account_role: AccountRole | None, route: str) -> bool:
        """Routes without a registered permission are public."""
        if account_role is None:
            return False
        required = ROUTE_PERMISSIONS.get(route)
        if required is None:
            return True
        return self.allows(account_role, required)
