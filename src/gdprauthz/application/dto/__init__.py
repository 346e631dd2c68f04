"""Application DTOs."""

from gdprauthz.application.dto.authorization_dto import (
    EffectivePermissionSet,
    ModuleAccess,
    PermissionStatusView,
    RoleDefaultsSlice,
)

__all__ = [
    "EffectivePermissionSet",
    "ModuleAccess",
    "PermissionStatusView",
    "RoleDefaultsSlice",
]
