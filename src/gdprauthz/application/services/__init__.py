"""Authorization services: catalog, resolver, access gate, platform policy."""

from gdprauthz.application.services.access_gate import AccessGate
from gdprauthz.application.services.catalog import PermissionCatalog
from gdprauthz.application.services.platform_policy import PlatformPolicy
from gdprauthz.application.services.resolver import EffectivePermissionResolver

__all__ = [
    "AccessGate",
    "EffectivePermissionResolver",
    "PermissionCatalog",
    "PlatformPolicy",
]
