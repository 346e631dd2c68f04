"""Tenant and platform role tiers."""

from enum import StrEnum

from gdprauthz.domain.exceptions import ValidationError


class Role(StrEnum):
    """Role of a subject inside a tenant, ordered by rank.

    ``OWNER`` is the tier that carries the wildcard grant.
    """

    COLLABORATOR = "collaborator"
    ADMIN = "admin"
    OWNER = "owner"

    @property
    def rank(self) -> int:
        return list(Role).index(self)

    @classmethod
    def parse(cls, value: str) -> "Role":
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError):
            raise ValidationError(f"Unknown role: {value!r}") from None


class AccountRole(StrEnum):
    """Platform-wide account role, independent of any tenant."""

    USER = "user"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"

    @property
    def rank(self) -> int:
        return list(AccountRole).index(self)

    @classmethod
    def from_realm_roles(cls, realm_roles: list[str]) -> "AccountRole":
        """Highest account role present in the identity provider's realm roles."""
        granted = {r.lower() for r in realm_roles}
        for role in sorted(cls, key=lambda r: r.rank, reverse=True):
            if role.value in granted:
                return role
        return cls.USER
