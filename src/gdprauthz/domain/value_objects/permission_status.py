"""Status of a (subject, permission) pair as shown to administrators."""

from enum import StrEnum


class PermissionStatus(StrEnum):
    """Explicit override state, or what the role default gives when there is none."""

    GRANTED = "granted"
    REVOKED = "revoked"
    INHERITED = "inherited"
    NONE = "none"

    @property
    def is_explicit(self) -> bool:
        return self in (PermissionStatus.GRANTED, PermissionStatus.REVOKED)

    @classmethod
    def of(cls, override_granted: bool | None, default_granted: bool) -> "PermissionStatus":
        if override_granted is not None:
            return cls.GRANTED if override_granted else cls.REVOKED
        return cls.INHERITED if default_granted else cls.NONE
