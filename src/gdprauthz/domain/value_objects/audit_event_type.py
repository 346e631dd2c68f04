"""Audit event kinds emitted by administration commands."""

from enum import StrEnum


class AuditEventType(StrEnum):
    PERMISSION_GRANTED = "permission_granted"
    PERMISSION_REVOKED = "permission_revoked"
    PERMISSION_OVERRIDE_CLEARED = "permission_override_cleared"
    ROLE_PERMISSION_CHANGED = "role_permission_changed"
