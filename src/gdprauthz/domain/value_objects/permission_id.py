"""Canonical permission identifier."""

import re
from dataclasses import dataclass

from gdprauthz.domain.exceptions import ValidationError

_TOKEN = re.compile(r"^[a-z0-9][a-z0-9_-]*$")


@dataclass(frozen=True)
class PermissionId:
    """Permission token ``resource.action``.

    Accepted inputs, all equivalent:

    - ``PermissionId.parse("records.write")``
    - ``PermissionId.parse("records", "write")``
    - ``PermissionId.parse("write:records")`` (legacy ``action:resource`` form)
    """

    resource: str
    action: str

    def __post_init__(self) -> None:
        for part in (self.resource, self.action):
            if not _TOKEN.match(part):
                raise ValidationError(f"Invalid permission token: {part!r}")

    def __str__(self) -> str:
        return f"{self.resource}.{self.action}"

    @classmethod
    def parse(cls, value: "str | PermissionId", action: str | None = None) -> "PermissionId":
        if isinstance(value, PermissionId):
            if action is not None:
                raise ValidationError("Action given alongside a full permission id")
            return value
        if not isinstance(value, str) or not value.strip():
            raise ValidationError("Permission id must be a non-empty string")

        text = value.strip().lower()
        if action is not None:
            if not isinstance(action, str) or not action.strip():
                raise ValidationError("Action must be a non-empty string")
            if "." in text or ":" in text:
                raise ValidationError(f"Module {value!r} already carries an action")
            return cls(resource=text, action=action.strip().lower())

        if "." in text:
            resource, _, act = text.partition(".")
            return cls(resource=resource, action=act)
        if ":" in text:
            act, _, resource = text.partition(":")
            return cls(resource=resource, action=act)
        raise ValidationError(f"Permission id {value!r} has no action")


def canonical_permission_id(value: "str | PermissionId", action: str | None = None) -> str:
    """Return the dotted string form of a permission reference."""
    return str(PermissionId.parse(value, action))
