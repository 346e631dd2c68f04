"""Unit tests for permission id canonicalization."""

import pytest

from gdprauthz.domain.exceptions import ValidationError
from gdprauthz.domain.value_objects import PermissionId, canonical_permission_id


@pytest.mark.parametrize(
    "value, action",
    [
        ("records.write", None),
        ("records", "write"),
        ("write:records", None),
        ("  Records.WRITE ", None),
        (PermissionId("records", "write"), None),
    ],
)
def test_equivalent_forms_canonicalize_to_dotted(value, action) -> None:
    assert canonical_permission_id(value, action) == "records.write"


def test_legacy_colon_form_is_action_first() -> None:
    assert canonical_permission_id("view:logs") == "logs.view"
    assert canonical_permission_id("manage:privacy-policy") == "privacy-policy.manage"


def test_parse_keeps_parts() -> None:
    pid = PermissionId.parse("breach-analysis.read")
    assert pid.resource == "breach-analysis"
    assert pid.action == "read"
    assert str(pid) == "breach-analysis.read"


@pytest.mark.parametrize(
    "value, action",
    [
        ("", None),
        ("   ", None),
        ("records", None),
        ("records.", None),
        (".write", None),
        ("records.write", "read"),
        ("records", ""),
        ("rec ords.write", None),
        (None, None),
        (42, None),
    ],
)
def test_malformed_input_raises_validation_error(value, action) -> None:
    with pytest.raises(ValidationError):
        canonical_permission_id(value, action)


def test_full_id_with_separate_action_is_rejected() -> None:
    with pytest.raises(ValidationError):
        PermissionId.parse(PermissionId("records", "write"), "read")
