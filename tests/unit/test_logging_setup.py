"""Unit tests for logging configuration."""

import json
import logging

import pytest

from gdprauthz.config import Settings
from gdprauthz.logging_setup import HANDLER_NAME, JsonFormatter, setup_logging


def _service_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.makeLogRecord(
        {"name": "gdprauthz.test", "levelname": "INFO", "msg": "granted %s", "args": ("x.y",)}
    )
    record.audit = {"type": "permission_granted"}
    data = json.loads(JsonFormatter().format(record))
    assert data["message"] == "granted x.y"
    assert data["logger"] == "gdprauthz.test"
    assert data["audit"] == {"type": "permission_granted"}


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    for handler in _service_handlers():
        root.removeHandler(handler)
    root.setLevel(level)


def test_setup_logging_installs_one_handler(restore_root_logger) -> None:
    setup_logging(Settings(log_level="warning", log_json=False))
    setup_logging(Settings(log_level="warning", log_json=False))
    assert len(_service_handlers()) == 1
    assert logging.getLogger().level == logging.WARNING


def test_debug_forces_debug_level(restore_root_logger) -> None:
    setup_logging(Settings(log_level="INFO", debug=True))
    assert logging.getLogger().level == logging.DEBUG
    assert isinstance(_service_handlers()[0].formatter, JsonFormatter)
