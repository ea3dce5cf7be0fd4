"""
tests.test_logging

Structured JSON log output.
"""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from parcel_tracker.observability.logging import (
    configure_from_settings,
    configure_logging,
    get_logger,
)
from parcel_tracker.settings import Settings


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_json_log_line_carries_service(caplog, reset_structlog) -> None:
    configure_logging(service_name="parcel-tracker-test", level="INFO")
    caplog.set_level(logging.INFO)

    get_logger("tests.logging").info("parcel_registered", number=7)

    line = json.loads(caplog.records[-1].getMessage())
    assert line["event"] == "parcel_registered"
    assert line["number"] == 7
    assert line["service"] == "parcel-tracker-test"
    assert line["level"] == "info"
    assert line["logger"] == "tests.logging"
    assert "timestamp" in line


def test_dev_settings_render_console_lines(caplog, reset_structlog) -> None:
    configure_from_settings(Settings(env="dev", service_name="parcel-tracker-dev"))
    caplog.set_level(logging.INFO)

    get_logger("tests.logging.dev").info("parcel_registered", number=8)

    message = caplog.records[-1].getMessage()
    assert "parcel_registered" in message
    assert "number=8" in message
    assert not message.startswith("{")
