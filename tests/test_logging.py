"""Tests for logging configuration."""

import json
import logging
from unittest.mock import MagicMock, patch

from recast.logging import JsonFormatter, setup_logging


def test_json_formatter_emits_one_object_per_record():
    """Test that records are rendered as JSON objects."""
    record = logging.LogRecord(
        "recast.rss.handler", logging.WARNING, __file__, 1, "failed: %s", ("x",), None
    )

    data = json.loads(JsonFormatter().format(record))

    assert data["level"] == "WARNING"
    assert data["msg"] == "failed: x"
    assert data["logger"] == "recast.rss.handler"


def test_json_formatter_includes_request_context():
    """Test that context passed through ``extra`` becomes JSON keys."""
    record = logging.LogRecord(
        "recast.rss.handler", logging.INFO, __file__, 1, "postdated", (), None
    )
    record.feed_url = "https://example.com/rss.xml"
    record.items_in = 5
    record.items_out = 2

    data = json.loads(JsonFormatter().format(record))

    assert data["feed_url"] == "https://example.com/rss.xml"
    assert data["items_in"] == 5
    assert data["items_out"] == 2
    assert "delay_hours" not in data
    assert data["ts"].endswith("+00:00")


def test_setup_logging_uses_json_in_prod():
    """Test that production logging uses the JSON formatter."""
    settings = MagicMock(env="prod", log_level="WARNING")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level

    try:
        with patch("recast.logging.get_settings", return_value=settings):
            setup_logging()

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert root.level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_uses_plain_format_in_dev():
    """Test that development logging is human readable."""
    settings = MagicMock(env="dev", log_level="INFO")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level

    try:
        with patch("recast.logging.get_settings", return_value=settings):
            setup_logging()

        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
        assert root.level == logging.INFO
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
