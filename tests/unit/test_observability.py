"""Tests for logging formatters and tool-call metrics."""

import json
import logging
import sys

from prometheus_client import REGISTRY, generate_latest

from shopify_mcp.observability.logging import (
    HumanReadableFormatter,
    StructuredFormatter,
    clear_log_context,
    configure_logging,
    set_log_context,
)
from shopify_mcp.observability.metrics import record_tool_call


def _record(message="Tool call: get-products"):
    return logging.LogRecord(
        name="shopify_mcp.mcp.server",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestFormatters:

    def teardown_method(self):
        clear_log_context()

    def test_structured_includes_context(self):
        set_log_context(tool_name="get-products", request_id="abc123")

        entry = json.loads(StructuredFormatter().format(_record()))

        assert entry["level"] == "INFO"
        assert entry["message"] == "Tool call: get-products"
        assert entry["tool_name"] == "get-products"
        assert entry["request_id"] == "abc123"

    def test_structured_without_context(self):
        entry = json.loads(StructuredFormatter().format(_record()))

        assert "tool_name" not in entry
        assert "request_id" not in entry

    def test_human_readable_context_suffix(self):
        set_log_context(tool_name="get-blogs")

        line = HumanReadableFormatter().format(_record("hello"))

        assert "hello" in line
        assert line.endswith("[tool=get-blogs]")

    def test_clear_log_context(self):
        set_log_context(tool_name="get-blogs", request_id="r1")
        clear_log_context()

        line = HumanReadableFormatter().format(_record("hello"))

        assert "[" not in line.split("hello", 1)[1]


class TestConfigureLogging:

    def teardown_method(self):
        root = logging.getLogger()
        root.handlers.clear()
        root.setLevel(logging.WARNING)

    def test_logs_go_to_stderr(self):
        configure_logging(environment="production", log_level="warning")

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)

    def test_development_is_human_readable(self):
        configure_logging(environment="development")

        assert isinstance(logging.getLogger().handlers[0].formatter, HumanReadableFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING


class TestMetrics:

    def test_record_tool_call(self):
        labels = {"tool_name": "update-blog", "status": "remote_user_error"}
        before = REGISTRY.get_sample_value("shopify_tool_calls_total", labels) or 0

        record_tool_call(tool_name="update-blog", status="remote_user_error", duration=0.25)

        assert REGISTRY.get_sample_value("shopify_tool_calls_total", labels) == before + 1
        assert REGISTRY.get_sample_value("shopify_tool_call_duration_seconds_count", labels) >= 1
        assert b"shopify_tool_call_duration_seconds" in generate_latest()
