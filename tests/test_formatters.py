"""Tests for log formatters"""

from datetime import datetime

import pytest

from logfile_module import LogLevel
from logfile_module.formatters import (
    BaseFormatter,
    CallbackFormatter,
    CompactFormatter,
    TextFormatter,
)
from logfile_module.formatters.base_formatter import exception_type_name

TIMESTAMP = datetime(2024, 1, 2, 3, 4, 5)


class CustomError(Exception):
    pass


class TestTextFormatter:
    """Test default text formatter."""

    def setup_method(self):
        self.formatter = TextFormatter("%Y-%m-%d %H:%M:%S")

    def test_primary(self):
        line = self.formatter.format_primary(LogLevel.ERROR, "Count : 5", TIMESTAMP)
        assert line == "[2024-01-02 03:04:05][ERROR] Count : 5"

    def test_primary_null_text(self):
        line = self.formatter.format_primary(LogLevel.INFO, None, TIMESTAMP)
        assert line == "[2024-01-02 03:04:05][INFO] (null)"

    def test_callable(self):
        assert self.formatter(LogLevel.WARNING, "w", TIMESTAMP) == "[2024-01-02 03:04:05][WARNING] w"

    def test_default_timestamp_format(self):
        formatter = TextFormatter()
        expected = TIMESTAMP.strftime("%x %X")
        assert formatter.format_primary(LogLevel.INFO, "x", TIMESTAMP) == f"[{expected}][INFO] x"

    def test_secondary(self):
        assert self.formatter.format_secondary(LogLevel.ERROR, "text", " : ") == " : text"
        assert self.formatter.format_secondary(LogLevel.ERROR, "text", "") == "text"

    def test_error_short_name(self):
        assert self.formatter.format_error(CustomError("bad")) == "CustomError: bad"

    def test_error_full_name(self):
        text = self.formatter.format_error(CustomError("bad"), full_name=True)
        assert text == f"{CustomError.__module__}.CustomError: bad"
        assert self.formatter.format_error(ValueError("v"), True) == "builtins.ValueError: v"

    def test_null_error(self):
        assert self.formatter.format_error(None) == "(null exception)"
        assert self.formatter.format_error(None) != "(null)"

    def test_nested_class_name(self):
        class Inner(Exception):
            pass

        assert exception_type_name(Inner()) == "Inner"
        assert exception_type_name(Inner(), True).endswith(".test_nested_class_name.<locals>.Inner")


class TestCompactFormatter:
    """Test compact formatter."""

    def test_compact(self):
        formatter = CompactFormatter()
        assert formatter.format_primary(LogLevel.ERROR, "msg", TIMESTAMP) == "03:04:05 ERR: msg"

    def test_without_timestamp(self):
        formatter = CompactFormatter(include_timestamp=False)
        assert formatter.format_primary(LogLevel.WARNING, "msg", TIMESTAMP) == "WRN: msg"
        assert formatter.format_primary(LogLevel.CRITICAL, None, TIMESTAMP) == "CRT: (null)"

    def test_inherits_error_format(self):
        assert CompactFormatter().format_error(CustomError("x")) == "CustomError: x"


class TestCallbackFormatter:
    """Test callback formatter."""

    def test_single_slot(self):
        formatter = CallbackFormatter(error=lambda e, full: f"<{type(e).__name__}>")
        assert formatter.format_error(CustomError("x")) == "<CustomError>"
        assert formatter.format_secondary(LogLevel.INFO, "t", "> ") == "> t"

    def test_all_slots(self):
        formatter = CallbackFormatter(
            primary=lambda level, text, ts: f"{level.name}:{text}",
            secondary=lambda level, text, prefix: f"{prefix}{prefix}{text}",
            error=lambda e, full: "E",
        )
        assert formatter.format_primary(LogLevel.INFO, "x", TIMESTAMP) == "INFO:x"
        assert formatter.format_secondary(LogLevel.INFO, "x", "-") == "--x"
        assert formatter.format_error(None) == "E"

    def test_custom_fallback(self):
        formatter = CallbackFormatter(fallback=CompactFormatter(include_timestamp=False))
        assert formatter.format_primary(LogLevel.INFO, "x", TIMESTAMP) == "INF: x"

    def test_not_callable(self):
        with pytest.raises(TypeError):
            CallbackFormatter(primary="not callable")

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            BaseFormatter()
