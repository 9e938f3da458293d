"""Tests for item joining and cause traversal"""

import pytest

from logfile_module.core.item_joiner import iter_causes, join_items
from logfile_module.core.log_entry import LogItem


def format_error(error):
    return f"{type(error).__name__}: {error}"


class TestJoinItems:
    """Test joining items into a body."""

    def test_empty(self):
        assert join_items([], " : ", format_error) == ("", None)

    def test_single(self):
        assert join_items(["only"], " : ", format_error) == ("only", None)

    def test_pair(self):
        assert join_items(["a", 1], " : ", format_error) == ("a : 1", None)

    def test_null_items(self):
        body, error = join_items([None, None], "|", format_error)
        assert body == "(null)|(null)"
        assert error is None

    def test_first_error_captured(self):
        first = ValueError("first")
        second = KeyError("second")
        body, error = join_items(["x", first, second], " : ", format_error)

        assert body == "x : ValueError: first : KeyError: 'second'"
        assert error is first

    def test_leading_empty_string_skips_delimiter(self):
        body, _ = join_items(["", "a", "b"], ", ", format_error)
        assert body == "a, b"

    def test_none_delimiter(self):
        body, _ = join_items(["a", "b"], None, format_error)
        assert body == "ab"

    def test_accepts_log_items(self):
        body, _ = join_items([LogItem.of(2), LogItem.of(None)], "/", format_error)
        assert body == "2/(null)"

    def test_renders_like_log_item(self):
        values = [None, 7, "text", 1.5]
        body, _ = join_items(values, "|", format_error)
        assert body == "|".join(str(LogItem.of(value)) for value in values)

    @pytest.mark.parametrize("value, text", [(3.25, "3.25"), (True, "True"), ([1, 2], "[1, 2]")])
    def test_natural_text(self, value, text):
        assert join_items([value], " : ", format_error)[0] == text


class TestIterCauses:
    """Test walking exception causes."""

    def test_no_cause(self):
        assert list(iter_causes(ValueError("x"))) == []

    def test_explicit_chain(self):
        root = OSError("root")
        mid = RuntimeError("mid")
        top = ValueError("top")
        mid.__cause__ = root
        top.__cause__ = mid

        assert list(iter_causes(top)) == [mid, root]

    def test_cause_preferred_over_context(self):
        top = ValueError("top")
        top.__context__ = KeyError("context")
        top.__cause__ = OSError("cause")

        assert [type(e) for e in iter_causes(top)] == [OSError]

    def test_self_cycle(self):
        error = ValueError("loop")
        error.__cause__ = error
        assert list(iter_causes(error)) == []
