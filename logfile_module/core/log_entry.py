"""
Log entry data structures

LogItem is the tagged union of values that may appear in a log call;
LogEntry is one logical record, built and consumed within a single call.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from numbers import Number
from typing import Any, List, Optional

from logfile_module.core.log_level import LogLevel

NULL_STRING = "(null)"
NULL_EXCEPTION_STRING = "(null exception)"


class ItemKind(Enum):
    """Kinds of values accepted by the log methods."""

    TEXT = "text"
    NUMBER = "number"
    ERROR = "error"
    NULL = "null"


@dataclass(frozen=True)
class LogItem:
    """A single value passed to a log method, tagged with its kind."""

    kind: ItemKind
    value: Any = None

    @classmethod
    def of(cls, value: Any) -> "LogItem":
        """
        Classify an arbitrary value.

        Args:
            value: Value passed by the caller (may already be a LogItem)

        Returns:
            LogItem wrapping the value
        """
        if isinstance(value, LogItem):
            return value
        if value is None:
            return cls(ItemKind.NULL)
        if isinstance(value, BaseException):
            return cls(ItemKind.ERROR, value)
        if isinstance(value, Number) and not isinstance(value, bool):
            return cls(ItemKind.NUMBER, value)
        return cls(ItemKind.TEXT, value)

    @property
    def is_error(self) -> bool:
        return self.kind is ItemKind.ERROR

    def __str__(self) -> str:
        """Natural text rendering (errors use str(), not the error format)."""
        if self.kind is ItemKind.NULL:
            return NULL_STRING
        return str(self.value)


@dataclass
class LogEntry:
    """
    One logical log record.

    The body and first_error are derived from the items by the joiner;
    the entry is never persisted as an object.
    """

    level: LogLevel
    items: List[LogItem] = field(default_factory=list)
    body: str = ""
    first_error: Optional[BaseException] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        self.items = [LogItem.of(item) for item in self.items]

    @property
    def has_error(self) -> bool:
        return self.first_error is not None
