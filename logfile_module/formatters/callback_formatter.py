"""
Callback-based formatter

Replaces individual formatting slots with plain functions
"""

from datetime import datetime
from typing import Callable, Optional

from logfile_module.core.log_level import LogLevel
from logfile_module.formatters.base_formatter import BaseFormatter
from logfile_module.formatters.text_formatter import TextFormatter

PrimaryCallback = Callable[[LogLevel, Optional[str], datetime], str]
SecondaryCallback = Callable[[LogLevel, Optional[str], str], str]
ErrorCallback = Callable[[Optional[BaseException], bool], str]


class CallbackFormatter(BaseFormatter):
    """
    Formatter built from callables.

    Any slot left unset is delegated to a fallback formatter, so a single
    slot can be customized without subclassing.
    """

    def __init__(
        self,
        primary: Optional[PrimaryCallback] = None,
        secondary: Optional[SecondaryCallback] = None,
        error: Optional[ErrorCallback] = None,
        fallback: Optional[BaseFormatter] = None,
    ):
        """
        Initialize callback formatter.

        Args:
            primary: Replaces format_primary(level, text, timestamp)
            secondary: Replaces format_secondary(level, text, prefix)
            error: Replaces format_error(error, full_name)
            fallback: Formatter used for unset slots (default: TextFormatter)

        Example:
            # Only change how exceptions look
            formatter = CallbackFormatter(
                error=lambda e, full: f"<{type(e).__name__}> {e}"
            )
        """
        for name, callback in (("primary", primary), ("secondary", secondary), ("error", error)):
            if callback is not None and not callable(callback):
                raise TypeError(f"{name} must be callable")

        self.primary = primary
        self.secondary = secondary
        self.error = error
        self.fallback = fallback or TextFormatter()

    def format_primary(self, level: LogLevel, text: Optional[str], timestamp: datetime) -> str:
        if self.primary is None:
            return self.fallback.format_primary(level, text, timestamp)
        return self.primary(level, text, timestamp)

    def format_secondary(self, level: LogLevel, text: Optional[str], prefix: str) -> str:
        if self.secondary is None:
            return self.fallback.format_secondary(level, text, prefix)
        return self.secondary(level, text, prefix)

    def format_error(self, error: Optional[BaseException], full_name: bool = False) -> str:
        if self.error is None:
            return self.fallback.format_error(error, full_name)
        return self.error(error, full_name)

    def __repr__(self) -> str:
        """String representation."""
        slots = [name for name in ("primary", "secondary", "error") if getattr(self, name)]
        return f"CallbackFormatter(slots={slots}, fallback={self.fallback!r})"
