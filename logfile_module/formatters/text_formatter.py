"""
Default text formatter

Produces lines such as ``[10/19/26 13:50:02][ERROR] Count : 5 : items``.
"""

from datetime import datetime
from typing import Optional

from logfile_module.core.log_entry import NULL_EXCEPTION_STRING, NULL_STRING
from logfile_module.core.log_level import LogLevel
from logfile_module.formatters.base_formatter import BaseFormatter, exception_type_name


class TextFormatter(BaseFormatter):
    """
    Format entries as ``[timestamp][LEVEL] text``.

    The default timestamp uses the locale's date and time representation,
    so output is not identical across locales.
    """

    DEFAULT_TIMESTAMP_FORMAT = "%x %X"

    def __init__(self, timestamp_format: str = None):
        """
        Initialize text formatter.

        Args:
            timestamp_format: strftime format for timestamps

        Example:
            # Locale date and time
            formatter = TextFormatter()

            # ISO-like, stable across locales
            formatter = TextFormatter("%Y-%m-%d %H:%M:%S")
        """
        self.timestamp_format = timestamp_format or self.DEFAULT_TIMESTAMP_FORMAT

    def format_primary(self, level: LogLevel, text: Optional[str], timestamp: datetime) -> str:
        timestamp_str = timestamp.strftime(self.timestamp_format)
        body = NULL_STRING if text is None else text
        return f"[{timestamp_str}][{level.name.upper()}] {body}"

    def format_secondary(self, level: LogLevel, text: Optional[str], prefix: str) -> str:
        body = NULL_STRING if text is None else text
        return f"{prefix or ''}{body}"

    def format_error(self, error: Optional[BaseException], full_name: bool = False) -> str:
        if error is None:
            return NULL_EXCEPTION_STRING
        return f"{exception_type_name(error, full_name)}: {error}"

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(timestamp_format='{self.timestamp_format}')"
