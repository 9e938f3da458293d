"""
Compact formatter for minimal log output

Produces concise lines with a short time and abbreviated level
"""

from datetime import datetime
from typing import Optional

from logfile_module.core.log_entry import NULL_STRING
from logfile_module.core.log_level import LogLevel
from logfile_module.formatters.text_formatter import TextFormatter

LEVEL_ABBREVIATIONS = {
    LogLevel.ALL: "ALL",
    LogLevel.INFO: "INF",
    LogLevel.WARNING: "WRN",
    LogLevel.ERROR: "ERR",
    LogLevel.CRITICAL: "CRT",
}


class CompactFormatter(TextFormatter):
    """
    Format log entries in a compact single-line format.

    Secondary lines and exceptions are rendered as by TextFormatter.
    """

    def __init__(self, include_timestamp: bool = True):
        """
        Initialize compact formatter.

        Args:
            include_timestamp: Include an HH:MM:SS timestamp

        Example:
            # "12:34:56 ERR: message"
            formatter = CompactFormatter()

            # "ERR: message"
            formatter = CompactFormatter(include_timestamp=False)
        """
        super().__init__("%H:%M:%S")
        self.include_timestamp = include_timestamp

    def format_primary(self, level: LogLevel, text: Optional[str], timestamp: datetime) -> str:
        parts = []

        if self.include_timestamp:
            parts.append(timestamp.strftime(self.timestamp_format))

        level_abbrev = LEVEL_ABBREVIATIONS.get(level, level.name[:3])
        parts.append(f"{level_abbrev}:")

        parts.append(NULL_STRING if text is None else text)

        return " ".join(parts)

    def __repr__(self) -> str:
        """String representation."""
        return f"CompactFormatter(timestamp={self.include_timestamp})"
