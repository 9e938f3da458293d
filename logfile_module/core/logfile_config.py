"""
Log file configuration management

Fields may be changed at any time; the log file reads them on every call.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from logfile_module.core.log_level import LogLevel

DEFAULT_ITEM_DELIMITER = " : "
DEFAULT_SECONDARY_PREFIX = " : "
DEFAULT_DIVIDER_CHAR = "-"
DIVIDER_WIDTH = 79


@dataclass
class LogFileConfig:
    """
    Log file configuration.

    Setting ``filename`` to None or an empty string disables logging.
    """

    # Destination
    filename: Optional[Union[str, Path]] = None

    # Filtering
    level: LogLevel = LogLevel.ALL

    # Exception settings
    log_inner_exceptions: bool = False
    show_full_exception_class_name: bool = False

    # Format settings
    item_delimiter: str = DEFAULT_ITEM_DELIMITER
    secondary_prefix: str = DEFAULT_SECONDARY_PREFIX

    # Divider settings
    dividers_enabled: bool = True
    divider_char: str = DEFAULT_DIVIDER_CHAR

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.level, str):
            self.level = LogLevel.from_string(self.level)
        elif not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")

        if not isinstance(self.divider_char, str) or len(self.divider_char) != 1:
            raise ValueError("divider_char must be a single character")

        if self.item_delimiter is None:
            self.item_delimiter = ""
        if self.secondary_prefix is None:
            self.secondary_prefix = ""

    @classmethod
    def default(cls, filename: Optional[Union[str, Path]] = None) -> "LogFileConfig":
        """Create default configuration."""
        return cls(filename=filename)

    @classmethod
    def debug_config(cls, filename: Optional[Union[str, Path]] = None) -> "LogFileConfig":
        """Create configuration for debugging."""
        return cls(
            filename=filename,
            level=LogLevel.ALL,
            log_inner_exceptions=True,
            show_full_exception_class_name=True,
        )

    @classmethod
    def production_config(cls, filename: Optional[Union[str, Path]] = None) -> "LogFileConfig":
        """Create configuration for production."""
        return cls(
            filename=filename,
            level=LogLevel.WARNING,
            log_inner_exceptions=True,
            dividers_enabled=False,
        )

    @classmethod
    def disabled(cls) -> "LogFileConfig":
        """Create configuration that writes nothing."""
        return cls(level=LogLevel.NONE)
