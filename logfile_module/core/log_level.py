"""
Log level enumeration

Levels are ordered from most permissive (ALL) to most restrictive (NONE).
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Used both as the level of an entry and as the threshold of a log file.
    An entry is written when its level is at or above the threshold,
    except that a NONE threshold blocks everything.
    """

    ALL = -1        # Threshold only: write every entry
    INFO = 0        # Informational messages
    WARNING = 1     # Warning messages
    ERROR = 2       # Error messages
    CRITICAL = 3    # Critical errors
    NONE = 100      # Threshold only: logging disabled

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        key = level_str.strip().upper()
        key = LEVEL_ALIASES.get(key, key)
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Invalid log level: {level_str}")

    def admits(self, level: "LogLevel") -> bool:
        """Check whether an entry at ``level`` passes this threshold."""
        return admits(level, self)


def admits(level: LogLevel, threshold: LogLevel) -> bool:
    """
    Decide whether an entry at ``level`` is written under ``threshold``.

    Args:
        level: Level of the entry being logged
        threshold: Configured threshold

    Returns:
        True if the entry should be written
    """
    if threshold == LogLevel.NONE:
        return False
    return level >= threshold


LEVEL_ALIASES: Dict[str, str] = {
    "WARN": "WARNING",
    "CRIT": "CRITICAL",
    "OFF": "NONE",
}
