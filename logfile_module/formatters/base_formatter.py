"""
Base formatter interface

A formatter renders the three kinds of text a log file writes: primary
lines, secondary (continuation) lines and single exceptions.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from logfile_module.core.log_level import LogLevel


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Each method can be overridden independently; the log file only
    orchestrates calls to them.
    """

    @abstractmethod
    def format_primary(self, level: LogLevel, text: Optional[str], timestamp: datetime) -> str:
        """
        Format the main line of a log entry.

        Args:
            level: Level of the entry
            text: Body text (None is rendered as a placeholder)
            timestamp: Time of the log call

        Returns:
            Line to write
        """
        pass

    @abstractmethod
    def format_secondary(self, level: LogLevel, text: Optional[str], prefix: str) -> str:
        """
        Format a continuation line, such as an inner exception.

        Args:
            level: Level of the entry the line belongs to
            text: Continuation text
            prefix: Configured secondary prefix

        Returns:
            Line to write
        """
        pass

    @abstractmethod
    def format_error(self, error: Optional[BaseException], full_name: bool = False) -> str:
        """
        Format a single exception, without its causes.

        Args:
            error: Exception to format (None is rendered as a placeholder)
            full_name: Use the module-qualified class name

        Returns:
            Formatted exception
        """
        pass

    def __call__(self, level: LogLevel, text: Optional[str], timestamp: datetime) -> str:
        """Allow formatters to be callable."""
        return self.format_primary(level, text, timestamp)


def exception_type_name(error: BaseException, full_name: bool = False) -> str:
    """
    Get the class name of an exception.

    Args:
        error: Exception instance
        full_name: Include the defining module, e.g. ``builtins.ValueError``

    Returns:
        Short or qualified class name
    """
    error_type = type(error)
    if full_name:
        return f"{error_type.__module__}.{error_type.__qualname__}"
    return error_type.__name__
