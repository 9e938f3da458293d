"""
Main LogFile class - synchronous leveled log file

Each call formats its lines and appends them to the destination before
returning; no handle is kept open between calls.
"""

from __future__ import annotations

import contextlib
from pathlib import Path
from typing import Any, Optional, Union

from logfile_module.core.events import EventHook, LineLoggedEvent
from logfile_module.core.item_joiner import iter_causes, join_items
from logfile_module.core.log_entry import LogEntry, NULL_STRING
from logfile_module.core.log_level import LogLevel, admits
from logfile_module.core.logfile_config import DIVIDER_WIDTH, LogFileConfig
from logfile_module.formatters.base_formatter import BaseFormatter
from logfile_module.formatters.text_formatter import TextFormatter
from logfile_module.writers.base_writer import BaseWriter
from logfile_module.writers.file_writer import FileWriter

INNER_EXCEPTION_TAG = "[INNER EXCEPTION]"


class LogFile:
    """
    Leveled log file.

    Configuration, formatter and writer may all be replaced between calls.

    Example:
        log = LogFile.open("app.log", log_inner_exceptions=True)
        log.info("Started", "version", 2)
        try:
            load()
        except OSError as e:
            log.error("Load failed", e)
        log.divider()
    """

    def __init__(
        self,
        config: Optional[LogFileConfig] = None,
        formatter: Optional[BaseFormatter] = None,
        writer: Optional[BaseWriter] = None,
        lock=None,
    ):
        """
        Initialize log file.

        Args:
            config: Log file configuration (default: LogFileConfig.default())
            formatter: Line formatter (default: TextFormatter)
            writer: Line writer (default: FileWriter)
            lock: Lock held for the whole of each call, so an entry and its
                  inner exception lines are never split by another thread
                  (e.g. threading.RLock; default: no locking)
        """
        self.config = config or LogFileConfig.default()
        self.formatter = formatter or TextFormatter()
        self.writer = writer or FileWriter()
        self.line_logged = EventHook()
        self._lock = lock
        self._metrics = {"logged": 0, "filtered": 0, "lines": 0}

    @classmethod
    def open(
        cls,
        filename: Optional[Union[str, Path]],
        level: LogLevel = LogLevel.ALL,
        log_inner_exceptions: bool = False,
    ) -> "LogFile":
        """
        Create a log file writing to ``filename``.

        Args:
            filename: Log file path (None disables logging)
            level: Only entries at this level or higher are written
            log_inner_exceptions: Also log the causes of logged exceptions

        Returns:
            New LogFile instance
        """
        return cls(LogFileConfig(
            filename=filename,
            level=level,
            log_inner_exceptions=log_inner_exceptions,
        ))

    @property
    def filename(self) -> Optional[Union[str, Path]]:
        return self.config.filename

    @filename.setter
    def filename(self, value: Optional[Union[str, Path]]) -> None:
        self.config.filename = value

    @property
    def level(self) -> LogLevel:
        return self.config.level

    @level.setter
    def level(self, value: LogLevel) -> None:
        if isinstance(value, str):
            value = LogLevel.from_string(value)
        elif not isinstance(value, LogLevel):
            raise TypeError("level must be LogLevel enum")
        self.config.level = value

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check if an entry at ``level`` would be written."""
        return admits(level, self.config.level)

    def log(self, level: LogLevel, *items: Any) -> None:
        """
        Log an entry made of any number of items.

        Items are joined with the configured delimiter. When inner exception
        logging is on, the causes of the first exception among the items
        are written as secondary lines, nearest cause first.

        Args:
            level: Entry level
            *items: Strings, numbers, exceptions or None
        """
        with self._locked():
            if not self._admit(level):
                return

            config = self.config
            entry = LogEntry(level=level, items=list(items))
            entry.body, entry.first_error = join_items(
                entry.items, config.item_delimiter, self._format_error
            )

            self._write(self.formatter.format_primary(level, entry.body, entry.timestamp))

            if config.log_inner_exceptions and entry.has_error:
                for cause in iter_causes(entry.first_error):
                    text = f"{INNER_EXCEPTION_TAG} {self._format_error(cause)}"
                    self._write(self.formatter.format_secondary(level, text, config.secondary_prefix))

    def log_format(self, level: LogLevel, template: str, *args: Any, **kwargs: Any) -> None:
        """
        Log an entry built with ``str.format``.

        Args:
            level: Entry level
            template: Format string with ``{}`` placeholders
            *args: Positional format arguments
            **kwargs: Keyword format arguments

        Raises:
            IndexError, KeyError, ValueError: If template and arguments don't match
        """
        with self._locked():
            if not self._admit(level):
                return

            entry = LogEntry(level=level, body=template.format(*args, **kwargs))
            self._write(self.formatter.format_primary(level, entry.body, entry.timestamp))

    def info(self, *items: Any) -> None:
        """Log info entry."""
        self.log(LogLevel.INFO, *items)

    def info_format(self, template: str, *args: Any, **kwargs: Any) -> None:
        """Log formatted info entry."""
        self.log_format(LogLevel.INFO, template, *args, **kwargs)

    def warning(self, *items: Any) -> None:
        """Log warning entry."""
        self.log(LogLevel.WARNING, *items)

    def warning_format(self, template: str, *args: Any, **kwargs: Any) -> None:
        """Log formatted warning entry."""
        self.log_format(LogLevel.WARNING, template, *args, **kwargs)

    def error(self, *items: Any) -> None:
        """Log error entry."""
        self.log(LogLevel.ERROR, *items)

    def error_format(self, template: str, *args: Any, **kwargs: Any) -> None:
        """Log formatted error entry."""
        self.log_format(LogLevel.ERROR, template, *args, **kwargs)

    def critical(self, *items: Any) -> None:
        """Log critical entry."""
        self.log(LogLevel.CRITICAL, *items)

    def critical_format(self, template: str, *args: Any, **kwargs: Any) -> None:
        """Log formatted critical entry."""
        self.log_format(LogLevel.CRITICAL, template, *args, **kwargs)

    def divider(self, char: Optional[str] = None) -> None:
        """
        Write a horizontal divider line.

        Dividers ignore the entry level; they are written unless logging is
        disabled with a NONE threshold or dividers are turned off.

        Args:
            char: Character to draw with (default: config.divider_char)

        Raises:
            ValueError: If char is not a single character
        """
        if char is None:
            char = self.config.divider_char
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("divider char must be a single character")

        with self._locked():
            if self.config.level != LogLevel.NONE and self.config.dividers_enabled:
                self._write(char * DIVIDER_WIDTH)

    def delete(self) -> None:
        """Delete the log file. Never raises."""
        with self._locked():
            self.writer.delete(self.config.filename)

    def get_metrics(self) -> dict:
        """
        Get logging metrics.

        Returns:
            Dictionary with ``logged`` (entries admitted), ``filtered``
            (entries below the threshold) and ``lines`` (lines the writer
            reported as written)
        """
        return self._metrics.copy()

    def _admit(self, level: LogLevel) -> bool:
        if admits(level, self.config.level):
            self._metrics["logged"] += 1
            return True
        self._metrics["filtered"] += 1
        return False

    def _locked(self):
        if self._lock is None:
            return contextlib.nullcontext()
        return self._lock

    def _format_error(self, error: Optional[BaseException]) -> str:
        return self.formatter.format_error(error, self.config.show_full_exception_class_name)

    def _write(self, text: str) -> None:
        """Write one line, then notify observers even if the write failed."""
        if text is None:
            text = NULL_STRING
        try:
            if self.writer.write(self.config.filename, text):
                self._metrics["lines"] += 1
        finally:
            self.line_logged.fire(LineLoggedEvent(text))

    def __repr__(self) -> str:
        """String representation."""
        return f"LogFile(filename={self.config.filename!r}, level={self.config.level.name})"
