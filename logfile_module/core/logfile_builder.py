"""LogFile builder pattern"""

import threading
from pathlib import Path
from typing import List, Optional, Union

from logfile_module.core.events import LineLoggedCallback
from logfile_module.core.logfile import LogFile
from logfile_module.core.logfile_config import LogFileConfig
from logfile_module.core.log_level import LogLevel
from logfile_module.formatters.base_formatter import BaseFormatter
from logfile_module.writers.base_writer import BaseWriter
from logfile_module.writers.console_writer import ConsoleWriter
from logfile_module.writers.file_writer import FileWriter
from logfile_module.writers.locked_writer import LockedWriter


class LogFileBuilder:
    """Builder pattern for log file construction."""

    def __init__(self):
        self._config = LogFileConfig()
        self._formatter: Optional[BaseFormatter] = None
        self._writer: Optional[BaseWriter] = None
        self._encoding = "utf-8"
        self._create_dirs = False
        self._console_stream = None
        self._console_enabled = False
        self._thread_safe = False
        self._callbacks: List[LineLoggedCallback] = []

    def with_file(self, filepath: Union[str, Path], create_dirs: bool = False) -> "LogFileBuilder":
        """Set the log file path."""
        self._config.filename = filepath
        self._create_dirs = create_dirs
        return self

    def with_level(self, level: LogLevel) -> "LogFileBuilder":
        """Set the level threshold."""
        if isinstance(level, str):
            level = LogLevel.from_string(level)
        self._config.level = level
        return self

    def with_inner_exceptions(self, enabled: bool = True) -> "LogFileBuilder":
        """Enable/disable logging of exception causes."""
        self._config.log_inner_exceptions = enabled
        return self

    def with_full_exception_names(self, enabled: bool = True) -> "LogFileBuilder":
        """Show module-qualified exception class names."""
        self._config.show_full_exception_class_name = enabled
        return self

    def with_dividers(self, enabled: bool = True, char: Optional[str] = None) -> "LogFileBuilder":
        """
        Enable/disable divider lines.

        Raises:
            ValueError: If char is not a single character
        """
        self._config.dividers_enabled = enabled
        if char is not None:
            if len(char) != 1:
                raise ValueError("divider_char must be a single character")
            self._config.divider_char = char
        return self

    def with_delimiter(self, delimiter: str) -> "LogFileBuilder":
        """Set the delimiter placed between items."""
        self._config.item_delimiter = delimiter or ""
        return self

    def with_secondary_prefix(self, prefix: str) -> "LogFileBuilder":
        """Set the prefix of secondary lines."""
        self._config.secondary_prefix = prefix or ""
        return self

    def with_encoding(self, encoding: str) -> "LogFileBuilder":
        """Set the file encoding used by the default file writer."""
        self._encoding = encoding
        return self

    def with_formatter(self, formatter: BaseFormatter) -> "LogFileBuilder":
        """Use a custom formatter."""
        self._formatter = formatter
        return self

    def with_writer(self, writer: BaseWriter) -> "LogFileBuilder":
        """
        Use a custom writer instead of the file writer.

        Args:
            writer: Writer instance with write(filename, text) and delete(filename)

        Returns:
            Self for method chaining
        """
        self._writer = writer
        return self

    def with_console(self, stream=None) -> "LogFileBuilder":
        """
        Mirror every logged line to the console.

        Args:
            stream: Output stream (default: sys.stderr)

        Returns:
            Self for method chaining
        """
        self._console_enabled = True
        self._console_stream = stream
        return self

    def with_thread_safety(self, enabled: bool = True) -> "LogFileBuilder":
        """
        Hold a lock for the whole of each log call.

        An entry and its inner exception lines are written, and their
        line-logged events fired, without lines from other threads between
        them.

        Example:
            log = (LogFileBuilder()
                .with_file("app.log")
                .with_thread_safety()
                .build())
        """
        self._thread_safe = enabled
        return self

    def on_line_logged(self, callback: LineLoggedCallback) -> "LogFileBuilder":
        """Subscribe a callback to the line-logged notification."""
        self._callbacks.append(callback)
        return self

    def build(self) -> LogFile:
        """Build and return configured log file."""
        writer = self._writer or FileWriter(
            encoding=self._encoding,
            create_dirs=self._create_dirs,
        )
        lock = None
        if self._thread_safe:
            lock = threading.RLock()
            writer = LockedWriter(writer, lock)

        logfile = LogFile(self._config, formatter=self._formatter, writer=writer, lock=lock)

        if self._console_enabled:
            logfile.line_logged.subscribe(ConsoleWriter(self._console_stream).mirror)

        for callback in self._callbacks:
            logfile.line_logged.subscribe(callback)

        return logfile
