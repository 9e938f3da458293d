"""
Locked writer

Serializes access to another writer for log files shared between threads.
"""

import threading
from typing import Optional

from logfile_module.writers.base_writer import BaseWriter, Destination


class LockedWriter(BaseWriter):
    """
    Writer wrapper holding a lock around every write and delete.

    Each line is written under the lock, so a line is never torn. Whole
    entries are kept together by the log file lock that
    LogFileBuilder.with_thread_safety() shares with this writer.

    Thread Safety:
        All methods are thread-safe for concurrent access.
    """

    def __init__(self, inner_writer: BaseWriter, lock=None):
        """
        Initialize locked writer.

        Args:
            inner_writer: Writer to wrap
            lock: Lock to use (default: a new threading.RLock)
        """
        self.inner_writer = inner_writer
        self._lock = lock or threading.RLock()

    def write(self, filename: Destination, text: Optional[str]) -> bool:
        with self._lock:
            return self.inner_writer.write(filename, text)

    def delete(self, filename: Destination) -> None:
        with self._lock:
            self.inner_writer.delete(filename)

    def __repr__(self) -> str:
        """String representation."""
        return f"LockedWriter({self.inner_writer!r})"
