"""Console writer"""

import sys
from typing import Optional

from logfile_module.core.events import LineLoggedEvent
from logfile_module.core.log_entry import NULL_STRING
from logfile_module.writers.base_writer import BaseWriter, Destination


class ConsoleWriter(BaseWriter):
    """
    Write lines to a console stream.

    Can replace the file writer, or mirror a file's output by subscribing
    ``mirror`` to a log file's ``line_logged`` hook.
    """

    def __init__(self, stream=None):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stderr)
        """
        self.stream = stream or sys.stderr

    def write(self, filename: Destination, text: Optional[str]) -> bool:
        """Write a line to the stream. The filename is ignored."""
        self.stream.write((NULL_STRING if text is None else text) + "\n")
        self.stream.flush()
        return True

    def mirror(self, event: LineLoggedEvent) -> None:
        """Line-logged callback that echoes the line to the stream."""
        self.write(None, event.text)
