"""File writer"""

import os
from pathlib import Path
from typing import Optional

from logfile_module.core.log_entry import NULL_STRING
from logfile_module.writers.base_writer import BaseWriter, Destination


class FileWriter(BaseWriter):
    """
    Append lines to a file.

    The file is opened, appended to and closed on every write, so an entry
    is on disk as soon as the call returns and no handle is left open.
    """

    def __init__(self, encoding: str = "utf-8", create_dirs: bool = False):
        """
        Initialize file writer.

        Args:
            encoding: File encoding (default: 'utf-8')
            create_dirs: Create missing parent directories before writing
        """
        self.encoding = encoding
        self.create_dirs = create_dirs

    def write(self, filename: Destination, text: Optional[str]) -> bool:
        """
        Append a line to the file.

        Raises:
            OSError: If the file cannot be opened or written
        """
        if not filename:
            return False

        path = Path(filename)
        if self.create_dirs:
            path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "a", encoding=self.encoding) as f:
            f.write((NULL_STRING if text is None else text) + "\n")
        return True

    def delete(self, filename: Destination) -> None:
        """Delete the file, ignoring any error."""
        if not filename:
            return
        try:
            os.remove(filename)
        except OSError:
            pass  # Missing or locked file is not an error

    def __repr__(self) -> str:
        """String representation."""
        return f"FileWriter(encoding='{self.encoding}')"
