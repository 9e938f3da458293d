"""
Base writer interface

A writer delivers rendered lines to a destination and can delete it.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

Destination = Optional[Union[str, Path]]


class BaseWriter(ABC):
    """
    Abstract base class for log writers.

    Writers hold no open handle between calls; each write is complete
    when the method returns.
    """

    @abstractmethod
    def write(self, filename: Destination, text: Optional[str]) -> bool:
        """
        Write one line.

        Args:
            filename: Destination name (None or empty disables writing)
            text: Line to write, without terminator

        Returns:
            True if the line was written, False if writing is disabled
        """
        pass

    def delete(self, filename: Destination) -> None:
        """
        Delete the destination. Best effort, never raises.

        Args:
            filename: Destination name
        """
        pass
