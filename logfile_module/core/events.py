"""
Line-logged notification

Observers subscribe to a log file's ``line_logged`` hook to receive the
exact text of every line it attempts to write.
"""

from dataclasses import dataclass
from typing import Callable, List

LineLoggedCallback = Callable[["LineLoggedEvent"], None]


@dataclass(frozen=True)
class LineLoggedEvent:
    """Payload of the line-logged notification."""

    text: str


class EventHook:
    """
    Ordered list of callbacks fired synchronously.

    Callbacks run in subscription order. Exceptions raised by a callback
    propagate to the code that fired the event.

    Example:
        log = LogFile.open("app.log")
        log.line_logged += lambda event: print(event.text)
    """

    def __init__(self):
        self._callbacks: List[LineLoggedCallback] = []

    def subscribe(self, callback: LineLoggedCallback) -> None:
        """
        Register a callback.

        Raises:
            TypeError: If callback is not callable
        """
        if not callable(callback):
            raise TypeError("callback must be callable")
        self._callbacks.append(callback)

    def unsubscribe(self, callback: LineLoggedCallback) -> None:
        """Remove a callback. Does nothing if it was never registered."""
        try:
            self._callbacks.remove(callback)
        except ValueError:
            pass

    def clear(self) -> None:
        self._callbacks.clear()

    def fire(self, event: LineLoggedEvent) -> None:
        for callback in list(self._callbacks):
            callback(event)

    def __iadd__(self, callback: LineLoggedCallback) -> "EventHook":
        self.subscribe(callback)
        return self

    def __isub__(self, callback: LineLoggedCallback) -> "EventHook":
        self.unsubscribe(callback)
        return self

    def __len__(self) -> int:
        return len(self._callbacks)

    def __repr__(self) -> str:
        return f"EventHook(callbacks={len(self._callbacks)})"
