"""Joins the items of a log call into a single body string"""

from typing import Any, Callable, Iterable, Optional, Tuple

from logfile_module.core.log_entry import LogItem


def join_items(
    items: Iterable[Any],
    delimiter: Optional[str],
    format_error: Callable[[BaseException], str],
) -> Tuple[str, Optional[BaseException]]:
    """
    Render items into one body string.

    A delimiter is inserted before an item whenever the body built so far
    is non-empty. Exceptions are rendered with ``format_error`` and never
    expanded inline; the first one encountered is returned so its causes
    can be logged afterwards.

    Args:
        items: Values or LogItems, in order
        delimiter: Separator between items (None is treated as empty)
        format_error: Renders a single exception to text

    Returns:
        Tuple of (body, first exception or None)
    """
    delimiter = delimiter or ""
    parts = []
    length = 0
    first_error: Optional[BaseException] = None

    for value in items:
        item = LogItem.of(value)
        if length > 0:
            parts.append(delimiter)
            length += len(delimiter)

        if item.is_error:
            text = format_error(item.value)
            if first_error is None:
                first_error = item.value
        else:
            text = str(item)

        parts.append(text)
        length += len(text)

    return "".join(parts), first_error


def iter_causes(error: BaseException):
    """
    Yield the causes of ``error``, nearest first, ending with the root cause.

    Follows ``__cause__`` and falls back to ``__context__`` unless context
    was suppressed with ``raise ... from None``. Each exception is yielded
    at most once, so a cyclic chain terminates.
    """
    seen = {id(error)}
    current = _next_cause(error)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = _next_cause(current)


def _next_cause(error: BaseException) -> Optional[BaseException]:
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__
