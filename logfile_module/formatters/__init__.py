"""
Log formatters module

Provides formatter implementations for controlling log output format.
"""

from logfile_module.formatters.base_formatter import BaseFormatter
from logfile_module.formatters.text_formatter import TextFormatter
from logfile_module.formatters.compact_formatter import CompactFormatter
from logfile_module.formatters.callback_formatter import CallbackFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "CompactFormatter",
    "CallbackFormatter",
]
