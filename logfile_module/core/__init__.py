"""
Core module for the log file system

This module contains the fundamental classes:
- LogFile: Main log file class
- LogFileBuilder: Builder pattern for log file construction
- LogEntry, LogItem: Log entry data structures
- LogLevel: Log level enumeration
- LogFileConfig: Configuration management
"""

from logfile_module.core.logfile import LogFile
from logfile_module.core.logfile_builder import LogFileBuilder
from logfile_module.core.log_entry import LogEntry, LogItem, ItemKind
from logfile_module.core.log_level import LogLevel, admits
from logfile_module.core.logfile_config import LogFileConfig
from logfile_module.core.events import EventHook, LineLoggedEvent

__all__ = [
    "LogFile",
    "LogFileBuilder",
    "LogEntry",
    "LogItem",
    "ItemKind",
    "LogLevel",
    "admits",
    "LogFileConfig",
    "EventHook",
    "LineLoggedEvent",
]
