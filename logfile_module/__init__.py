"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Simple Log File - A minimal synchronous leveled log file writer
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from logfile_module.core.logfile import LogFile
from logfile_module.core.logfile_builder import LogFileBuilder
from logfile_module.core.log_entry import LogEntry, LogItem, ItemKind
from logfile_module.core.log_level import LogLevel, admits
from logfile_module.core.logfile_config import LogFileConfig
from logfile_module.core.events import EventHook, LineLoggedEvent

# Import submodules (not all classes by default)
from logfile_module import formatters
from logfile_module import writers

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
    "formatters",
    "writers",
]
