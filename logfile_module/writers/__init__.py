"""Writers module - Log output handlers"""

from logfile_module.writers.base_writer import BaseWriter
from logfile_module.writers.console_writer import ConsoleWriter
from logfile_module.writers.file_writer import FileWriter
from logfile_module.writers.locked_writer import LockedWriter

__all__ = ["BaseWriter", "ConsoleWriter", "FileWriter", "LockedWriter"]
