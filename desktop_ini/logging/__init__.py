"""Module de logging."""

from desktop_ini.logging.base import Logger
from desktop_ini.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
