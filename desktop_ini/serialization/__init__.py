"""Module de sérialisation des documents INI."""

from desktop_ini.serialization.base import IniWriter
from desktop_ini.serialization.writer import IniStyleFileWriter

__all__ = [
    "IniWriter",
    "IniStyleFileWriter",
]
