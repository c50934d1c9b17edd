"""Module desktop : fichiers freedesktop Desktop Entry."""

from desktop_ini.desktop.entry import (
    DESKTOP_ENTRY_GROUP,
    STANDARD_KEY_TYPES,
    DesktopEntry,
)
from desktop_ini.desktop.writer import DesktopEntryWriter

__all__ = [
    "DESKTOP_ENTRY_GROUP",
    "STANDARD_KEY_TYPES",
    "DesktopEntry",
    "DesktopEntryWriter",
]
