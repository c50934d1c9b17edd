"""Module de configuration."""

from desktop_ini.config.document_loader import DocumentConfigLoader
from desktop_ini.config.loader import ConfigLoader, FileConfigLoader
from desktop_ini.config.schema import DocumentConfig

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "DocumentConfig",
    "DocumentConfigLoader",
]
