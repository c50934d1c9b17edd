"""
Desktop INI - Modèle et validation de fichiers de style INI freedesktop.

Modules disponibles:
- inifile: Document INI en mémoire (IniDocument, TypeRegistry, ValueType)
- desktop: Fichiers Desktop Entry (DesktopEntry, DesktopEntryWriter)
- serialization: Écriture au format [Groupe] / Clé=Valeur
- config: Construction de documents depuis TOML ou JSON
- errors: Exceptions et handlers d'erreurs
- logging: Gestion des logs (Logger, FileLogger)
"""

__version__ = "1.0.0"

from desktop_ini.logging import Logger, FileLogger
from desktop_ini.errors import (
    ApplicationError,
    ConfigurationError,
    IniStyleError,
    InvalidNameError,
    InvalidValueError,
    NameRule,
    NotFoundError,
    ErrorHandler,
    ErrorHandlerChain,
    LoggerErrorHandler,
)
from desktop_ini.inifile import (
    IniStore,
    IniDocument,
    TypeRegistry,
    ValueType,
    MutationResult,
)
from desktop_ini.serialization import IniWriter, IniStyleFileWriter
from desktop_ini.desktop import DesktopEntry, DesktopEntryWriter
from desktop_ini.config import (
    ConfigLoader,
    FileConfigLoader,
    DocumentConfig,
    DocumentConfigLoader,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Errors
    "ApplicationError",
    "ConfigurationError",
    "IniStyleError",
    "InvalidNameError",
    "InvalidValueError",
    "NameRule",
    "NotFoundError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "LoggerErrorHandler",
    # Inifile
    "IniStore",
    "IniDocument",
    "TypeRegistry",
    "ValueType",
    "MutationResult",
    # Serialization
    "IniWriter",
    "IniStyleFileWriter",
    # Desktop
    "DesktopEntry",
    "DesktopEntryWriter",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "DocumentConfig",
    "DocumentConfigLoader",
]
