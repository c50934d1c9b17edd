"""Module inifile : modèle en mémoire des documents de style INI.

Ce module fournit :
- IniDocument : magasin de groupes et de clés validés à l'écriture
- TypeRegistry : types déclarés par couple (groupe, clé)
- ValueType : types de valeurs freedesktop
- MutationResult : résultat explicite des opérations try_*
- Des validateurs purs pour les noms et les valeurs

Example:
    >>> from desktop_ini.inifile import IniDocument, ValueType
    >>> doc = IniDocument("Main")
    >>> doc.declare_type("Main", "Flag", ValueType.BOOLEAN)
    >>> doc.add("Flag", "true")
    >>> doc.try_add("Flag", "1").success
    False
"""

from desktop_ini.inifile.base import IniStore
from desktop_ini.inifile.document import DEFAULT_GROUP, IniDocument
from desktop_ini.inifile.registry import TypeRegistry
from desktop_ini.inifile.result import MutationResult
from desktop_ini.inifile.types import ValueType
from desktop_ini.inifile.validators import (
    is_valid_boolean,
    is_valid_number,
    validate_group_name,
    validate_key_name,
    validate_value,
)

__all__ = [
    # Interfaces abstraites
    "IniStore",
    # Implémentations
    "IniDocument",
    "TypeRegistry",
    "ValueType",
    "MutationResult",
    "DEFAULT_GROUP",
    # Validateurs
    "is_valid_boolean",
    "is_valid_number",
    "validate_group_name",
    "validate_key_name",
    "validate_value",
]
