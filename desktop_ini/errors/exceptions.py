"""
Exceptions personnalisées pour desktop_ini.

Ce module suit le principe SRP en isolant la gestion des exceptions.
Les trois familles d'erreurs du modèle INI (nom invalide, valeur
invalide, élément introuvable) dérivent de IniStyleError.
"""
from enum import StrEnum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from desktop_ini.inifile.types import ValueType


class NameRule(StrEnum):
    """Règle de syntaxe violée par un nom de groupe ou de clé."""

    MISSING = "missing"
    BLANK = "blank"
    BRACKET = "bracket"
    NEWLINE = "newline"
    EQUALS = "equals"


class ApplicationError(Exception):
    """Exception de base pour toutes les applications."""
    pass

class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les Configurations."""
    pass

class IniStyleError(ApplicationError):
    """Exception de base pour les erreurs du modèle INI."""
    pass


class InvalidNameError(IniStyleError, ValueError):
    """Nom de groupe ou de clé syntaxiquement invalide.

    Attributes:
        name: Nom rejeté (peut être None).
        rule: Première règle violée.
        kind: "group" ou "key".
    """

    def __init__(self, name: Optional[str], rule: NameRule, kind: str) -> None:
        self.name = name
        self.rule = rule
        self.kind = kind
        label = "groupe" if kind == "group" else "clé"
        super().__init__(
            f"Nom de {label} invalide ({rule}) : {name!r}"
        )


class InvalidValueError(IniStyleError, ValueError):
    """Valeur refusée pour une clé.

    Attributes:
        group: Groupe ciblé.
        key: Clé ciblée.
        value: Valeur rejetée.
        expected: Type déclaré pour la clé, None si non typée.
    """

    def __init__(
        self,
        group: str,
        key: str,
        value: Optional[str],
        expected: Optional["ValueType"] = None,
        reason: str = "",
    ) -> None:
        self.group = group
        self.key = key
        self.value = value
        self.expected = expected
        message = f"Valeur invalide pour [{group}] {key} : {value!r}"
        if expected is not None:
            message += f" (type attendu : {expected})"
        if reason:
            message += f" - {reason}"
        super().__init__(message)


class NotFoundError(IniStyleError, LookupError):
    """Suppression d'un groupe ou d'une clé inexistant."""

    def __init__(self, group: str, key: Optional[str] = None) -> None:
        self.group = group
        self.key = key
        if key is None:
            message = f"Groupe introuvable : {group!r}"
        else:
            message = f"Clé {key!r} introuvable dans le groupe {group!r}"
        super().__init__(message)
