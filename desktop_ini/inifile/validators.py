"""Fonctions de validation pour les noms et valeurs INI.

Ce module fournit des prédicats purs (booléen, nombre) et des
validateurs de noms de groupe, de noms de clé et de valeurs.
Les validateurs retournent l'élément validé ou lèvent une
exception indiquant la première règle violée.
"""

from typing import Optional

from desktop_ini.errors.exceptions import (
    InvalidNameError,
    InvalidValueError,
    NameRule,
)
from desktop_ini.inifile.types import ValueType


def is_valid_boolean(value: str) -> bool:
    """Indique si la valeur vaut "true" ou "false" (casse ignorée)."""
    return value.lower() in ("true", "false")


def is_valid_number(value: str) -> bool:
    """Indique si la valeur est analysable comme un flottant.

    Volontairement permissif : toute écriture acceptée par float()
    est valide (décimales, notation scientifique, signe, espaces
    en bordure). Une clé de type INTEGER accepte donc "3.14".

    Args:
        value: Chaîne à tester.

    Returns:
        True si float(value) réussit.
    """
    try:
        float(value)
    except ValueError:
        return False
    return True


def _check_common(name: Optional[str], kind: str) -> None:
    if name is None:
        raise InvalidNameError(name, NameRule.MISSING, kind)
    if not name.strip():
        raise InvalidNameError(name, NameRule.BLANK, kind)
    if "\n" in name:
        raise InvalidNameError(name, NameRule.NEWLINE, kind)


def validate_group_name(name: Optional[str]) -> str:
    """Valide un nom de groupe.

    Un nom de groupe n'est ni None ni vide après suppression des
    espaces, et ne contient ni '[', ni ']', ni retour à la ligne.

    Args:
        name: Nom de groupe à valider.

    Returns:
        Le nom validé.

    Raises:
        InvalidNameError: Si le nom est invalide.
    """
    _check_common(name, "group")
    if "[" in name or "]" in name:
        raise InvalidNameError(name, NameRule.BRACKET, "group")
    return name


def validate_key_name(
    name: Optional[str], value_type: Optional[ValueType] = None
) -> str:
    """Valide un nom de clé.

    Un nom de clé n'est ni None ni vide, et ne contient ni retour
    à la ligne ni '='. Les crochets sont réservés aux clés de type
    LOCALE_STRING (ex: "Name[fr]").

    Args:
        name: Nom de clé à valider.
        value_type: Type déclaré pour la clé, None si non typée.

    Returns:
        Le nom validé.

    Raises:
        InvalidNameError: Si le nom est invalide.
    """
    _check_common(name, "key")
    if "=" in name:
        raise InvalidNameError(name, NameRule.EQUALS, "key")
    if value_type != ValueType.LOCALE_STRING and (
        "[" in name or "]" in name
    ):
        raise InvalidNameError(name, NameRule.BRACKET, "key")
    return name


def validate_value(
    group: str,
    key: str,
    value: Optional[str],
    value_type: Optional[ValueType] = None,
) -> str:
    """Valide une valeur selon le type déclaré de sa clé.

    Args:
        group: Groupe de la clé (pour le message d'erreur).
        key: Clé concernée.
        value: Valeur à valider.
        value_type: Type déclaré, None si non typée.

    Returns:
        La valeur validée.

    Raises:
        InvalidValueError: Si la valeur est None, contient un retour
            à la ligne, ou ne respecte pas son type BOOLEAN/INTEGER.
    """
    if value is None:
        raise InvalidValueError(group, key, value, value_type, "valeur absente")
    if "\n" in value:
        raise InvalidValueError(
            group, key, value, value_type, "retour à la ligne interdit"
        )
    if value_type == ValueType.BOOLEAN and not is_valid_boolean(value):
        raise InvalidValueError(
            group, key, value, value_type, "attendu true ou false"
        )
    if value_type == ValueType.INTEGER and not is_valid_number(value):
        raise InvalidValueError(
            group, key, value, value_type, "nombre invalide"
        )
    return value
