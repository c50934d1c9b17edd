"""Types de valeurs déclarables pour une clé INI."""

from enum import StrEnum


class ValueType(StrEnum):
    """Types de valeurs de la spécification freedesktop Desktop Entry.

    Les valeurs sont toujours stockées sous forme de chaînes brutes ;
    le type ne fait que restreindre la validation à l'écriture.
    """

    LOCALE_STRING = "localestring"
    STRINGS = "strings"
    STRING = "string"
    INTEGERS = "integers"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    POINTS = "points"
