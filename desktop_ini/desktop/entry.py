"""Fichier Desktop Entry au-dessus du document INI générique.

Ce module fournit DesktopEntry, qui déclare les types des clés
standard de la spécification freedesktop dès sa construction,
et quelques accès nommés aux champs les plus courants.
"""

from typing import Optional

from desktop_ini.inifile.document import IniDocument
from desktop_ini.inifile.types import ValueType

DESKTOP_ENTRY_GROUP = "Desktop Entry"

STANDARD_KEY_TYPES: dict[str, ValueType] = {
    "Type": ValueType.STRING,
    "Version": ValueType.STRING,
    "Exec": ValueType.STRING,
    "TryExec": ValueType.STRING,
    "Path": ValueType.STRING,
    "StartupWMClass": ValueType.STRING,
    "URL": ValueType.STRING,
    "Name": ValueType.LOCALE_STRING,
    "GenericName": ValueType.LOCALE_STRING,
    "Comment": ValueType.LOCALE_STRING,
    "Icon": ValueType.LOCALE_STRING,
    "Keywords": ValueType.LOCALE_STRING,
    "NoDisplay": ValueType.BOOLEAN,
    "Hidden": ValueType.BOOLEAN,
    "Terminal": ValueType.BOOLEAN,
    "StartupNotify": ValueType.BOOLEAN,
    "DBusActivatable": ValueType.BOOLEAN,
    "OnlyShowIn": ValueType.STRINGS,
    "NotShowIn": ValueType.STRINGS,
    "Actions": ValueType.STRINGS,
    "MimeType": ValueType.STRINGS,
    "Categories": ValueType.STRINGS,
    "Implements": ValueType.STRINGS,
}


class DesktopEntry(IniDocument):
    """Document dont le groupe par défaut est "Desktop Entry".

    Les types standard sont déclarés avant toute écriture. Les
    clés localisées (ex: "Name[fr]") doivent être déclarées en
    LOCALE_STRING via declare_locale() pour être acceptées.

    Example:
        >>> entry = DesktopEntry()
        >>> entry.entry_type = "Application"
        >>> entry.name = "Firefox"
        >>> entry.no_display
        False
    """

    def __init__(self, default_group: str = DESKTOP_ENTRY_GROUP) -> None:
        super().__init__(default_group)
        for key, value_type in STANDARD_KEY_TYPES.items():
            self.declare_type(default_group, key, value_type)

    def declare_locale(self, key: str, locale: str) -> str:
        """Déclare la variante localisée d'une clé LOCALE_STRING.

        Args:
            key: Clé de base (ex: "Name").
            locale: Code de langue (ex: "fr", "pt_BR").

        Returns:
            Nom de la clé localisée (ex: "Name[fr]").
        """
        localized = f"{key}[{locale}]"
        self.declare_type(self.default_group, localized, ValueType.LOCALE_STRING)
        return localized

    @property
    def entry_type(self) -> Optional[str]:
        return self.get("Type")

    @entry_type.setter
    def entry_type(self, value: str) -> None:
        self.add("Type", value)

    @property
    def name(self) -> Optional[str]:
        return self.get("Name")

    @name.setter
    def name(self, value: str) -> None:
        self.add("Name", value)

    @property
    def exec(self) -> Optional[str]:
        return self.get("Exec")

    @exec.setter
    def exec(self, value: str) -> None:
        self.add("Exec", value)

    @property
    def icon(self) -> Optional[str]:
        return self.get("Icon")

    @icon.setter
    def icon(self, value: str) -> None:
        self.add("Icon", value)

    @property
    def no_display(self) -> bool:
        """Valeur de NoDisplay, False si absente."""
        return bool(self.get_boolean("NoDisplay"))

    @no_display.setter
    def no_display(self, value: bool) -> None:
        self.add("NoDisplay", "true" if value else "false")
