"""Écriture de fichiers .desktop."""

from desktop_ini.desktop.entry import DESKTOP_ENTRY_GROUP
from desktop_ini.inifile.base import IniStore
from desktop_ini.inifile.document import IniDocument
from desktop_ini.serialization.writer import IniStyleFileWriter


class DesktopEntryWriter(IniStyleFileWriter):
    """Sérialiseur plaçant le groupe principal de l'entrée en tête.

    Le groupe principal est le groupe par défaut du document
    ("Desktop Entry" pour un DesktopEntry standard). Les autres
    groupes (ex: "Desktop Action new-window") suivent dans l'ordre
    lexicographique.
    """

    def _ordered_groups(self, document: IniStore) -> list[str]:
        names = document.get_group_names()
        if isinstance(document, IniDocument):
            main_group = document.default_group
        else:
            main_group = DESKTOP_ENTRY_GROUP
        if main_group in names:
            names.remove(main_group)
            names.insert(0, main_group)
        return names
