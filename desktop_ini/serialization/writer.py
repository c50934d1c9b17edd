"""Sérialiseur de documents INI au format "[Groupe]" / "Clé=Valeur".

Ce module fournit IniStyleFileWriter, qui s'appuie sur configparser
comme LinuxIniConfigManager. Aucun échappement n'est nécessaire : le
modèle garantit que les noms et les valeurs ne contiennent pas de
caractères structurants.
"""

import configparser
from io import StringIO
from pathlib import Path
from typing import Optional, TextIO

from desktop_ini.inifile.base import IniStore
from desktop_ini.logging.base import Logger
from desktop_ini.serialization.base import IniWriter

# Contient des crochets : aucun groupe valide ne peut porter ce nom,
# un groupe "DEFAULT" est donc écrit comme les autres.
_UNUSED_DEFAULT_SECTION = "[]"


class IniStyleFileWriter(IniWriter):
    """Écrit un document INI groupe par groupe.

    Les groupes sont écrits dans l'ordre de get_group_names(), les
    clés dans l'ordre du stockage, en respectant la casse. Chaque
    groupe est suivi d'une ligne vide.

    Attributes:
        logger: Logger optionnel pour tracer les écritures de fichiers.

    Example:
        >>> writer = IniStyleFileWriter()
        >>> print(writer.to_ini(doc), end="")
        [Main]
        Key=v
        <BLANKLINE>
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger = logger

    def to_ini(self, document: IniStore) -> str:
        output = StringIO()
        self.write_to(output, document)
        return output.getvalue()

    def write_to(self, stream: TextIO, document: IniStore) -> None:
        parser = self._build_parser(document)
        parser.write(stream, space_around_delimiters=False)

    def write(self, path: Path, document: IniStore) -> None:
        """Écrit le document dans un fichier UTF-8.

        Un fichier existant est remplacé, ce qui est signalé par un
        avertissement.

        Args:
            path: Chemin du fichier de destination.
            document: Document à écrire.
        """
        replaced = Path(path).exists()

        with open(path, "w", encoding="utf-8") as f:
            self.write_to(f, document)

        if self.logger:
            if replaced:
                self.logger.log_warning(f"Fichier {path} existant remplacé.")
            self.logger.log_info(f"Fichier {path} écrit avec succès.")

    def _build_parser(self, document: IniStore) -> configparser.ConfigParser:
        parser = configparser.ConfigParser(
            delimiters=("=",),
            interpolation=None,
            default_section=_UNUSED_DEFAULT_SECTION,
        )
        parser.optionxform = str

        for name in self._ordered_groups(document):
            parser[name] = document.get_group(name)
        return parser

    def _ordered_groups(self, document: IniStore) -> list[str]:
        return document.get_group_names()
