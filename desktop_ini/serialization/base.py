"""Interface abstraite pour l'écriture de documents INI."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO

from desktop_ini.inifile.base import IniStore


class IniWriter(ABC):
    """Interface pour les sérialiseurs de documents INI."""

    @abstractmethod
    def to_ini(self, document: IniStore) -> str:
        """Génère le contenu textuel du document.

        Args:
            document: Document à sérialiser.

        Returns:
            Contenu INI formaté.
        """
        pass

    @abstractmethod
    def write_to(self, stream: TextIO, document: IniStore) -> None:
        """Écrit le document dans un flux texte.

        Args:
            stream: Flux de destination.
            document: Document à écrire.
        """
        pass

    @abstractmethod
    def write(self, path: Path, document: IniStore) -> None:
        """Écrit le document dans un fichier UTF-8.

        Args:
            path: Chemin du fichier de destination.
            document: Document à écrire.
        """
        pass
