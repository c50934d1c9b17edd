"""Interface abstraite d'un magasin de groupes INI.

Ce module définit le contrat de lecture consommé par les
sérialiseurs : liste ordonnée des groupes et copie de leur contenu.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IniStore(ABC):
    """Interface de lecture d'un document INI groupé.

    Un sérialiseur peut supposer qu'aucune valeur ne contient de
    retour à la ligne et qu'aucun nom ne contient '[', ']', '='
    ou de retour à la ligne (hors clés localisées).
    """

    @abstractmethod
    def get_group_names(self) -> list[str]:
        """Retourne les noms de groupes dans un ordre déterministe.

        Returns:
            Liste triée des noms de groupes.
        """
        pass

    @abstractmethod
    def get_group(self, group: str) -> Optional[dict[str, str]]:
        """Retourne une copie des paires clé=valeur d'un groupe.

        Args:
            group: Nom du groupe.

        Returns:
            Copie du groupe, ou None s'il n'existe pas.
        """
        pass
