"""Registre des types déclarés par couple (groupe, clé)."""

import copy
from typing import Any, Mapping, Optional

from desktop_ini.inifile.types import ValueType


class TypeRegistry:
    """Associe un ValueType à des couples (groupe, clé).

    Le registre est une métadonnée optionnelle : une clé absente
    est simplement non typée. Aucune validation syntaxique n'est
    faite à la déclaration, elle a lieu à l'écriture de la valeur.
    """

    def __init__(self) -> None:
        self._types: dict[str, dict[str, ValueType]] = {}

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[str, Mapping[str, Any]]
    ) -> "TypeRegistry":
        """Construit un registre depuis un dictionnaire imbriqué.

        Args:
            mapping: {groupe: {clé: ValueType ou nom de type}}.

        Returns:
            Nouveau registre.

        Raises:
            ValueError: Si un nom de type est inconnu.
        """
        registry = cls()
        for group, keys in mapping.items():
            for key, value_type in keys.items():
                registry.declare(group, key, ValueType(value_type))
        return registry

    def declare(self, group: str, key: str, value_type: ValueType) -> None:
        """Déclare (ou redéclare) le type d'une clé. La dernière écriture gagne."""
        self._types.setdefault(group, {})[key] = value_type

    def lookup(self, group: str, key: str) -> Optional[ValueType]:
        """Retourne le type déclaré, ou None si la clé n'est pas typée."""
        return self._types.get(group, {}).get(key)

    def declared(self, group: str) -> dict[str, ValueType]:
        """Retourne une copie des déclarations d'un groupe."""
        return dict(self._types.get(group, {}))

    def as_dict(self) -> dict[str, dict[str, ValueType]]:
        return {group: dict(keys) for group, keys in self._types.items()}

    def copy(self) -> "TypeRegistry":
        clone = TypeRegistry()
        clone._types = copy.deepcopy(self._types)
        return clone

    def __contains__(self, item: tuple[str, str]) -> bool:
        group, key = item
        return self.lookup(group, key) is not None

    def __len__(self) -> int:
        return sum(len(keys) for keys in self._types.values())
