"""Document INI en mémoire : groupes, clés et valeurs validés.

Ce module fournit IniDocument, le magasin de groupes qui garantit à
chaque mutation les règles de syntaxe des noms et des valeurs, en
consultant le registre des types déclarés.
"""

import copy
from typing import Optional

from desktop_ini.errors.exceptions import (
    IniStyleError,
    InvalidValueError,
    NotFoundError,
)
from desktop_ini.inifile.base import IniStore
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

DEFAULT_GROUP = "default"


class IniDocument(IniStore):
    """Document INI groupé avec validation à l'écriture.

    Chaque groupe associe des noms de clés à des valeurs chaînes.
    Les opérations à clé seule (``group`` omis) ciblent le groupe
    par défaut fixé à la construction. Toute écriture est validée
    avant d'être appliquée : en cas d'erreur le document reste
    inchangé.

    Cette classe n'est pas synchronisée en interne : un accès
    concurrent depuis plusieurs threads doit être protégé par
    l'appelant.

    Attributes:
        default_group: Groupe ciblé quand aucun groupe n'est précisé.
        types: Registre des types déclarés.

    Example:
        >>> doc = IniDocument("Desktop Entry")
        >>> doc.declare_type("Desktop Entry", "Terminal", ValueType.BOOLEAN)
        >>> doc.add("Terminal", "false")
        >>> doc.get("Terminal")
        'false'
    """

    def __init__(
        self,
        default_group: str = DEFAULT_GROUP,
        types: Optional[TypeRegistry] = None,
    ) -> None:
        """Crée un document vide.

        Args:
            default_group: Nom du groupe par défaut (pas encore créé).
            types: Registre de types initial. Il est partagé, pas copié.
        """
        self._default_group = default_group
        self._data: dict[str, dict[str, str]] = {}
        self._types = types if types is not None else TypeRegistry()

    @property
    def default_group(self) -> str:
        return self._default_group

    @property
    def types(self) -> TypeRegistry:
        return self._types

    # Construction à partir d'un autre document

    def clone(self, default_group: Optional[str] = None) -> "IniDocument":
        """Retourne une copie profonde indépendante du document.

        Args:
            default_group: Groupe par défaut de la copie, celui du
                document source si None.

        Returns:
            Nouveau document, sans état partagé avec la source.
        """
        other = self._spawn(default_group, self._types.copy())
        other._data = copy.deepcopy(self._data)
        return other

    def view(self, default_group: Optional[str] = None) -> "IniDocument":
        """Retourne un document qui partage les données de celui-ci.

        Les groupes, les valeurs et les types sont partagés : une
        écriture via la vue est visible dans la source et
        inversement. Seul le groupe par défaut peut différer.

        Args:
            default_group: Groupe par défaut de la vue, celui du
                document source si None.

        Returns:
            Vue partagée, revalidée intégralement.

        Raises:
            InvalidNameError: Si un nom stocké est invalide.
            InvalidValueError: Si une valeur stockée est invalide.
        """
        other = self._spawn(default_group, self._types)
        other._data = self._data
        other.check_all_valid()
        return other

    # Types

    def declare_type(
        self, group: str, key: str, value_type: ValueType
    ) -> None:
        """Déclare le type d'une clé pour les écritures suivantes.

        Les valeurs déjà stockées ne sont pas revalidées ; utiliser
        check_all_valid() pour cela.
        """
        self._types.declare(group, key, value_type)

    def get_type(
        self, key: str, group: Optional[str] = None
    ) -> Optional[ValueType]:
        return self._types.lookup(self._resolve(group), key)

    # Écriture

    def add_group(self, name: str) -> None:
        """Crée un groupe vide s'il n'existe pas encore.

        Args:
            name: Nom du groupe.

        Raises:
            InvalidNameError: Si le nom est invalide.
        """
        validate_group_name(name)
        self._data.setdefault(name, {})

    def add(self, key: str, value: str, group: Optional[str] = None) -> None:
        """Ajoute ou remplace une valeur.

        Le groupe est créé s'il n'existe pas. Rien n'est modifié si
        la validation échoue.

        Args:
            key: Nom de la clé.
            value: Valeur brute.
            group: Groupe cible, le groupe par défaut si None.

        Raises:
            InvalidNameError: Si le nom de groupe ou de clé est invalide.
            InvalidValueError: Si la valeur est invalide pour son type.
        """
        group = self._resolve(group)
        self._check_entry(group, key, value)
        self._data.setdefault(group, {})[key] = value

    def remove(self, key: str, group: Optional[str] = None) -> None:
        """Supprime une clé.

        Raises:
            NotFoundError: Si le groupe ou la clé n'existe pas.
        """
        group = self._resolve(group)
        if group not in self._data:
            raise NotFoundError(group)
        if key not in self._data[group]:
            raise NotFoundError(group, key)
        del self._data[group][key]

    def remove_group(self, group: str) -> None:
        """Supprime un groupe et toutes ses clés.

        Raises:
            NotFoundError: Si le groupe n'existe pas.
        """
        if group not in self._data:
            raise NotFoundError(group)
        del self._data[group]

    # Variantes retournant un résultat explicite

    def try_add_group(self, name: str) -> MutationResult:
        return self._attempt("add_group", self.add_group, name)

    def try_add(
        self, key: str, value: str, group: Optional[str] = None
    ) -> MutationResult:
        return self._attempt("add", self.add, key, value, group)

    def try_remove(
        self, key: str, group: Optional[str] = None
    ) -> MutationResult:
        return self._attempt("remove", self.remove, key, group)

    def try_remove_group(self, group: str) -> MutationResult:
        return self._attempt("remove_group", self.remove_group, group)

    # Lecture

    def get(self, key: str, group: Optional[str] = None) -> Optional[str]:
        """Retourne la valeur d'une clé, ou None si absente."""
        return self._data.get(self._resolve(group), {}).get(key)

    def get_as_list(
        self, key: str, group: Optional[str] = None
    ) -> Optional[list[str]]:
        """Retourne la valeur découpée sur ','.

        Les segments ne sont ni nettoyés ni filtrés : "a,,b" donne
        ["a", "", "b"].

        Returns:
            Liste des segments, ou None si la clé est absente.
        """
        value = self.get(key, group)
        if value is None:
            return None
        return value.split(",")

    def get_boolean(
        self, key: str, group: Optional[str] = None
    ) -> Optional[bool]:
        """Retourne la valeur interprétée comme booléen.

        Raises:
            InvalidValueError: Si la valeur n'est ni true ni false.
        """
        group = self._resolve(group)
        value = self.get(key, group)
        if value is None:
            return None
        if not is_valid_boolean(value):
            raise InvalidValueError(group, key, value, ValueType.BOOLEAN)
        return value.lower() == "true"

    def get_number(
        self, key: str, group: Optional[str] = None
    ) -> Optional[float]:
        """Retourne la valeur interprétée comme nombre flottant.

        Raises:
            InvalidValueError: Si la valeur n'est pas un nombre.
        """
        group = self._resolve(group)
        value = self.get(key, group)
        if value is None:
            return None
        if not is_valid_number(value):
            raise InvalidValueError(group, key, value, ValueType.INTEGER)
        return float(value)

    def contains_group(self, group: str) -> bool:
        return group in self._data

    def contains_key(self, key: str, group: Optional[str] = None) -> bool:
        return key in self._data.get(self._resolve(group), {})

    def get_group_names(self) -> list[str]:
        return sorted(self._data)

    def get_group(self, group: str) -> Optional[dict[str, str]]:
        if group not in self._data:
            return None
        return dict(self._data[group])

    def check_all_valid(self) -> None:
        """Revalide tous les groupes, clés et valeurs stockés.

        Utile après une construction partagée ou après la déclaration
        tardive de types.

        Raises:
            InvalidNameError: Si un nom stocké est invalide.
            InvalidValueError: Si une valeur stockée est invalide.
        """
        for group, entries in self._data.items():
            validate_group_name(group)
            for key, value in entries.items():
                self._check_entry(group, key, value)

    # Interne

    def _spawn(
        self, default_group: Optional[str], types: TypeRegistry
    ) -> "IniDocument":
        # Même classe que la source, sans rejouer son __init__
        other = type(self).__new__(type(self))
        IniDocument.__init__(
            other,
            default_group if default_group is not None else self._default_group,
            types,
        )
        return other

    def _resolve(self, group: Optional[str]) -> str:
        return self._default_group if group is None else group

    def _check_entry(self, group: str, key: str, value: str) -> None:
        validate_group_name(group)
        value_type = self._types.lookup(group, key)
        validate_key_name(key, value_type)
        validate_value(group, key, value, value_type)

    @staticmethod
    def _attempt(operation: str, func, *args) -> MutationResult:
        try:
            func(*args)
        except IniStyleError as e:
            return MutationResult.failure(operation, e)
        return MutationResult.ok(operation)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(default_group={self._default_group!r}, "
            f"groups={self.get_group_names()!r})"
        )
