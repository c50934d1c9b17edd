"""Résultat explicite d'une mutation du document."""

from dataclasses import dataclass
from typing import Optional

from desktop_ini.errors.exceptions import IniStyleError


@dataclass(frozen=True)
class MutationResult:
    """Résultat d'une opération try_* d'IniDocument.

    Attributes:
        operation: Nom de l'opération (ex: "add", "remove_group").
        success: True si la mutation a été appliquée.
        error: Erreur rencontrée, None en cas de succès.
    """

    operation: str
    success: bool
    error: Optional[IniStyleError] = None

    @classmethod
    def ok(cls, operation: str) -> "MutationResult":
        return cls(operation=operation, success=True)

    @classmethod
    def failure(
        cls, operation: str, error: IniStyleError
    ) -> "MutationResult":
        return cls(operation=operation, success=False, error=error)

    def unwrap(self) -> None:
        """Relève l'erreur portée par un résultat en échec.

        Raises:
            IniStyleError: L'erreur capturée si success est False.
        """
        if self.error is not None:
            raise self.error

    def __bool__(self) -> bool:
        return self.success
