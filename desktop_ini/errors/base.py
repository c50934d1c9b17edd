"""Handlers d'erreurs du modèle INI.

Les erreurs arrivent soit levées par IniDocument, soit portées par
le MutationResult d'une opération try_*.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from desktop_ini.inifile.result import MutationResult


class ErrorHandler(ABC):
    """Stratégie de traitement d'une erreur (logging, collecte...)."""

    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Traite une erreur.

        Args:
            error: L'exception à traiter.
        """
        pass

    def handle_result(self, result: "MutationResult") -> bool:
        """Traite l'erreur portée par un résultat en échec.

        Args:
            result: Résultat d'une opération try_* d'IniDocument.

        Returns:
            True si le résultat est un succès, False sinon.
        """
        if result.error is not None:
            self.handle(result.error)
        return result.success


class ErrorHandlerChain(ErrorHandler):
    """Diffuse chaque erreur à tous les handlers, dans l'ordre d'ajout."""

    def __init__(self, handlers: Optional[Iterable[ErrorHandler]] = None):
        self.handlers: list[ErrorHandler] = list(handlers or [])

    def add_handler(self, handler: ErrorHandler) -> None:
        self.handlers.append(handler)

    def handle(self, error: Exception) -> None:
        for handler in self.handlers:
            handler.handle(error)
