"""
    LoggerErrorHandler
"""
from desktop_ini.errors.base import ErrorHandler
from desktop_ini.errors.exceptions import ApplicationError, InvalidNameError
from desktop_ini.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler pour logger les erreurs.

    Enregistre les erreurs via le Logger injecté au constructeur.
    Les erreurs de nom précisent la règle violée.
    """

    def __init__(self,
                 logger: Logger,
                 base_error_type: type[Exception] = ApplicationError
                 ) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
            base_error_type: Classe de base des erreurs connues.
        """
        self.logger = logger
        self.base_error_type = base_error_type

    def handle(self, error: Exception) -> None:
        """Log l'erreur selon qu'elle est connue ou inattendue.

        Args:
            error: L'exception à logger.
        """
        if isinstance(error, self.base_error_type):
            message = f"{type(error).__name__}: {str(error)}"
            if isinstance(error, InvalidNameError):
                message += f" [règle: {error.rule}]"
            self.logger.log_error(message)
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {str(error)}"
            )
