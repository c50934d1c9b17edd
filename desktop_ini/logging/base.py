"""Contrat de journalisation injecté dans les écrivains et chargeurs.

Le modèle IniDocument ne journalise rien ; seuls les composants qui
touchent au disque (sérialisation, chargement de configuration)
reçoivent un Logger.
"""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Destination des messages de desktop_ini.

    Trois niveaux suffisent : information (fichier écrit, document
    construit), avertissement (fichier existant remplacé) et erreur
    (transmise par LoggerErrorHandler).
    """

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Trace une opération réussie."""
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Signale une opération réussie mais à surveiller."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Trace un échec."""
        pass
