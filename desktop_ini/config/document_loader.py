"""Construction d'un IniDocument depuis un fichier de configuration."""

from pathlib import Path
from typing import Optional

import pydantic

from desktop_ini.config.loader import ConfigLoader, FileConfigLoader
from desktop_ini.config.schema import DocumentConfig
from desktop_ini.errors.exceptions import ConfigurationError
from desktop_ini.inifile.document import IniDocument
from desktop_ini.logging.base import Logger


class DocumentConfigLoader:
    """Charge un DocumentConfig et construit le document correspondant.

    Les types sont déclarés avant l'écriture des valeurs, afin que
    celles-ci soient validées selon leur type.

    Example:
        >>> loader = DocumentConfigLoader("app.toml")
        >>> doc = loader.build()
        >>> doc.get("Name")
        'Firefox'
    """

    def __init__(
        self,
        config_path: str | Path,
        config_loader: ConfigLoader | None = None,
        logger: Optional[Logger] = None,
    ) -> None:
        """Charge et valide le fichier de configuration.

        Args:
            config_path: Chemin vers le fichier (.toml ou .json).
            config_loader: Chargeur injectable. Si None, utilise
                FileConfigLoader.
            logger: Logger optionnel pour tracer la construction.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            ValueError: Si l'extension n'est pas supportée.
            ConfigurationError: Si le contenu ne décrit pas un
                document valide.
        """
        self.config_path = Path(config_path)
        self.logger = logger
        loader = config_loader or FileConfigLoader()
        try:
            self._config: DocumentConfig = loader.load(config_path)
        except pydantic.ValidationError as e:
            raise ConfigurationError(
                f"Configuration de document invalide ({config_path}) : {e}"
            ) from e

    @property
    def config(self) -> DocumentConfig:
        return self._config

    def build(self) -> IniDocument:
        """Construit le document décrit par la configuration.

        Returns:
            Document peuplé.

        Raises:
            InvalidNameError: Si un nom de groupe ou de clé est invalide.
            InvalidValueError: Si une valeur ne respecte pas son type.
        """
        document = IniDocument(self._config.default_group)
        for group, keys in self._config.types.items():
            for key, value_type in keys.items():
                document.declare_type(group, key, value_type)
        for group, entries in self._config.values.items():
            document.add_group(group)
            for key, value in entries.items():
                document.add(key, value, group)

        if self.logger:
            self.logger.log_info(
                f"Document construit depuis {self.config_path} : "
                f"{len(document.get_group_names())} groupe(s)."
            )
        return document
