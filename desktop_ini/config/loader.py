"""Lecture des fichiers décrivant un document INI."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from desktop_ini.config.schema import DocumentConfig


class ConfigLoader(ABC):
    """
    Interface abstraite pour la lecture d'une description de document.

    Permet d'injecter une autre source (mock, base de données...)
    dans DocumentConfigLoader.
    """

    @abstractmethod
    def load(self, config_path: Union[str, Path]) -> DocumentConfig:
        """
        Lit et valide une description de document.

        Args:
            config_path: Chemin vers le fichier de configuration

        Returns:
            Description validée du document

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Si le format n'est pas supporté
            pydantic.ValidationError: Si le contenu est invalide
        """
        pass


class FileConfigLoader(ConfigLoader):
    """
    Lit une description de document depuis un fichier TOML ou JSON.

    Le format est détecté par l'extension du fichier, le contenu
    est validé par le modèle DocumentConfig.
    """

    def load(self, config_path: Union[str, Path]) -> DocumentConfig:
        path = Path(config_path)

        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de configuration non trouvé: {path}"
            )

        return DocumentConfig.model_validate(self._read_raw(path))

    @staticmethod
    def _read_raw(path: Path) -> Dict[str, Any]:
        suffix = path.suffix.lower()

        if suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f)
        if suffix == ".json":
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        raise ValueError(
            f"Extension non supportée: {suffix}. "
            "Utilisez .toml ou .json"
        )
