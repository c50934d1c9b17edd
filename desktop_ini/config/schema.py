"""Modèle Pydantic décrivant un document INI dans un fichier de configuration.

Exemple de fichier TOML :

    default_group = "Desktop Entry"

    [types."Desktop Entry"]
    Terminal = "boolean"
    Name = "localestring"

    [values."Desktop Entry"]
    Name = "Firefox"
    Terminal = "false"
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from desktop_ini.inifile.document import DEFAULT_GROUP
from desktop_ini.inifile.types import ValueType


class DocumentConfig(BaseModel):
    """Description d'un document : groupe par défaut, types et valeurs."""

    model_config = ConfigDict(extra="forbid")

    default_group: str = DEFAULT_GROUP
    types: dict[str, dict[str, ValueType]] = Field(default_factory=dict)
    values: dict[str, dict[str, str]] = Field(default_factory=dict)

    @field_validator("default_group")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le groupe par défaut ne peut pas être vide")
        return v
