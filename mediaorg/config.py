"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe MEDIAORG_,
et peut optionnellement etre fournie via un fichier .env.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env a la racine du projet (parent de mediaorg/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe MEDIAORG_.
    Exemple : MEDIAORG_MOVIE_MIN_DURATION_SECONDS=3600
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIAORG_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Classification
    movie_min_duration_seconds: float = Field(default=3000.0, gt=0)
    allow_missing_extension: bool = Field(default=False)
    extra_noise_tokens: tuple[str, ...] = Field(default=())

    # Traitement par lot
    max_workers: int = Field(default=4, ge=1)

    # Logging (stderr, plus fichier JSON rotatif si log_file est defini)
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Etend ~ vers le repertoire home dans les chemins."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()
