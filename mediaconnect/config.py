"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe
MEDIACONNECT_, et peut optionnellement être fournie via un fichier .env.

Les deux clés API (OMDb, TMDB) sont obligatoires: leur absence empêche la
construction des Settings.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mediaconnect.utils.constants import (
    DEFAULT_WATCH_REGION,
    OMDB_BASE_URL,
    OMDB_MAX_REQUESTS,
    OMDB_WINDOW_SECONDS,
    TMDB_BASE_URL,
    TMDB_MAX_REQUESTS,
    TMDB_WINDOW_SECONDS,
)

# Trouver le fichier .env à la racine du projet (parent de mediaconnect/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MEDIACONNECT_.
    Exemple : MEDIACONNECT_TMDB_API_KEY=xxx
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIACONNECT_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Clés API (OBLIGATOIRES)
    omdb_api_key: str
    tmdb_api_key: str

    # Endpoints
    omdb_base_url: str = Field(default=OMDB_BASE_URL)
    tmdb_base_url: str = Field(default=TMDB_BASE_URL)

    # Quotas (fenêtre glissante)
    omdb_max_requests: int = Field(default=OMDB_MAX_REQUESTS, ge=1)
    omdb_window_seconds: float = Field(default=OMDB_WINDOW_SECONDS, gt=0)
    tmdb_max_requests: int = Field(default=TMDB_MAX_REQUESTS, ge=1)
    tmdb_window_seconds: float = Field(default=TMDB_WINDOW_SECONDS, gt=0)
    rate_limit_poll_interval: float = Field(default=0.1, gt=0)

    # HTTP
    http_timeout_seconds: float = Field(default=20.0, gt=0)
    http_retry_attempts: int = Field(default=3, ge=1)
    http_retry_max_wait: float = Field(default=30.0, gt=0)

    # Plateformes de streaming
    watch_region: str = Field(default=DEFAULT_WATCH_REGION, min_length=2, max_length=2)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/mediaconnect.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("omdb_api_key", "tmdb_api_key")
    @classmethod
    def require_key(cls, v: str) -> str:
        """Refuse une clé vide ou composée d'espaces."""
        v = v.strip()
        if not v:
            raise ValueError("la clé API ne peut pas être vide")
        return v

    @field_validator("watch_region")
    @classmethod
    def upper_region(cls, v: str) -> str:
        return v.upper()

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()
