"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe
MEDIATHEQUE_, et peut optionnellement être fournie via un fichier .env.

Les fichiers de cache et de progression sont dérivés de data_dir.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mediatheque.utils.constants import (
    CONTINUE_WATCHING_LIMIT,
    METADATA_CACHE_FILENAME,
    PROGRESS_FILENAME,
    REMOTE_CACHE_FILENAME,
)

# Fichier .env à la racine du projet (parent de mediatheque/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MEDIATHEQUE_.
    Exemple : MEDIATHEQUE_SCAN_WORKERS=8

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIATHEQUE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Chemins (avec expansion ~)
    library_dir: Path = Field(default=Path("~/Videos"))
    data_dir: Path = Field(default=Path("~/.mediatheque"))

    # Scan
    scan_workers: int = Field(default=4, ge=1)
    probe_timeout_seconds: float = Field(default=30.0, gt=0)

    # Progression
    continue_watching_limit: int = Field(default=CONTINUE_WATCHING_LIMIT, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("~/.mediatheque/logs/mediatheque.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("library_dir", "data_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def metadata_cache_file(self) -> Path:
        """Cache des métadonnées techniques (résolution, durée)."""
        return self.data_dir / METADATA_CACHE_FILENAME

    @property
    def remote_cache_file(self) -> Path:
        """Cache des métadonnées distantes."""
        return self.data_dir / REMOTE_CACHE_FILENAME

    @property
    def progress_file(self) -> Path:
        """Progression de lecture."""
        return self.data_dir / PROGRESS_FILENAME
