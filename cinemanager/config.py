"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe
CINEMANAGER_, et peut optionnellement etre fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Exemple : CINEMANAGER_DATA_DIR=/srv/cinema CINEMANAGER_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement etendus (~ -> repertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CINEMANAGER_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Stockage (registre des comptes + un catalogue par utilisateur)
    data_dir: Path = Field(default=Path("~/CinemaManagerData/lex"))
    credentials_file: str = Field(default="credentials.txt")
    catalog_file_pattern: str = Field(default="movies_{username}.txt")

    # Empreinte pbkdf2 des nouveaux mots de passe (texte clair par defaut
    # pour rester compatible avec les registres existants)
    hash_passwords: bool = Field(default=False)
    hash_iterations: int = Field(default=200_000, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinemanager.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("data_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("catalog_file_pattern")
    @classmethod
    def check_pattern(cls, v: str) -> str:
        """Le motif doit contenir le champ {username}."""
        if "{username}" not in v:
            raise ValueError("catalog_file_pattern doit contenir {username}")
        return v

    @property
    def credentials_path(self) -> Path:
        """Chemin complet du registre des comptes."""
        return self.data_dir / self.credentials_file

    def catalog_path(self, username: str) -> Path:
        """Chemin deterministe du catalogue d'un utilisateur."""
        return self.data_dir / self.catalog_file_pattern.format(username=username)
