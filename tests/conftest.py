"""
Fixtures pytest partagees pour les tests CineManager.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec un repertoire de donnees temporaire
- Repositories fichier pointant vers ce repertoire
- Films d'exemple
"""

from pathlib import Path

import pytest

from cinemanager.config import Settings
from cinemanager.core.entities import Movie
from cinemanager.infrastructure.persistence import (
    FileCatalogRepository,
    FileUserRepository,
)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le registre et les catalogues
    de chaque test.
    """
    return Settings(
        data_dir=tmp_path / "data",
        log_file=tmp_path / "logs" / "test.log",
        hash_passwords=False,
    )


@pytest.fixture
def user_repo(test_settings: Settings) -> FileUserRepository:
    """Registre des comptes dans le repertoire temporaire."""
    return FileUserRepository(path=test_settings.credentials_path)


@pytest.fixture
def catalog_repo(test_settings: Settings) -> FileCatalogRepository:
    """Catalogue de l'utilisateur 'alice' dans le repertoire temporaire."""
    return FileCatalogRepository(
        username="alice", path=test_settings.catalog_path("alice")
    )


@pytest.fixture
def inception() -> Movie:
    """Film de science-fiction de Nolan."""
    return Movie(
        title="Inception",
        director="Nolan",
        release_year=2010,
        media_path="/media/inception",
        categories="Sci-Fi",
        rating=8.8,
        external_id="tt1375666",
    )


@pytest.fixture
def up() -> Movie:
    """Film d'animation de Docter."""
    return Movie(
        title="Up",
        director="Docter",
        release_year=2009,
        media_path="",
        categories="Animation",
        rating=8.3,
        external_id="tt1049413",
    )
