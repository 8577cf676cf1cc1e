"""
Tests unitaires pour FileCatalogRepository.

Tests couvrant:
- Creation du fichier au premier chargement
- Aller-retour save_all / load_all (ordre et valeurs)
- Tolerance aux lignes malformees
- Reecriture complete (pas d'ajout)
- Echec d'ecriture signale sans exception
"""

from pathlib import Path
from unittest.mock import patch

from cinemanager.core.entities import Movie
from cinemanager.infrastructure.persistence import FileCatalogRepository


class TestLoadAll:
    """Tests pour load_all()."""

    def test_missing_file_is_created_empty(self, catalog_repo: FileCatalogRepository):
        assert not catalog_repo.path.exists()

        assert catalog_repo.load_all() == []
        assert catalog_repo.path.exists()
        assert catalog_repo.path.read_text(encoding="utf-8") == ""

    def test_path_is_derived_from_username(self, test_settings):
        repo = FileCatalogRepository("bob", test_settings.catalog_path("bob"))
        assert repo.path == test_settings.data_dir / "movies_bob.txt"

    def test_malformed_line_is_skipped(self, catalog_repo: FileCatalogRepository):
        """Une ligne a 6 champs est ecartee, la ligne valide est chargee."""
        catalog_repo.path.write_text(
            "Inception,Nolan,2010,/m,Sci-Fi,8.8,tt1375666\n"
            "Up,Docter,2009,,Animation,8.3\n",
            encoding="utf-8",
        )

        movies = catalog_repo.load_all()

        assert len(movies) == 1
        assert movies[0].title == "Inception"
        assert catalog_repo.last_skipped == 1

    def test_bad_number_does_not_stop_loading(self, catalog_repo: FileCatalogRepository):
        """Une annee illisible ecarte sa ligne, les suivantes sont chargees."""
        catalog_repo.path.write_text(
            "A,X,abc,,,5.0,\n"
            "B,Y,2000,,,notanumber,\n"
            "C,Z,2001,,,6.5,\n",
            encoding="utf-8",
        )

        movies = catalog_repo.load_all()

        assert [m.title for m in movies] == ["C"]
        assert catalog_repo.last_skipped == 2

    def test_blank_lines_are_ignored(self, catalog_repo: FileCatalogRepository):
        catalog_repo.path.write_text("\n   \nC,Z,2001,,,6.5,\n\n", encoding="utf-8")

        assert len(catalog_repo.load_all()) == 1
        assert catalog_repo.last_skipped == 0

    def test_unreadable_file_gives_empty_catalog(self, catalog_repo: FileCatalogRepository):
        catalog_repo.path.write_text("C,Z,2001,,,6.5,\n", encoding="utf-8")

        with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
            assert catalog_repo.load_all() == []


class TestSaveAll:
    """Tests pour save_all()."""

    def test_round_trip_preserves_order_and_values(
        self, catalog_repo: FileCatalogRepository, inception: Movie, up: Movie
    ):
        movies = [up, inception, up]

        assert catalog_repo.save_all(movies) is True
        assert catalog_repo.load_all() == movies

    def test_unicode_line_separator_in_title_round_trips(
        self, catalog_repo: FileCatalogRepository
    ):
        """Un titre contenant U+2028 reste un seul enregistrement au rechargement."""
        movie = Movie(title="A\u2028B", director="X", release_year=2000, rating=5.0)

        assert catalog_repo.save_all([movie]) is True

        assert catalog_repo.load_all() == [movie]
        assert catalog_repo.last_skipped == 0

    def test_save_rewrites_whole_file(
        self, catalog_repo: FileCatalogRepository, inception: Movie, up: Movie
    ):
        """save_all remplace le contenu au lieu d'ajouter."""
        catalog_repo.save_all([inception, up])
        catalog_repo.save_all([up])

        lines = catalog_repo.path.read_text(encoding="utf-8").splitlines()
        assert lines == ["Up,Docter,2009,,Animation,8.3,tt1049413"]

    def test_save_empty_sequence_truncates(
        self, catalog_repo: FileCatalogRepository, inception: Movie
    ):
        catalog_repo.save_all([inception])
        catalog_repo.save_all([])

        assert catalog_repo.path.read_text(encoding="utf-8") == ""

    def test_save_leaves_no_temporary_file(
        self, catalog_repo: FileCatalogRepository, inception: Movie
    ):
        catalog_repo.save_all([inception])

        assert [p.name for p in catalog_repo.path.parent.iterdir()] == [catalog_repo.path.name]

    def test_write_failure_returns_false(
        self, catalog_repo: FileCatalogRepository, inception: Movie
    ):
        """Un echec d'ecriture est signale par False, sans exception."""
        catalog_repo.save_all([inception])

        with patch("cinemanager.infrastructure.persistence.catalog_repository.os.replace",
                   side_effect=OSError("disk full")):
            assert catalog_repo.save_all([]) is False

        # Le fichier precedent est intact et aucun temporaire ne traine
        assert catalog_repo.load_all() == [inception]
        assert len(list(catalog_repo.path.parent.iterdir())) == 1
