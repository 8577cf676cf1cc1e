"""
Catalogue filtre d'un utilisateur.

FilteredCatalog detient la liste de reference des films (ordre d'insertion)
et un predicat de filtrage. La vue filtree n'est jamais materialisee :
chaque lecture reparcourt la liste courante avec le predicat courant.

Chaque ajout ou suppression est suivi, avant le retour de l'appel, d'une
reecriture complete du fichier catalogue.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from loguru import logger

from cinemanager.core.entities import Movie
from cinemanager.core.ports.repositories import ICatalogRepository
from cinemanager.services.validation import validate_movie

MoviePredicate = Callable[[Movie], bool]


def accept_all(movie: Movie) -> bool:
    return True


def make_text_predicate(text: Optional[str]) -> MoviePredicate:
    """
    Construit le predicat de recherche textuelle.

    Un texte vide accepte tout. Sinon un film est retenu si le texte
    apparait (insensible a la casse) dans le titre, le realisateur,
    l'annee ecrite en decimal ou les categories.
    """
    if not text:
        return accept_all

    needle = text.lower()

    def predicate(movie: Movie) -> bool:
        return (
            needle in movie.title.lower()
            or needle in movie.director.lower()
            or needle in str(movie.release_year)
            or (bool(movie.categories) and needle in movie.categories.lower())
        )

    return predicate


def filter_movies(movies: list[Movie], predicate: MoviePredicate) -> Iterator[Movie]:
    """Projection paresseuse de movies a travers predicate, dans l'ordre."""
    return (movie for movie in movies if predicate(movie))


@dataclass(frozen=True)
class CatalogFacets:
    """Valeurs distinctes triees pour la navigation dans le catalogue.

    Attributes:
        categories: Tags individuels (categories decoupees sur la virgule)
        directors: Realisateurs non vides
        years: Annees de sortie
    """

    categories: tuple[str, ...] = ()
    directors: tuple[str, ...] = ()
    years: tuple[int, ...] = ()


class FilteredCatalog:
    """
    Liste de reference des films d'un utilisateur et sa vue filtree.

    Un seul catalogue par session, utilise sequentiellement : aucune
    synchronisation interne.

    Example:
        catalog = FilteredCatalog.open(FileCatalogRepository("alice", path))
        catalog.add(title="Inception", director="Nolan", release_year=2010, rating=9.0)
        catalog.set_filter("nol")
        titles = [m.title for m in catalog.view()]
    """

    def __init__(self, repository: ICatalogRepository, movies: Optional[list[Movie]] = None) -> None:
        """
        Args :
            repository : Stockage du catalogue, appele apres chaque mutation
            movies : Contenu initial (deja charge)
        """
        self._repository = repository
        self._movies: list[Movie] = list(movies) if movies else []
        self._predicate: MoviePredicate = accept_all
        self._filter_text = ""
        self.last_save_ok = True

    @classmethod
    def open(cls, repository: ICatalogRepository) -> "FilteredCatalog":
        """Charge le catalogue depuis le stockage."""
        return cls(repository, repository.load_all())

    @property
    def movies(self) -> tuple[Movie, ...]:
        """Instantane de la liste de reference."""
        return tuple(self._movies)

    @property
    def filter_text(self) -> str:
        return self._filter_text

    def __len__(self) -> int:
        return len(self._movies)

    def _persist(self) -> bool:
        self.last_save_ok = self._repository.save_all(self._movies)
        if not self.last_save_ok:
            logger.warning(
                "Catalogue en memoire non synchronise avec le disque",
                count=len(self._movies),
            )
        return self.last_save_ok

    def add(
        self,
        title: str,
        director: str = "",
        release_year: int = 0,
        media_path: str = "",
        categories: str = "",
        rating: float = 0.0,
        external_id: str = "",
    ) -> Movie:
        """
        Valide puis ajoute un film en fin de catalogue et sauvegarde.

        Raises:
            ValidationError: le film est refuse, rien n'est modifie ni ecrit
        """
        movie = validate_movie(
            title=title,
            director=director,
            release_year=release_year,
            media_path=media_path,
            categories=categories,
            rating=rating,
            external_id=external_id,
        )
        self._movies.append(movie)
        logger.info("Film ajoute", title=movie.title, year=movie.release_year)
        self._persist()
        return movie

    def delete(self, movie: Movie) -> bool:
        """
        Retire la premiere occurrence egale a movie puis sauvegarde.

        Retourne False si le film est absent (sans erreur).
        """
        try:
            self._movies.remove(movie)
            removed = True
            logger.info("Film supprime", title=movie.title)
        except ValueError:
            removed = False
            logger.debug("Film a supprimer absent du catalogue", title=movie.title)
        self._persist()
        return removed

    def set_filter(self, text: Optional[str]) -> None:
        """Remplace le predicat courant par une recherche sur text."""
        self._filter_text = text or ""
        self._predicate = make_text_predicate(text)

    def set_predicate(self, predicate: Optional[MoviePredicate]) -> None:
        """Remplace le predicat courant par un predicat arbitraire (None = tout)."""
        self._filter_text = ""
        self._predicate = predicate or accept_all

    def view(self) -> Iterator[Movie]:
        """
        Films retenus par le predicat courant, dans l'ordre d'insertion.

        Chaque appel produit un nouvel iterateur evalue a la lecture.
        """
        return filter_movies(self._movies, self._predicate)

    def facets(self) -> CatalogFacets:
        """Valeurs distinctes de la vue courante pour la navigation."""
        visible = list(self.view())
        return CatalogFacets(
            categories=tuple(sorted({tag for m in visible for tag in m.tags})),
            directors=tuple(sorted({m.director for m in visible if m.director})),
            years=tuple(sorted({m.release_year for m in visible})),
        )
