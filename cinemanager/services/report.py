"""
Rapport texte du catalogue, groupe par categories.

Les films sont groupes sur la valeur exacte du champ categories (pas tag
par tag) ; les films sans categorie vont dans UNCATEGORIZED. Les groupes
suivent l'ordre de premiere apparition, les films de chaque groupe sont
tries par titre (ordre naturel des chaines).
"""

from pathlib import Path
from typing import Iterable

from loguru import logger

from cinemanager.core.entities import Movie

UNCATEGORIZED = "Sans categorie"

BANNER = "=" * 42
RULE = "-" * 42
TITLE_LINE = "RAPPORT DE LA COLLECTION - CINEMA MANAGER".center(42).rstrip()


def group_by_categories(movies: Iterable[Movie]) -> dict[str, list[Movie]]:
    """Groupe les films par champ categories, dans l'ordre de premiere apparition."""
    groups: dict[str, list[Movie]] = {}
    for movie in movies:
        key = movie.categories if movie.categories else UNCATEGORIZED
        groups.setdefault(key, []).append(movie)
    return groups


def format_movie_line(movie: Movie) -> str:
    return (
        f"- {movie.title} | Realisateur: {movie.director} | Annee: {movie.release_year} "
        f"| Note: {movie.rating:.1f} | IMDb: {movie.external_id}"
    )


class ReportGenerator:
    """
    Genere le rapport groupe d'un instantane du catalogue.

    Sans effet de bord : generate() produit le texte, write() est une
    commodite pour l'ecrire a l'emplacement choisi par l'appelant.
    """

    def generate(self, movies: Iterable[Movie]) -> str:
        """Produit le texte complet du rapport."""
        lines = [BANNER, TITLE_LINE, BANNER, ""]

        for category, group in group_by_categories(movies).items():
            lines.append(f"CATEGORIE: {category.upper()}")
            lines.append(RULE)
            for movie in sorted(group, key=lambda m: m.title):
                lines.append(format_movie_line(movie))
            lines.append("")

        return "\n".join(lines) + "\n"

    def write(self, movies: Iterable[Movie], destination: Path) -> Path:
        """
        Ecrit le rapport en UTF-8 a destination.

        Raises:
            OSError: si le fichier ne peut pas etre ecrit
        """
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(self.generate(movies), encoding="utf-8")
        logger.info("Rapport genere", path=str(destination))
        return destination
