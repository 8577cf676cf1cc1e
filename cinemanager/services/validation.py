"""
Regles metier d'admission d'un film dans le catalogue.

Les regles sont verifiees dans l'ordre, la premiere violee l'emporte :
1. titre non vide (apres suppression des espaces)
2. note entre 1 et 10 inclus
3. annee entre 1888 et 2100 inclus

Le realisateur, le chemin media, les categories et l'identifiant externe
ne sont pas contraints. Les films charges depuis le disque ne passent
jamais par ici.
"""

from cinemanager.core.entities import Movie
from cinemanager.core.errors import ValidationError, ValidationErrorKind

MIN_RATING = 1.0
MAX_RATING = 10.0
MIN_YEAR = 1888
MAX_YEAR = 2100


def validate_movie(
    title: str,
    director: str = "",
    release_year: int = 0,
    media_path: str = "",
    categories: str = "",
    rating: float = 0.0,
    external_id: str = "",
) -> Movie:
    """
    Construit un Movie a partir de champs candidats.

    Les champs texte sont nettoyes des espaces en bordure, comme le fait
    le decodage au chargement : le film admis est celui qui sera relu.

    Raises:
        ValidationError: avec kind EMPTY_TITLE, RATING_OUT_OF_RANGE ou INVALID_YEAR
    """
    if title is None or not title.strip():
        raise ValidationError(
            ValidationErrorKind.EMPTY_TITLE,
            "Le titre du film ne peut pas etre vide",
        )

    if not MIN_RATING <= rating <= MAX_RATING:
        raise ValidationError(
            ValidationErrorKind.RATING_OUT_OF_RANGE,
            f"La note doit etre comprise entre {MIN_RATING:g} et {MAX_RATING:g} (recu {rating})",
        )

    if (
        isinstance(release_year, bool)
        or not isinstance(release_year, int)
        or not MIN_YEAR <= release_year <= MAX_YEAR
    ):
        raise ValidationError(
            ValidationErrorKind.INVALID_YEAR,
            f"Annee de sortie invalide : {release_year} ({MIN_YEAR}-{MAX_YEAR})",
        )

    return Movie(
        title=title.strip(),
        director=(director or "").strip(),
        release_year=release_year,
        media_path=(media_path or "").strip(),
        categories=(categories or "").strip(),
        rating=float(rating),
        external_id=(external_id or "").strip(),
    )
