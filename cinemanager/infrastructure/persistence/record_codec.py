"""
Codec des enregistrements : une entite <-> une ligne de texte delimitee.

Format d'un compte : ``username,password``
Format d'un film : ``title,director,year,mediaPath,categories,rating,externalId``

Les champs sont separes par DELIMITER sans echappement et sont nettoyes
des espaces en bordure au decodage.
"""

from typing import Optional

from cinemanager.core.entities import Movie, User
from cinemanager.core.errors import MalformedRecordError

DELIMITER = ","

USER_FIELD_COUNT = 2
MOVIE_FIELD_COUNT = 7

# Fins de ligne du format (read_text convertit deja CR et CRLF en LF)
RECORD_SEPARATORS = ("\n", "\r")


def _split(line: str) -> list[str]:
    return [part.strip() for part in line.rstrip("\r\n").split(DELIMITER)]


def split_records(text: str) -> list[str]:
    """
    Decoupe le contenu d'un fichier en lignes d'enregistrement.

    Seuls LF et CR terminent une ligne : les autres separateurs reconnus par
    str.splitlines (U+2028, U+0085, saut de page...) restent dans le champ
    qui les contient.
    """
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def is_storable_field(value: str) -> bool:
    """Un champ sans delimiteur ni fin de ligne se relit a l'identique."""
    return not any(c in value for c in (DELIMITER, *RECORD_SEPARATORS))


def format_rating(rating: float) -> str:
    """
    Forme decimale courte d'une note, toujours avec un point (8 -> "8.0").

    Identique a la forme deja presente dans les fichiers existants.
    """
    return repr(float(rating))


def encode_user(user: User) -> str:
    """Encode un compte en une ligne (sans fin de ligne)."""
    return DELIMITER.join((user.username, user.password))


def decode_user(line: str) -> Optional[User]:
    """
    Decode une ligne du registre.

    Retourne :
        Le compte, ou None si la ligne n'a pas exactement deux champs
    """
    parts = _split(line)
    if len(parts) != USER_FIELD_COUNT:
        return None
    return User(username=parts[0], password=parts[1])


def encode_movie(movie: Movie) -> str:
    """Encode un film en une ligne de 7 champs (sans fin de ligne)."""
    return DELIMITER.join((
        movie.title,
        movie.director,
        str(movie.release_year),
        movie.media_path,
        movie.categories,
        format_rating(movie.rating),
        movie.external_id,
    ))


def decode_movie(line: str) -> Movie:
    """
    Decode une ligne de catalogue.

    Raises:
        MalformedRecordError: nombre de champs different de 7, annee non
            entiere ou note non numerique
    """
    parts = _split(line)
    if len(parts) != MOVIE_FIELD_COUNT:
        raise MalformedRecordError(
            line, f"{len(parts)} champs au lieu de {MOVIE_FIELD_COUNT}"
        )

    title, director, year_text, media_path, categories, rating_text, external_id = parts
    try:
        year = int(year_text)
    except ValueError:
        raise MalformedRecordError(line, f"annee invalide {year_text!r}") from None
    try:
        rating = float(rating_text)
    except ValueError:
        raise MalformedRecordError(line, f"note invalide {rating_text!r}") from None

    return Movie(
        title=title,
        director=director,
        release_year=year,
        media_path=media_path,
        categories=categories,
        rating=rating,
        external_id=external_id,
    )
