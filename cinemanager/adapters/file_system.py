"""
Adaptateur de recherche des fichiers media d'un film.

Le dossier media_path d'un film contient la video et sa jaquette. Ce module
ne fait que localiser ces fichiers : lancer un lecteur ou decoder une image
reste a la charge de la couche de presentation.
"""

from pathlib import Path
from typing import Optional

from cinemanager.core.entities import Movie

# Extensions recherchees (insensible a la casse)
VIDEO_EXTENSIONS: frozenset[str] = frozenset({".mp4"})
COVER_EXTENSIONS: frozenset[str] = frozenset({".jpg", ".png"})


class MediaLocator:
    """
    Localise la video et la jaquette dans le dossier media d'un film.

    Les fichiers sont examines par ordre alphabetique de nom, pour un
    resultat stable d'un systeme a l'autre.
    """

    def _first_with_extension(
        self, media_path: str, extensions: frozenset[str]
    ) -> Optional[Path]:
        if not media_path:
            return None
        directory = Path(media_path).expanduser()
        try:
            if not directory.is_dir():
                return None
            candidates = sorted(
                (p for p in directory.iterdir() if p.suffix.lower() in extensions and p.is_file()),
                key=lambda p: p.name,
            )
        except OSError:
            return None
        return candidates[0] if candidates else None

    def find_video(self, media_path: str) -> Optional[Path]:
        """Premier fichier .mp4 du dossier, ou None."""
        return self._first_with_extension(media_path, VIDEO_EXTENSIONS)

    def find_cover(self, media_path: str) -> Optional[Path]:
        """Premiere image .jpg ou .png du dossier, ou None."""
        return self._first_with_extension(media_path, COVER_EXTENSIONS)

    def locate(self, movie: Movie) -> tuple[Optional[Path], Optional[Path]]:
        """Couple (video, jaquette) d'un film."""
        return self.find_video(movie.media_path), self.find_cover(movie.media_path)
