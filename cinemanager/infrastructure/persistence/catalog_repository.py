"""
Catalogue de films d'un utilisateur stocke dans un fichier texte.

Une ligne par film, 7 champs separes par des virgules. Le fichier est
toujours reecrit en entier a partir de la liste en memoire : il ne peut
donc jamais contenir plus d'enregistrements que la memoire.
"""

import os
import uuid
from pathlib import Path
from typing import Sequence

from loguru import logger

from cinemanager.core.entities import Movie
from cinemanager.core.errors import MalformedRecordError
from cinemanager.core.ports.repositories import ICatalogRepository
from cinemanager.infrastructure.persistence.record_codec import (
    decode_movie,
    encode_movie,
    split_records,
)


class FileCatalogRepository(ICatalogRepository):
    """
    Implementation de ICatalogRepository sur un fichier texte plat.

    Le chargement est tolerant : une ligne illisible est ecartee et
    journalisee, le reste du fichier est charge normalement. Le nombre de
    lignes ecartees lors du dernier chargement est expose par last_skipped.

    Example:
        repo = FileCatalogRepository(username="alice", path=settings.catalog_path("alice"))
        movies = repo.load_all()
        repo.save_all(movies)
    """

    def __init__(self, username: str, path: Path) -> None:
        """
        Initialise le repository et cree le repertoire de donnees si besoin.

        Args :
            username : Proprietaire du catalogue
            path : Chemin du fichier catalogue de cet utilisateur
        """
        self._username = username
        self._path = path
        self.last_skipped = 0
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def username(self) -> str:
        return self._username

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> list[Movie]:
        """
        Charge le catalogue dans l'ordre du fichier.

        Cree un fichier vide si absent. Ne leve jamais d'exception :
        un fichier illisible donne un catalogue vide.
        """
        self.last_skipped = 0
        try:
            if not self._path.exists():
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._path.touch()
                logger.info("Catalogue cree", username=self._username, path=str(self._path))
                return []
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(
                "Lecture du catalogue impossible",
                username=self._username,
                path=str(self._path),
                error=str(e),
            )
            return []

        movies: list[Movie] = []
        for lineno, line in enumerate(split_records(text), start=1):
            if not line.strip():
                continue
            try:
                movies.append(decode_movie(line))
            except MalformedRecordError as e:
                self.last_skipped += 1
                logger.warning(
                    "Ligne de catalogue ignoree",
                    path=str(self._path),
                    line=lineno,
                    reason=e.reason,
                )

        logger.debug(
            "Catalogue charge",
            username=self._username,
            count=len(movies),
            skipped=self.last_skipped,
        )
        return movies

    def save_all(self, movies: Sequence[Movie]) -> bool:
        """
        Reecrit entierement le fichier a partir de la sequence donnee.

        L'ecriture passe par un fichier temporaire du meme repertoire puis
        os.replace, pour qu'un lecteur ne voie jamais un fichier partiel.
        """
        temp_path = self._path.with_name(f".tmp_{uuid.uuid4().hex}_{self._path.name}")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_path, "w", encoding="utf-8", newline="\n") as f:
                for movie in movies:
                    f.write(encode_movie(movie) + "\n")
            os.replace(temp_path, self._path)
        except OSError as e:
            logger.error(
                "Sauvegarde du catalogue impossible",
                username=self._username,
                path=str(self._path),
                error=str(e),
            )
            temp_path.unlink(missing_ok=True)
            return False

        logger.debug("Catalogue sauvegarde", username=self._username, count=len(movies))
        return True
