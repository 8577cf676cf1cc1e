"""
Registre des comptes stocke dans un fichier texte.

Une ligne par compte (``username,password``). Le fichier est cree vide
au premier acces et n'est jamais reecrit : les inscriptions sont ajoutees
en fin de fichier.
"""

from pathlib import Path

from loguru import logger

from cinemanager.core.entities import User
from cinemanager.core.ports.repositories import IUserRepository
from cinemanager.infrastructure.persistence.record_codec import (
    decode_user,
    encode_user,
    split_records,
)


class FileUserRepository(IUserRepository):
    """
    Implementation de IUserRepository sur un fichier texte plat.

    Aucun verrou inter-processus : deux inscriptions concurrentes depuis
    deux processus peuvent toutes deux ajouter le meme username.
    """

    def __init__(self, path: Path) -> None:
        """
        Args :
            path : Chemin du registre (cree avec son repertoire si absent)
        """
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_file(self) -> bool:
        """Cree le registre vide s'il n'existe pas. Retourne True si cree."""
        if self._path.exists():
            return False
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.touch()
        logger.info("Registre des comptes cree", path=str(self._path))
        return True

    def load_all(self) -> list[User]:
        """Charge tous les comptes valides du registre."""
        try:
            if self._ensure_file():
                return []
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error("Lecture du registre impossible", path=str(self._path), error=str(e))
            return []

        users: list[User] = []
        skipped = 0
        for line in split_records(text):
            if not line.strip():
                continue
            user = decode_user(line)
            if user is None:
                skipped += 1
                continue
            users.append(user)

        if skipped:
            logger.debug("Lignes ignorees dans le registre", skipped=skipped)
        return users

    def append(self, user: User) -> bool:
        """Ajoute une ligne pour le compte en fin de registre."""
        try:
            self._ensure_file()
            with open(self._path, "a", encoding="utf-8") as f:
                f.write(encode_user(user) + "\n")
        except OSError as e:
            logger.error(
                "Ecriture du compte impossible",
                username=user.username,
                path=str(self._path),
                error=str(e),
            )
            return False
        return True
