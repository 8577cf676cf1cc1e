"""
Service d'authentification des comptes.

Le registre est relu a chaque appel pour voir les inscriptions faites
depuis le dernier acces. Les mots de passe sont compares en texte clair,
sauf les empreintes ``pbkdf2_sha256$...`` ecrites quand hash_passwords
est active.
"""

import hashlib
import hmac
import secrets
from typing import Optional

from loguru import logger

from cinemanager.core.entities import User
from cinemanager.core.ports.repositories import IUserRepository
from cinemanager.infrastructure.persistence.record_codec import is_storable_field

HASH_SCHEME = "pbkdf2_sha256"
# Tous les caracteres que str.splitlines traite comme une fin de ligne
_LINE_BREAKS = frozenset("\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029")
# Le username entre dans le nom du fichier catalogue
_FORBIDDEN_USERNAME_CHARS = ("/", "\\")


def _is_storable(username: str, password: str) -> bool:
    """Le couple peut-il etre ecrit puis relu a l'identique ?"""
    if not username or any(c in username for c in _FORBIDDEN_USERNAME_CHARS):
        return False
    return all(
        field == field.strip()
        and is_storable_field(field)
        and _LINE_BREAKS.isdisjoint(field)
        for field in (username, password)
    )


def hash_password(password: str, iterations: int, salt: Optional[str] = None) -> str:
    """
    Calcule l'empreinte stockee d'un mot de passe.

    Le resultat ne contient jamais le delimiteur du registre.
    """
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("ascii"), iterations
    )
    return f"{HASH_SCHEME}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    """Compare un mot de passe a sa valeur stockee (empreinte ou texte clair)."""
    if stored.startswith(HASH_SCHEME + "$"):
        try:
            _, iterations, salt, _ = stored.split("$")
            expected = hash_password(password, int(iterations), salt)
        except ValueError:
            return False
        return hmac.compare_digest(expected, stored)
    return password == stored


class AuthService:
    """
    Authentification et inscription sur le registre des comptes.

    Example:
        auth = AuthService(user_repo=FileUserRepository(settings.credentials_path))
        if auth.register("alice", "secret"):
            assert auth.authenticate("alice", "secret")
    """

    def __init__(
        self,
        user_repo: IUserRepository,
        hash_passwords: bool = False,
        hash_iterations: int = 200_000,
    ) -> None:
        """
        Args :
            user_repo : Repository du registre des comptes
            hash_passwords : Stocker une empreinte pbkdf2 au lieu du texte clair
            hash_iterations : Iterations pbkdf2 des nouvelles empreintes
        """
        self._user_repo = user_repo
        self._hash_passwords = hash_passwords
        self._hash_iterations = hash_iterations

    def authenticate(self, username: str, password: str) -> bool:
        """True si un compte correspond exactement au couple fourni."""
        for user in self._user_repo.load_all():
            if user.username == username and verify_password(password, user.password):
                logger.info("Authentification reussie", username=username)
                return True
        logger.info("Authentification refusee", username=username)
        return False

    def register(self, username: str, password: str) -> bool:
        """
        Inscrit un nouveau compte.

        Retourne False sans rien ecrire si le username existe deja
        (comparaison sensible a la casse), s'il est vide, ou si un champ
        contient le delimiteur, une fin de ligne ou des espaces en bordure
        (perdus a la relecture).
        """
        if not _is_storable(username, password):
            logger.warning("Inscription refusee : identifiants non stockables", username=username)
            return False

        if any(user.username == username for user in self._user_repo.load_all()):
            logger.info("Inscription refusee : compte existant", username=username)
            return False

        stored = (
            hash_password(password, self._hash_iterations)
            if self._hash_passwords
            else password
        )
        if not self._user_repo.append(User(username=username, password=stored)):
            return False

        logger.info("Compte cree", username=username)
        return True
