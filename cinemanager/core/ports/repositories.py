"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) definissant les contrats pour la persistance des donnees.
Les implementations (adaptateurs) fournissent le stockage concret
(fichiers texte delimites, en memoire pour les tests, etc.).
"""

from abc import ABC, abstractmethod
from typing import Sequence

from cinemanager.core.entities import Movie, User


class IUserRepository(ABC):
    """
    Interface de stockage du registre des comptes.

    Le registre est relu integralement a chaque appel : aucune mise en cache.
    """

    @abstractmethod
    def load_all(self) -> list[User]:
        """Charge tous les comptes. Les lignes invalides sont ignorees."""
        ...

    @abstractmethod
    def append(self, user: User) -> bool:
        """Ajoute un compte en fin de registre. Retourne True si ecrit."""
        ...


class ICatalogRepository(ABC):
    """
    Interface de stockage du catalogue de films d'un utilisateur.

    Le catalogue est toujours reecrit en entier : save_all est le seul
    chemin d'ecriture.
    """

    @abstractmethod
    def load_all(self) -> list[Movie]:
        """Charge tous les films, dans l'ordre du stockage."""
        ...

    @abstractmethod
    def save_all(self, movies: Sequence[Movie]) -> bool:
        """
        Remplace le contenu stocke par la sequence donnee.

        Args :
            movies : Films a persister, dans l'ordre voulu

        Retourne :
            True si l'ecriture a reussi, False sinon
        """
        ...
