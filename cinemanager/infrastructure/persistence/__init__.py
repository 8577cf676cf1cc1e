"""
Module de persistance fichier pour CineManager.

Tout est stocke en texte UTF-8, une ligne par enregistrement, champs
separes par une virgule :

- record_codec.py : Encodage/decodage d'une ligne (pur, sans I/O)
- user_repository.py : Registre global des comptes (ajout en fin de fichier)
- catalog_repository.py : Catalogue d'un utilisateur (reecriture complete)

Le format n'echappe pas le delimiteur : un champ contenant une virgule
decale les champs de la ligne, qui sera rejetee au chargement suivant.
"""

from cinemanager.infrastructure.persistence.catalog_repository import (
    FileCatalogRepository,
)
from cinemanager.infrastructure.persistence.user_repository import (
    FileUserRepository,
)

__all__ = [
    "FileCatalogRepository",
    "FileUserRepository",
]
