"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports repository : Contrats de persistance des donnees
- IUserRepository : Stockage du registre des comptes
- ICatalogRepository : Stockage du catalogue de films d'un utilisateur
"""

from cinemanager.core.ports.repositories import (
    ICatalogRepository,
    IUserRepository,
)

__all__ = [
    "ICatalogRepository",
    "IUserRepository",
]
