"""
Business entities representing core domain concepts.

Exports:
- Movie: A movie record of a user's catalog
- User: An account of the credential registry
"""

from cinemanager.core.entities.movie import Movie
from cinemanager.core.entities.user import User

__all__ = [
    "Movie",
    "User",
]
