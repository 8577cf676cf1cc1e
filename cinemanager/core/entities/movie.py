"""
Movie catalog entity.

A movie record as stored in a user's catalog file: metadata plus the
directory holding the video file and its cover image.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Movie:
    """
    A movie of a user's private catalog.

    Movies have no identity beyond their values: two records with the same
    fields are equal, and a catalog may hold duplicates.

    Attributes:
        title: Movie title (never empty once validated)
        director: Director name, free text
        release_year: Release year (1888-2100 for validated records)
        media_path: Directory containing the video and cover files, may be empty
        categories: Comma-separated tag list, may be empty
        rating: Personal rating between 1.0 and 10.0
        external_id: External database identifier (ex: IMDb "tt0111161")
    """

    title: str
    director: str = ""
    release_year: int = 0
    media_path: str = ""
    categories: str = ""
    rating: float = 0.0
    external_id: str = ""

    @property
    def tags(self) -> tuple[str, ...]:
        """Individual category tags, trimmed, empty tags dropped."""
        return tuple(t.strip() for t in self.categories.split(",") if t.strip())
