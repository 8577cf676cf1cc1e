"""
Exceptions du domaine catalogue.

Seules les erreurs de validation remontent a l'appelant : les problemes
de lecture sont corriges localement par les repositories et les problemes
d'ecriture sont journalises et signales par une valeur de retour.
"""

from enum import Enum


class CatalogError(Exception):
    """Classe de base des erreurs du catalogue."""


class ValidationErrorKind(str, Enum):
    """Regle metier violee par un film candidat."""

    EMPTY_TITLE = "empty_title"
    RATING_OUT_OF_RANGE = "rating_out_of_range"
    INVALID_YEAR = "invalid_year"


class ValidationError(CatalogError):
    """Un film candidat ne respecte pas les regles metier.

    Attributes:
        kind: La regle violee
    """

    def __init__(self, kind: ValidationErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class MalformedRecordError(CatalogError):
    """Une ligne stockee ne peut pas etre decodee en enregistrement.

    Attributes:
        line: La ligne brute rejetee
        reason: Motif du rejet
    """

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason
