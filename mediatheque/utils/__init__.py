"""
Utilitaires et constantes pour Mediatheque.

Ce module contient les constantes partagees.
"""

from mediatheque.utils.constants import (
    COMPLETED_PERCENTAGE,
    CONTINUE_WATCHING_LIMIT,
    IN_PROGRESS_MIN_PERCENTAGE,
    NO_YEAR,
    VIDEO_EXTENSIONS,
)

__all__ = [
    "VIDEO_EXTENSIONS",
    "IN_PROGRESS_MIN_PERCENTAGE",
    "COMPLETED_PERCENTAGE",
    "CONTINUE_WATCHING_LIMIT",
    "NO_YEAR",
]
