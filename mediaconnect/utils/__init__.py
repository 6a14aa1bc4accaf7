"""
Utilitaires et constantes pour MediaConnect.

Ce module contient les constantes partagees.
"""

from mediaconnect.utils.constants import (
    DETAILS_ERROR_PREFIX,
    DETAILS_FAILED_MESSAGE,
    DETAILS_NOT_FOUND_MESSAGE,
    TMDB_IMAGE_BASE_URL,
)

__all__ = [
    "DETAILS_ERROR_PREFIX",
    "DETAILS_FAILED_MESSAGE",
    "DETAILS_NOT_FOUND_MESSAGE",
    "TMDB_IMAGE_BASE_URL",
]
