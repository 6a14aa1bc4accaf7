"""
Constantes globales pour MediaConnect.

Ce module contient les constantes utilisees dans l'application:
- URLs de base des API OMDb et TMDB
- Quotas par defaut de chaque API
- Messages affiches quand les details ne peuvent pas etre charges
"""

OMDB_BASE_URL = "http://www.omdbapi.com/"
TMDB_BASE_URL = "https://api.themoviedb.org/3"

# Images TMDB (photos des acteurs, logos des plateformes)
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w185"

# Quotas: OMDb 30 requetes/minute, TMDB 40 requetes/10 secondes
OMDB_MAX_REQUESTS = 30
OMDB_WINDOW_SECONDS = 60.0
TMDB_MAX_REQUESTS = 40
TMDB_WINDOW_SECONDS = 10.0

# Region utilisee pour les plateformes de streaming
DEFAULT_WATCH_REGION = "US"

# OMDb renvoie "N/A" quand l'affiche est absente
OMDB_MISSING_VALUE = "N/A"

# Messages affichables quand les details sont indisponibles
DETAILS_NOT_FOUND_MESSAGE = "Additional details could not be found for this title."
DETAILS_FAILED_MESSAGE = "Failed to load content details."
DETAILS_ERROR_PREFIX = "Failed to load content details: "
