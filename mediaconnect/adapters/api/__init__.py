"""
Clients API externes pour la recherche et les details des titres.

Ce module fournit les adaptateurs pour communiquer avec les API externes:
- OMDb: recherche par titre (API principale)
- TMDB: resolution de l'ID IMDb puis details, credits et plateformes

Infrastructure partagee:
- HttpJsonClient: client HTTP unique, decodage JSON vers modeles pydantic
- RateLimiter: limiteur a fenetre glissante, un par API
- with_retry / get_with_retry: backoff exponentiel sur les reponses 429
- Exceptions typees: TransportError, RequestFailedError, DecodeError,
  InterruptedWaitError (toutes derivent de MovieClientError)

Les clients implementent les ports definis dans core/ports/api_clients.py.
"""

from mediaconnect.adapters.api.errors import (
    DecodeError,
    InterruptedWaitError,
    MovieClientError,
    RequestFailedError,
    TransportError,
)
from mediaconnect.adapters.api.http_json import HttpJsonClient
from mediaconnect.adapters.api.omdb_client import OMDbSearchGateway
from mediaconnect.adapters.api.rate_limiter import RateLimiter
from mediaconnect.adapters.api.retry import RateLimitError, get_with_retry, with_retry
from mediaconnect.adapters.api.tmdb_aggregator import TMDBDetailsAggregator
from mediaconnect.adapters.api.tmdb_resolver import TMDBIdentifierResolver

__all__ = [
    "DecodeError",
    "HttpJsonClient",
    "InterruptedWaitError",
    "MovieClientError",
    "OMDbSearchGateway",
    "RateLimitError",
    "RateLimiter",
    "RequestFailedError",
    "TMDBDetailsAggregator",
    "TMDBIdentifierResolver",
    "TransportError",
    "get_with_retry",
    "with_retry",
]
