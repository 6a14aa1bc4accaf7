"""
Mecanisme de retry avec backoff exponentiel pour les API externes.

Gere automatiquement les erreurs 429 (rate limiting cote serveur) en relancant
les requetes avec un delai croissant et du jitter aleatoire. Complete le
RateLimiter local, qui ne connait pas les quotas partages par d'autres clients.

Usage:
    # Avec le decorateur
    @with_retry(max_attempts=5, max_wait=60)
    async def my_api_call():
        ...

    # Avec la fonction helper (le limiteur est sollicite a chaque tentative)
    response = await get_with_retry(client, url, limiter=limiter, params=params)
"""

from typing import Optional

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from mediaconnect.adapters.api.rate_limiter import RateLimiter


class RateLimitError(Exception):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie.
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Retry-After peut etre un nombre de secondes ou une date HTTP."""
    if value is None or not value.strip().isdigit():
        return None
    return int(value)


def _wait_retry_after(fallback, max_wait: float):
    """Attend Retry-After (borne par max_wait) s'il est fourni, sinon le backoff."""

    def _wait(retry_state) -> float:
        error = retry_state.outcome.exception()
        if isinstance(error, RateLimitError) and error.retry_after is not None:
            return min(float(error.retry_after), max_wait)
        return fallback(retry_state)

    return _wait


def with_retry(max_attempts: int = 3, max_wait: float = 30, min_wait: float = 1):
    """
    Decorateur pour relancer sur RateLimitError avec backoff exponentiel.

    Le delai suit Retry-After quand le serveur le fournit (borne par max_wait),
    sinon wait_random_exponential, dont le jitter evite que les sous-requetes
    paralleles relancent toutes en meme temps.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 3)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 30)
        min_wait: Delai minimum entre les tentatives en secondes (defaut: 1)

    Returns:
        Decorateur a appliquer sur une fonction async
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=_wait_retry_after(
            wait_random_exponential(multiplier=1, min=min_wait, max=max_wait), max_wait
        ),
        stop=stop_after_attempt(max_attempts),
        reraise=True,
    )


async def get_with_retry(
    client: httpx.AsyncClient,
    url: str,
    max_attempts: int = 3,
    max_wait: float = 30,
    min_wait: float = 1,
    limiter: Optional[RateLimiter] = None,
    **kwargs,
) -> httpx.Response:
    """
    Execute un GET avec retry automatique sur 429.

    Convertit les reponses 429 en RateLimitError et relance avec
    backoff exponentiel. Les autres reponses sont retournees telles quelles:
    l'appelant decide quoi faire du statut.

    Chaque tentative, y compris les relances, consomme une place du limiteur:
    une requete HTTP envoyee correspond toujours a une admission.

    Args:
        client: Client httpx async a utiliser
        url: URL a appeler
        max_attempts: Nombre maximum de tentatives (defaut: 3)
        max_wait: Delai maximum entre les tentatives en secondes
        min_wait: Delai minimum entre les tentatives en secondes
        limiter: Limiteur de debit a solliciter avant chaque tentative
        **kwargs: Arguments supplementaires passes a client.get()

    Returns:
        httpx.Response (tout statut sauf 429)

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        httpx.RequestError: Pour les erreurs reseau (pas de retry)
        InterruptedWaitError: Si le limiteur est ferme pendant l'attente
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait, min_wait=min_wait)
    async def _do_request() -> httpx.Response:
        if limiter is not None:
            await limiter.acquire()
        response = await client.get(url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
        return response

    return await _do_request()
