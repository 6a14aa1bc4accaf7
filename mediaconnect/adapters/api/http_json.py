"""
Client HTTP JSON partage par les passerelles OMDb et TMDB.

Execute un GET, exige un statut 200 et decode le corps JSON dans un modele
pydantic. Les echecs sont convertis en exceptions typees (voir errors.py).

Usage:
    http = HttpJsonClient(timeout=20.0)
    payload = await http.request(
        url, TmdbFindResponse, params={"api_key": key}, limiter=tmdb_limiter
    )
    await http.close()
"""

import re
from typing import Any, Mapping, Optional, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from mediaconnect.adapters.api.errors import DecodeError, RequestFailedError, TransportError
from mediaconnect.adapters.api.rate_limiter import RateLimiter
from mediaconnect.adapters.api.retry import RateLimitError, get_with_retry

ModelT = TypeVar("ModelT", bound=BaseModel)

_SECRET_PARAMS = re.compile(r"(api_?key=)[^&]+", re.IGNORECASE)


def mask_secrets(url: str) -> str:
    """Masque les cles API presentes dans une URL avant de la logger."""
    return _SECRET_PARAMS.sub(r"\1***", url)


class HttpJsonClient:
    """
    Client HTTP unique (un seul pool de connexions) pour toutes les API.

    Le client httpx est cree a la premiere requete et reutilise ensuite.
    Les redirections sont suivies; chaque requete est bornee par un timeout.

    Attributes:
        timeout: Timeout de connexion/lecture en secondes
        retry_attempts: Nombre de tentatives sur reponse 429
    """

    def __init__(
        self,
        timeout: float = 20.0,
        retry_attempts: int = 3,
        retry_max_wait: float = 30.0,
        retry_min_wait: float = 1.0,
    ) -> None:
        """
        Initialise le client.

        Args:
            timeout: Timeout de connexion/lecture en secondes
            retry_attempts: Nombre de tentatives sur reponse 429
            retry_max_wait: Delai maximum entre deux tentatives
            retry_min_wait: Delai minimum entre deux tentatives
        """
        self.timeout = timeout
        self.retry_attempts = retry_attempts
        self._retry_max_wait = retry_max_wait
        self._retry_min_wait = retry_min_wait
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(follow_redirects=True, timeout=self.timeout)
        return self._client

    async def request(
        self,
        url: str,
        model: type[ModelT],
        params: Optional[Mapping[str, Any]] = None,
        limiter: Optional[RateLimiter] = None,
    ) -> ModelT:
        """
        Execute un GET et decode la reponse JSON.

        Args:
            url: URL a appeler
            model: Modele pydantic cible (champs inconnus ignores)
            params: Parametres de requete (encodes par httpx)
            limiter: Budget de l'API, sollicite avant chaque tentative (relances 429 comprises)

        Returns:
            Instance de model

        Raises:
            TransportError: Erreur reseau ou timeout
            RequestFailedError: Statut HTTP different de 200 (y compris 429 persistant)
            DecodeError: Corps JSON invalide ou de forme inattendue
            InterruptedWaitError: Si le limiteur est ferme pendant l'attente
        """
        client = self._get_client()
        safe_url = mask_secrets(str(httpx.URL(url, params=params)))
        logger.debug(f"GET {safe_url}")

        try:
            response = await get_with_retry(
                client,
                url,
                max_attempts=self.retry_attempts,
                max_wait=self._retry_max_wait,
                min_wait=self._retry_min_wait,
                limiter=limiter,
                params=params,
            )
        except RateLimitError as e:
            raise RequestFailedError(429, safe_url) from e
        except httpx.TimeoutException as e:
            raise TransportError(f"Timeout after {self.timeout:g}s: {safe_url}") from e
        except httpx.RequestError as e:
            raise TransportError(f"{type(e).__name__}: {mask_secrets(str(e))}") from e

        if response.status_code != 200:
            raise RequestFailedError(response.status_code, safe_url)

        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(
                f"Invalid {model.__name__} payload: {e.error_count()} error(s)"
            ) from e

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
