"""
Passerelle de recherche OMDb (API principale).

Implemente ISearchGateway: recherche par mot-cle, soumise au quota OMDb.

Usage:
    gateway = OMDbSearchGateway(http=http, limiter=omdb_limiter, api_key="key")
    outcome = await gateway.search("Batman")
    if isinstance(outcome, Found):
        for result in outcome.results:
            print(result.title, result.external_id)
"""

from typing import Optional

from loguru import logger

from mediaconnect.adapters.api.http_json import HttpJsonClient
from mediaconnect.adapters.api.rate_limiter import RateLimiter
from mediaconnect.adapters.api.schemas import OmdbMovie, OmdbSearchResponse
from mediaconnect.core.ports.api_clients import ISearchGateway
from mediaconnect.core.value_objects import Found, NotFound, SearchOutcome, SearchResult
from mediaconnect.utils.constants import OMDB_BASE_URL, OMDB_MISSING_VALUE


def _poster_url(poster: Optional[str]) -> Optional[str]:
    if not poster or poster == OMDB_MISSING_VALUE:
        return None
    return poster


def _to_search_result(movie: OmdbMovie) -> SearchResult:
    return SearchResult(
        title=movie.title,
        year=movie.year,
        external_id=movie.imdb_id,
        poster_url=_poster_url(movie.poster),
    )


def _parse_total(total_results: Optional[str], fallback: int) -> int:
    """totalResults est une chaine dans OMDb; repli sur le nombre recu."""
    if total_results and total_results.strip().isdigit():
        return int(total_results)
    return fallback


class OMDbSearchGateway(ISearchGateway):
    """
    Recherche de films et series sur OMDb.

    OMDb ne signale pas l'absence de resultat par un statut HTTP mais par le
    champ Response ("True"/"False"). Response "False" ou liste vide donne
    NotFound. Les erreurs HTTP, reseau et de decodage remontent inchangees.
    """

    def __init__(
        self,
        http: HttpJsonClient,
        limiter: RateLimiter,
        api_key: str,
        base_url: str = OMDB_BASE_URL,
    ) -> None:
        """
        Initialise la passerelle.

        Args:
            http: Client HTTP JSON partage
            limiter: Limiteur du budget OMDb
            api_key: Cle API OMDb
            base_url: URL de l'API OMDb

        Raises:
            ValueError: Si la cle API est absente
        """
        if not api_key:
            raise ValueError("Cle API OMDb manquante")
        self._http = http
        self._limiter = limiter
        self._api_key = api_key
        self._base_url = base_url

    async def search(self, query: str) -> SearchOutcome:
        payload = await self._http.request(
            self._base_url,
            OmdbSearchResponse,
            params={"apikey": self._api_key, "s": query},
            limiter=self._limiter,
        )

        if not payload.is_success or not payload.search:
            logger.info(f"Aucun resultat OMDb pour '{query}': {payload.error or 'liste vide'}")
            return NotFound(error=payload.error)

        results = tuple(_to_search_result(movie) for movie in payload.search)
        total = _parse_total(payload.total_results, len(results))
        logger.debug(f"OMDb '{query}': {len(results)} resultats sur {total}")
        return Found(results=results, total_count=total)
