"""
Facade MovieClient: recherche et details agreges d'un titre.

Compose la passerelle de recherche OMDb, la resolution d'ID TMDB et
l'agregateur de details. C'est le seul point d'entree utilise par la
couche de presentation.

Usage:
    client = container.movie_client()
    outcome = await client.search("Batman Begins")
    details = await client.get_details("tt0372784")
    await client.close()
"""

from typing import Optional, Sequence

from loguru import logger

from mediaconnect.adapters.api.http_json import HttpJsonClient
from mediaconnect.adapters.api.rate_limiter import RateLimiter
from mediaconnect.core.ports.api_clients import (
    IDetailsAggregator,
    IIdentifierResolver,
    ISearchGateway,
)
from mediaconnect.core.value_objects import AggregatedDetails, SearchOutcome
from mediaconnect.utils.constants import DETAILS_ERROR_PREFIX, DETAILS_NOT_FOUND_MESSAGE


class MovieClient:
    """
    Facade des API OMDb et TMDB.

    - search() propage les erreurs: l'appelant affiche un etat d'erreur
    - get_details() ne leve jamais d'exception: tout echec devient un
      AggregatedDetails avec details_available=False et un message lisible

    Les operations sont des coroutines; c'est a la couche de presentation
    de les executer hors de son thread d'affichage.
    """

    def __init__(
        self,
        search_gateway: ISearchGateway,
        resolver: IIdentifierResolver,
        aggregator: IDetailsAggregator,
        http: Optional[HttpJsonClient] = None,
        limiters: Sequence[RateLimiter] = (),
    ) -> None:
        """
        Initialise la facade.

        Args:
            search_gateway: Recherche par titre (OMDb)
            resolver: Resolution ID IMDb -> ID TMDB
            aggregator: Agregation details/credits/plateformes (TMDB)
            http: Client HTTP partage, ferme par close()
            limiters: Limiteurs de debit possedes par la facade, fermes par close()
        """
        self._search_gateway = search_gateway
        self._resolver = resolver
        self._aggregator = aggregator
        self._http = http
        self._limiters = tuple(limiters)

    async def search(self, title: str) -> SearchOutcome:
        """Recherche des titres sur l'API principale."""
        logger.debug(f"Recherche: {title}")
        return await self._search_gateway.search(title)

    async def get_details(self, external_id: str) -> AggregatedDetails:
        """
        Charge les details agreges d'un titre a partir de son ID IMDb.

        Args:
            external_id: ID IMDb (format ttXXXXXXX)

        Returns:
            AggregatedDetails, toujours affichable
        """
        try:
            target = await self._resolver.resolve(external_id)
            if target is None:
                return AggregatedDetails.unavailable(DETAILS_NOT_FOUND_MESSAGE)
            return await self._aggregator.aggregate(target.internal_id, target.content_type)
        except Exception as e:
            logger.error(f"Echec du chargement des details pour {external_id}: {e}")
            return AggregatedDetails.unavailable(f"{DETAILS_ERROR_PREFIX}{e}")

    async def close(self) -> None:
        """Interrompt les attentes de quota en cours et ferme le client HTTP."""
        for limiter in self._limiters:
            limiter.close()
        if self._http is not None:
            await self._http.close()
