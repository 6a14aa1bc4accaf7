"""
Resolution d'un ID IMDb vers l'ID interne TMDB.

Utilise l'endpoint TMDB /find/{external_id} avec external_source=imdb_id,
soumis au quota TMDB.
"""

from typing import Optional
from urllib.parse import quote

from loguru import logger

from mediaconnect.adapters.api.http_json import HttpJsonClient
from mediaconnect.adapters.api.rate_limiter import RateLimiter
from mediaconnect.adapters.api.schemas import TmdbFindResponse
from mediaconnect.core.ports.api_clients import IIdentifierResolver
from mediaconnect.core.value_objects import ContentType, ResolvedTarget
from mediaconnect.utils.constants import TMDB_BASE_URL


class TMDBIdentifierResolver(IIdentifierResolver):
    """
    Resout un ID IMDb en (ID TMDB, film ou serie).

    La reponse /find contient deux listes independantes. Les films sont
    prioritaires: si movie_results n'est pas vide, son premier element est
    retenu; sinon le premier element de tv_results. En pratique un ID IMDb
    ne correspond qu'a un seul type de contenu.

    Aucune correspondance donne None. Les erreurs HTTP, reseau et de
    decodage remontent a l'appelant.
    """

    def __init__(
        self,
        http: HttpJsonClient,
        limiter: RateLimiter,
        api_key: str,
        base_url: str = TMDB_BASE_URL,
    ) -> None:
        if not api_key:
            raise ValueError("Cle API TMDB manquante")
        self._http = http
        self._limiter = limiter
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    async def resolve(self, external_id: str) -> Optional[ResolvedTarget]:
        """
        Recherche la correspondance TMDB d'un ID IMDb.

        Args:
            external_id: ID IMDb (format ttXXXXXXX)

        Returns:
            ResolvedTarget, ou None si TMDB ne connait pas cet ID
        """
        payload = await self._http.request(
            f"{self._base_url}/find/{quote(external_id, safe='')}",
            TmdbFindResponse,
            params={
                "api_key": self._api_key,
                "external_source": "imdb_id",
                "include_adult": "false",
            },
            limiter=self._limiter,
        )

        logger.debug(
            f"TMDB find {external_id}: {len(payload.movie_results)} film(s), "
            f"{len(payload.tv_results)} serie(s)"
        )

        if payload.movie_results:
            target = ResolvedTarget(payload.movie_results[0].id, ContentType.MOVIE)
        elif payload.tv_results:
            target = ResolvedTarget(payload.tv_results[0].id, ContentType.SERIES)
        else:
            logger.info(f"Aucune correspondance TMDB pour {external_id}")
            return None

        logger.info(
            f"{external_id} resolu: TMDB {target.content_type.value}/{target.internal_id}"
        )
        return target
