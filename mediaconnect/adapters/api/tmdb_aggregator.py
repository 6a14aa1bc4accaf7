"""
Agregation des details TMDB d'un titre.

Lance trois sous-requetes concurrentes (details, credits, plateformes de
streaming), chacune soumise au quota TMDB, puis fusionne les resultats.
Seul l'echec des details rend le resultat indisponible: credits et
plateformes manquants laissent simplement des listes vides.

Usage:
    aggregator = TMDBDetailsAggregator(http=http, limiter=tmdb_limiter, api_key="key")
    details = await aggregator.aggregate(272, ContentType.MOVIE)
"""

import asyncio
from dataclasses import replace
from typing import Awaitable, Optional, TypeVar

from loguru import logger

from mediaconnect.adapters.api.errors import MovieClientError
from mediaconnect.adapters.api.http_json import HttpJsonClient
from mediaconnect.adapters.api.rate_limiter import RateLimiter
from mediaconnect.adapters.api.schemas import (
    TmdbCreditsResponse,
    TmdbDetailsResponse,
    TmdbWatchProvidersResponse,
)
from mediaconnect.core.ports.api_clients import IDetailsAggregator
from mediaconnect.core.value_objects import (
    AggregatedDetails,
    CastMember,
    ContentType,
    StreamingProvider,
)
from mediaconnect.utils.constants import (
    DEFAULT_WATCH_REGION,
    DETAILS_FAILED_MESSAGE,
    TMDB_BASE_URL,
)

T = TypeVar("T")


class TMDBDetailsAggregator(IDetailsAggregator):
    """
    Charge details, credits et plateformes d'un titre TMDB en parallele.

    Politique de fusion:
    - details en echec (ou sans titre) -> AggregatedDetails indisponible,
      quel que soit le sort des deux autres sous-requetes
    - credits en echec -> distribution vide
    - plateformes en echec -> liste de plateformes vide

    Les sous-requetes encore en cours quand les details echouent ne sont
    pas annulees: elles se terminent en arriere-plan et leur eventuel
    echec est seulement logge.

    Attributes:
        region: Code region des plateformes de streaming (ex: "US")
    """

    def __init__(
        self,
        http: HttpJsonClient,
        limiter: RateLimiter,
        api_key: str,
        base_url: str = TMDB_BASE_URL,
        region: str = DEFAULT_WATCH_REGION,
    ) -> None:
        if not api_key:
            raise ValueError("Cle API TMDB manquante")
        self._http = http
        self._limiter = limiter
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self.region = region
        self._background: set[asyncio.Task] = set()

    def _url(self, internal_id: int, content_type: ContentType, suffix: str = "") -> str:
        return f"{self._base_url}/{content_type.value}/{internal_id}{suffix}"

    async def _get(self, url: str, model: type[T]) -> T:
        return await self._http.request(
            url, model, params={"api_key": self._api_key}, limiter=self._limiter
        )

    async def fetch_details(
        self, internal_id: int, content_type: ContentType
    ) -> Optional[AggregatedDetails]:
        """
        Recupere les details principaux (titre, synopsis, date, note).

        Returns:
            AggregatedDetails sans distribution ni plateformes, ou None si
            la reponse ne contient ni titre ni nom
        """
        data = await self._get(self._url(internal_id, content_type), TmdbDetailsResponse)
        if not data.display_title:
            return None
        return AggregatedDetails(
            title=data.display_title,
            overview=data.overview or "",
            release_date=data.display_release_date,
            rating=data.vote_average,
        )

    async def fetch_credits(
        self, internal_id: int, content_type: ContentType
    ) -> tuple[CastMember, ...]:
        """Recupere la distribution, dans l'ordre TMDB."""
        data = await self._get(
            self._url(internal_id, content_type, "/credits"), TmdbCreditsResponse
        )
        return tuple(
            CastMember(
                name=entry.name,
                character=entry.character or "",
                profile_path=entry.profile_path,
            )
            for entry in data.cast
        )

    async def fetch_providers(
        self, internal_id: int, content_type: ContentType
    ) -> tuple[StreamingProvider, ...]:
        """Recupere les plateformes de streaming par abonnement de la region."""
        data = await self._get(
            self._url(internal_id, content_type, "/watch/providers"),
            TmdbWatchProvidersResponse,
        )
        return tuple(
            StreamingProvider(name=entry.provider_name, logo_path=entry.logo_path)
            for entry in data.flatrate_for(self.region)
        )

    async def aggregate(
        self, internal_id: int, content_type: ContentType
    ) -> AggregatedDetails:
        label = f"{content_type.value}/{internal_id}"
        details_task = asyncio.create_task(
            self.fetch_details(internal_id, content_type), name=f"details:{label}"
        )
        credits_task = asyncio.create_task(
            self.fetch_credits(internal_id, content_type), name=f"credits:{label}"
        )
        providers_task = asyncio.create_task(
            self.fetch_providers(internal_id, content_type), name=f"providers:{label}"
        )

        unsettled = {credits_task, providers_task}
        try:
            details = await self._settle(details_task, "details", label)
            if details is None:
                return AggregatedDetails.unavailable(DETAILS_FAILED_MESSAGE)

            cast = await self._settle(credits_task, "credits", label)
            unsettled.discard(credits_task)
            providers = await self._settle(providers_task, "providers", label)
            unsettled.discard(providers_task)
        finally:
            self._detach(*unsettled)

        return replace(
            details,
            cast=cast or (),
            streaming_providers=providers or (),
        )

    @staticmethod
    async def _settle(task: Awaitable[T], what: str, label: str) -> Optional[T]:
        """
        Attend une sous-requete; son echec est logge et donne None.

        Toute Exception est absorbee, pas seulement MovieClientError: une
        sous-requete ne fait jamais echouer l'agregation. L'annulation
        (CancelledError) n'est pas absorbee.
        """
        try:
            return await task
        except MovieClientError as e:
            logger.warning(f"Echec TMDB {what} pour {label}: {e}")
            return None
        except Exception as e:
            logger.warning(
                f"Erreur inattendue TMDB {what} pour {label}: {type(e).__name__}: {e}"
            )
            return None

    def _detach(self, *tasks: asyncio.Task) -> None:
        """Laisse des sous-requetes se terminer en arriere-plan sans les annuler."""
        for task in tasks:
            if task.done():
                # terminee avant l'echec des details, jamais attendue
                self._log_orphan(task)
                continue
            self._background.add(task)
            task.add_done_callback(self._background.discard)
            task.add_done_callback(self._log_orphan)

    @staticmethod
    def _log_orphan(task: asyncio.Task) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.warning(f"Sous-requete {task.get_name()} ignoree en echec: {error}")
