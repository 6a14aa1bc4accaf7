"""
Container d'injection de dependances via dependency-injector.

Enregistre une seule fois les ressources partagees du processus (client HTTP,
limiteurs de debit) et les injecte dans les passerelles et la facade.
"""

from dependency_injector import containers, providers

from .adapters.api.http_json import HttpJsonClient
from .adapters.api.omdb_client import OMDbSearchGateway
from .adapters.api.rate_limiter import RateLimiter
from .adapters.api.tmdb_aggregator import TMDBDetailsAggregator
from .adapters.api.tmdb_resolver import TMDBIdentifierResolver
from .config import Settings
from .services.movie_client import MovieClient


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        client = container.movie_client()
        details = await client.get_details("tt0372784")
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Client HTTP unique (un seul pool de connexions)
    http_client = providers.Singleton(
        HttpJsonClient,
        timeout=config.provided.http_timeout_seconds,
        retry_attempts=config.provided.http_retry_attempts,
        retry_max_wait=config.provided.http_retry_max_wait,
    )

    # Un limiteur par API, partage par tous les appels vers cette API
    omdb_limiter = providers.Singleton(
        RateLimiter,
        max_requests=config.provided.omdb_max_requests,
        window=config.provided.omdb_window_seconds,
        name="omdb",
        poll_interval=config.provided.rate_limit_poll_interval,
    )
    tmdb_limiter = providers.Singleton(
        RateLimiter,
        max_requests=config.provided.tmdb_max_requests,
        window=config.provided.tmdb_window_seconds,
        name="tmdb",
        poll_interval=config.provided.rate_limit_poll_interval,
    )

    search_gateway = providers.Singleton(
        OMDbSearchGateway,
        http=http_client,
        limiter=omdb_limiter,
        api_key=config.provided.omdb_api_key,
        base_url=config.provided.omdb_base_url,
    )

    identifier_resolver = providers.Singleton(
        TMDBIdentifierResolver,
        http=http_client,
        limiter=tmdb_limiter,
        api_key=config.provided.tmdb_api_key,
        base_url=config.provided.tmdb_base_url,
    )

    details_aggregator = providers.Singleton(
        TMDBDetailsAggregator,
        http=http_client,
        limiter=tmdb_limiter,
        api_key=config.provided.tmdb_api_key,
        base_url=config.provided.tmdb_base_url,
        region=config.provided.watch_region,
    )

    # Facade - possede les limiteurs et le client HTTP (fermes par close())
    movie_client = providers.Singleton(
        MovieClient,
        search_gateway=search_gateway,
        resolver=identifier_resolver,
        aggregator=details_aggregator,
        http=http_client,
        limiters=providers.List(omdb_limiter, tmdb_limiter),
    )
