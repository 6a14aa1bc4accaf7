"""
Tests d'integration de la facade MovieClient avec les vrais adaptateurs.

Seul le reseau est simule (respx): container, limiteurs, client HTTP,
passerelle OMDb, resolution et agregation TMDB sont reels.
"""

import httpx
import pytest
import respx
from dependency_injector import providers

from mediaconnect.config import Settings
from mediaconnect.container import Container
from mediaconnect.core.value_objects import Found
from tests.fixtures.omdb_responses import OMDB_SEARCH_RESPONSE, OMDB_URL
from tests.fixtures.tmdb_responses import (
    TMDB_BASE,
    TMDB_FIND_EMPTY_RESPONSE,
    TMDB_MOVIE_CREDITS_RESPONSE,
    TMDB_MOVIE_DETAILS_RESPONSE,
)


@pytest.fixture
def container(test_settings: Settings) -> Container:
    container = Container()
    container.config.override(providers.Object(test_settings))
    return container


@pytest.mark.asyncio
@respx.mock
async def test_search_then_details_end_to_end(container: Container):
    """Batman Begins: 2 cast members, 1 streaming provider "Max"."""
    respx.get(OMDB_URL).mock(return_value=httpx.Response(200, json=OMDB_SEARCH_RESPONSE))
    respx.get(f"{TMDB_BASE}/find/tt0372784").mock(
        return_value=httpx.Response(
            200, json={"movie_results": [{"id": 272, "media_type": "movie"}], "tv_results": []}
        )
    )
    respx.get(f"{TMDB_BASE}/movie/272").mock(
        return_value=httpx.Response(200, json=TMDB_MOVIE_DETAILS_RESPONSE)
    )
    respx.get(f"{TMDB_BASE}/movie/272/credits").mock(
        return_value=httpx.Response(200, json=TMDB_MOVIE_CREDITS_RESPONSE)
    )
    respx.get(f"{TMDB_BASE}/movie/272/watch/providers").mock(
        return_value=httpx.Response(
            200, json={"results": {"US": {"flatrate": [{"provider_name": "Max"}]}}}
        )
    )
    client = container.movie_client()

    outcome = await client.search("Batman Begins")
    assert isinstance(outcome, Found)
    details = await client.get_details(outcome.results[0].external_id)
    await client.close()

    assert details.details_available is True
    assert details.title == "Batman Begins"
    assert details.release_date == "2005-06-10"
    assert details.rating == "7.7"
    assert len(details.cast) == 2
    assert [p.name for p in details.streaming_providers] == ["Max"]
    assert respx.calls.call_count == 5


@pytest.mark.asyncio
@respx.mock
async def test_unmatched_id_end_to_end(container: Container):
    respx.get(f"{TMDB_BASE}/find/tt9999999").mock(
        return_value=httpx.Response(200, json=TMDB_FIND_EMPTY_RESPONSE)
    )
    client = container.movie_client()

    details = await client.get_details("tt9999999")
    await client.close()

    assert details.details_available is False
    assert details.overview == "Additional details could not be found for this title."
    assert respx.calls.call_count == 1


@pytest.mark.asyncio
@respx.mock
async def test_network_failure_never_escapes_get_details(container: Container):
    respx.get(f"{TMDB_BASE}/find/tt0372784").mock(side_effect=httpx.ConnectError("refused"))
    client = container.movie_client()

    details = await client.get_details("tt0372784")
    await client.close()

    assert details.details_available is False
    assert details.overview.startswith("Failed to load content details: ")
