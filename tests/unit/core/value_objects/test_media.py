"""
Tests pour les objets valeur de recherche et de details.
"""

import dataclasses

import pytest

from mediaconnect.core.value_objects import (
    AggregatedDetails,
    CastMember,
    ContentType,
    SearchResult,
    StreamingProvider,
)
from mediaconnect.utils.constants import DETAILS_NOT_FOUND_MESSAGE


class TestContentType:
    def test_values_are_tmdb_path_segments(self):
        assert ContentType.MOVIE.value == "movie"
        assert ContentType.SERIES.value == "tv"


class TestSearchResult:
    def test_str(self):
        assert str(SearchResult("Batman Begins", "2005", "tt0372784")) == "Batman Begins (2005)"

    def test_is_immutable(self):
        result = SearchResult("Batman Begins", "2005", "tt0372784")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.title = "Other"


class TestCastMember:
    def test_profile_url(self):
        member = CastMember("Christian Bale", "Bruce Wayne", "/bale.jpg")

        assert member.profile_url == "https://image.tmdb.org/t/p/w185/bale.jpg"

    def test_profile_url_absent(self):
        assert CastMember("Michael Caine").profile_url is None

    def test_str(self):
        assert str(CastMember("Christian Bale", "Bruce Wayne")) == "Christian Bale as Bruce Wayne"
        assert str(CastMember("Christian Bale")) == "Christian Bale"


class TestAggregatedDetails:
    def test_unavailable(self):
        details = AggregatedDetails.unavailable(DETAILS_NOT_FOUND_MESSAGE)

        assert details.details_available is False
        assert details.overview == "Additional details could not be found for this title."
        assert details.cast == ()
        assert details.streaming_providers == ()

    def test_streaming_summary(self):
        details = AggregatedDetails(
            title="Batman Begins",
            overview="...",
            streaming_providers=(StreamingProvider("Max"), StreamingProvider("Hulu")),
        )

        assert details.streaming_summary == "Available on: Max, Hulu"

    def test_streaming_summary_empty(self):
        details = AggregatedDetails(title="Batman Begins", overview="...")

        assert details.streaming_summary == "Not available for streaming"

    def test_logo_url(self):
        assert StreamingProvider("Max", "/max.jpg").logo_url.endswith("/max.jpg")
