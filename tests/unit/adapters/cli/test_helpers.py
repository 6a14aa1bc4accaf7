"""
Tests unitaires pour les utilitaires CLI (suppress_loguru, with_container).
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from mediaconnect.adapters.api.errors import TransportError
from mediaconnect.adapters.cli.helpers import suppress_loguru, with_container
from mediaconnect.core.ports.api_clients import (
    IDetailsAggregator,
    IIdentifierResolver,
    ISearchGateway,
)
from mediaconnect.services.movie_client import MovieClient


@pytest.fixture
def failing_client() -> MovieClient:
    """MovieClient dont la resolution echoue (logue une erreur)."""
    resolver = AsyncMock(spec=IIdentifierResolver)
    resolver.resolve.side_effect = TransportError("offline")
    return MovieClient(
        search_gateway=AsyncMock(spec=ISearchGateway),
        resolver=resolver,
        aggregator=AsyncMock(spec=IDetailsAggregator),
    )


class TestSuppressLoguru:
    @pytest.mark.asyncio
    async def test_mediaconnect_logs_are_hidden(
        self, failing_client: MovieClient, warning_messages: list[str]
    ):
        with suppress_loguru():
            await failing_client.get_details("tt0372784")

        assert warning_messages == []

    @pytest.mark.asyncio
    async def test_logs_are_restored_after_block(
        self, failing_client: MovieClient, warning_messages: list[str]
    ):
        with suppress_loguru():
            pass

        await failing_client.get_details("tt0372784")

        assert any("tt0372784" in message for message in warning_messages)

    @pytest.mark.asyncio
    async def test_logs_are_restored_after_error(
        self, failing_client: MovieClient, warning_messages: list[str]
    ):
        with pytest.raises(ValueError):
            with suppress_loguru():
                raise ValueError("boom")

        await failing_client.get_details("tt0372784")

        assert warning_messages


class TestWithContainer:
    @pytest.mark.asyncio
    async def test_injects_container_and_closes_client(self):
        with patch("mediaconnect.adapters.cli.helpers.Container") as mock_cls:
            container = MagicMock()
            container.movie_client.return_value = AsyncMock(spec=MovieClient)
            mock_cls.return_value = container

            @with_container()
            async def command(injected, value):
                assert injected is container
                return value * 2

            assert await command(21) == 42
            container.movie_client.return_value.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_closes_client_on_error(self):
        with patch("mediaconnect.adapters.cli.helpers.Container") as mock_cls:
            container = MagicMock()
            container.movie_client.return_value = AsyncMock(spec=MovieClient)
            mock_cls.return_value = container

            @with_container()
            async def command(injected):
                raise RuntimeError("boom")

            with pytest.raises(RuntimeError):
                await command()
            container.movie_client.return_value.close.assert_awaited_once()
