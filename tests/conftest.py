"""
Fixtures pytest partagees pour les tests MediaConnect.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec cles factices et log temporaire
- Client HTTP sans attente entre les tentatives
- Limiteurs de debit a budget large
- Capture des avertissements loguru
"""

from pathlib import Path

import pytest
from loguru import logger

from mediaconnect.adapters.api.http_json import HttpJsonClient
from mediaconnect.adapters.api.rate_limiter import RateLimiter
from mediaconnect.config import Settings

OMDB_TEST_KEY = "omdb_test_key"
TMDB_TEST_KEY = "tmdb_test_key"


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test, independants de l'environnement et du fichier .env."""
    return Settings(
        omdb_api_key=OMDB_TEST_KEY,
        tmdb_api_key=TMDB_TEST_KEY,
        log_file=tmp_path / "test.log",
        _env_file=None,
    )


@pytest.fixture
def http_client() -> HttpJsonClient:
    """
    HttpJsonClient de test.

    Une seule tentative par defaut: les tests de retry construisent
    leur propre client.
    """
    return HttpJsonClient(timeout=5.0, retry_attempts=1, retry_min_wait=0, retry_max_wait=0.01)


@pytest.fixture
def omdb_limiter() -> RateLimiter:
    """Limiteur OMDb qui ne fait jamais attendre dans les tests."""
    return RateLimiter(max_requests=100, window=1.0, name="omdb")


@pytest.fixture
def tmdb_limiter() -> RateLimiter:
    """Limiteur TMDB qui ne fait jamais attendre dans les tests."""
    return RateLimiter(max_requests=100, window=1.0, name="tmdb")


@pytest.fixture
def warning_messages() -> list[str]:
    """Messages loguru de niveau WARNING et plus emis pendant le test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)
