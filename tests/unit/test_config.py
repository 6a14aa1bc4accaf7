"""
Tests de la configuration pydantic-settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from mediaconnect.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isole les tests des variables MEDIACONNECT_ de la machine."""
    for name in ("MEDIACONNECT_OMDB_API_KEY", "MEDIACONNECT_TMDB_API_KEY", "MEDIACONNECT_WATCH_REGION"):
        monkeypatch.delenv(name, raising=False)


class TestRequiredKeys:
    def test_missing_keys_are_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None)

        fields = {error["loc"][0] for error in exc_info.value.errors()}
        assert fields == {"omdb_api_key", "tmdb_api_key"}

    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_key_is_rejected(self, blank: str):
        with pytest.raises(ValidationError):
            Settings(omdb_api_key=blank, tmdb_api_key="tmdb", _env_file=None)

    def test_keys_are_stripped(self):
        settings = Settings(omdb_api_key=" omdb ", tmdb_api_key="tmdb\n", _env_file=None)

        assert settings.omdb_api_key == "omdb"
        assert settings.tmdb_api_key == "tmdb"

    def test_keys_from_environment(self, monkeypatch):
        monkeypatch.setenv("MEDIACONNECT_OMDB_API_KEY", "from_env_omdb")
        monkeypatch.setenv("MEDIACONNECT_TMDB_API_KEY", "from_env_tmdb")

        settings = Settings(_env_file=None)

        assert settings.omdb_api_key == "from_env_omdb"
        assert settings.tmdb_api_key == "from_env_tmdb"


class TestDefaults:
    def test_default_values(self, test_settings: Settings):
        assert test_settings.omdb_base_url == "http://www.omdbapi.com/"
        assert test_settings.tmdb_base_url == "https://api.themoviedb.org/3"
        assert test_settings.omdb_max_requests == 30
        assert test_settings.omdb_window_seconds == 60.0
        assert test_settings.tmdb_max_requests == 40
        assert test_settings.tmdb_window_seconds == 10.0
        assert test_settings.rate_limit_poll_interval == 0.1
        assert test_settings.http_timeout_seconds == 20.0
        assert test_settings.watch_region == "US"
        assert test_settings.log_level == "INFO"

    def test_region_is_uppercased(self):
        settings = Settings(omdb_api_key="o", tmdb_api_key="t", watch_region="fr", _env_file=None)

        assert settings.watch_region == "FR"

    def test_region_must_be_two_letters(self):
        with pytest.raises(ValidationError):
            Settings(omdb_api_key="o", tmdb_api_key="t", watch_region="USA", _env_file=None)

    @pytest.mark.parametrize("field", ["omdb_max_requests", "tmdb_max_requests"])
    def test_quota_must_be_positive(self, field: str):
        with pytest.raises(ValidationError):
            Settings(omdb_api_key="o", tmdb_api_key="t", _env_file=None, **{field: 0})

    def test_log_file_expands_home(self):
        settings = Settings(
            omdb_api_key="o", tmdb_api_key="t", log_file="~/mediaconnect.log", _env_file=None
        )

        assert settings.log_file == Path.home() / "mediaconnect.log"
