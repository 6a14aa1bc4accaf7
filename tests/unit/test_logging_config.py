"""
Tests pour la configuration loguru.
"""

import inspect
import json
import sys

import pytest
from loguru import logger

from mediaconnect.config import Settings
from mediaconnect.logging_config import configure_logging


@pytest.fixture
def restore_loguru():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_defaults_come_from_settings():
    params = inspect.signature(configure_logging).parameters

    assert params["log_file"].default == Settings.model_fields["log_file"].default
    assert params["log_level"].default == Settings.model_fields["log_level"].default
    assert params["rotation_size"].default == Settings.model_fields["log_rotation_size"].default
    assert (
        params["retention_count"].default
        == Settings.model_fields["log_retention_count"].default
    )


def test_file_sink_is_json(tmp_path, restore_loguru):
    log_file = tmp_path / "logs" / "mediaconnect.log"

    configure_logging(log_level="WARNING", log_file=log_file)
    logger.info("Recherche: Batman")
    logger.complete()

    records = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert any(r["record"]["message"] == "Recherche: Batman" for r in records)
