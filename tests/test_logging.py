"""Logging setup."""

import pytest
from loguru import logger

from geolibrary import Point
from geolibrary.utils.logging import GeoLibraryLogger


@pytest.fixture
def geo_logger():
    instance = GeoLibraryLogger()
    yield instance
    instance.reset()


def test_setup_with_log_file(geo_logger, config_dir, tmp_path):
    log_file = tmp_path / "logs" / "geo.log"

    geo_logger.setup(
        verbose=True,
        log_file=log_file,
        environment="test",
        config_path=config_dir / "geolibrary_config.yaml",
    )
    logger.info("hello from test")
    logger.complete()

    assert geo_logger.is_configured
    assert geo_logger.level == "DEBUG"
    assert geo_logger.get_log_file_path() == log_file
    assert "hello from test" in log_file.read_text(encoding="utf-8")


def test_level_from_config(geo_logger, config_dir):
    geo_logger.setup(environment="test", config_path=config_dir / "geolibrary_config.yaml")

    assert geo_logger.level == "WARNING"
    assert geo_logger.get_log_file_path() is None


def test_fallback_when_config_fails(geo_logger, tmp_path):
    geo_logger.setup(config_path=tmp_path / "missing.yaml")

    assert geo_logger.is_configured
    assert geo_logger.level == "INFO"


def test_unsupported_pair_is_logged(loguru_capture):
    with pytest.raises(TypeError):
        Point(1, 1).union(None)

    assert "No union rule for Point and NoneType" in loguru_capture.getvalue()
