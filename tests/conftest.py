"""Pytest configuration and fixtures."""

import io
import os
import sys
from pathlib import Path

import pytest
from loguru import logger

# Add src to Python path for testing
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


def pytest_configure(config):
    """Force test environment for all pytest runs"""
    os.environ["GEOLIBRARY_ENVIRONMENT"] = "test"


@pytest.fixture(autouse=True)
def loguru_capture():
    stream = io.StringIO()
    logger.remove()
    logger.add(stream, level="DEBUG")
    yield stream
    logger.remove()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop GEOLIBRARY_* overrides that could leak from the shell."""
    for key in list(os.environ):
        if key.startswith("GEOLIBRARY_GLOBAL_") or key.startswith("GEOLIBRARY_WKT_"):
            monkeypatch.delenv(key)


@pytest.fixture
def config_dir(tmp_path):
    """Isolated config directory with a base file and a test environment file."""
    config_dir = tmp_path / "config"
    (config_dir / "environments").mkdir(parents=True)

    (config_dir / "geolibrary_config.yaml").write_text(
        "global:\n"
        "  log_level: INFO\n"
        "wkt:\n"
        "  precision: null\n",
        encoding="utf-8",
    )
    (config_dir / "environments" / "test.yaml").write_text(
        "_environment: test\n"
        "global:\n"
        "  log_level: WARNING\n",
        encoding="utf-8",
    )
    return config_dir
