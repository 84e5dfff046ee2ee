# src/geolibrary/config/__init__.py
"""
Configuration system using Pydantic
"""

from geolibrary.config.exceptions import (
    ConfigurationError,
    ConfigurationNotFoundError,
    ConfigurationValidationError,
)
from geolibrary.config.loader import ConfigManager, get_config, load_config
from geolibrary.config.models import (
    AppConfig,
    ConsoleLoggingConfig,
    FileLoggingConfig,
    GlobalConfig,
    LoggingConfig,
    WktConfig,
)

__all__ = [
    "AppConfig",
    "GlobalConfig",
    "LoggingConfig",
    "FileLoggingConfig",
    "ConsoleLoggingConfig",
    "WktConfig",
    "ConfigManager",
    "load_config",
    "get_config",
    "ConfigurationError",
    "ConfigurationNotFoundError",
    "ConfigurationValidationError",
]
