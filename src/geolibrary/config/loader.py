# src/geolibrary/config/loader.py
"""
Configuration loader supporting separate environment files and
environment variable overrides
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from loguru import logger
from pydantic import ValidationError

from geolibrary.config.exceptions import (
    ConfigurationNotFoundError,
    ConfigurationValidationError,
)
from geolibrary.config.models import AppConfig

ENV_PREFIX = "GEOLIBRARY"
CONFIG_SECTIONS = ["global", "wkt"]
DEFAULT_ENVIRONMENT = "development"


def resolve_environment(environment: Optional[str] = None) -> str:
    """Explicit environment, else GEOLIBRARY_ENVIRONMENT, else development"""
    return environment or os.environ.get(f"{ENV_PREFIX}_ENVIRONMENT", DEFAULT_ENVIRONMENT)


class ConfigManager:
    """Loads YAML configuration, merges environment overrides, validates with Pydantic"""

    def __init__(self):
        self._config: Optional[AppConfig] = None

    def load_config(
        self,
        config_path: Optional[Path] = None,
        environment: Optional[str] = None,
    ) -> AppConfig:
        """Load configuration for ``environment``"""
        environment = resolve_environment(environment)
        logger.debug(f"Loading configuration (environment={environment})")

        # 1. Base configuration (defaults when nothing is found)
        base_config_data = self._load_base_config(config_path)

        # 2. Environment-specific overrides
        env_config_data = self._load_environment_config(config_path, environment)
        if env_config_data:
            self._merge_configs(base_config_data, env_config_data)

        # 3. Environment variables
        self._apply_env_overrides(base_config_data)

        # 4. Validate
        try:
            self._config = AppConfig(**base_config_data)
        except ValidationError as e:
            raise ConfigurationValidationError(str(e)) from e

        return self._config

    def get_config(self) -> AppConfig:
        """Last loaded configuration, loading defaults on first use"""
        if self._config is None:
            return self.load_config()
        return self._config

    def _load_base_config(self, config_path: Optional[Path]) -> dict:
        if config_path is not None:
            config_path = Path(config_path)
            if not config_path.exists():
                raise ConfigurationNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
        else:
            config_path = self._find_base_config_file()
            if config_path is None:
                logger.debug("No configuration file found, using defaults")
                return {}

        logger.debug(f"Loading base config: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            configs = list(yaml.safe_load_all(f))

        base_config = configs[0] if configs and configs[0] else {}

        # Extra documents in the same file are merged unless they are environment sections
        for config in configs[1:]:
            if config and not self._is_environment_section(config):
                self._merge_configs(base_config, config)

        return base_config

    def _load_environment_config(
        self, base_config_path: Optional[Path], environment: str
    ) -> Optional[dict]:
        for env_path in self._find_environment_config_paths(
            base_config_path, environment
        ):
            if env_path.exists():
                logger.debug(f"Loading environment config: {env_path}")

                with open(env_path, "r", encoding="utf-8") as f:
                    env_config = yaml.safe_load(f)

                if env_config:
                    return env_config
                logger.warning(f"Environment config is empty: {env_path}")

        return None

    def _find_base_config_file(self) -> Optional[Path]:
        search_paths = [
            Path("config/geolibrary_config.yaml"),
            Path("config/config.yaml"),
            Path("~/.config/geolibrary/config.yaml").expanduser(),
        ]

        for path in search_paths:
            if path.exists():
                return path
        return None

    def _find_environment_config_paths(
        self, base_config_path: Optional[Path], environment: str
    ) -> list[Path]:
        base_dir = Path(base_config_path).parent if base_config_path else Path("config")

        return [
            base_dir / "environments" / f"{environment}.yaml",
            base_dir / "environments" / f"{environment}.yml",
            base_dir / f"{environment}.yaml",
            base_dir / f"{environment}.yml",
        ]

    def _is_environment_section(self, config: dict) -> bool:
        env_keys = ["environment", "env", "_environment"]
        return any(key in config for key in env_keys)

    def _merge_configs(self, base: dict, override: dict) -> None:
        """Recursively merge configuration dictionaries"""
        for key, value in override.items():
            if key.startswith("_"):  # Skip meta keys like _environment
                continue

            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_configs(base[key], value)
            else:
                base[key] = value
                logger.debug(f"Override: {key} = {value}")

    def _apply_env_overrides(self, config: dict) -> None:
        """Apply GEOLIBRARY_<SECTION>_<KEY> overrides, '__' separating nested keys"""
        for section in CONFIG_SECTIONS:
            prefix = f"{ENV_PREFIX}_{section.upper()}_"
            for env_var, value in os.environ.items():
                if not env_var.startswith(prefix):
                    continue
                path = env_var[len(prefix) :].lower().split("__")
                section_data = config.setdefault(section, {})
                if not isinstance(section_data, dict):
                    section_data = config[section] = {}
                self._set_nested_value(section_data, path, self._parse_env_value(value))
                logger.debug(f"Env override: {env_var} = {value}")

    def _parse_env_value(self, value: str) -> Any:
        # Explicit None strings clear optional settings
        if value.lower() in ("none", "null"):
            return None
        return value

    def _set_nested_value(self, config: dict, path: list[str], value: Any) -> None:
        current = config
        for key in path[:-1]:
            if not isinstance(current.get(key), dict):
                current[key] = {}
            current = current[key]
        current[path[-1]] = value


# Global instance
_config_manager = ConfigManager()


def load_config(
    config_path: Optional[Path] = None,
    environment: Optional[str] = None,
) -> AppConfig:
    """Load configuration with separate environment files"""
    return _config_manager.load_config(config_path, environment)


def get_config() -> AppConfig:
    """Get the loaded configuration"""
    return _config_manager.get_config()
