# src/geolibrary/utils/logging.py
"""
Centralized logging configuration for geolibrary.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from loguru import logger
from rich.console import Console
from rich.markup import escape

from geolibrary.config import load_config
from geolibrary.config.loader import resolve_environment


class GeoLibraryLogger:
    """Loguru setup driven by the library configuration, rendered with Rich."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)
        self._is_configured = False
        self._current_level = "INFO"
        self._log_file: Optional[Path] = None
        self._environment = "development"

    @property
    def is_configured(self) -> bool:
        return self._is_configured

    @property
    def level(self) -> str:
        return self._current_level

    def setup(
        self,
        verbose: bool = False,
        log_file: Optional[Path] = None,
        environment: Optional[str] = None,
        config_path: Optional[Path] = None,
    ):
        """
        Setup logging using the configuration system.

        Args:
            verbose: Enable debug logging (overrides config)
            log_file: Optional custom log file path (overrides config)
            environment: Environment name for config loading
            config_path: Optional path to config file
        """
        if self._is_configured:
            return

        environment = resolve_environment(environment)
        self._environment = environment

        try:
            app_config = load_config(environment=environment, config_path=config_path)
        except Exception as e:
            self._setup_fallback_logging(verbose)
            logger.warning(f"Failed to load config, using fallback logging: {e}")
            return

        logging_config = app_config.global_.get_logging_config(environment)
        log_level = "DEBUG" if verbose else app_config.global_.log_level
        self._current_level = log_level

        # Remove default loguru handler
        logger.remove()

        self._setup_console_logging(log_level, verbose, logging_config["console"])

        if log_file:
            self._log_file = Path(log_file)
            self._setup_file_logging(
                log_level,
                {"rotation": "10 MB", "retention": "30 days", "compression": "gz"},
            )
        elif logging_config["file"]["enabled"] and logging_config["file"]["path"]:
            self._log_file = logging_config["file"]["path"]
            self._setup_file_logging(log_level, logging_config["file"])

        self._is_configured = True

        logger.debug(
            f"geolibrary logging initialized (level={log_level}, env={environment})"
        )

    def reset(self):
        """Remove all handlers so that ``setup`` can run again."""
        logger.remove()
        self._is_configured = False
        self._log_file = None

    def _setup_fallback_logging(self, verbose: bool):
        """Plain stderr logging when config loading fails."""
        logger.remove()

        log_level = "DEBUG" if verbose else "INFO"
        self._current_level = log_level

        logger.add(
            sys.stderr,
            format="{level}: {message}",
            level=log_level,
            colorize=False,
        )
        self._is_configured = True

    def _setup_console_logging(self, log_level: str, verbose: bool, console_config: Dict):
        format_type = console_config.get("format", "simple")
        show_time = console_config.get("show_time", True)
        show_level = console_config.get("show_level", True)
        show_path = console_config.get("show_path", False)
        detailed = verbose or format_type == "detailed"

        def rich_sink(message):
            record = message.record
            level = record["level"].name
            time = f"[green]{record['time'].strftime('%H:%M:%S')}[/green]"

            if level in ("ERROR", "CRITICAL"):
                colored_level = f"[bold red]{level}[/bold red]"
            elif level == "WARNING":
                colored_level = f"[bold orange1]{level}[/bold orange1]"
            elif level == "SUCCESS":
                colored_level = f"[bold green]{level}[/bold green]"
            else:
                colored_level = f"[bold]{level}[/bold]"

            if detailed:
                location = f"{record['name']}:{record['function']}"
                if show_path:
                    location += f":{record['line']}"
                formatted_msg = (
                    f"{time} | {colored_level} | [cyan]{location}[/cyan] - {escape(record['message'])}"
                )
            else:
                parts = []
                if show_time:
                    parts.append(time)
                if show_level:
                    parts.append(colored_level)
                parts.append(escape(record["message"]))
                formatted_msg = " | ".join(parts)

            try:
                self.console.print(formatted_msg, markup=True, highlight=False)
            except Exception:
                # Fallback to plain text if Rich rendering fails
                plain_msg = f"{record['time'].strftime('%H:%M:%S')} | {level} | {record['message']}"
                self.console.print(plain_msg, markup=False, highlight=False)

        logger.add(
            rich_sink,
            format="{message}",
            level=log_level,
            colorize=False,
            diagnose=verbose,
        )

    def _setup_file_logging(self, log_level: str, file_config: Dict):
        if not self._log_file:
            return

        self._log_file.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            str(self._log_file),
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level=log_level,
            rotation=file_config.get("rotation", "10 MB"),
            retention=file_config.get("retention", "30 days"),
            compression=file_config.get("compression", "gz"),
        )

    def get_log_file_path(self) -> Optional[Path]:
        return self._log_file

    def show_log_info(self):
        """Display logging information."""
        self.console.print("[bold]Logging Configuration:[/bold]")
        self.console.print(f"  Environment: {self._environment}")
        self.console.print(f"  Level: {self._current_level}")
        self.console.print(f"  Log file: {self._log_file}")


# Global logger instance
geolibrary_logger = GeoLibraryLogger()


def setup_logging(
    verbose: bool = False,
    log_file: Optional[Path] = None,
    environment: Optional[str] = None,
    config_path: Optional[Path] = None,
):
    """
    Setup logging for geolibrary.

    Args:
        verbose: Enable debug logging
        log_file: Optional custom log file path
        environment: Environment name
        config_path: Optional path to config file
    """
    geolibrary_logger.setup(
        verbose=verbose,
        log_file=log_file,
        environment=environment,
        config_path=config_path,
    )
