"""
Utilities for geolibrary.
"""

from geolibrary.utils.logging import GeoLibraryLogger, geolibrary_logger, setup_logging

__all__ = ["GeoLibraryLogger", "geolibrary_logger", "setup_logging"]
