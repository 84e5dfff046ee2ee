"""
Interoperability with other geometry libraries.
"""

from geolibrary.bridge.shapely_bridge import from_shapely, to_shapely

__all__ = ["to_shapely", "from_shapely"]
