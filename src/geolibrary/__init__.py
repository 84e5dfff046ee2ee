"""
geolibrary - Geographic geometry values, set algebra and WKT output.

This package provides:
- Point, MultiPoint, LineString, Polygon and MultiPolygon values with
  tolerant validity and equality
- Union and intersection across supported variant pairs
- A Well-Known Text writer
- Conversion to and from shapely geometries
"""

__docformat__ = "numpy"

from geolibrary._version import __version__

from geolibrary.algebra import intersection, is_intersects, union
from geolibrary.io.wkt import WktWriter, write
from geolibrary.model import (
    EPSILON,
    Geometry,
    GeometryError,
    InvalidGeometryError,
    LineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    UnsupportedGeometryError,
)

__all__ = [
    "__version__",
    "EPSILON",
    "Geometry",
    "Point",
    "MultiPoint",
    "LineString",
    "Polygon",
    "MultiPolygon",
    "GeometryError",
    "InvalidGeometryError",
    "UnsupportedGeometryError",
    "union",
    "intersection",
    "is_intersects",
    "WktWriter",
    "write",
]

__license__ = "BSD-3"
