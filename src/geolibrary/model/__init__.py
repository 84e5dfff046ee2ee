"""
Geometry value model: variants, tolerance and exceptions.
"""

from geolibrary.model.exceptions import (
    GeometryError,
    InvalidGeometryError,
    UnsupportedGeometryError,
)
from geolibrary.model.geometry import Geometry, GeometrySequence
from geolibrary.model.linestring import LineString
from geolibrary.model.multipoint import MultiPoint
from geolibrary.model.point import Point
from geolibrary.model.polygon import MultiPolygon, Polygon
from geolibrary.model.tolerance import EPSILON, is_valid_coordinate, nearly_equal

__all__ = [
    "Geometry",
    "GeometrySequence",
    "Point",
    "MultiPoint",
    "LineString",
    "Polygon",
    "MultiPolygon",
    "GeometryError",
    "InvalidGeometryError",
    "UnsupportedGeometryError",
    "EPSILON",
    "is_valid_coordinate",
    "nearly_equal",
]
