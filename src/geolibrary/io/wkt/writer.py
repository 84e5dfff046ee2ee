# src/geolibrary/io/wkt/writer.py
"""
WKT Writer
==========

Serializes geometries to Well-Known Text.

Output shapes:
    POINT (X Y)
    MULTIPOINT (X1 Y1, X2 Y2)
    LINESTRING (X1 Y1, X2 Y2)
    POLYGON ((ring1), (ring2))
    MULTIPOLYGON (((poly1 ring1), (poly1 ring2)), ((poly2 ring1)))

Coordinates are written ``longitude latitude`` in the shortest positional
form that round-trips (``10``, ``10.5``, ``0.00001``).
"""

from typing import Callable, Dict, Optional, Type

import numpy as np
from loguru import logger

from geolibrary.config.models import WktConfig
from geolibrary.model.exceptions import (
    InvalidGeometryError,
    UnsupportedGeometryError,
)
from geolibrary.model.geometry import Geometry, GeometrySequence
from geolibrary.model.linestring import LineString
from geolibrary.model.multipoint import MultiPoint
from geolibrary.model.point import Point
from geolibrary.model.polygon import MultiPolygon, Polygon


class WktWriter:
    """
    Stateless WKT serializer.

    Attributes:
        precision: Maximum digits after the decimal point, None for the
            exact shortest representation
    """

    def __init__(self, precision: Optional[int] = None):
        if precision is not None and precision < 0:
            raise ValueError(f"precision must be >= 0, got {precision}")
        self.precision = precision

        self._handlers: Dict[Type[Geometry], Callable[[Geometry], str]] = {
            Point: self._write_point,
            MultiPoint: self._write_multipoint,
            LineString: self._write_linestring,
            Polygon: self._write_polygon,
            MultiPolygon: self._write_multipolygon,
        }

    @classmethod
    def from_config(cls, config: WktConfig) -> "WktWriter":
        return cls(precision=config.precision)

    def write(self, geometry: Geometry) -> str:
        """
        Serialize a geometry to WKT.

        Args:
            geometry: Geometry to serialize

        Returns:
            WKT text

        Raises:
            InvalidGeometryError: If the geometry is not valid
            UnsupportedGeometryError: If the variant has no WKT form
        """
        if not isinstance(geometry, Geometry) or not geometry.is_valid:
            logger.debug(f"Refusing to write invalid geometry {geometry!r}")
            raise InvalidGeometryError()

        handler = self._handlers.get(type(geometry))
        if handler is None:
            raise UnsupportedGeometryError()

        return handler(geometry)

    def format_number(self, value: float) -> str:
        """Culture-invariant, positional, no trailing zeros."""
        text = np.format_float_positional(
            float(value) + 0.0, precision=self.precision, unique=True, trim="-"
        )
        # Rounding can leave a negative zero behind
        if text == "-0":
            return "0"
        return text

    def _coordinates(self, point: Point) -> str:
        return f"{self.format_number(point.longitude)} {self.format_number(point.latitude)}"

    def _point_list(self, points: GeometrySequence) -> str:
        return ", ".join(self._coordinates(p) for p in points)

    def _ring_list(self, polygon: Polygon) -> str:
        return ", ".join(f"({self._point_list(ring)})" for ring in polygon)

    def _write_point(self, point: Point) -> str:
        return f"POINT ({self._coordinates(point)})"

    def _write_multipoint(self, multi_point: MultiPoint) -> str:
        return f"MULTIPOINT ({self._point_list(multi_point)})"

    def _write_linestring(self, line: LineString) -> str:
        return f"LINESTRING ({self._point_list(line)})"

    def _write_polygon(self, polygon: Polygon) -> str:
        return f"POLYGON ({self._ring_list(polygon)})"

    def _write_multipolygon(self, multi_polygon: MultiPolygon) -> str:
        polygons = ", ".join(f"({self._ring_list(p)})" for p in multi_polygon)
        return f"MULTIPOLYGON ({polygons})"


_default_writer = WktWriter()


def write(geometry: Geometry) -> str:
    """Serialize a geometry with the default writer."""
    return _default_writer.write(geometry)
