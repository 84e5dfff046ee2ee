# src/geolibrary/model/polygon.py
"""
Polygon and MultiPolygon geometries.
"""

from typing import Optional, Tuple

from geolibrary.model.geometry import GeometrySequence
from geolibrary.model.linestring import LineString


class Polygon(GeometrySequence):
    """
    Polygon made of rings.

    The first ring is the outer boundary, the following rings are holes.
    """

    geom_type = "POLYGON"
    member_type = LineString

    __slots__ = ()

    @property
    def exterior(self) -> Optional[LineString]:
        return self._members[0] if self._members else None

    @property
    def interiors(self) -> Tuple[LineString, ...]:
        return self._members[1:]


class MultiPolygon(GeometrySequence):
    """Ordered collection of polygons."""

    geom_type = "MULTIPOLYGON"
    member_type = Polygon

    __slots__ = ()
