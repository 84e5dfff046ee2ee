# src/geolibrary/model/linestring.py
"""
LineString geometry.
"""

from geolibrary.model.geometry import GeometrySequence
from geolibrary.model.point import Point


class LineString(GeometrySequence):
    """Ordered sequence of points. Also used as a polygon ring."""

    geom_type = "LINESTRING"
    member_type = Point

    __slots__ = ()

    @property
    def is_closed(self) -> bool:
        return bool(self._members) and self._members[0].equals(self._members[-1])
