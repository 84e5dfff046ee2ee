# src/geolibrary/model/multipoint.py
"""
MultiPoint geometry.
"""

from geolibrary.model.geometry import GeometrySequence
from geolibrary.model.point import Point


class MultiPoint(GeometrySequence):
    """
    Ordered collection of points.

    Duplicates are kept as given; only union removes them.
    """

    geom_type = "MULTIPOINT"
    member_type = Point

    __slots__ = ()

    def contains(self, point: Point) -> bool:
        """Membership by tolerant equality (an invalid point is never a member)."""
        return any(member.equals(point) for member in self._members)

    def __contains__(self, point) -> bool:
        return self.contains(point)
