# src/geolibrary/model/point.py
"""
Point geometry.
"""

from typing import Optional, Tuple

from geolibrary.model.geometry import Geometry
from geolibrary.model.tolerance import is_valid_coordinate, nearly_equal


class Point(Geometry):
    """
    Geographic point (longitude, latitude).

    ``Point()`` without coordinates is the empty sentinel: it is always
    invalid and is distinct from ``Point(0, 0)``.

    Attributes:
        longitude: X coordinate, None for the empty point
        latitude: Y coordinate, None for the empty point
    """

    geom_type = "POINT"

    __slots__ = ("_coordinates",)

    def __init__(
        self, longitude: Optional[float] = None, latitude: Optional[float] = None
    ):
        if (longitude is None) != (latitude is None):
            raise TypeError("Point requires both longitude and latitude, or neither")

        self._coordinates: Optional[Tuple[float, float]] = None
        if longitude is not None:
            self._coordinates = (float(longitude), float(latitude))

    @property
    def coordinates(self) -> Optional[Tuple[float, float]]:
        return self._coordinates

    @property
    def longitude(self) -> Optional[float]:
        return None if self._coordinates is None else self._coordinates[0]

    @property
    def latitude(self) -> Optional[float]:
        return None if self._coordinates is None else self._coordinates[1]

    x = longitude
    y = latitude

    @property
    def is_empty(self) -> bool:
        return self._coordinates is None

    @property
    def is_valid(self) -> bool:
        if self._coordinates is None:
            return False
        return is_valid_coordinate(*self._coordinates)

    def equals(self, other: object) -> bool:
        if not isinstance(other, Point):
            return False
        if not (self.is_valid and other.is_valid):
            return False

        return nearly_equal(self.longitude, other.longitude) and nearly_equal(
            self.latitude, other.latitude
        )

    def clone(self) -> "Point":
        if self._coordinates is None:
            return Point()
        return Point(*self._coordinates)

    def __repr__(self) -> str:
        if self._coordinates is None:
            return "Point()"
        return f"Point({self.longitude!r}, {self.latitude!r})"
