# src/geolibrary/model/geometry.py
"""
Geometry base classes.

Design:
- Closed set of variants (Point, MultiPoint, LineString, Polygon, MultiPolygon)
- Immutable values: operations always return new geometries
- Tolerance-based equality, hence no hashing
- Pair-dependent operations are delegated to ``geolibrary.algebra``
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Iterable, Iterator, Optional, Tuple, Type


class Geometry(ABC):
    """Abstract geometry value."""

    geom_type: ClassVar[str] = ""

    __slots__ = ()

    # Equality is tolerance based, so equal values could never share a hash
    __hash__ = None

    @property
    @abstractmethod
    def is_valid(self) -> bool:
        """Whether the geometry can be used in the algebra and serialized."""

    @property
    @abstractmethod
    def is_empty(self) -> bool:
        """Whether the geometry holds no coordinates at all."""

    @abstractmethod
    def equals(self, other: object) -> bool:
        """Value-based, tolerance-aware comparison. Never raises."""

    @abstractmethod
    def clone(self) -> "Geometry":
        """Independent copy of the same runtime class."""

    def union(self, other: "Geometry") -> "Geometry":
        from geolibrary import algebra

        return algebra.union(self, other)

    def is_intersects(self, other: "Geometry") -> bool:
        from geolibrary import algebra

        return algebra.is_intersects(self, other)

    def intersection(self, other: "Geometry") -> Optional["Geometry"]:
        from geolibrary import algebra

        return algebra.intersection(self, other)

    def to_wkt(self) -> str:
        """Serialize to Well-Known Text using the default writer."""
        from geolibrary.io.wkt import write

        return write(self)

    def __eq__(self, other):
        if not isinstance(other, Geometry):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        if not isinstance(other, Geometry):
            return NotImplemented
        return not self.equals(other)


class GeometrySequence(Geometry):
    """
    Ordered, immutable sequence of member geometries of one variant.

    Subclasses set ``member_type``; members of any other class are rejected
    at construction.
    """

    member_type: ClassVar[Type[Geometry]] = Geometry

    __slots__ = ("_members",)

    def __init__(self, members: Iterable[Geometry] = ()):
        members = tuple(members)
        for member in members:
            if type(member) is not self.member_type:
                raise TypeError(
                    f"{type(self).__name__} members must be "
                    f"{self.member_type.__name__}, got {type(member).__name__}"
                )
        self._members: Tuple[Geometry, ...] = members

    @property
    def members(self) -> Tuple[Geometry, ...]:
        return self._members

    @property
    def count(self) -> int:
        return len(self._members)

    @property
    def is_empty(self) -> bool:
        return not self._members

    @property
    def is_valid(self) -> bool:
        return bool(self._members) and all(m.is_valid for m in self._members)

    def equals(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        if len(self._members) != len(other._members):
            return False
        return all(a.equals(b) for a, b in zip(self._members, other._members))

    def clone(self) -> "GeometrySequence":
        return type(self)(member.clone() for member in self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self._members)

    def __getitem__(self, index):
        return self._members[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(repr(m) for m in self._members)}])"
