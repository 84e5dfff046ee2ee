# src/geolibrary/bridge/shapely_bridge.py
"""
Bridge between geolibrary geometries and shapely geometries.
"""

from typing import Iterable, Tuple

from loguru import logger
from shapely import geometry as sg
from shapely.errors import GEOSException
from shapely.geometry.base import BaseGeometry

from geolibrary.model import (
    Geometry,
    InvalidGeometryError,
    LineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    UnsupportedGeometryError,
)


def _coords(points: Iterable[Point]) -> list[Tuple[float, float]]:
    return [(p.longitude, p.latitude) for p in points]


def _points(coords) -> list[Point]:
    # Drop any Z value
    return [Point(c[0], c[1]) for c in coords]


def _to_shapely_polygon(polygon: Polygon) -> sg.Polygon:
    return sg.Polygon(
        shell=_coords(polygon.exterior),
        holes=[_coords(ring) for ring in polygon.interiors],
    )


def to_shapely(geometry: Geometry) -> BaseGeometry:
    """
    Convert a geometry to its shapely counterpart.

    Args:
        geometry: Valid geolibrary geometry

    Returns:
        shapely geometry with the same coordinates

    Raises:
        InvalidGeometryError: If the geometry is invalid, or shapely rejects it
            (e.g. a single-point line or a ring with too few points)
        UnsupportedGeometryError: If the variant has no shapely counterpart
    """
    if not isinstance(geometry, Geometry) or not geometry.is_valid:
        raise InvalidGeometryError()

    try:
        return _build_shapely(geometry)
    except (GEOSException, ValueError) as e:
        logger.debug(f"shapely rejected {geometry!r}: {e}")
        raise InvalidGeometryError() from e


def _build_shapely(geometry: Geometry) -> BaseGeometry:
    if isinstance(geometry, Point):
        return sg.Point(geometry.longitude, geometry.latitude)
    if isinstance(geometry, MultiPoint):
        return sg.MultiPoint(_coords(geometry))
    if isinstance(geometry, LineString):
        return sg.LineString(_coords(geometry))
    if isinstance(geometry, Polygon):
        return _to_shapely_polygon(geometry)
    if isinstance(geometry, MultiPolygon):
        return sg.MultiPolygon([_to_shapely_polygon(p) for p in geometry])

    raise UnsupportedGeometryError()


def _from_shapely_polygon(shape: sg.Polygon) -> Polygon:
    if shape.is_empty:
        return Polygon()
    rings = [shape.exterior, *shape.interiors]
    return Polygon(LineString(_points(ring.coords)) for ring in rings)


def from_shapely(shape: BaseGeometry) -> Geometry:
    """
    Convert a shapely geometry to a geolibrary geometry.

    Empty shapely points become the empty ``Point()``.

    Raises:
        UnsupportedGeometryError: For shapely types without a counterpart
            (GeometryCollection, MultiLineString)
    """
    geom_type = getattr(shape, "geom_type", None)
    logger.debug(f"Converting shapely {geom_type}")

    if geom_type == "Point":
        if shape.is_empty:
            return Point()
        return Point(shape.x, shape.y)
    if geom_type == "MultiPoint":
        return MultiPoint(Point(p.x, p.y) for p in shape.geoms)
    if geom_type in ("LineString", "LinearRing"):
        return LineString(_points(shape.coords))
    if geom_type == "Polygon":
        return _from_shapely_polygon(shape)
    if geom_type == "MultiPolygon":
        return MultiPolygon(_from_shapely_polygon(p) for p in shape.geoms)

    raise UnsupportedGeometryError()
