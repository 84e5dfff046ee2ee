"""Conversion to and from shapely."""

import pytest
from shapely import geometry as sg

from geolibrary import (
    InvalidGeometryError,
    LineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    UnsupportedGeometryError,
)
from geolibrary.bridge import from_shapely, to_shapely


def ring(*coords):
    return LineString(Point(x, y) for x, y in coords)


def test_point_to_shapely():
    shape = to_shapely(Point(10, 20))

    assert shape.geom_type == "Point"
    assert (shape.x, shape.y) == (10, 20)


def test_polygon_with_hole_to_shapely():
    polygon = Polygon(
        [
            ring((0, 0), (10, 0), (10, 10), (0, 10), (0, 0)),
            ring((1, 1), (2, 1), (2, 2), (1, 1)),
        ]
    )

    shape = to_shapely(polygon)

    assert shape.geom_type == "Polygon"
    assert len(shape.interiors) == 1
    assert shape.area == pytest.approx(100 - 0.5)


def test_multipolygon_round_trip():
    multi_polygon = MultiPolygon(
        [
            Polygon([ring((30, 20), (45, 40), (10, 40), (30, 20))]),
            Polygon([ring((15, 5), (40, 10), (10, 20), (5, 10), (15, 5))]),
        ]
    )

    assert from_shapely(to_shapely(multi_polygon)) == multi_polygon


def test_from_shapely_variants():
    assert from_shapely(sg.Point()).is_empty
    assert from_shapely(sg.Point(1, 2)) == Point(1, 2)
    assert from_shapely(sg.MultiPoint([(1, 2), (3, 4)])) == MultiPoint([Point(1, 2), Point(3, 4)])
    assert from_shapely(sg.LineString([(1, 2), (3, 4)])) == ring((1, 2), (3, 4))
    assert from_shapely(sg.Polygon()) == Polygon()


def test_invalid_geometry_cannot_be_converted():
    with pytest.raises(InvalidGeometryError):
        to_shapely(Point())


def test_unsupported_shapely_type():
    with pytest.raises(UnsupportedGeometryError):
        from_shapely(sg.MultiLineString([[(0, 0), (1, 1)]]))


def test_single_point_linestring_is_rejected_as_invalid():
    line = LineString([Point(1, 1)])
    assert line.is_valid

    with pytest.raises(InvalidGeometryError, match="^Invalid geometry$") as exc_info:
        to_shapely(line)

    assert exc_info.value.__cause__ is not None


def test_degenerate_polygon_ring_is_rejected_as_invalid():
    polygon = Polygon([ring((0, 0), (1, 1))])

    with pytest.raises(InvalidGeometryError):
        to_shapely(polygon)
