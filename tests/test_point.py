"""Point validity, equality, cloning and algebra."""

import pytest

from geolibrary import (
    LineString,
    MultiPoint,
    Point,
    UnsupportedGeometryError,
)


def test_point_without_coordinates_is_invalid():
    point = Point()

    assert point.is_valid is False
    assert point.is_empty is True


def test_point_at_origin_is_not_empty():
    point = Point(0, 0)

    assert point.is_empty is False
    assert point.is_valid is True


def test_point_requires_both_coordinates():
    with pytest.raises(TypeError):
        Point(10)


@pytest.mark.parametrize(
    "longitude, latitude",
    [(-180.1, 90), (180.0001, -70), (-170, 100), (120, -91)],
)
def test_point_with_out_of_range_coordinates_is_invalid(longitude, latitude):
    assert Point(longitude, latitude).is_valid is False


@pytest.mark.parametrize(
    "longitude, latitude",
    [(-170.1, 90), (180.000000001, -70), (120, -90.000000001)],
)
def test_point_with_valid_coordinates_is_valid(longitude, latitude):
    assert Point(longitude, latitude).is_valid is True


def test_point_does_not_equal_a_non_geometry():
    point = Point()

    assert point.equals(100) is False
    assert (point == 100) is False


def test_valid_point_does_not_equal_invalid_point():
    assert Point(100, 50).equals(Point()) is False


def test_points_with_different_coordinates_are_not_equal():
    point = Point(100, 50)
    other = Point(100, 60)

    assert point.equals(other) is False
    assert point != other


def test_points_with_same_coordinates_are_equal():
    point = Point(100, 50)
    other = Point(100, 50)

    assert point.equals(other) is True
    assert point == other


def test_valid_point_equals_itself():
    point = Point(100, 50)

    assert point.equals(point) is True


def test_points_with_very_close_coordinates_are_equal():
    point = Point(100.000000003, 50)
    other = Point(100, 50.000000003)

    assert point.equals(other) is True
    assert point == other


def test_none_comparisons_are_symmetric():
    point, other = None, None
    assert point == other

    point, other = Point(), None
    assert (point == other) is False

    point, other = None, Point()
    assert (point == other) is False


def test_points_are_unhashable():
    with pytest.raises(TypeError):
        hash(Point(1, 2))


def test_clone_of_invalid_point_is_invalid_point():
    copied = Point().clone()

    assert copied.is_valid is False
    assert isinstance(copied, Point)


def test_clone_of_valid_point_is_equal_and_distinct():
    point = Point(100, 50)
    copied = point.clone()

    assert copied.equals(point)
    assert copied is not point


def test_same_point_union_is_clone():
    point = Point(100, 50)

    union_point = point.union(Point(100, 50))

    assert union_point.is_valid
    assert union_point.equals(point)
    assert union_point is not point


def test_different_points_union_is_multipoint():
    point1 = Point(100, 50)
    point2 = Point(120, 60)

    union_geo = point1.union(point2)
    union_geo2 = point2.union(point1)

    assert isinstance(union_geo, MultiPoint)
    assert isinstance(union_geo2, MultiPoint)
    assert union_geo.count == 2
    assert union_geo[0].equals(point1)
    assert union_geo2[0].equals(point2)


def test_valid_point_union_invalid_point_is_clone_of_valid_one():
    point1 = Point(100, 50)
    point2 = Point()

    union_geo = point1.union(point2)
    union_geo2 = point2.union(point1)

    assert isinstance(union_geo, Point)
    assert union_geo2.equals(union_geo)
    assert union_geo.equals(point1)


def test_point_union_multipoint_is_multipoint():
    point = Point(100, 50)
    multi_point = MultiPoint([Point(100, 50), Point(120, -70)])

    union_geo = point.union(multi_point)
    union_geo2 = multi_point.union(point)

    assert isinstance(union_geo, MultiPoint)
    assert union_geo2.equals(union_geo)
    assert union_geo.equals(multi_point)


def test_point_union_linestring_is_not_supported():
    with pytest.raises(UnsupportedGeometryError) as exc_info:
        Point().union(LineString())

    assert str(exc_info.value) == "Not supported type!"


def test_invalid_points_do_not_intersect():
    point = Point()
    point2 = Point()

    assert point.is_intersects(point2) is False
    assert point.intersection(point2) is None


def test_invalid_point_does_not_intersect_valid_point():
    point1 = Point(100, 50)
    point2 = Point()

    assert point1.is_intersects(point2) is False
    assert point1.intersection(point2) is None


def test_different_points_do_not_intersect():
    point1 = Point(100, 50)
    point2 = Point(120, 60)

    assert point1.is_intersects(point2) is False
    assert point1.intersection(point2) is None


def test_same_points_intersect():
    point1 = Point(100, 50)
    point2 = Point(100, 50)

    assert point1.is_intersects(point2) is True

    result = point1.intersection(point2)
    assert result is not None
    assert result.equals(point1)


def test_valid_point_does_not_intersect_empty_multipoint():
    point1 = Point(100, 50)
    multi_point = MultiPoint()

    assert point1.is_intersects(multi_point) is False
    assert point1.intersection(multi_point) is None


def test_invalid_point_does_not_intersect_valid_multipoint():
    point1 = Point()
    multi_point = MultiPoint([Point(100, 50), Point(120, -70)])

    assert point1.is_intersects(multi_point) is False
    assert point1.intersection(multi_point) is None
