# src/geolibrary/algebra.py
"""
Geometry Algebra
================

Union and intersection defined per pair of geometry variants.

Design:
- Rules live in explicit registries keyed by (left class, right class)
- Registering a pair of distinct classes also registers the mirrored pair
- Union looks up the pair before any validity check, so an unsupported
  pair fails even when an operand is invalid
- Intersection answers None for an invalid or empty operand before the
  lookup, so such operands never intersect anything
- Invalid or empty operands act as the empty set: identity for union,
  annihilator for intersection
"""

from typing import Callable, Dict, List, Optional, Tuple, Type

from loguru import logger

from geolibrary.model.exceptions import UnsupportedGeometryError
from geolibrary.model.geometry import Geometry
from geolibrary.model.multipoint import MultiPoint
from geolibrary.model.point import Point

Rule = Callable[[Geometry, Geometry], Optional[Geometry]]
Registry = Dict[Tuple[Type[Geometry], Type[Geometry]], Rule]

_UNION_RULES: Registry = {}
_INTERSECTION_RULES: Registry = {}


def _register(registry: Registry, left: Type[Geometry], right: Type[Geometry]):
    """Register ``func`` for (left, right) and, when they differ, (right, left)."""

    def decorator(func: Rule) -> Rule:
        registry[(left, right)] = func
        if left is not right:
            registry[(right, left)] = lambda a, b: func(b, a)
        return func

    return decorator


def _lookup(registry: Registry, operation: str, a, b) -> Rule:
    rule = registry.get((type(a), type(b)))
    if rule is None:
        logger.debug(
            f"No {operation} rule for {type(a).__name__} and {type(b).__name__}"
        )
        raise UnsupportedGeometryError()
    return rule


def _is_void(geometry) -> bool:
    """Invalid point or empty geometry: the empty set for the algebra."""
    if not isinstance(geometry, Geometry):
        return False
    return geometry.is_empty or (isinstance(geometry, Point) and not geometry.is_valid)


def _merge_points(base: List[Point], extra) -> List[Point]:
    merged = list(base)
    for point in extra:
        if point.is_valid and not any(p.equals(point) for p in merged):
            merged.append(point)
    return merged


# Union rules


@_register(_UNION_RULES, Point, Point)
def _union_point_point(a: Point, b: Point) -> Geometry:
    if not a.is_valid:
        return b.clone()
    if not b.is_valid or a.equals(b):
        return a.clone()
    return MultiPoint([a.clone(), b.clone()])


@_register(_UNION_RULES, Point, MultiPoint)
def _union_point_multipoint(point: Point, multi_point: MultiPoint) -> Geometry:
    if not point.is_valid or multi_point.contains(point):
        return multi_point.clone()
    return MultiPoint([*multi_point.clone(), point.clone()])


@_register(_UNION_RULES, MultiPoint, MultiPoint)
def _union_multipoint_multipoint(a: MultiPoint, b: MultiPoint) -> Geometry:
    return MultiPoint(_merge_points(a.clone().members, b.clone()))


# Intersection rules


@_register(_INTERSECTION_RULES, Point, Point)
def _intersection_point_point(a: Point, b: Point) -> Optional[Geometry]:
    if a.equals(b):
        return a.clone()
    return None


@_register(_INTERSECTION_RULES, Point, MultiPoint)
def _intersection_point_multipoint(
    point: Point, multi_point: MultiPoint
) -> Optional[Geometry]:
    if multi_point.contains(point):
        return point.clone()
    return None


@_register(_INTERSECTION_RULES, MultiPoint, MultiPoint)
def _intersection_multipoint_multipoint(
    a: MultiPoint, b: MultiPoint
) -> Optional[Geometry]:
    common = _merge_points([], (p for p in a if b.contains(p)))
    if not common:
        return None
    return MultiPoint(p.clone() for p in common)


# Public operations


def union(a: Geometry, b: Geometry) -> Geometry:
    """
    Union of two geometries.

    Args:
        a: Left operand, kept first in the result
        b: Right operand

    Returns:
        A new geometry; operands are never mutated

    Raises:
        UnsupportedGeometryError: If no rule exists for the pair of variants
    """
    rule = _lookup(_UNION_RULES, "union", a, b)
    return rule(a, b)


def intersection(a: Geometry, b: Geometry) -> Optional[Geometry]:
    """
    Overlapping part of two geometries.

    Returns:
        The common geometry, or None when the operands do not intersect
        (including when either is invalid or empty)

    Raises:
        UnsupportedGeometryError: If no rule exists for the pair of variants
            and neither operand is invalid or empty
    """
    if _is_void(a) or _is_void(b):
        return None

    rule = _lookup(_INTERSECTION_RULES, "intersection", a, b)
    return rule(a, b)


def is_intersects(a: Geometry, b: Geometry) -> bool:
    """True if the two geometries share at least one point."""
    return intersection(a, b) is not None


def supported_union_pairs() -> List[Tuple[str, str]]:
    """Variant pairs with a union rule, as class names."""
    return sorted((left.__name__, right.__name__) for left, right in _UNION_RULES)


def supported_intersection_pairs() -> List[Tuple[str, str]]:
    """Variant pairs with an intersection rule, as class names."""
    return sorted(
        (left.__name__, right.__name__) for left, right in _INTERSECTION_RULES
    )
