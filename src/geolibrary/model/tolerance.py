# src/geolibrary/model/tolerance.py
"""
Coordinate tolerance and geographic envelope checks.

Every tolerance comparison in the package goes through this module so that
validity, equality and the algebra agree on what "close enough" means.
"""

import math

# Absorbs floating-point rounding at the envelope boundary and between
# nearly identical coordinates.
EPSILON = 1e-8

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0


def is_valid_coordinate(longitude: float, latitude: float) -> bool:
    """
    Check whether a longitude/latitude pair lies inside the tolerant envelope.

    Args:
        longitude: X coordinate in degrees
        latitude: Y coordinate in degrees

    Returns:
        True if both values are within [min - EPSILON, max + EPSILON]
    """
    if math.isnan(longitude) or math.isnan(latitude):
        return False

    return (
        MIN_LONGITUDE - EPSILON <= longitude <= MAX_LONGITUDE + EPSILON
        and MIN_LATITUDE - EPSILON <= latitude <= MAX_LATITUDE + EPSILON
    )


def nearly_equal(a: float, b: float, tolerance: float = EPSILON) -> bool:
    """Return True if ``a`` and ``b`` differ by less than ``tolerance``."""
    return abs(a - b) < tolerance
