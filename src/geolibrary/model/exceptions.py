# src/geolibrary/model/exceptions.py
"""
Geometry-related exceptions
"""

INVALID_GEOMETRY_MESSAGE = "Invalid geometry"
UNSUPPORTED_TYPE_MESSAGE = "Not supported type!"


class GeometryError(Exception):
    """Base exception for geometry errors"""

    pass


class InvalidGeometryError(GeometryError, ValueError):
    """Raised when an invalid geometry is serialized"""

    def __init__(self, message: str = INVALID_GEOMETRY_MESSAGE):
        super().__init__(message)


class UnsupportedGeometryError(GeometryError, TypeError):
    """Raised when an operation has no rule for the given geometry types"""

    def __init__(self, message: str = UNSUPPORTED_TYPE_MESSAGE):
        super().__init__(message)
