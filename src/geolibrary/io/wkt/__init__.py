"""
Well-Known Text output.
"""

from geolibrary.io.wkt.writer import WktWriter, write

__all__ = ["WktWriter", "write"]
