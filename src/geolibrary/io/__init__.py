"""
Geometry serialization.
"""
