"""
Geometry value objects.

Numeric side of polygon elements: vertices, borders, area, anchors.
"""

from src.core.geometry.polygon import (
    MIN_POLYGON_VERTICES,
    MIN_REGULAR_POLYGON_VERTICES,
    Point,
    Polygon,
    Segment,
    regular_polygon,
)

__all__ = [
    "MIN_POLYGON_VERTICES",
    "MIN_REGULAR_POLYGON_VERTICES",
    "Point",
    "Polygon",
    "Segment",
    "regular_polygon",
]
