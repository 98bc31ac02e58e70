"""Geometric primitives shared by the containment predicates."""

from .bbox import BBox, bbox, bbox_overlap, coords_equal, midpoint
from .point_in_polygon import point_in_polygon
from .point_on_line import point_on_line

__all__ = [
    "BBox",
    "bbox",
    "bbox_overlap",
    "coords_equal",
    "midpoint",
    "point_in_polygon",
    "point_on_line",
]
