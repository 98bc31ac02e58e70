"""Topological ``within`` / ``contains`` predicates for GeoJSON geometries.

``within(a, b)`` is true when no point of ``a`` lies in the exterior of ``b``
and at least one point of ``a`` lies in the interior of ``b``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from shapely.prepared import prep

from .exceptions import UnsupportedGeometryError
from .invariant import get_geom, get_shape
from .primitives.bbox import bbox, bbox_overlap, coords_equal, midpoint
from .primitives.point_in_polygon import point_in_polygon
from .primitives.point_on_line import point_on_line

logger = logging.getLogger(__name__)

Geometry = Mapping[str, Any]


class GeometryType(str, Enum):
    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"


SUPPORTED_TYPES = frozenset(member.value for member in GeometryType)


def is_point_in_multi_point(point: Geometry, multi_point: Geometry) -> bool:
    coordinate = point["coordinates"]
    return any(coords_equal(candidate, coordinate) for candidate in multi_point["coordinates"])


def is_multi_point_in_multi_point(multi_point1: Geometry, multi_point2: Geometry) -> bool:
    candidates = multi_point2["coordinates"]
    for coordinate in multi_point1["coordinates"]:
        if not any(coords_equal(coordinate, candidate) for candidate in candidates):
            return False
    return True


def is_multi_point_on_line(multi_point: Geometry, line_string: Geometry) -> bool:
    target = prep(get_shape(line_string))
    found_inside_point = False

    for coordinate in multi_point["coordinates"]:
        if not point_on_line(coordinate, target):
            return False
        if not found_inside_point:
            found_inside_point = point_on_line(coordinate, target, ignore_end_vertices=True)

    return found_inside_point


def is_multi_point_in_polygon(multi_point: Geometry, polygon: Geometry) -> bool:
    target = prep(get_shape(polygon))
    found_inside_point = False

    for coordinate in multi_point["coordinates"]:
        if not point_in_polygon(coordinate, target):
            return False
        if not found_inside_point:
            found_inside_point = point_in_polygon(coordinate, target, ignore_boundary=True)

    return found_inside_point


def is_line_on_line(line_string1: Geometry, line_string2: Geometry) -> bool:
    target = prep(get_shape(line_string2))
    return all(point_on_line(coordinate, target) for coordinate in line_string1["coordinates"])


def is_line_in_polygon(line_string: Geometry, polygon: Geometry) -> bool:
    """A line is within a polygon when it never leaves it and crosses its interior.

    Lines lying only on the boundary are rejected: either a vertex or the
    midpoint of a segment has to be strictly inside.
    """

    if not bbox_overlap(bbox(polygon), bbox(line_string)):
        logger.debug("LineString bbox is not contained in Polygon bbox")
        return False

    coordinates = line_string["coordinates"]
    target = prep(get_shape(polygon))
    found_inside_point = False

    for index in range(len(coordinates) - 1):
        if not point_in_polygon(coordinates[index], target):
            return False
        if not found_inside_point:
            found_inside_point = point_in_polygon(coordinates[index], target, ignore_boundary=True)
        if not found_inside_point:
            middle = midpoint(coordinates[index], coordinates[index + 1])
            found_inside_point = point_in_polygon(middle, target, ignore_boundary=True)

    return found_inside_point


def is_polygon_in_polygon(polygon1: Geometry, polygon2: Geometry) -> bool:
    """Outer-ring containment of ``polygon1`` in ``polygon2``; holes are ignored."""

    if not bbox_overlap(bbox(polygon2), bbox(polygon1)):
        logger.debug("Polygon bbox is not contained in the outer Polygon bbox")
        return False

    target = prep(get_shape(polygon2))
    return all(point_in_polygon(coordinate, target) for coordinate in polygon1["coordinates"][0])


def _point_on_line_interior(point: Geometry, line_string: Geometry) -> bool:
    return point_on_line(point, line_string, ignore_end_vertices=True)


def _point_in_polygon_interior(point: Geometry, polygon: Geometry) -> bool:
    return point_in_polygon(point, polygon, ignore_boundary=True)


Predicate = Callable[[Geometry, Geometry], bool]

_PREDICATES: dict[tuple[GeometryType, GeometryType], Predicate] = {
    (GeometryType.POINT, GeometryType.MULTI_POINT): is_point_in_multi_point,
    (GeometryType.POINT, GeometryType.LINE_STRING): _point_on_line_interior,
    (GeometryType.POINT, GeometryType.POLYGON): _point_in_polygon_interior,
    (GeometryType.MULTI_POINT, GeometryType.MULTI_POINT): is_multi_point_in_multi_point,
    (GeometryType.MULTI_POINT, GeometryType.LINE_STRING): is_multi_point_on_line,
    (GeometryType.MULTI_POINT, GeometryType.POLYGON): is_multi_point_in_polygon,
    (GeometryType.LINE_STRING, GeometryType.LINE_STRING): is_line_on_line,
    (GeometryType.LINE_STRING, GeometryType.POLYGON): is_line_in_polygon,
    (GeometryType.POLYGON, GeometryType.POLYGON): is_polygon_in_polygon,
}


def _resolve(
    geometry1: Geometry,
    geometry2: Geometry,
    labels: tuple[str, str],
) -> Predicate:
    type1 = geometry1["type"]
    type2 = geometry2["type"]

    if not isinstance(type1, str) or type1 not in SUPPORTED_TYPES:
        raise UnsupportedGeometryError(labels[0], type1)
    if not isinstance(type2, str) or type2 not in SUPPORTED_TYPES:
        raise UnsupportedGeometryError(labels[1], type2)

    predicate = _PREDICATES.get((GeometryType(type1), GeometryType(type2)))
    if predicate is None:
        raise UnsupportedGeometryError(labels[1], type2)

    logger.debug("within dispatch %s -> %s using %s", type1, type2, predicate.__name__)
    return predicate


def _within(feature1: Any, feature2: Any, labels: tuple[str, str]) -> bool:
    geometry1 = get_geom(feature1)
    geometry2 = get_geom(feature2)
    predicate = _resolve(geometry1, geometry2, labels)
    return predicate(geometry1, geometry2)


def within(feature1: Any, feature2: Any) -> bool:
    """Return ``True`` if ``feature1`` is completely within ``feature2``.

    The interiors of both geometries must intersect, and the interior and
    boundary of ``feature1`` must not intersect the exterior of ``feature2``.

    Parameters
    ----------
    feature1, feature2:
        GeoJSON Geometry or Feature mappings, shapely geometries, or objects
        exposing ``__geo_interface__``.

    Raises
    ------
    UnsupportedGeometryError
        When the type of either argument, or the ordered pair of types, has
        no containment predicate. The error names the offending argument.

    Examples
    --------
    >>> line = {"type": "LineString", "coordinates": [[1, 1], [1, 2], [1, 3], [1, 4]]}
    >>> within({"type": "Point", "coordinates": [1, 2]}, line)
    True
    """

    return _within(feature1, feature2, ("feature1", "feature2"))


def contains(feature1: Any, feature2: Any) -> bool:
    """Return ``True`` if ``feature2`` is completely within ``feature1``."""

    return _within(feature2, feature1, ("feature2", "feature1"))


__all__ = [
    "GeometryType",
    "SUPPORTED_TYPES",
    "contains",
    "is_line_in_polygon",
    "is_line_on_line",
    "is_multi_point_in_multi_point",
    "is_multi_point_in_polygon",
    "is_multi_point_on_line",
    "is_point_in_multi_point",
    "is_polygon_in_polygon",
    "within",
]
