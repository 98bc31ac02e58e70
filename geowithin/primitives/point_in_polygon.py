"""Point-in-polygon membership backed by shapely predicates."""

from __future__ import annotations

from typing import Any

from shapely.geometry import Point
from shapely.prepared import PreparedGeometry

from ..exceptions import InvalidGeoJSONError
from ..invariant import get_coord, get_shape


def point_in_polygon(point: Any, polygon: Any, ignore_boundary: bool = False) -> bool:
    """Return ``True`` if ``point`` lies inside ``polygon``.

    Points on the boundary (outer ring or hole edges) count as inside unless
    ``ignore_boundary`` is set. ``polygon`` may be a Polygon or MultiPolygon
    geometry, Feature or (prepared) shapely geometry; a point inside a hole is
    outside the polygon.
    """

    coord = get_coord(point)
    polygon_shape = get_shape(polygon)
    base = polygon_shape.context if isinstance(polygon_shape, PreparedGeometry) else polygon_shape
    if base.geom_type not in ("Polygon", "MultiPolygon"):
        raise InvalidGeoJSONError(f"expected a Polygon or MultiPolygon, got {base.geom_type}")

    candidate = Point(coord[0], coord[1])
    if ignore_boundary:
        return polygon_shape.contains(candidate)
    return polygon_shape.covers(candidate)


__all__ = ["point_in_polygon"]
