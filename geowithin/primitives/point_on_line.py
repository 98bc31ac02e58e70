"""Point-on-line membership for LineStrings."""

from __future__ import annotations

from typing import Any

from shapely.geometry import Point
from shapely.prepared import PreparedGeometry

from ..exceptions import InvalidGeoJSONError
from ..invariant import get_coord, get_shape
from .bbox import coords_equal


def point_on_line(point: Any, line: Any, ignore_end_vertices: bool = False) -> bool:
    """Return ``True`` if ``point`` lies on ``line``.

    Parameters
    ----------
    point:
        Point geometry, Feature or bare ``(x, y)`` pair.
    line:
        LineString geometry or Feature, or a (prepared) shapely LineString.
    ignore_end_vertices:
        When ``True`` the first and last vertices of the line are not part of
        it, so only points strictly between the endpoints match.
    """

    coord = get_coord(point)
    line_shape = get_shape(line)
    base = line_shape.context if isinstance(line_shape, PreparedGeometry) else line_shape
    if base.geom_type != "LineString":
        raise InvalidGeoJSONError(f"expected a LineString, got {base.geom_type}")

    if not line_shape.covers(Point(coord[0], coord[1])):
        return False

    if ignore_end_vertices:
        coords = base.coords
        if coords_equal(coord, coords[0]) or coords_equal(coord, coords[-1]):
            return False

    return True


__all__ = ["point_on_line"]
