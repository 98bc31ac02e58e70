"""Bounding boxes and small coordinate helpers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from shapely.geometry import GeometryCollection

from ..exceptions import InvalidGeoJSONError
from ..invariant import as_mapping, get_shape

BBox = tuple[float, float, float, float]


def bbox(geojson: Any) -> BBox:
    """Return ``(min_x, min_y, max_x, max_y)`` of a geometry, Feature or FeatureCollection."""

    data = as_mapping(geojson)
    if data.get("type") == "FeatureCollection":
        features = [feature for feature in data.get("features") or [] if feature.get("geometry") is not None]
        geometry = GeometryCollection([get_shape(feature) for feature in features])
    else:
        geometry = get_shape(geojson)

    if geometry.is_empty:
        raise InvalidGeoJSONError("cannot compute the bounding box of an empty geometry")

    min_x, min_y, max_x, max_y = geometry.bounds
    return min_x, min_y, max_x, max_y


def bbox_overlap(bbox1: Sequence[float], bbox2: Sequence[float]) -> bool:
    """Return ``True`` when ``bbox1`` fully contains ``bbox2``.

    The test is directional: the first box is the candidate container.
    """

    if bbox1[0] > bbox2[0]:
        return False
    if bbox1[2] < bbox2[2]:
        return False
    if bbox1[1] > bbox2[1]:
        return False
    if bbox1[3] < bbox2[3]:
        return False
    return True


def coords_equal(pair1: Sequence[float], pair2: Sequence[float]) -> bool:
    """Exact ``x``/``y`` equality, no tolerance."""

    return pair1[0] == pair2[0] and pair1[1] == pair2[1]


def midpoint(pair1: Sequence[float], pair2: Sequence[float]) -> tuple[float, float]:
    return (pair1[0] + pair2[0]) / 2, (pair1[1] + pair2[1]) / 2


__all__ = ["BBox", "bbox", "bbox_overlap", "coords_equal", "midpoint"]
