from __future__ import annotations

import pytest
from shapely.geometry import Polygon

from geowithin import InvalidGeoJSONError
from geowithin.primitives import bbox, bbox_overlap, coords_equal, midpoint


def test_bbox_of_line_string():
    line = {"type": "LineString", "coordinates": [[3, -1], [-2, 4], [0, 0]]}

    assert bbox(line) == (-2, -1, 3, 4)


def test_bbox_covers_every_ring_and_feature():
    polygon = {
        "type": "Polygon",
        "coordinates": [[[0, 0], [0, 5], [5, 5], [0, 0]], [[1, 1], [1, 2], [2, 2], [1, 1]]],
    }
    collection = {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "properties": {}, "geometry": polygon},
            {"type": "Feature", "properties": {}, "geometry": {"type": "Point", "coordinates": [9, -3]}},
        ],
    }

    assert bbox(collection) == (0, -3, 9, 5)


def test_bbox_of_shapely_geometry():
    assert bbox(Polygon([(0, 0), (2, 0), (2, 3)])) == (0.0, 0.0, 2.0, 3.0)


def test_bbox_of_empty_geometry_raises():
    with pytest.raises(InvalidGeoJSONError):
        bbox({"type": "MultiPoint", "coordinates": []})


def test_bbox_overlap_is_directional():
    outer = (0, 0, 10, 10)
    inner = (2, 2, 8, 8)

    assert bbox_overlap(outer, inner)
    assert bbox_overlap(outer, outer)
    assert not bbox_overlap(inner, outer)
    assert not bbox_overlap(outer, (5, 5, 15, 8))
    assert not bbox_overlap(outer, (-1, 2, 8, 8))


def test_coords_equal_is_exact():
    assert coords_equal([1.5, 2.0], (1.5, 2))
    assert coords_equal([1, 2, 99], [1, 2])
    assert not coords_equal([0.1 + 0.2, 0], [0.3, 0])


def test_midpoint():
    assert midpoint([0, 0], [4, -2]) == (2, -1)
