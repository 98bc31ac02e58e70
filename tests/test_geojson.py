from __future__ import annotations

import json

import pytest

from geowithin import InvalidGeoJSONError
from geowithin.geojson import loads_geometry, read_geometry

POLYGON = {"type": "Polygon", "coordinates": [[[0, 0], [0, 1], [1, 1], [0, 0]]]}


def test_read_geometry_from_feature_collection(tmp_path):
    path = tmp_path / "area.geojson"
    feature = {"type": "Feature", "properties": {}, "geometry": POLYGON}
    path.write_text(json.dumps({"type": "FeatureCollection", "features": [feature]}), encoding="utf-8")

    assert read_geometry(path) == feature
    assert read_geometry(str(path)) == feature


def test_loads_bare_geometry():
    assert loads_geometry(json.dumps(POLYGON)) == POLYGON


@pytest.mark.parametrize(
    "text",
    [
        '{"type": "FeatureCollection", "features": []}',
        '{"coordinates": []}',
        "[1, 2]",
        "{not json",
    ],
)
def test_loads_geometry_rejects_invalid_documents(text):
    with pytest.raises(InvalidGeoJSONError):
        loads_geometry(text)


def test_read_geometry_rejects_invalid_path_type():
    with pytest.raises(TypeError):
        read_geometry(42)
