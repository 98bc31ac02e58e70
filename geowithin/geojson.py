"""Read GeoJSON geometries from files or strings."""

from __future__ import annotations

import json
from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from typing import Any

from .exceptions import InvalidGeoJSONError


def _ensure_path(path: Path | str | PathLike[str]) -> Path:
    """Return ``path`` as :class:`pathlib.Path` enforcing valid types."""

    if isinstance(path, Path):
        return path
    if isinstance(path, (str, PathLike)):
        return Path(path)
    raise TypeError("path must be a string, Path or os.PathLike instance")


def _first_geometry(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping) or "type" not in data:
        raise InvalidGeoJSONError("invalid GeoJSON object: missing 'type'")

    if data["type"] == "FeatureCollection":
        features = data.get("features") or []
        if not features:
            raise InvalidGeoJSONError("FeatureCollection does not contain features")
        return features[0]

    return data


def loads_geometry(text: str) -> Mapping[str, Any]:
    """Parse a GeoJSON string into a Feature or Geometry mapping.

    A FeatureCollection yields its first feature.
    """

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidGeoJSONError(f"invalid GeoJSON text: {exc.msg}") from exc
    return _first_geometry(data)


def read_geometry(path: Path | str | PathLike[str]) -> Mapping[str, Any]:
    """Load a Feature or Geometry from a GeoJSON file."""

    source = _ensure_path(path)
    return loads_geometry(source.read_text(encoding="utf-8"))


__all__ = ["loads_geometry", "read_geometry"]
