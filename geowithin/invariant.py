"""Normalize Feature-or-Geometry inputs into plain GeoJSON mappings."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from shapely.geometry import mapping, shape
from shapely.geometry.base import BaseGeometry
from shapely.prepared import PreparedGeometry

from .exceptions import InvalidGeoJSONError


def as_mapping(obj: Any) -> Mapping[str, Any]:
    """Return ``obj`` as a GeoJSON-like mapping."""

    if isinstance(obj, BaseGeometry):
        return mapping(obj)
    if isinstance(obj, Mapping):
        return obj
    data = getattr(obj, "__geo_interface__", None)
    if isinstance(data, Mapping):
        return data
    raise InvalidGeoJSONError("geojson must be a Feature or Geometry object")


def get_geom(geojson: Any) -> Mapping[str, Any]:
    """Return the geometry mapping of ``geojson``.

    Features are unwrapped, geometries are returned as-is. Shapely geometries
    and any object exposing ``__geo_interface__`` are converted first.
    """

    data = as_mapping(geojson)
    if "type" not in data:
        raise InvalidGeoJSONError("invalid GeoJSON object: missing 'type'")

    if data["type"] == "Feature":
        geometry = data.get("geometry")
        if geometry is None:
            raise InvalidGeoJSONError("Feature has no geometry")
        return get_geom(geometry)

    return data


def get_type(geojson: Any) -> str:
    """Return the geometry type name of a Feature or Geometry."""

    return get_geom(geojson)["type"]


def _is_coordinate(value: Any) -> bool:
    return (
        isinstance(value, Sequence)
        and not isinstance(value, (str, bytes))
        and len(value) >= 2
        and all(isinstance(component, (int, float)) for component in value[:2])
    )


def get_coord(obj: Any) -> Sequence[float]:
    """Return a single ``(x, y)`` coordinate from a Point or a bare pair."""

    if _is_coordinate(obj):
        return obj

    geometry = get_geom(obj)
    if geometry["type"] != "Point":
        raise InvalidGeoJSONError(f"expected a Point, got {geometry['type']}")
    coordinates = geometry.get("coordinates")
    if not _is_coordinate(coordinates):
        raise InvalidGeoJSONError("Point coordinates must be an (x, y) pair")
    return coordinates


def get_coords(obj: Any) -> Sequence[Any]:
    """Return the ``coordinates`` member of a geometry, or a bare sequence."""

    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
        return obj

    geometry = get_geom(obj)
    coordinates = geometry.get("coordinates")
    if coordinates is None:
        raise InvalidGeoJSONError(f"{geometry['type']} has no coordinates")
    return coordinates


def get_shape(obj: Any) -> BaseGeometry | PreparedGeometry:
    """Return ``obj`` as a shapely geometry; shapely inputs pass through."""

    if isinstance(obj, (BaseGeometry, PreparedGeometry)):
        return obj
    return shape(get_geom(obj))


__all__ = ["as_mapping", "get_coord", "get_coords", "get_geom", "get_shape", "get_type"]
