"""Containment predicates for GeoJSON geometries."""

from .exceptions import GeoWithinError, InvalidGeoJSONError, UnsupportedGeometryError
from .invariant import get_coord, get_coords, get_geom, get_type
from .within import SUPPORTED_TYPES, GeometryType, contains, within

__all__ = [
    "GeoWithinError",
    "GeometryType",
    "InvalidGeoJSONError",
    "SUPPORTED_TYPES",
    "UnsupportedGeometryError",
    "contains",
    "get_coord",
    "get_coords",
    "get_geom",
    "get_type",
    "within",
]
