"""Errors raised by the containment predicates."""

from __future__ import annotations


class GeoWithinError(Exception):
    """Base class for every error raised by :mod:`geowithin`."""


class InvalidGeoJSONError(GeoWithinError, ValueError):
    """Input is not a GeoJSON Feature or Geometry we can read."""


class UnsupportedGeometryError(GeoWithinError, ValueError):
    """The geometry type (or the pair of types) has no containment predicate.

    ``position`` names the offending argument (``"feature1"`` or
    ``"feature2"``) and ``geometry_type`` its declared type.
    """

    def __init__(self, position: str, geometry_type: str | None):
        self.position = position
        self.geometry_type = geometry_type
        super().__init__(f"{position} {geometry_type} geometry not supported")


__all__ = ["GeoWithinError", "InvalidGeoJSONError", "UnsupportedGeometryError"]
