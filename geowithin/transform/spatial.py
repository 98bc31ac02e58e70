"""Vectorised containment tests over pandas and geopandas frames."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import geopandas as gpd
import pandas as pd
from shapely.geometry.base import BaseGeometry

from ..within import within

GeometryLike = Any


def _is_geometry(value: Any) -> bool:
    if isinstance(value, BaseGeometry):
        return True
    if isinstance(value, Mapping):
        return "type" in value
    return hasattr(value, "__geo_interface__")


def _to_geodataframe(df: pd.DataFrame | gpd.GeoDataFrame) -> gpd.GeoDataFrame:
    """Return a GeoDataFrame copy ensuring the geometry column exists."""
    if isinstance(df, gpd.GeoDataFrame):
        return df.copy()
    if "geometry" not in df.columns:
        raise ValueError("input DataFrame must contain a 'geometry' column")
    return gpd.GeoDataFrame(df.copy(), geometry="geometry")


def _named_series(series: gpd.GeoSeries, names: Iterable[Any]) -> gpd.GeoSeries:
    named = series.copy()
    named.index = [str(value) for value in names]
    return named


def _geometries_from_input(
    geom: GeometryLike,
) -> tuple[gpd.GeoSeries | None, dict[str, GeometryLike] | None]:
    """Normalize the target geometries.

    Returns a tuple of (series, mapping). A GeoSeries keeps its CRS so it can
    be checked against the frame; every other input becomes a mapping of
    column names to geometries.
    """
    if isinstance(geom, gpd.GeoDataFrame):
        names = geom["name"] if "name" in geom.columns else geom.index
        return _named_series(geom.geometry, names), None

    if isinstance(geom, gpd.GeoSeries):
        return _named_series(geom, geom.index), None

    if _is_geometry(geom):
        return None, {"within": geom}

    if isinstance(geom, Mapping):
        normalized = {}
        for key, value in geom.items():
            if not _is_geometry(value):
                raise TypeError("Mapping values must be geometries")
            normalized[str(key)] = value
        return None, normalized

    if isinstance(geom, Iterable) and not isinstance(geom, (str, bytes)):
        normalized = {}
        for index, value in enumerate(geom):
            if isinstance(value, tuple) and len(value) == 2 and not _is_geometry(value):
                name, geometry = value
            else:
                name, geometry = f"within_{index}", value
            if not _is_geometry(geometry):
                raise TypeError("Iterable values must be geometries or (name, geometry) tuples")
            normalized[str(name)] = geometry
        if normalized:
            return None, normalized

    raise TypeError(
        "geom must be a geometry, GeoSeries, GeoDataFrame, a mapping of names to geometries, "
        "or an iterable of geometries/(name, geometry) tuples",
    )


def _check_crs(gdf: gpd.GeoDataFrame, geom_series: gpd.GeoSeries) -> None:
    if geom_series.crs is None:
        return
    if gdf.crs is not None and gdf.crs != geom_series.crs:
        raise ValueError("Geometry CRS does not match the GeoDataFrame CRS")
    if gdf.crs is None:
        gdf.set_crs(geom_series.crs, inplace=True)


def _row_within(geometry: BaseGeometry | None, target: GeometryLike) -> bool:
    # Missing or empty row geometries are never within anything.
    if geometry is None or geometry.is_empty:
        return False
    return within(geometry, target)


def _within_column(gdf: gpd.GeoDataFrame, target: GeometryLike) -> pd.Series:
    return gdf.geometry.apply(lambda geometry: _row_within(geometry, target)).astype(bool)


def mark_within(
    df: pd.DataFrame | gpd.GeoDataFrame,
    geom: GeometryLike,
) -> gpd.GeoDataFrame:
    """Return a GeoDataFrame with boolean columns marking rows within geometries.

    Parameters
    ----------
    df:
        DataFrame or GeoDataFrame with geometries under the ``geometry`` column.
    geom:
        Single geometry, collection or mapping of geometries. Each target
        produces one boolean column telling whether the row's geometry is
        within it; a single geometry produces the ``within`` column.
    """

    gdf = _to_geodataframe(df)
    geom_series, geom_mapping = _geometries_from_input(geom)

    if geom_series is not None:
        _check_crs(gdf, geom_series)
        for name, geometry in geom_series.items():
            gdf[name] = _within_column(gdf, geometry)
        return gdf

    assert geom_mapping is not None
    for name, geometry in geom_mapping.items():
        gdf[name] = _within_column(gdf, geometry)
    return gdf


__all__ = ["mark_within"]
