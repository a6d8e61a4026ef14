"""
Planar boolean-geometry operations with explicit failure results.

Wraps shapely (GEOS) so that callers receive a ``GeometryResult`` instead of
an exception when an operation degenerates. Each caller decides its own
fallback: drop the cell, keep the operands unmerged, keep the uncut region.
All operations work in unscaled longitude/latitude degrees; only the area
helpers are geodesic, on a sphere of the mean Earth radius.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from pyproj import Geod
from shapely.errors import GEOSException, ShapelyError
from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

GEOMETRY_ERRORS = (GEOSException, ShapelyError, ValueError, TypeError)

EARTH_RADIUS_M = 6371008.8

_GEOD = Geod(a=EARTH_RADIUS_M, b=EARTH_RADIUS_M)


@dataclass(frozen=True)
class GeometryResult:
    """Outcome of a geometry-engine call."""

    geometry: Optional[BaseGeometry] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.geometry is not None

    @property
    def is_empty(self) -> bool:
        return self.ok and self.geometry.is_empty

    @classmethod
    def failure(cls, exc: Exception) -> "GeometryResult":
        return cls(error=f"{type(exc).__name__}: {exc}")


def intersection(a: BaseGeometry, b: BaseGeometry) -> GeometryResult:
    """Intersect two geometries."""
    try:
        return GeometryResult(a.intersection(b))
    except GEOMETRY_ERRORS as e:
        return GeometryResult.failure(e)


def union(a: BaseGeometry, b: BaseGeometry) -> GeometryResult:
    """Union two geometries."""
    try:
        return GeometryResult(a.union(b))
    except GEOMETRY_ERRORS as e:
        return GeometryResult.failure(e)


def difference(a: BaseGeometry, b: BaseGeometry) -> GeometryResult:
    """Subtract ``b`` from ``a``."""
    try:
        return GeometryResult(a.difference(b))
    except GEOMETRY_ERRORS as e:
        return GeometryResult.failure(e)


def make_polygon(ring) -> GeometryResult:
    """Build a polygon from a closed ring, failing on invalid outlines."""
    try:
        polygon = Polygon(ring)
    except GEOMETRY_ERRORS as e:
        return GeometryResult.failure(e)
    if polygon.is_empty or not polygon.is_valid:
        return GeometryResult(error="invalid polygon ring")
    return GeometryResult(polygon)


def polygonal_parts(geometry: Optional[BaseGeometry]) -> List[Polygon]:
    """
    Decompose any geometry into its non-empty simple polygons.

    Lines and points left over from boolean operations along shared edges
    are discarded.
    """
    if geometry is None or geometry.is_empty:
        return []
    if isinstance(geometry, Polygon):
        return [geometry]
    if isinstance(geometry, MultiPolygon):
        return [p for p in geometry.geoms if not p.is_empty]
    if hasattr(geometry, "geoms"):
        parts = []
        for part in geometry.geoms:
            parts.extend(polygonal_parts(part))
        return parts
    return []


def as_polygonal(geometry: Optional[BaseGeometry]) -> Optional[BaseGeometry]:
    """Reduce a geometry to a Polygon or MultiPolygon, or None if nothing is left."""
    parts = polygonal_parts(geometry)
    if not parts:
        return None
    if len(parts) == 1:
        return parts[0]
    return MultiPolygon(parts)


def geodesic_area(geometry: BaseGeometry) -> float:
    """Area in square metres on the mean-radius sphere."""
    area, _ = _GEOD.geometry_area_perimeter(geometry)
    return abs(area)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round half away from zero for positive values, unlike ``round``."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def area_fields(geometry: BaseGeometry) -> dict:
    """
    Area properties for a polygon.

    Returns:
        {"area_sqm": int, "area_ha": float rounded to 0.1}
    """
    area = geodesic_area(geometry)
    return {
        "area_sqm": int(round_half_up(area)),
        "area_ha": round_half_up(area / 10000, 1),
    }

