"""
Hydrology features: the major river and its lost tributaries.

The major river is built with a three-tier fallback:
1. river polygon clipped to the boundary
2. unclipped river polygon when the clip fails
3. centerline vertices inside the boundary, as a line, when no polygon
   can be built at all
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import structlog
from shapely.geometry import LineString, MultiPolygon, Point, Polygon
from shapely.geometry.base import BaseGeometry

from ..utils.geo import point_in_ring
from . import geometry
from .topography import ReferenceData

logger = structlog.get_logger()

MAJOR_RIVER_PROPERTIES = {"type": "thames", "name": "River Thames", "category": "major_river"}


@dataclass
class MajorRiver:
    """The major river as a polygon, or as a line after degradation."""

    geometry: BaseGeometry
    properties: Dict = field(default_factory=lambda: dict(MAJOR_RIVER_PROPERTIES))

    @property
    def is_polygonal(self) -> bool:
        return isinstance(self.geometry, (Polygon, MultiPolygon))


@dataclass
class Tributary:
    """A minor river line."""

    name: str
    geometry: LineString
    category: str = "lost_river"

    @property
    def properties(self) -> Dict:
        return {"type": "river", "name": self.name, "category": self.category}


def build_major_river(boundary: BaseGeometry, reference: ReferenceData) -> Optional[MajorRiver]:
    """
    Build the major river feature.

    Args:
        boundary: Boundary polygon
        reference: Static reference data with the river outline and centerline

    Returns:
        MajorRiver, or None if even the line fallback has fewer than two vertices
    """
    built = geometry.make_polygon(reference.river_polygon)
    if built.ok:
        clipped = geometry.intersection(built.geometry, boundary)
        river = geometry.as_polygonal(clipped.geometry) if clipped.ok else None
        if river is not None:
            return MajorRiver(river)

        # The river lies roughly within the boundary anyway
        logger.warning("Major river clip failed, using unclipped polygon", error=clipped.error)
        return MajorRiver(built.geometry)

    logger.warning("Major river polygon creation failed", error=built.error)

    # Last resort: centerline
    coords = [c for c in reference.river_centerline if boundary.covers(Point(c))]
    if len(coords) >= 2:
        logger.warning("Major river degraded to centerline", vertices=len(coords))
        return MajorRiver(LineString(coords))

    logger.error("Major river could not be built")
    return None


def build_tributaries(boundary_ring, reference: ReferenceData) -> List[Tributary]:
    """
    Build the tributary lines that lie inside the boundary.

    Vertices outside the ring are dropped; rivers left with fewer than
    two vertices are skipped.
    """
    tributaries = []
    for river in reference.tributaries:
        coords = [c for c in river.coordinates if point_in_ring(c[0], c[1], boundary_ring)]
        if len(coords) >= 2:
            tributaries.append(Tributary(name=river.name, geometry=LineString(coords),
                                         category=river.category))

    logger.info("Tributaries built", count=len(tributaries), total=len(reference.tributaries))
    return tributaries
