"""
Static reference data and the terrain signals derived from it.

This module provides:
- Immutable containers for the boundary, elevation control points,
  marsh/forest zones and river geometry
- Inverse-distance-weighted elevation
- Distances to tributaries and to the major river (centerline and banks)
- South-bank detection
"""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..exceptions import ReferenceDataError
from ..utils.geo import (
    KM_PER_DEG_LAT,
    KM_PER_DEG_LNG,
    distance_to_line,
    km_distance,
    point_in_ring,
    segment_distance_sq,
)

Coordinate = Tuple[float, float]

# Latitude band containing the major river polygon; outside it the bank
# distance is not computed.
RIVER_BAND = (51.43, 51.52)
FAR_FROM_RIVER_KM = 10.0
SEGMENT_MARGIN_DEG = 0.02
EXACT_MATCH_KM = 0.01


@dataclass(frozen=True)
class ElevationPoint:
    """Known elevation in metres above sea level."""

    lng: float
    lat: float
    elev: float
    name: str = ""


@dataclass(frozen=True)
class Zone:
    """Circular hint zone (marsh or woodland); radius in km."""

    lng: float
    lat: float
    radius: float
    name: str = ""

    def contains(self, lng: float, lat: float) -> bool:
        return km_distance(lng, lat, self.lng, self.lat) < self.radius


@dataclass(frozen=True)
class RiverLine:
    """Named tributary polyline."""

    name: str
    coordinates: Tuple[Coordinate, ...]
    category: str = "lost_river"


@dataclass(frozen=True)
class ReferenceData:
    """All static inputs of a generation run."""

    boundary: Tuple[Coordinate, ...]
    elevation_points: Tuple[ElevationPoint, ...]
    marshes: Tuple[Zone, ...]
    forests: Tuple[Zone, ...]
    river_polygon: Tuple[Coordinate, ...]
    river_centerline: Tuple[Coordinate, ...]
    tributaries: Tuple[RiverLine, ...]

    def __post_init__(self):
        _check_ring("boundary", self.boundary)
        _check_ring("river polygon", self.river_polygon)
        if not self.elevation_points:
            raise ReferenceDataError("at least one elevation control point is required")
        if len(self.river_centerline) < 2:
            raise ReferenceDataError("river centerline needs at least two vertices")

    @classmethod
    def from_records(
        cls,
        boundary,
        elevation_points,
        marshes,
        forests,
        river_polygon,
        river_centerline,
        tributaries,
    ) -> "ReferenceData":
        """Build reference data from plain dict/tuple records."""
        return cls(
            boundary=_coords(boundary),
            elevation_points=tuple(ElevationPoint(**p) for p in elevation_points),
            marshes=tuple(Zone(**z) for z in marshes),
            forests=tuple(Zone(**z) for z in forests),
            river_polygon=_coords(river_polygon),
            river_centerline=_coords(river_centerline),
            tributaries=tuple(
                RiverLine(
                    name=r["name"],
                    coordinates=_coords(r["coordinates"]),
                    category=r.get("category", "lost_river"),
                )
                for r in tributaries
            ),
        )

    @classmethod
    def london(cls) -> "ReferenceData":
        """Greater London reference data."""
        from ..config import (
            ELEVATION_POINTS,
            KNOWN_FORESTS,
            KNOWN_MARSHES,
            LONDON_BOUNDARY,
            LOST_RIVERS,
            THAMES_CENTERLINE,
            THAMES_POLYGON,
        )

        return cls.from_records(
            boundary=LONDON_BOUNDARY,
            elevation_points=ELEVATION_POINTS,
            marshes=KNOWN_MARSHES,
            forests=KNOWN_FORESTS,
            river_polygon=THAMES_POLYGON,
            river_centerline=THAMES_CENTERLINE,
            tributaries=LOST_RIVERS,
        )


def _coords(points: Sequence[Sequence[float]]) -> Tuple[Coordinate, ...]:
    return tuple((float(p[0]), float(p[1])) for p in points)


def _check_ring(label: str, ring: Sequence[Coordinate]) -> None:
    if len(ring) < 4:
        raise ReferenceDataError(f"{label} ring needs at least 4 positions, got {len(ring)}")
    if ring[0] != ring[-1]:
        raise ReferenceDataError(f"{label} ring is not closed")


class Topography:
    """Terrain signals over the reference data, queried per point."""

    def __init__(self, reference: ReferenceData):
        self.reference = reference

    def elevation(self, lng: float, lat: float) -> float:
        """
        Inverse-distance-weighted elevation in metres.

        Weights are 1/d² in projected km; a point within 0.01 km of a
        control point takes that point's elevation exactly.
        """
        weighted_sum = 0.0
        weight_sum = 0.0

        for pt in self.reference.elevation_points:
            dx = (lng - pt.lng) * KM_PER_DEG_LNG
            dy = (lat - pt.lat) * KM_PER_DEG_LAT
            dist = math.sqrt(dx * dx + dy * dy)

            if dist < EXACT_MATCH_KM:
                return pt.elev

            weight = 1 / (dist * dist)
            weighted_sum += pt.elev * weight
            weight_sum += weight

        return weighted_sum / weight_sum

    def nearest_tributary_distance(self, lng: float, lat: float) -> float:
        """Distance in km to the closest tributary polyline."""
        min_dist = math.inf
        for river in self.reference.tributaries:
            d = distance_to_line(lng, lat, river.coordinates)
            if d < min_dist:
                min_dist = d
        return min_dist

    def major_river_distance(self, lng: float, lat: float) -> float:
        """Distance in km to the major river centerline."""
        return distance_to_line(lng, lat, self.reference.river_centerline)

    def major_river_edge_distance(self, lng: float, lat: float) -> float:
        """
        Distance in km to the nearest bank of the major river polygon.

        Returns 0 inside the river and a far sentinel outside the river's
        latitude band.
        """
        if lat > RIVER_BAND[1] or lat < RIVER_BAND[0]:
            return FAR_FROM_RIVER_KM

        ring = self.reference.river_polygon
        if point_in_ring(lng, lat, ring):
            return 0.0

        min_dist_sq = math.inf
        for i in range(len(ring) - 1):
            x1, y1 = ring[i]
            x2, y2 = ring[i + 1]

            # Skip segments that are far away
            if lat > max(y1, y2) + SEGMENT_MARGIN_DEG or lat < min(y1, y2) - SEGMENT_MARGIN_DEG:
                continue
            if lng > max(x1, x2) + SEGMENT_MARGIN_DEG or lng < min(x1, x2) - SEGMENT_MARGIN_DEG:
                continue

            d_sq = segment_distance_sq(lng, lat, x1, y1, x2, y2)
            if d_sq < min_dist_sq:
                min_dist_sq = d_sq

        return math.sqrt(min_dist_sq)

    def major_river_latitude(self, lng: float) -> float:
        """
        Latitude of the major river centerline at a longitude.

        Interpolates along the first segment spanning ``lng``; beyond the
        ends the nearest endpoint's latitude is used.
        """
        line = self.reference.river_centerline
        for i in range(len(line) - 1):
            lng0, lat0 = line[i]
            lng1, lat1 = line[i + 1]
            if lng0 <= lng <= lng1:
                if lng1 == lng0:
                    return lat0
                t = (lng - lng0) / (lng1 - lng0)
                return lat0 + t * (lat1 - lat0)

        if lng < line[0][0]:
            return line[0][1]
        return line[-1][1]

    def is_south_bank(self, lng: float, lat: float) -> bool:
        return lat < self.major_river_latitude(lng)

    def in_marsh(self, lng: float, lat: float) -> bool:
        return any(zone.contains(lng, lat) for zone in self.reference.marshes)

    def in_forest(self, lng: float, lat: float) -> bool:
        return any(zone.contains(lng, lat) for zone in self.reference.forests)
