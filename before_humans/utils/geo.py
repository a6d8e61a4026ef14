"""
Flat-earth helpers for small-area geographic calculations.

Distances use a local equirectangular projection with fixed kilometre
factors for London's latitude. Good enough for biome scoring, not for
surveying.
"""

import math
from typing import Sequence, Tuple

KM_PER_DEG_LNG = 70.0  # at London's latitude
KM_PER_DEG_LAT = 111.0

Coordinate = Tuple[float, float]


def point_in_ring(x: float, y: float, ring: Sequence[Sequence[float]]) -> bool:
    """
    Ray-casting point-in-polygon test against a single ring.

    Args:
        x, y: Point longitude and latitude
        ring: Ring positions; closed or open rings both work

    Returns:
        True if the point is inside the ring
    """
    inside = False
    j = len(ring) - 1
    for i in range(len(ring)):
        xi, yi = ring[i][0], ring[i][1]
        xj, yj = ring[j][0], ring[j][1]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def ring_bbox(ring: Sequence[Sequence[float]]) -> Tuple[float, float, float, float]:
    """Return (min_lng, min_lat, max_lng, max_lat) of a ring."""
    xs = [p[0] for p in ring]
    ys = [p[1] for p in ring]
    return min(xs), min(ys), max(xs), max(ys)


def km_distance(lng1: float, lat1: float, lng2: float, lat2: float) -> float:
    """Approximate distance in km between two nearby points."""
    dx = (lng1 - lng2) * KM_PER_DEG_LNG
    dy = (lat1 - lat2) * KM_PER_DEG_LAT
    return math.sqrt(dx * dx + dy * dy)


def segment_distance_sq(
    lng: float, lat: float, x1: float, y1: float, x2: float, y2: float
) -> float:
    """
    Squared km distance from a point to a segment.

    The projection parameter is clamped to the segment, so points beyond an
    end measure to that endpoint.
    """
    dx = (x2 - x1) * KM_PER_DEG_LNG
    dy = (y2 - y1) * KM_PER_DEG_LAT
    len_sq = dx * dx + dy * dy

    t = 0.0
    if len_sq > 0:
        t = ((lng - x1) * KM_PER_DEG_LNG * dx + (lat - y1) * KM_PER_DEG_LAT * dy) / len_sq
        t = max(0.0, min(1.0, t))

    proj_x = (x1 + t * (x2 - x1)) * KM_PER_DEG_LNG
    proj_y = (y1 + t * (y2 - y1)) * KM_PER_DEG_LAT
    px = lng * KM_PER_DEG_LNG
    py = lat * KM_PER_DEG_LAT
    return (px - proj_x) * (px - proj_x) + (py - proj_y) * (py - proj_y)


def distance_to_line(lng: float, lat: float, coords: Sequence[Sequence[float]]) -> float:
    """Distance in km from a point to the nearest segment of a polyline."""
    min_dist_sq = math.inf
    for i in range(len(coords) - 1):
        x1, y1 = coords[i][0], coords[i][1]
        x2, y2 = coords[i + 1][0], coords[i + 1][1]
        d_sq = segment_distance_sq(lng, lat, x1, y1, x2, y2)
        if d_sq < min_dist_sq:
            min_dist_sq = d_sq
    return math.sqrt(min_dist_sq)
