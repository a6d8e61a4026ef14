"""Jittered grid sampling of Voronoi sites inside a boundary."""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import structlog

from ..utils.geo import point_in_ring, ring_bbox
from .mulberry_prng import MulberryPRNG

logger = structlog.get_logger()


@dataclass
class SamplingOptions:
    """Sampling grid options."""

    spacing: float = 0.009  # degrees, ~900m cells
    jitter: float = 0.4  # max deviation as a fraction of spacing

    def __post_init__(self):
        if not self.spacing > 0:
            raise ValueError(f"spacing must be positive, got {self.spacing}")
        if not 0 <= self.jitter < 0.5:
            raise ValueError(f"jitter must be in [0, 0.5), got {self.jitter}")

    @classmethod
    def from_settings(cls, settings) -> "SamplingOptions":
        return cls(spacing=settings.point_spacing, jitter=settings.jitter_fraction)


def get_jittered_grid(
    bbox: Tuple[float, float, float, float],
    prng: MulberryPRNG,
    options: SamplingOptions,
) -> List[Tuple[float, float]]:
    """
    Generate jittered square grid points over a bounding box.

    The grid is walked column by column (longitude outer, latitude inner)
    and every node draws two jitter values, longitude first.

    Args:
        bbox: (min_lng, min_lat, max_lng, max_lat)
        prng: Random stream; advanced twice per grid node
        options: Grid spacing and jitter

    Returns:
        List of (lng, lat) points in grid order
    """
    min_lng, min_lat, max_lng, max_lat = bbox
    step = options.spacing
    jitter_span = options.jitter * 2

    def jitter():
        return (prng.random() - 0.5) * step * jitter_span

    points = []
    lng = min_lng
    while lng <= max_lng:
        lat = min_lat
        while lat <= max_lat:
            j_lng = lng + jitter()
            j_lat = lat + jitter()
            points.append((j_lng, j_lat))
            lat += step
        lng += step

    return points


def sample_points(
    boundary: Sequence[Sequence[float]],
    prng: MulberryPRNG,
    options: SamplingOptions = None,
) -> List[Tuple[float, float]]:
    """
    Sample Voronoi sites strictly inside a boundary ring.

    Args:
        boundary: Closed boundary ring of (lng, lat) positions
        prng: Random stream owned by this generation run
        options: Grid spacing and jitter

    Returns:
        Points inside the ring, in grid traversal order
    """
    options = options or SamplingOptions()
    candidates = get_jittered_grid(ring_bbox(boundary), prng, options)
    points = [p for p in candidates if point_in_ring(p[0], p[1], boundary)]

    logger.info("Sample points generated",
                candidates=len(candidates),
                inside=len(points),
                spacing=options.spacing)
    return points
