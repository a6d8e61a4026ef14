"""Voronoi tessellation of sample points, clipped to the map boundary."""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
import structlog
from scipy.spatial import Voronoi
from shapely.geometry import MultiPoint, Polygon, box
from shapely.geometry.base import BaseGeometry

from . import geometry

logger = structlog.get_logger()

FRAME_DISTANCE = 10.0  # frame offset in multiples of the bbox span


@dataclass
class Cell:
    """A boundary-clipped Voronoi cell."""

    index: int  # position of the generating point in the sampler output
    site: Tuple[float, float]  # generating point, used for scoring
    geometry: BaseGeometry  # Polygon or MultiPolygon


def get_frame_points(bbox: Tuple[float, float, float, float]) -> np.ndarray:
    """
    Generate far-away frame points for pseudo-clipping Voronoi cells.

    Eight points (corners and edge midpoints of a square far outside the
    bbox) make every real site's region finite. Their bisectors with any
    real site lie outside the bbox, so cells clipped to the bbox are exact.

    Args:
        bbox: (min_lng, min_lat, max_lng, max_lat)

    Returns:
        Array of frame point coordinates
    """
    min_x, min_y, max_x, max_y = bbox
    cx = (min_x + max_x) / 2
    cy = (min_y + max_y) / 2
    span = max(max_x - min_x, max_y - min_y, 1e-6)
    d = span * FRAME_DISTANCE

    points = []
    for dx in (-d, 0.0, d):
        for dy in (-d, 0.0, d):
            if dx or dy:
                points.append([cx + dx, cy + dy])
    return np.array(points)


def voronoi_polygons(
    points: Sequence[Tuple[float, float]],
    bbox: Tuple[float, float, float, float],
) -> List[Optional[Polygon]]:
    """
    Build bbox-bounded Voronoi polygons, one slot per input point.

    A slot is None when the diagram gives the point no usable region
    (coincident sites, for instance).
    """
    n_points = len(points)
    if n_points == 0:
        return []

    sites = np.asarray(points, dtype=float).reshape(-1, 2)
    vor = Voronoi(np.vstack([sites, get_frame_points(bbox)]))
    logger.info("Voronoi diagram created",
                sites=n_points,
                vertices=len(vor.vertices),
                ridges=len(vor.ridge_points))

    frame = box(*bbox)
    polygons: List[Optional[Polygon]] = []
    for i in range(n_points):
        region_idx = vor.point_region[i]
        region = vor.regions[region_idx] if region_idx >= 0 else []
        if not region or -1 in region:
            polygons.append(None)
            continue
        # Voronoi regions are convex, so the hull orders the vertices
        hull = MultiPoint(vor.vertices[region]).convex_hull
        result = geometry.intersection(hull, frame)
        polygons.append(geometry.as_polygonal(result.geometry) if result.ok else None)

    return polygons


def create_voronoi_cells(
    points: Sequence[Tuple[float, float]],
    bbox: Tuple[float, float, float, float],
    boundary: BaseGeometry,
) -> List[Cell]:
    """
    Tessellate the sample points and clip every cell to the boundary.

    Cells whose clip fails or leaves nothing polygonal are dropped; some
    coverage loss along the boundary edge is expected.

    Args:
        points: Sample points in sampler order
        bbox: Bounding box for the diagram
        boundary: Boundary polygon

    Returns:
        Cells in input order, each tagged with its point index and site
    """
    cells = []
    dropped = 0

    for i, polygon in enumerate(voronoi_polygons(points, bbox)):
        if polygon is None:
            dropped += 1
            logger.debug("Voronoi region missing", index=i)
            continue

        result = geometry.intersection(polygon, boundary)
        clipped = geometry.as_polygonal(result.geometry) if result.ok else None
        if clipped is None:
            dropped += 1
            logger.debug("Cell clip dropped", index=i, error=result.error)
            continue

        cells.append(Cell(index=i, site=tuple(points[i]), geometry=clipped))

    logger.info("Voronoi cells created", cells=len(cells), dropped=dropped)
    return cells
