"""
Biome region merging and major-river subtraction.

Same-biome cells are unioned with a balanced pairwise reduction, then the
major river polygon is cut out of every region. Every region's area is
computed from its current geometry when the region is built.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import structlog
from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry

from . import geometry
from .biomes import BIOME_ORDER, BiomeType

logger = structlog.get_logger()


@dataclass(frozen=True)
class MergedRegion:
    """A simple polygon of a single biome with its area."""

    biome: BiomeType
    geometry: Polygon
    area_sqm: int
    area_ha: float

    @classmethod
    def from_geometry(cls, biome: BiomeType, polygon: Polygon) -> "MergedRegion":
        return cls(biome=biome, geometry=polygon, **geometry.area_fields(polygon))

    @property
    def properties(self) -> Dict:
        return {"biome": self.biome.value, "area_sqm": self.area_sqm, "area_ha": self.area_ha}


def tree_union(geometries: Sequence[BaseGeometry]) -> List[BaseGeometry]:
    """
    Union geometries by balanced pairwise reduction.

    Each round unions neighbours (0,1), (2,3), ... and carries an odd last
    element over, halving the working list. A pair whose union fails stays
    as two separate pieces. The reduction stops at a single geometry or
    after a round in which no union succeeded.

    Returns:
        The remaining pieces; one element unless some unions failed
    """
    current = list(geometries)
    rounds = 0

    while len(current) > 1:
        merged_any = False
        next_round = []
        for i in range(0, len(current), 2):
            if i + 1 >= len(current):
                next_round.append(current[i])
                continue

            result = geometry.union(current[i], current[i + 1])
            if result.ok and not result.geometry.is_empty:
                next_round.append(result.geometry)
                merged_any = True
            else:
                logger.warning("Pairwise union failed, keeping both pieces",
                               round=rounds, error=result.error)
                next_round.append(current[i])
                next_round.append(current[i + 1])

        current = next_round
        rounds += 1
        if not merged_any:
            break

    return current


def explode_regions(biome: BiomeType, geometries: Sequence[BaseGeometry]) -> List[MergedRegion]:
    """Split geometries into simple polygons tagged with the biome."""
    regions = []
    for geom in geometries:
        for polygon in geometry.polygonal_parts(geom):
            regions.append(MergedRegion.from_geometry(biome, polygon))
    return regions


def merge_biome_cells(cells, assignments: Sequence[BiomeType]) -> List[MergedRegion]:
    """
    Union same-biome cells into regions.

    Args:
        cells: Tessellation cells
        assignments: One biome per cell, aligned with ``cells``

    Returns:
        Regions grouped forest, grassland, wetland, beach
    """
    if len(cells) != len(assignments):
        raise ValueError(
            f"Got {len(assignments)} biome assignments for {len(cells)} cells"
        )

    groups: Dict[BiomeType, List[BaseGeometry]] = {biome: [] for biome in BIOME_ORDER}
    for cell, biome in zip(cells, assignments):
        groups[biome].append(cell.geometry)

    merged = []
    for biome in BIOME_ORDER:
        group = groups[biome]
        if not group:
            continue
        regions = explode_regions(biome, tree_union(group))
        logger.debug("Biome merged", biome=biome.value, cells=len(group), polygons=len(regions))
        merged.extend(regions)

    logger.info("Biome regions merged", regions=len(merged))
    return merged


def subtract_major_river(regions: Sequence[MergedRegion], major_river) -> List[MergedRegion]:
    """
    Cut the major river polygon out of every region.

    Nothing is cut when the river is missing or degraded to a line. A
    region whose difference fails is kept uncut; a region entirely under
    the river disappears.

    Args:
        regions: Merged biome regions
        major_river: MajorRiver feature or None

    Returns:
        Cut regions, areas recomputed
    """
    if major_river is None or not major_river.is_polygonal:
        return list(regions)

    river: Optional[BaseGeometry] = major_river.geometry
    result_regions = []
    kept_uncut = 0

    for region in regions:
        result = geometry.difference(region.geometry, river)
        if not result.ok:
            logger.warning("River difference failed, keeping region uncut",
                           biome=region.biome.value, error=result.error)
            result_regions.append(region)
            kept_uncut += 1
            continue

        result_regions.extend(explode_regions(region.biome, [result.geometry]))

    logger.info("Major river subtracted",
                regions_in=len(regions),
                regions_out=len(result_regions),
                kept_uncut=kept_uncut)
    return result_regions
