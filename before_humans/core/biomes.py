"""
Biome classification from terrain, hydrology and noise signals.

This module implements:
- Per-cell signal extraction (elevation, river distances, noise samples)
- Heuristic beach/wetland/forest/grassland scoring
- Fixed-priority selection of the winning biome

The weights and thresholds below are empirically tuned domain constants.
Changing any of them changes the generated map.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

import structlog

from .simplex_noise import SimplexNoise
from .topography import Topography

logger = structlog.get_logger()


class BiomeType(str, Enum):
    """Land-cover labels."""

    FOREST = "forest"
    GRASSLAND = "grassland"
    WETLAND = "wetland"
    BEACH = "beach"


# Selection priority: on equal scores the earlier label wins.
SCORE_ORDER = (BiomeType.BEACH, BiomeType.WETLAND, BiomeType.FOREST, BiomeType.GRASSLAND)

# Grouping order used when merging cells into regions.
BIOME_ORDER = (BiomeType.FOREST, BiomeType.GRASSLAND, BiomeType.WETLAND, BiomeType.BEACH)


@dataclass(frozen=True)
class CellSignals:
    """Everything the scorer knows about one cell centroid."""

    elevation: float
    river_distance: float  # nearest tributary, km
    major_river_distance: float  # centerline, km
    major_river_edge_distance: float  # bank, km; 0 inside the river
    south_bank: bool
    in_marsh: bool
    in_forest: bool
    n1: float  # large-scale terrain
    n2: float  # fine detail
    n3: float  # very large variation
    n4: float  # medium patches
    n5: float  # fine patches
    grass_noise: float


def extract_signals(lng: float, lat: float, noise: SimplexNoise, topography: Topography) -> CellSignals:
    """Sample terrain and noise at a cell centroid."""
    return CellSignals(
        elevation=topography.elevation(lng, lat),
        river_distance=topography.nearest_tributary_distance(lng, lat),
        major_river_distance=topography.major_river_distance(lng, lat),
        major_river_edge_distance=topography.major_river_edge_distance(lng, lat),
        south_bank=topography.is_south_bank(lng, lat),
        in_marsh=topography.in_marsh(lng, lat),
        in_forest=topography.in_forest(lng, lat),
        n1=noise.fbm(lng * 80, lat * 80, 4),
        n2=noise.fbm(lng * 200, lat * 200, 3),
        n3=noise.fbm(lng * 40, lat * 40, 2),
        n4=noise.fbm(lng * 150 + 50, lat * 150 + 50, 3),
        n5=noise.fbm(lng * 300 + 100, lat * 300 + 100, 2),
        grass_noise=noise.fbm(lng * 120 + 200, lat * 120 + 200, 3),
    )


def beach_score(s: CellSignals) -> float:
    """Gravel and sand shores in a narrow band at the river's edge."""
    elev = s.elevation
    score = 0.0

    if s.major_river_edge_distance < 0.8 and elev < 12:
        edge_proximity = 1 - s.major_river_edge_distance / 0.8
        score = edge_proximity * 4.0
        # Patchy: some stretches are mud (wetland), some sand
        score *= max(0, 0.4 + s.n5 * 0.8)
        # Gravel terraces slightly above water level
        if 2 < elev < 10:
            score += 1.0

    # Tributary mouths
    if s.river_distance < 0.4 and s.major_river_distance < 2.5 and elev < 10:
        score += (1 - s.river_distance / 0.4) * 2.0 * max(0, 0.3 + s.n5 * 0.8)

    return score


def wetland_score(s: CellSignals, beach: float) -> float:
    """Dominant biome of the low-lying floodplain."""
    elev = s.elevation
    score = 0.0

    if elev < 15:
        score = (1 - elev / 15) * 2.5
    if s.river_distance < 2.0 and elev < 25:
        score += (1 - s.river_distance / 2.0) * (1 - elev / 30) * 2.0
    if s.major_river_distance < 3.0 and elev < 15:
        score += (1 - s.major_river_distance / 3.0) * (1 - elev / 15) * 3.0
    # South bank was overwhelmingly wetland
    if s.south_bank and elev < 20 and s.major_river_distance < 5.0:
        score += (1 - s.major_river_distance / 5.0) * 2.0
    if s.in_marsh:
        score += 3.0 + s.n1 * 0.5

    score *= 0.8 + s.n1 * 0.4

    # Give way to beach right at the water's edge
    if s.major_river_edge_distance < 0.5 and beach > 1.0:
        score *= 0.4

    return score


def forest_score(s: CellSignals) -> float:
    """Higher ground, known woodland, and noise-driven patches."""
    elev = s.elevation
    score = 0.0

    if elev > 20:
        score = (elev - 20) / 60 * 2.0
    if s.in_forest:
        score += 2.5 + s.n1 * 0.5

    forest_noise = s.n3 * 0.6 + s.n4 * 0.8 + s.n5 * 0.4
    score += max(0, forest_noise * 1.8)
    if 15 < elev < 80:
        score += 0.6

    score *= 0.5 + s.n2 * 0.6
    if elev < 8:
        score *= 0.2

    return score


def grassland_score(s: CellSignals) -> float:
    """Clearings, river meadows and drier transitions."""
    elev = s.elevation
    score = 0.8 + s.grass_noise * 0.8

    if 10 < elev < 60:
        score += 0.4
    if 0.3 < s.river_distance < 2.0:
        score += 0.3
    if elev < 8:
        score *= 0.3

    return score


def score_biomes(s: CellSignals) -> List[Tuple[BiomeType, float]]:
    """Score every biome, in selection priority order."""
    beach = beach_score(s)
    return [
        (BiomeType.BEACH, beach),
        (BiomeType.WETLAND, wetland_score(s, beach)),
        (BiomeType.FOREST, forest_score(s)),
        (BiomeType.GRASSLAND, grassland_score(s)),
    ]


def select_biome(scores: Sequence[Tuple[BiomeType, float]]) -> BiomeType:
    """
    Pick the first entry whose score beats every earlier one.

    Ties therefore go to the earlier label; grassland is the default when
    nothing beats negative infinity.
    """
    best_biome = BiomeType.GRASSLAND
    best_score = float("-inf")
    for biome, score in scores:
        if score > best_score:
            best_score = score
            best_biome = biome
    return best_biome


class BiomeClassifier:
    """Assigns one biome per cell from its centroid."""

    def __init__(self, noise: SimplexNoise, topography: Topography):
        """
        Initialize biome classifier.

        Args:
            noise: Seeded noise field
            topography: Terrain signals over the static reference data
        """
        self.noise = noise
        self.topography = topography

    def score_cell(self, lng: float, lat: float) -> List[Tuple[BiomeType, float]]:
        return score_biomes(extract_signals(lng, lat, self.noise, self.topography))

    def classify_point(self, lng: float, lat: float) -> BiomeType:
        return select_biome(self.score_cell(lng, lat))

    def classify(self, cells) -> List[BiomeType]:
        """
        Classify every cell by its generating site.

        Cells are independent of each other; the result is aligned with
        the input order.
        """
        assignments = [self.classify_point(*cell.site) for cell in cells]

        counts = {biome.value: 0 for biome in BIOME_ORDER}
        for biome in assignments:
            counts[biome.value] += 1
        logger.info("Biomes assigned", cells=len(assignments), **counts)

        return assignments
