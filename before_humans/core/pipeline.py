"""
Biome map generation pipeline.

The pipeline is a pure function of (seed, reference data, sampling
options): the PRNG is created here, consumed only by the point sampler,
and discarded with the run.
"""

import time
from typing import Any, Dict, Optional

import structlog

from ..exceptions import GenerationError, ReferenceDataError
from ..utils.geo import ring_bbox
from . import geometry
from .assembly import assemble_feature_collection
from .biomes import BiomeClassifier
from .hydrology import build_major_river, build_tributaries
from .mulberry_prng import MulberryPRNG
from .point_sampler import SamplingOptions, sample_points
from .regions import merge_biome_cells, subtract_major_river
from .simplex_noise import SimplexNoise
from .topography import ReferenceData, Topography
from .voronoi_cells import create_voronoi_cells

logger = structlog.get_logger()


def generate_biome_map(
    seed: int,
    reference: Optional[ReferenceData] = None,
    options: Optional[SamplingOptions] = None,
) -> Dict[str, Any]:
    """
    Generate a biome map as a GeoJSON FeatureCollection.

    Args:
        seed: Integer seed; the same seed always gives the same map
        reference: Static reference data (defaults to Greater London)
        options: Sampling grid options

    Returns:
        FeatureCollection of biome polygons, tributary lines and the major river

    Raises:
        GenerationError: If the run fails as a whole; no partial output is returned
    """
    try:
        return _generate(int(seed), reference or ReferenceData.london(), options or SamplingOptions())
    except GenerationError:
        raise
    except Exception as e:
        logger.error("Generation failed", seed=seed, error=str(e))
        raise GenerationError(seed, str(e)) from e


def _generate(seed: int, reference: ReferenceData, options: SamplingOptions) -> Dict[str, Any]:
    start = time.perf_counter()
    log = logger.bind(seed=seed)
    log.info("Starting biome map generation")

    prng = MulberryPRNG(seed)
    noise = SimplexNoise(seed)

    built = geometry.make_polygon(reference.boundary)
    if not built.ok:
        raise ReferenceDataError(f"Boundary polygon is invalid: {built.error}")
    boundary = built.geometry
    bbox = ring_bbox(reference.boundary)

    # Step 1: sample sites within the boundary
    points = sample_points(reference.boundary, prng, options)

    # Step 2: Voronoi cells clipped to the boundary
    cells = create_voronoi_cells(points, bbox, boundary)

    # Step 3: one biome per cell
    classifier = BiomeClassifier(noise, Topography(reference))
    assignments = classifier.classify(cells)

    # Step 4: merge same-biome cells
    regions = merge_biome_cells(cells, assignments)

    # Step 5: hydrology
    major_river = build_major_river(boundary, reference)
    tributaries = build_tributaries(reference.boundary, reference)

    # Step 6: cut the major river out of the biome polygons
    cut_regions = subtract_major_river(regions, major_river)

    # Step 7: assemble
    collection = assemble_feature_collection(cut_regions, tributaries, major_river)

    log.info("Biome map generated",
             features=len(collection["features"]),
             regions=len(cut_regions),
             tributaries=len(tributaries),
             prng_calls=prng.call_count,
             elapsed_s=round(time.perf_counter() - start, 3))
    return collection
