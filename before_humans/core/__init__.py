"""
Core biome map generation functionality.
"""

from .biomes import BiomeClassifier, BiomeType
from .hydrology import MajorRiver, Tributary, build_major_river, build_tributaries
from .mulberry_prng import MulberryPRNG
from .pipeline import generate_biome_map
from .point_sampler import SamplingOptions, sample_points
from .regions import MergedRegion, merge_biome_cells, subtract_major_river, tree_union
from .simplex_noise import SimplexNoise
from .topography import ReferenceData, Topography
from .voronoi_cells import Cell, create_voronoi_cells

__all__ = ['BiomeClassifier', 'BiomeType', 'MajorRiver', 'Tributary',
           'build_major_river', 'build_tributaries', 'MulberryPRNG',
           'generate_biome_map', 'SamplingOptions', 'sample_points',
           'MergedRegion', 'merge_biome_cells', 'subtract_major_river', 'tree_union',
           'SimplexNoise', 'ReferenceData', 'Topography', 'Cell', 'create_voronoi_cells']
