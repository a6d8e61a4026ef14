"""
Configuration and static reference data for biome map generation.
"""

from .config import Settings, settings
from .london_boundary import LONDON_BOUNDARY
from .london_hydrography import LOST_RIVERS, THAMES_CENTERLINE, THAMES_POLYGON
from .london_topography import ELEVATION_POINTS, KNOWN_FORESTS, KNOWN_MARSHES

__all__ = ['Settings', 'settings', 'LONDON_BOUNDARY', 'ELEVATION_POINTS',
           'KNOWN_MARSHES', 'KNOWN_FORESTS', 'THAMES_CENTERLINE',
           'THAMES_POLYGON', 'LOST_RIVERS']
