"""
Deterministic pre-settlement biome maps of Greater London.
"""

from .core import BiomeType, ReferenceData, generate_biome_map
from .exceptions import BeforeHumansError, GenerationError, ReferenceDataError
from .session import GenerationContext

__version__ = "0.1.0"

__all__ = ['generate_biome_map', 'BiomeType', 'ReferenceData', 'GenerationContext',
           'BeforeHumansError', 'GenerationError', 'ReferenceDataError']
