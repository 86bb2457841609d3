"""Fractal noise heightmap generation.

Builds deterministic elevation grids from seeded multi-octave gradient
noise, with optional neighbor-average smoothing.
"""

from .config import (
    HeightmapConfig,
    NoiseParameters,
    OffsetConfig,
    SmoothingConfig,
    load_config,
)
from .exceptions import ConfigurationError, HeightmapError, NumericDegeneracyError
from .generator import (
    HeightmapGenerator,
    HeightmapResult,
    generate_heightmap,
)
from .noise import NoiseField, octave_amplitudes
from .persistence import load_heightmap, save_heightmap
from .smoothing import smooth

__all__ = [
    # Config
    "HeightmapConfig",
    "NoiseParameters",
    "OffsetConfig",
    "SmoothingConfig",
    "load_config",
    # Generation
    "HeightmapGenerator",
    "HeightmapResult",
    "NoiseField",
    "generate_heightmap",
    "octave_amplitudes",
    "smooth",
    # Persistence
    "load_heightmap",
    "save_heightmap",
    # Exceptions
    "HeightmapError",
    "ConfigurationError",
    "NumericDegeneracyError",
]
