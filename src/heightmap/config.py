"""Heightmap generation configuration models."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field


class NoiseParameters(BaseModel, frozen=True):
    """Fractal noise parameters for a single generation run."""

    scale: float = Field(default=20.0, description="Domain stretch factor")
    offset_x: float = Field(default=100.0, description="Domain translation along x")
    offset_y: float = Field(default=100.0, description="Domain translation along y")
    octaves: int = Field(default=3, description="Number of noise layers to sum")
    lacunarity: float = Field(default=2.0, description="Frequency multiplier per octave")
    persistence: float = Field(default=0.5, description="Amplitude multiplier per octave")


class OffsetConfig(BaseModel):
    """Offset randomization parameters."""

    randomize: bool = Field(
        default=False, description="Replace offsets with seeded random values"
    )
    max_offset: float = Field(
        default=100.0, description="Randomized offsets fall in [-max_offset, max_offset)"
    )


class SmoothingConfig(BaseModel):
    """Post-process smoothing parameters."""

    enabled: bool = Field(default=False, description="Apply neighbor-average smoothing")
    iterations: int = Field(default=5, description="Number of smoothing passes")


class HeightmapConfig(BaseModel):
    """Complete heightmap generation configuration."""

    width: int = Field(default=100, description="Grid width in samples")
    height: int = Field(default=100, description="Grid height in samples")

    use_random_seed: bool = Field(
        default=True, description="Draw a fresh seed instead of using `seed`"
    )
    seed: int = Field(default=0, description="Random seed for reproducibility")

    noise: NoiseParameters = Field(default_factory=NoiseParameters)
    offset: OffsetConfig = Field(default_factory=OffsetConfig)
    smoothing: SmoothingConfig = Field(default_factory=SmoothingConfig)


def load_config(config_path: Path) -> HeightmapConfig:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed HeightmapConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return HeightmapConfig.model_validate(data)
