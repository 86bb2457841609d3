"""Main heightmap generation orchestration."""

import numpy as np
import structlog
from numpy.typing import NDArray

from .config import HeightmapConfig, NoiseParameters, OffsetConfig
from .exceptions import ConfigurationError, NumericDegeneracyError
from .noise import NoiseField
from .smoothing import smooth

logger = structlog.get_logger()

# Random seeds are drawn from [0, MAX_SEED)
MAX_SEED = 2**31 - 1

# Seed shift so randomized offsets draw from their own stream
_OFFSET_STREAM = 700


class HeightmapResult:
    """Result of heightmap generation."""

    def __init__(
        self,
        heights: NDArray[np.float64],
        seed: int,
        params: NoiseParameters,
        config: HeightmapConfig,
    ):
        self.heights = heights
        self.seed = seed
        self.params = params
        self.config = config

    @property
    def width(self) -> int:
        return self.heights.shape[0]

    @property
    def height(self) -> int:
        return self.heights.shape[1]


def validate_dimensions(width: int, height: int) -> None:
    """Reject grid sizes that can't be mapped onto the noise domain.

    Raises:
        NumericDegeneracyError: If a dimension is 1 (zero denominator).
        ConfigurationError: If a dimension is below 1.
    """
    for name, size in (("width", width), ("height", height)):
        if size == 1:
            raise NumericDegeneracyError(
                f"{name} must be at least 2, got 1 (domain mapping divides by {name} - 1)"
            )
        if size < 2:
            raise ConfigurationError(f"{name} must be at least 2, got {size}")


def validate_config(config: HeightmapConfig) -> None:
    """Check a configuration before any generation work begins.

    Raises:
        ConfigurationError: On invalid dimensions, octaves, seed or smoothing.
    """
    validate_dimensions(config.width, config.height)

    if config.noise.octaves < 1:
        raise ConfigurationError(f"octaves must be at least 1, got {config.noise.octaves}")
    if not config.use_random_seed and config.seed < 0:
        raise ConfigurationError(f"seed must be non-negative, got {config.seed}")
    if config.smoothing.iterations < 0:
        raise ConfigurationError(
            f"smoothing iterations must be >= 0, got {config.smoothing.iterations}"
        )


def resolve_seed(use_random_seed: bool, seed: int) -> int:
    """Return the seed to generate with, drawing a fresh one if requested."""
    if use_random_seed:
        return int(np.random.default_rng().integers(0, MAX_SEED))
    return seed


def resolve_offsets(
    params: NoiseParameters,
    offset: OffsetConfig,
    seed: int,
) -> NoiseParameters:
    """Apply offset randomization to noise parameters.

    Randomized offsets come from a generator seeded by the resolved seed, so
    they are reproducible along with the rest of the grid.

    Args:
        params: Configured noise parameters.
        offset: Offset randomization settings.
        seed: Resolved generation seed.

    Returns:
        Noise parameters with the offsets to sample at.
    """
    if not offset.randomize:
        return params

    rng = np.random.default_rng(seed + _OFFSET_STREAM)
    offset_x, offset_y = rng.uniform(-offset.max_offset, offset.max_offset, size=2)
    return params.model_copy(update={"offset_x": float(offset_x), "offset_y": float(offset_y)})


def domain_coordinates(
    width: int,
    height: int,
    params: NoiseParameters,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Map grid indices to noise domain coordinates.

    Index 0 maps to the offset and the last index maps to offset + scale.

    Returns:
        (x_coords, y_coords), each of shape (width, height).
    """
    validate_dimensions(width, height)

    xs = np.arange(width, dtype=np.float64) / (width - 1) * params.scale + params.offset_x
    ys = np.arange(height, dtype=np.float64) / (height - 1) * params.scale + params.offset_y
    x_coords, y_coords = np.meshgrid(xs, ys, indexing="ij")
    return x_coords, y_coords


def generate_heights(
    width: int,
    height: int,
    params: NoiseParameters,
    field: NoiseField,
) -> NDArray[np.float64]:
    """Fill an elevation grid with fractal noise.

    Args:
        width: Grid width.
        height: Grid height.
        params: Noise parameters.
        field: Seeded noise field.

    Returns:
        Elevation grid of shape (width, height), indexed [x, y].
    """
    x_coords, y_coords = domain_coordinates(width, height, params)
    return np.asarray(field.sample(x_coords, y_coords, params), dtype=np.float64)


class HeightmapGenerator:
    """Generates elevation grids from a configuration.

    Each call to generate() resolves a seed, builds a fresh NoiseField from it,
    and returns a grid the generator keeps no reference to.
    """

    def __init__(self, config: HeightmapConfig | None = None):
        self.config = config if config is not None else HeightmapConfig()

    def generate(self) -> HeightmapResult:
        """Generate a heightmap.

        Returns:
            HeightmapResult with the grid and the seed actually used.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        config = self.config
        validate_config(config)

        seed = resolve_seed(config.use_random_seed, config.seed)
        logger.debug("seed_resolved", seed=seed, random=config.use_random_seed)

        field = NoiseField(seed)
        params = resolve_offsets(config.noise, config.offset, seed)

        logger.info(
            "heightmap_generating",
            width=config.width,
            height=config.height,
            seed=seed,
            octaves=params.octaves,
            offset_x=params.offset_x,
            offset_y=params.offset_y,
        )

        heights = generate_heights(config.width, config.height, params, field)

        if config.smoothing.enabled:
            heights = smooth(heights, config.smoothing.iterations)
            logger.debug("heightmap_smoothed", iterations=config.smoothing.iterations)

        logger.info(
            "heightmap_generated",
            seed=seed,
            min=float(heights.min()),
            max=float(heights.max()),
        )

        return HeightmapResult(heights=heights, seed=seed, params=params, config=config)


def generate_heightmap(config: HeightmapConfig) -> HeightmapResult:
    """Generate a heightmap from configuration.

    Args:
        config: Heightmap generation configuration.

    Returns:
        HeightmapResult with the elevation grid.
    """
    return HeightmapGenerator(config).generate()
