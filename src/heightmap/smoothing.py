"""Neighbor-average smoothing for elevation grids."""

import numpy as np
from numpy.typing import NDArray

from .exceptions import ConfigurationError


def smooth(heights: NDArray[np.float64], iterations: int) -> NDArray[np.float64]:
    """Smooth a grid by averaging each interior cell's four neighbors.

    Every pass reads only the previous pass's values. Border rows and
    columns are never written and keep their input values.

    Args:
        heights: 2D elevation grid.
        iterations: Number of passes (0 returns an equal copy).

    Returns:
        New smoothed grid; the input is not modified.

    Raises:
        ConfigurationError: If iterations is negative or heights is not 2D.
    """
    if iterations < 0:
        raise ConfigurationError(f"smoothing iterations must be >= 0, got {iterations}")
    if heights.ndim != 2:
        raise ConfigurationError(f"expected a 2D grid, got {heights.ndim} dimensions")

    result = heights.copy()

    for _ in range(iterations):
        previous = result
        result = previous.copy()
        # Paired sums keep a uniform grid exactly uniform
        result[1:-1, 1:-1] = (
            (previous[:-2, 1:-1] + previous[2:, 1:-1])
            + (previous[1:-1, :-2] + previous[1:-1, 2:])
        ) * 0.25

    return result
