"""Noise generation for heightmap synthesis.

Provides a seeded 2D gradient (Perlin) noise primitive and the fractal
octave accumulation built on top of it.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .config import NoiseParameters
from .exceptions import ConfigurationError

_TABLE_SIZE = 256
_TABLE_MASK = _TABLE_SIZE - 1

# Largest magnitude 2D gradient noise reaches with unit gradients is sqrt(2)/2
_NOISE_SCALE = np.sqrt(2.0)

# Doubles at or above this magnitude have no fractional part
_LATTICE_LIMIT = 2.0**53


def _fade(t: NDArray[np.float64]) -> NDArray[np.float64]:
    """Quintic fade curve 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(
    a: NDArray[np.float64],
    b: NDArray[np.float64],
    t: NDArray[np.float64],
) -> NDArray[np.float64]:
    return a + t * (b - a)


def _fold_lattice(t: NDArray[np.float64]) -> NDArray[np.float64]:
    """Fold coordinates too large to carry a fraction onto one table period.

    Such coordinates are lattice points, so only their value modulo the table
    size matters. Non-finite coordinates fold to 0.
    """
    coarse = ~(np.abs(t) < _LATTICE_LIMIT)
    if not coarse.any():
        return t
    finite = np.where(np.isfinite(t), t, 0.0)
    return np.where(coarse, np.fmod(finite, _TABLE_SIZE), t)


class NoiseField:
    """Seeded coherent noise generator.

    All random state is drawn once at construction: a permutation table for
    hashing lattice points and one unit gradient vector per table slot.
    After that the instance is read-only, so evaluation order never affects
    results and one instance can be shared freely.
    """

    def __init__(self, seed: int) -> None:
        """Initialize NoiseField.

        Args:
            seed: Seed for the permutation table and gradient vectors.
        """
        self.seed = seed

        rng = np.random.default_rng(seed)
        perm = rng.permutation(_TABLE_SIZE)
        angles = rng.uniform(0.0, 2.0 * np.pi, _TABLE_SIZE)

        # Doubled so perm[perm[xi] + yi] never needs wrapping
        self._perm = np.concatenate([perm, perm])
        self._gradients = np.stack([np.cos(angles), np.sin(angles)], axis=-1)

        self._perm.setflags(write=False)
        self._gradients.setflags(write=False)

    def _corner(
        self,
        xi: NDArray[np.int64],
        yi: NDArray[np.int64],
        dx: NDArray[np.float64],
        dy: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        """Dot product of a lattice corner's gradient with the offset to it."""
        gradient = self._gradients[self._perm[self._perm[xi] + yi]]
        return gradient[..., 0] * dx + gradient[..., 1] * dy

    def noise_2d(self, x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
        """Evaluate single-octave gradient noise.

        Args:
            x: X coordinates (scalar or array).
            y: Y coordinates, broadcastable against x.

        Returns:
            Noise values in range [0, 1], shaped like the broadcast inputs.
            Lattice points, including coordinates beyond float precision, give 0.5.
        """
        x, y = np.broadcast_arrays(
            np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64)
        )
        x = _fold_lattice(x)
        y = _fold_lattice(y)

        x0 = np.floor(x)
        y0 = np.floor(y)
        xf = x - x0
        yf = y - y0

        xi = x0.astype(np.int64) & _TABLE_MASK
        yi = y0.astype(np.int64) & _TABLE_MASK
        xj = (xi + 1) & _TABLE_MASK
        yj = (yi + 1) & _TABLE_MASK

        n00 = self._corner(xi, yi, xf, yf)
        n10 = self._corner(xj, yi, xf - 1.0, yf)
        n01 = self._corner(xi, yj, xf, yf - 1.0)
        n11 = self._corner(xj, yj, xf - 1.0, yf - 1.0)

        u = _fade(xf)
        v = _fade(yf)
        value = _lerp(_lerp(n00, n10, u), _lerp(n01, n11, u), v)

        return np.clip((value * _NOISE_SCALE + 1.0) / 2.0, 0.0, 1.0)

    def sample(
        self,
        x: ArrayLike,
        y: ArrayLike,
        params: NoiseParameters,
    ) -> float | NDArray[np.float64]:
        """Sample fractal noise by summing octaves.

        Each octave multiplies frequency by lacunarity and amplitude by
        persistence. The sum is not normalized. Once frequency overflows,
        every sample lands on a lattice point, so the remaining octaves each
        contribute their amplitude times 0.5.

        Args:
            x: X coordinates in noise domain (scalar or array).
            y: Y coordinates in noise domain.
            params: Fractal noise parameters.

        Returns:
            Accumulated noise; a float for scalar input, otherwise an array.

        Raises:
            ConfigurationError: If params.octaves is less than 1.
        """
        if params.octaves < 1:
            raise ConfigurationError(f"octaves must be at least 1, got {params.octaves}")

        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)

        value = np.zeros(np.broadcast_shapes(x.shape, y.shape), dtype=np.float64)
        frequency = 1.0
        amplitude = 1.0

        for _ in range(params.octaves):
            if np.isfinite(frequency):
                # Overflowing products fold onto the lattice in noise_2d
                with np.errstate(over="ignore"):
                    scaled_x = x * frequency
                    scaled_y = y * frequency
                value += self.noise_2d(scaled_x, scaled_y) * amplitude
            else:
                value += 0.5 * amplitude
            frequency *= params.lacunarity
            amplitude *= params.persistence

        if value.ndim == 0:
            return float(value)
        return value


def octave_amplitudes(params: NoiseParameters) -> list[float]:
    """Amplitude weight applied to each octave, lowest frequency first."""
    if params.octaves < 1:
        raise ConfigurationError(f"octaves must be at least 1, got {params.octaves}")
    amplitudes = []
    amplitude = 1.0
    for _ in range(params.octaves):
        amplitudes.append(amplitude)
        amplitude *= params.persistence
    return amplitudes
