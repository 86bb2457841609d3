"""Custom exceptions for heightmap generation."""


class HeightmapError(Exception):
    """Base exception for heightmap errors."""

    pass


class ConfigurationError(HeightmapError):
    """Raised when generation parameters are invalid."""

    pass


class NumericDegeneracyError(ConfigurationError):
    """Raised when a grid dimension would divide by zero in domain mapping."""

    pass
