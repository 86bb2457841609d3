"""Tests for heightmap configuration."""

import pytest
from pydantic import ValidationError

from heightmap.config import (
    HeightmapConfig,
    NoiseParameters,
    OffsetConfig,
    SmoothingConfig,
    load_config,
)


class TestNoiseParameters:
    """Tests for NoiseParameters."""

    def test_defaults(self):
        """Test default values."""
        params = NoiseParameters()
        assert params.scale == 20.0
        assert params.offset_x == 100.0
        assert params.offset_y == 100.0
        assert params.octaves == 3
        assert params.lacunarity == 2.0
        assert params.persistence == 0.5

    def test_immutable(self):
        """Parameters are frozen for the duration of a run."""
        params = NoiseParameters()
        with pytest.raises(ValidationError):
            params.octaves = 5  # type: ignore


class TestHeightmapConfig:
    """Tests for HeightmapConfig."""

    def test_defaults(self):
        """Test default values."""
        config = HeightmapConfig()
        assert config.width == 100
        assert config.height == 100
        assert config.use_random_seed is True
        assert config.seed == 0
        assert config.offset == OffsetConfig()
        assert config.offset.max_offset == 100.0
        assert config.smoothing == SmoothingConfig()
        assert config.smoothing.enabled is False
        assert config.smoothing.iterations == 5

    def test_nested_from_dict(self):
        """Nested sections validate from plain dicts."""
        config = HeightmapConfig.model_validate(
            {"width": 8, "noise": {"octaves": 6}, "smoothing": {"enabled": True}}
        )
        assert config.width == 8
        assert config.noise.octaves == 6
        assert config.noise.lacunarity == 2.0
        assert config.smoothing.enabled is True

    def test_wrong_type_rejected(self):
        """Non-numeric width fails validation."""
        with pytest.raises(ValidationError):
            HeightmapConfig.model_validate({"width": "wide"})


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_config_basic(self, config_file):
        """Test loading a config file."""
        config = load_config(config_file)

        assert config.width == 32
        assert config.height == 24
        assert config.use_random_seed is False
        assert config.seed == 7

    def test_load_config_sections(self, config_file):
        """Test loading nested sections."""
        config = load_config(config_file)

        assert config.noise.scale == 5.0
        assert config.noise.offset_x == 1.5
        assert config.noise.offset_y == -2.5
        assert config.noise.octaves == 5
        assert config.noise.lacunarity == 2.5
        assert config.noise.persistence == 0.4
        assert config.offset.max_offset == 50.0
        assert config.smoothing.enabled is True
        assert config.smoothing.iterations == 3

    def test_load_config_file_not_found(self, temp_dir):
        """Test error on missing file."""
        with pytest.raises(FileNotFoundError):
            load_config(temp_dir / "nonexistent.toml")
