"""Pytest configuration and fixtures for heightmap tests."""

import tempfile
from pathlib import Path

import pytest

from heightmap.config import HeightmapConfig, NoiseParameters


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def small_config() -> HeightmapConfig:
    """Small fixed-seed config with a few octaves."""
    return HeightmapConfig(
        width=16,
        height=12,
        use_random_seed=False,
        seed=42,
        noise=NoiseParameters(scale=4.0, offset_x=10.0, offset_y=20.0, octaves=4),
    )


@pytest.fixture
def sample_config_toml():
    """Sample heightmap config as TOML string."""
    return """
width = 32
height = 24
use_random_seed = false
seed = 7

[noise]
scale = 5.0
offset_x = 1.5
offset_y = -2.5
octaves = 5
lacunarity = 2.5
persistence = 0.4

[offset]
randomize = false
max_offset = 50.0

[smoothing]
enabled = true
iterations = 3
"""


@pytest.fixture
def config_file(temp_dir, sample_config_toml):
    """Create a temporary config file."""
    config_path = temp_dir / "test_config.toml"
    config_path.write_text(sample_config_toml)
    return config_path
