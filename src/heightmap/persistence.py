"""Heightmap persistence: save and load generated grids."""

import json
from datetime import datetime, timezone
from pathlib import Path

import numpy as np
import structlog
from numpy.typing import NDArray

from .generator import HeightmapResult

logger = structlog.get_logger()

FORMAT_VERSION = 1


def save_heightmap(path: Path, result: HeightmapResult) -> Path:
    """Save a generated heightmap to disk.

    Uses numpy's compressed .npz format. The resolved seed and effective noise
    parameters are stored alongside the grid so it can be regenerated.

    Args:
        path: Output path; ".npz" is appended if missing.
        result: Generation result to save.

    Returns:
        Path the file was written to.
    """
    if path.suffix != ".npz":
        path = path.with_name(path.name + ".npz")

    metadata = {
        "version": FORMAT_VERSION,
        "seed": result.seed,
        "width": result.width,
        "height": result.height,
        "noise": result.params.model_dump(),
        "smoothing": result.config.smoothing.model_dump(),
        "generated_at": datetime.now(timezone.utc).isoformat(),
    }

    np.savez_compressed(
        path,
        heights=result.heights,
        metadata=np.frombuffer(json.dumps(metadata).encode("utf-8"), dtype=np.uint8),
    )

    logger.info("heightmap_saved", path=str(path), seed=result.seed)
    return path


def load_heightmap(path: Path) -> tuple[NDArray[np.float64], dict]:
    """Load a heightmap from disk.

    Args:
        path: Path to .npz file.

    Returns:
        Tuple of (heights array, metadata dict).

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValueError: If file format is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Heightmap file not found: {path}")

    with np.load(path) as data:
        if "heights" not in data:
            raise ValueError("Invalid heightmap file: missing 'heights' array")
        heights = data["heights"]

        if "metadata" in data:
            metadata = json.loads(data["metadata"].tobytes().decode("utf-8"))
        else:
            metadata = {}

    logger.info(
        "heightmap_loaded", path=str(path), width=heights.shape[0], height=heights.shape[1]
    )
    return heights, metadata
