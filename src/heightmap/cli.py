"""Command-line interface for heightmap generation."""

import argparse
import logging
import time
from pathlib import Path

import structlog

from .config import HeightmapConfig, load_config
from .exceptions import ConfigurationError
from .generator import generate_heightmap
from .persistence import save_heightmap


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a fractal noise heightmap"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a TOML config file (CLI flags override it)",
    )
    parser.add_argument("--width", type=int, default=None, help="Grid width")
    parser.add_argument("--height", type=int, default=None, help="Grid height")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (disables random seeding)",
    )
    parser.add_argument("--octaves", type=int, default=None, help="Noise octaves")
    parser.add_argument("--scale", type=float, default=None, help="Domain scale")
    parser.add_argument(
        "--lacunarity", type=float, default=None, help="Frequency multiplier per octave"
    )
    parser.add_argument(
        "--persistence", type=float, default=None, help="Amplitude multiplier per octave"
    )
    parser.add_argument(
        "--smooth",
        type=int,
        default=None,
        metavar="N",
        help="Enable smoothing with N iterations",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default="heightmap.npz",
        help="Output path (default: heightmap.npz)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def apply_overrides(config: HeightmapConfig, args: argparse.Namespace) -> HeightmapConfig:
    """Return a copy of config with any CLI flags applied."""
    update: dict = {}
    if args.width is not None:
        update["width"] = args.width
    if args.height is not None:
        update["height"] = args.height
    if args.seed is not None:
        update["seed"] = args.seed
        update["use_random_seed"] = False

    noise_update = {
        name: getattr(args, name)
        for name in ("octaves", "scale", "lacunarity", "persistence")
        if getattr(args, name) is not None
    }
    if noise_update:
        update["noise"] = config.noise.model_copy(update=noise_update)

    if args.smooth is not None:
        update["smoothing"] = config.smoothing.model_copy(
            update={"enabled": True, "iterations": args.smooth}
        )

    return config.model_copy(update=update)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for heightmap generation."""
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
    logger = structlog.get_logger()

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            logger.error("config_not_found", path=args.config)
            return 1
        config = load_config(config_path)
        logger.info("config_loaded", path=str(config_path))
    else:
        config = HeightmapConfig()

    config = apply_overrides(config, args)

    start_time = time.time()
    try:
        result = generate_heightmap(config)
    except ConfigurationError as e:
        logger.error("invalid_configuration", error=str(e))
        return 1
    gen_time = time.time() - start_time

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path = save_heightmap(output_path, result)

    logger.info(
        "generation_complete",
        seed=result.seed,
        duration_s=round(gen_time, 3),
        output=str(output_path),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
