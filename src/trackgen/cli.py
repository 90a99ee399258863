"""
trackgen command line

Generates a track from command line settings, renders it and writes the
requested outputs.

Usage:
    trackgen                                  # Default track to ./tracks/track.png
    trackgen --seed 42 --num-points 12        # Custom settings
    trackgen --random-seed                    # Fresh seed each run
    trackgen --json track.json --npz track.npz
    trackgen --log-level DEBUG                # Verbose logging
"""

import argparse
import logging
import sys
from typing import List, Optional

from trackgen.render.exporter import ExporterConfig, TrackExporter
from trackgen.render.renderer import TrackRenderer
from trackgen.session import coerce_setting
from trackgen.track.generator import TrackGenerator
from trackgen.track.rng import random_seed
from trackgen.track.sampler import DEFAULT_CANVAS_SIZE
from trackgen.track.settings import TrackConfigError, TrackSettings

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    defaults = TrackSettings()
    parser = argparse.ArgumentParser(
        prog="trackgen",
        description="Generate a closed loop track from jittered control points",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Default settings
    trackgen

    # Twelve points with stronger angle jitter
    trackgen --num-points 12 --theta-jitter 0.1

    # Text seeds are accepted
    trackgen --seed monza --png monza.png
        """
    )

    # Track settings
    track_group = parser.add_argument_group("Track Settings")
    track_group.add_argument(
        "--num-points",
        type=int,
        default=defaults.num_points,
        help=f"Number of control points (default: {defaults.num_points})"
    )
    track_group.add_argument(
        "--radius",
        type=float,
        default=defaults.radius_fraction,
        help=f"Radius as a fraction of the canvas half-size (default: {defaults.radius_fraction})"
    )
    track_group.add_argument(
        "--radius-jitter",
        type=float,
        default=defaults.radius_jitter_fraction,
        help=f"Radius jitter as a fraction of radius (default: {defaults.radius_jitter_fraction})"
    )
    track_group.add_argument(
        "--theta-jitter",
        type=float,
        default=defaults.theta_jitter_fraction,
        help=f"Angle jitter as a fraction of pi (default: {defaults.theta_jitter_fraction})"
    )
    track_group.add_argument(
        "--density",
        type=float,
        default=defaults.spline_point_density,
        help=f"Spline samples per pixel (default: {defaults.spline_point_density})"
    )
    seed_group = track_group.add_mutually_exclusive_group()
    seed_group.add_argument(
        "--seed",
        default=str(defaults.seed),
        help=f"Integer or text seed (default: {defaults.seed})"
    )
    seed_group.add_argument(
        "--random-seed",
        action="store_true",
        help="Pick a random seed"
    )

    # Output settings
    output_group = parser.add_argument_group("Output")
    output_group.add_argument(
        "--size",
        type=int,
        default=DEFAULT_CANVAS_SIZE,
        help=f"Canvas size in pixels (default: {DEFAULT_CANVAS_SIZE})"
    )
    output_group.add_argument(
        "--output-dir",
        default=ExporterConfig.output_dir,
        help=f"Output directory (default: {ExporterConfig.output_dir})"
    )
    output_group.add_argument(
        "--png",
        default="track.png",
        help="PNG filename, empty to skip (default: track.png)"
    )
    output_group.add_argument(
        "--json",
        help="Also write track data to this JSON filename"
    )
    output_group.add_argument(
        "--npz",
        help="Also write point arrays to this NumPy filename"
    )

    # Logging
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Shortcut for --log-level DEBUG"
    )

    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    """Configure logging."""
    log_format = "%(asctime)s [%(levelname)s] %(message)s"
    logging.basicConfig(
        level=getattr(logging, level),
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def settings_from_args(args: argparse.Namespace) -> TrackSettings:
    """Build validated track settings from parsed arguments."""
    seed = random_seed() if args.random_seed else coerce_setting("seed", args.seed)
    return TrackSettings(
        num_points=args.num_points,
        radius_fraction=args.radius,
        radius_jitter_fraction=args.radius_jitter,
        theta_jitter_fraction=args.theta_jitter,
        spline_point_density=args.density,
        seed=seed,
    ).validate()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging("DEBUG" if args.verbose else args.log_level)

    try:
        settings = settings_from_args(args)
        generator = TrackGenerator(args.size)
    except (TrackConfigError, ValueError) as e:
        logger.error("Invalid configuration: %s", e)
        return EXIT_CONFIG_ERROR

    track = generator.generate(settings)
    logger.info(
        "Track seed=%r: %d control points, %d curve samples",
        settings.seed, track.num_points, track.num_samples,
    )

    exporter = TrackExporter(ExporterConfig(output_dir=args.output_dir))

    if args.png:
        canvas = TrackRenderer().render(track)
        exporter.export_png(canvas, args.png)
    if args.json:
        exporter.export_json(track, args.json)
    if args.npz:
        exporter.export_numpy(track, args.npz)

    return 0


if __name__ == "__main__":
    sys.exit(main())
