"""
Arc Point Calculator
Command line front end for the boomerang arc solver
"""

import sys
import math
import logging
import argparse
from typing import List, Optional

from arcpoint.geometry import (
    Pose,
    SolverSettings,
    clamp_dlead,
    compute_arc_point,
    compute_arc_point_from_curvature,
    compute_straight_point,
    degrees_to_radians,
    effective_radius,
    format_summary,
    sample_arc,
    summarize_arc,
)
from arcpoint.utils import Config, setup_logger

logger = logging.getLogger(__name__)


def finite_float(text: str) -> float:
    """argparse type: finite real number"""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"must be finite: {text!r}")
    return value


def positive_float(text: str) -> float:
    """argparse type: finite number > 0"""
    value = finite_float(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text!r}")
    return value


def non_negative_int(text: str) -> int:
    """argparse type: integer >= 0"""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


def _display_setting(config: Config, key: str, default: int) -> int:
    """Non-negative integer from the "display" section, default when invalid"""
    value = config.get(f"display.{key}", default)
    try:
        return non_negative_int(str(value))
    except argparse.ArgumentTypeError:
        logger.warning(f"Invalid display.{key} {value!r} in config, using {default}")
        return default


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Boomerang arc target point calculator"
    )
    parser.add_argument("--x", type=finite_float, default=0.0, help="Current X")
    parser.add_argument("--y", type=finite_float, default=0.0, help="Current Y")
    parser.add_argument(
        "--theta",
        type=finite_float,
        default=0.0,
        help="Current heading in degrees (CCW from +X)"
    )
    parser.add_argument(
        "--dlead",
        type=finite_float,
        required=True,
        help="Lookahead distance along the curve (negative is backwards)"
    )

    shape = parser.add_mutually_exclusive_group()
    shape.add_argument("--radius", type=positive_float, help="Curvature radius")
    shape.add_argument("--curvature", type=finite_float, help="Curvature (1/radius, positive turns left)")
    shape.add_argument(
        "--straight",
        action="store_true",
        help="Travel in a straight line along the heading"
    )

    parser.add_argument("--config", help="YAML config file")
    parser.add_argument(
        "--samples",
        type=non_negative_int,
        help="Also print N points sampled along the path"
    )
    parser.add_argument("--precision", type=non_negative_int, help="Decimal places in output")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main program entry point"""
    args = build_parser().parse_args(argv)

    config = Config(args.config)
    debug = args.debug or bool(config.get("system.debug", False))
    setup_logger(
        "arcpoint",
        level=logging.DEBUG if debug else logging.INFO,
        log_dir=config.get("system.log_dir"),
    )

    try:
        settings = SolverSettings.from_config(config)
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid solver settings: {e}")
        return 1

    precision = args.precision if args.precision is not None else _display_setting(config, "precision", 4)
    samples = args.samples if args.samples is not None else _display_setting(config, "samples", 0)

    pose = Pose(args.x, args.y, degrees_to_radians(args.theta))
    dlead = args.dlead

    if args.straight:
        target = compute_straight_point(pose.x, pose.y, pose.theta, dlead)
        radius = None
    elif args.curvature is not None:
        target = compute_arc_point_from_curvature(
            pose.x, pose.y, pose.theta, dlead, args.curvature, settings=settings
        )
        if abs(args.curvature) < settings.epsilon:
            radius = None
        else:
            radius = 1.0 / abs(args.curvature)
            if args.curvature < 0:
                dlead = -dlead
    else:
        radius = args.radius if args.radius is not None else settings.default_radius
        target = compute_arc_point(pose.x, pose.y, pose.theta, dlead, radius, settings=settings)

    if radius is not None:
        dlead = clamp_dlead(dlead, settings)
        radius = effective_radius(radius, settings)

    logger.debug(f"pose={pose}, dlead={dlead}, radius={radius}, target={target}")

    summary = summarize_arc((pose.x, pose.y), target, dlead, radius)
    print(format_summary(summary, precision))

    if samples >= 2:
        points = sample_arc(pose.x, pose.y, pose.theta, dlead, radius, num=samples, settings=settings)
        print("Sampled path:")
        for px, py in points:
            print(f"  {px:.{precision}f}, {py:.{precision}f}")
    elif samples == 1:
        logger.warning("--samples needs at least 2 points, skipping path sampling")

    return 0


def cli() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Received interrupt signal, shutting down...")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
