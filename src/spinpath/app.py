"""Command line entry point: read points, rotate them and render an SVG path."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ._version import get_version
from .errors import ArgumentError, SpinPathError, SpinPathIOError
from .io import read_points, write_svg
from .logging_config import setup_logging
from .models import AppConfig, Point2D
from .rotation import rotate_copies, rotate_points
from .svg import render_svg

log = logging.getLogger(__name__)

SAMPLE_POINTS: Tuple[Point2D, ...] = (
    Point2D(-2.0, 2.0),
    Point2D(-1.0, 4.0),
    Point2D(0.0, 7.0),
    Point2D(1.0, 4.0),
    Point2D(2.0, 2.0),
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


# ---------------------------- Config I/O ----------------------------------


def default_config_path() -> Path:
    return Path.home() / ".spinpath_config.json"


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load an :class:`AppConfig`.

    An explicit ``path`` must exist and parse. Without one, the per-user file
    is used when present and a broken file falls back to the defaults.
    """
    explicit = path is not None
    p = path if path is not None else default_config_path()
    if not explicit and not p.exists():
        return AppConfig()

    try:
        return AppConfig.from_json(p.read_text(encoding="utf-8"))
    except OSError as e:
        if explicit:
            raise SpinPathIOError(f"Could not read config: {p}") from e
        log.warning("Could not read config %s: %s", p, e)
    except (ValueError, TypeError, AttributeError) as e:
        if explicit:
            raise ArgumentError(f"Invalid config {p}: {e}") from e
        log.warning("Ignoring invalid config %s: %s", p, e)
    return AppConfig()


def save_config(cfg: AppConfig, path: Optional[Path] = None) -> Path:
    p = path if path is not None else default_config_path()
    try:
        p.write_text(cfg.to_json(), encoding="utf-8")
    except OSError as e:
        raise SpinPathIOError(f"Could not write config: {p}") from e
    log.info("Saved config to %s", p)
    return p


# ---------------------------- Pipeline ------------------------------------


def run(points: Sequence[Point2D], cfg: AppConfig) -> Tuple[List[Point2D], str]:
    """Rotate ``points`` as ``cfg.rotation`` describes and render the result."""
    rot = cfg.rotation
    if rot.copies is not None:
        rotated = rotate_copies(
            points, rot.copies, rot.center_point, rot.clockwise, epsilon=rot.epsilon
        )
    else:
        rotated = rotate_points(
            points, rot.angle_deg, rot.center_point, rot.clockwise, epsilon=rot.epsilon
        )
    return rotated, render_svg(rotated, cfg.style)


# ---------------------------- CLI -----------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spinpath",
        description="Rotate 2D points about a center and render them as an SVG path.",
    )
    parser.add_argument(
        "points",
        nargs="?",
        help="file of 'x;y' records, '-' for stdin (default: a built-in sample shape)",
    )
    parser.add_argument("-o", "--output", help="write the SVG here instead of stdout")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--angle", type=float, help="rotation angle in degrees")
    mode.add_argument(
        "--copies",
        type=int,
        help="split a full turn into N steps and keep every rotated copy",
    )
    parser.add_argument(
        "--center", type=float, nargs=2, metavar=("X", "Y"), help="rotation center"
    )
    parser.add_argument(
        "--counterclockwise",
        action="store_true",
        default=None,
        help="rotate counterclockwise (default is clockwise)",
    )
    parser.add_argument("--epsilon", type=float, help="snap |coordinate| below this to 0")

    parser.add_argument("--stroke-width", type=float)
    parser.add_argument("--stroke", help="stroke color as hex digits, e.g. 444")
    parser.add_argument("--fill", help="fill color as hex digits, e.g. ddd")
    parser.add_argument("--size", type=float, help="width and height of the document")
    parser.add_argument(
        "--round", type=int, dest="round_to", help="round coordinates to N decimals"
    )

    parser.add_argument("--config", help="JSON config file (default: ~/.spinpath_config.json)")
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="store the effective settings in the config file",
    )
    parser.add_argument(
        "--print-points",
        action="store_true",
        help="echo the rotated points as 'x;y' lines on stderr",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING")
    parser.add_argument("--log-file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser


def apply_overrides(cfg: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Overlay command line flags that were given onto ``cfg``."""
    rot = cfg.rotation
    style = cfg.style
    if args.angle is not None:
        rot.angle_deg = args.angle
        rot.copies = None
    if args.copies is not None:
        rot.copies = args.copies
    if args.center is not None:
        rot.center = (args.center[0], args.center[1])
    if args.counterclockwise is not None:
        rot.clockwise = not args.counterclockwise
    if args.epsilon is not None:
        rot.epsilon = args.epsilon

    if args.stroke_width is not None:
        style.stroke_width = args.stroke_width
    if args.stroke is not None:
        style.stroke_color = args.stroke.strip().lstrip("#")
    if args.fill is not None:
        style.fill_color = args.fill.strip().lstrip("#")
    if args.size is not None:
        style.viewport_size = args.size
    if args.round_to is not None:
        style.round_to = args.round_to
    return cfg


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    config_path = Path(args.config) if args.config else None
    try:
        cfg = apply_overrides(load_config(config_path), args)
        points = list(SAMPLE_POINTS) if args.points is None else read_points(args.points)
        rotated, document = run(points, cfg)
        # run() validates the settings; only persist ones that rendered
        if args.save_config:
            save_config(cfg, config_path)

        if args.print_points:
            sys.stderr.write("".join(f"{p.x};{p.y}\n" for p in rotated))
        if args.output:
            write_svg(document, args.output)
        else:
            sys.stdout.write(document + "\n")
    except SpinPathError as e:
        log.error("%s", e)
        return 1
    return 0


__all__ = [
    "SAMPLE_POINTS",
    "default_config_path",
    "load_config",
    "save_config",
    "run",
    "build_parser",
    "apply_overrides",
    "main",
]
