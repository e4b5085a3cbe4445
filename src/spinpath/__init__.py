"""spinpath: rotate 2D points about a center and render them as an SVG path."""

from __future__ import annotations

from typing import Optional, Sequence

from ._version import get_version
from .errors import ArgumentError, DomainError, SpinPathError
from .models import PathStyle, Point2D
from .rotation import rotate_copies, rotate_point, rotate_points
from .svg import render_svg
from .utils import angle_between, degrees_to_radians, radians_to_degrees

__version__ = get_version()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for ``python -m spinpath`` and console scripts."""
    from .app import main as _main

    return _main(argv)


__all__ = [
    "main",
    "__version__",
    "get_version",
    "ArgumentError",
    "DomainError",
    "SpinPathError",
    "PathStyle",
    "Point2D",
    "rotate_point",
    "rotate_points",
    "rotate_copies",
    "render_svg",
    "angle_between",
    "degrees_to_radians",
    "radians_to_degrees",
]
