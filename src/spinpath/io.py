"""Reading ``x;y`` point files and writing rendered SVG documents."""

from __future__ import annotations

import logging
import math
import sys
from os import PathLike
from pathlib import Path
from typing import List

from .errors import ArgumentError, PointsFormatError, SpinPathIOError
from .models import Point2D

log = logging.getLogger(__name__)

STDIN_NAME = "-"


def parse_points(text: str) -> List[Point2D]:
    """Parse one ``x;y`` record per line.

    Blank lines and lines starting with ``#`` are ignored. Numbers always use
    ``.`` as the decimal separator.
    """
    points: List[Point2D] = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        fields = line.split(";")
        if len(fields) != 2:
            raise PointsFormatError(f"expected 'x;y', got {raw!r}", line_no)
        try:
            x, y = (float(f.strip()) for f in fields)
        except ValueError as e:
            raise PointsFormatError(f"not a number in {raw!r}", line_no) from e
        if not (math.isfinite(x) and math.isfinite(y)):
            raise PointsFormatError(f"coordinates must be finite, got {raw!r}", line_no)
        points.append(Point2D(x, y))
    return points


def read_points(path: str | PathLike[str]) -> List[Point2D]:
    """Read points from ``path``; ``-`` reads standard input."""
    if str(path) == STDIN_NAME:
        text = sys.stdin.read()
        source = "<stdin>"
    else:
        p = Path(path)
        try:
            text = p.read_text(encoding="utf-8")
        except OSError as e:
            raise SpinPathIOError(f"Could not read points: {p}") from e
        source = str(p)

    points = parse_points(text)
    log.info("Read %d point(s) from %s", len(points), source)
    return points


def write_svg(document: str, filename: str | PathLike[str]) -> Path:
    """Write ``document`` to ``filename`` and return the path written.

    A ``.svg`` suffix is enforced and missing parent directories are
    created. An existing file is overwritten.
    """
    if not str(filename).strip():
        raise ArgumentError("The file name must not be empty.")

    p = Path(filename)
    if p.suffix.lower() != ".svg":
        p = p.with_suffix(".svg")

    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(document, encoding="utf-8")
    except OSError as e:
        raise SpinPathIOError(f"Could not write SVG: {p}") from e

    log.info("Wrote SVG to %s", p)
    return p


__all__ = ["STDIN_NAME", "parse_points", "read_points", "write_svg"]
