"""Render an ordered point sequence as a closed SVG path with relative coordinates."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple
from xml.etree.ElementTree import Element, SubElement, tostring

import numpy as np

from ..errors import ArgumentError
from ..models import PathStyle, Point2D
from ..utils.geometry import PointLike

log = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

BBox = Tuple[float, float, float, float]


def _coerce_points(points: Optional[Iterable[PointLike]]) -> List[Point2D]:
    pts = [] if points is None else [Point2D.of(p) for p in points]
    if not pts:
        raise ArgumentError("The points list must contain at least one point.")
    return pts


def format_number(value: float, round_to: Optional[int] = None) -> str:
    """Format ``value`` for SVG output, independent of the current locale.

    Uses the shortest positional representation that round-trips, without an
    exponent and without a trailing ``.0``. ``-0`` is written as ``0``.
    """
    v = float(value)
    if round_to is not None:
        v = round(v, round_to)
    if v == 0.0:
        v = 0.0
    return np.format_float_positional(v, trim="-")


def _join_tokens(tokens: Iterable[str]) -> str:
    # a leading minus already separates two numbers
    parts: List[str] = []
    for tok in tokens:
        if parts and not tok.startswith("-"):
            parts.append(" ")
        parts.append(tok)
    return "".join(parts)


def path_data(points: Iterable[PointLike], round_to: Optional[int] = None) -> str:
    """Build the ``d`` attribute for a closed path through ``points``.

    The first point is a move to absolute coordinates; each later point is
    the delta from the previous *unrounded* position, so rounding never
    accumulates along the path.
    """
    pts = _coerce_points(points)
    first = pts[0]
    tokens = [format_number(first.x, round_to), format_number(first.y, round_to)]
    cur_x, cur_y = first.x, first.y
    for p in pts[1:]:
        tokens.append(format_number(p.x - cur_x, round_to))
        tokens.append(format_number(p.y - cur_y, round_to))
        cur_x, cur_y = p.x, p.y
    return "m" + _join_tokens(tokens) + "z"


def bounding_box(points: Iterable[PointLike]) -> BBox:
    """Return ``(min_x, min_y, width, height)`` of ``points``."""
    pts = _coerce_points(points)
    coords = np.array([p.as_tuple() for p in pts], dtype=np.float64)
    lo = coords.min(axis=0)
    hi = coords.max(axis=0)
    return float(lo[0]), float(lo[1]), float(hi[0] - lo[0]), float(hi[1] - lo[1])


def render_svg(
    points: Iterable[PointLike], style: Optional[PathStyle] = None
) -> str:
    """Render ``points`` as a standalone SVG document and return its text.

    The viewBox is the bounding box of the points; the document itself is
    ``viewport_size`` units square. When ``style.round_to`` is set, the
    viewBox and every path coordinate are rounded to that many decimals.

    Raises
    ------
    ArgumentError
        If ``points`` is empty or ``style`` is invalid.
    """
    pts = _coerce_points(points)
    style = (style if style is not None else PathStyle()).validate()
    round_to = style.round_to

    view_box = " ".join(format_number(v, round_to) for v in bounding_box(pts))
    size = format_number(style.viewport_size)
    svg = Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "viewBox": view_box,
            "width": size,
            "height": size,
        },
    )
    SubElement(
        svg,
        "path",
        {
            "stroke-width": format_number(style.stroke_width),
            "stroke": f"#{style.stroke_color}",
            "fill": f"#{style.fill_color}",
            "d": path_data(pts, round_to),
        },
    )
    log.debug("Rendered %d point(s), viewBox=%s", len(pts), view_box)
    return tostring(svg, encoding="unicode")


__all__ = ["SVG_NS", "format_number", "path_data", "bounding_box", "render_svg"]
