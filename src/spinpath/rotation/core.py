"""Rotation of points about a center: single points, batches and evenly spaced copies."""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from ..errors import ArgumentError
from ..models import DEFAULT_EPSILON, ORIGIN, Point2D
from ..utils.geometry import (
    PointLike,
    check_epsilon,
    degrees_to_radians,
)

log = logging.getLogger(__name__)

# cos/sin of whole quarter turns, keyed by the angle reduced to [0, 360)
_QUARTER_TURNS: Dict[float, Tuple[float, float]] = {
    0.0: (1.0, 0.0),
    90.0: (0.0, 1.0),
    180.0: (-1.0, 0.0),
    270.0: (0.0, -1.0),
}


def _signed_angle(angle_deg: float, clockwise: bool) -> float:
    angle = float(angle_deg)
    return -angle if clockwise else angle


def _cos_sin(angle_deg: float) -> Tuple[float, float]:
    exact = _QUARTER_TURNS.get(angle_deg % 360.0)
    if exact is not None:
        return exact
    theta = degrees_to_radians(angle_deg)
    return math.cos(theta), math.sin(theta)


def _as_array(points: Iterable[PointLike]) -> np.ndarray:
    pairs = [Point2D.of(p).as_tuple() for p in points]
    return np.array(pairs, dtype=np.float64).reshape(-1, 2)


def _to_points(coords: np.ndarray) -> List[Point2D]:
    return [Point2D(x, y) for x, y in coords.tolist()]


def _rotate_array(
    coords: np.ndarray, angle_deg: float, center: Point2D, epsilon: float
) -> np.ndarray:
    """Rotate an ``(N, 2)`` array by the signed ``angle_deg`` about ``center``."""

    if angle_deg % 360.0 == 0.0:
        # identity; skip the offset round trip so points come back bit-exact
        return coords.copy()

    cos_t, sin_t = _cos_sin(angle_deg)
    ox = coords[:, 0] - center.x
    oy = coords[:, 1] - center.y
    rx = ox * cos_t - oy * sin_t + center.x
    ry = ox * sin_t + oy * cos_t + center.y

    out = np.column_stack((rx, ry))
    out[np.abs(out) < epsilon] = 0.0
    return out


def _center(center: Optional[PointLike]) -> Point2D:
    return ORIGIN if center is None else Point2D.of(center)


def rotate_point(
    point: PointLike,
    angle_deg: float,
    center: Optional[PointLike] = None,
    clockwise: bool = True,
    *,
    epsilon: float = DEFAULT_EPSILON,
) -> Point2D:
    """Rotate ``point`` about ``center`` (the origin by default) by ``angle_deg``.

    ``clockwise=True`` negates the angle, matching screen-space coordinates
    where y grows downwards. Coordinates closer to zero than ``epsilon`` are
    snapped to ``0.0``.
    """
    eps = check_epsilon(epsilon)
    coords = _as_array([point])
    rotated = _rotate_array(
        coords, _signed_angle(angle_deg, clockwise), _center(center), eps
    )
    return _to_points(rotated)[0]


def rotate_points(
    points: Iterable[PointLike],
    angle_deg: float,
    center: Optional[PointLike] = None,
    clockwise: bool = True,
    *,
    epsilon: float = DEFAULT_EPSILON,
) -> List[Point2D]:
    """Rotate every point by the same angle, preserving order and length."""
    eps = check_epsilon(epsilon)
    c = _center(center)
    coords = _as_array(points)
    log.debug(
        "Rotating %d point(s) by %s deg about %s (clockwise=%s)",
        len(coords),
        angle_deg,
        c,
        clockwise,
    )
    return _to_points(_rotate_array(coords, _signed_angle(angle_deg, clockwise), c, eps))


def _dedupe(coords: np.ndarray, epsilon: float) -> List[Point2D]:
    """Drop repeated points, comparing precision-adjusted coordinates.

    Coordinates closer to zero than ``epsilon`` are snapped to ``0.0``; a point is a
    repeat when both snapped coordinates lie within ``epsilon`` of a point
    already kept. Copies that only differ by trigonometric noise therefore
    collapse onto the first occurrence.
    """
    snapped = np.where(np.abs(coords) < epsilon, 0.0, coords)
    kept: List[int] = []
    for i, row in enumerate(snapped):
        if kept and bool(
            np.any(np.max(np.abs(snapped[kept] - row), axis=1) <= epsilon)
        ):
            continue
        kept.append(i)
    return _to_points(coords[kept])


def rotate_copies(
    points: Iterable[PointLike],
    count: int,
    center: Optional[PointLike] = None,
    clockwise: bool = True,
    *,
    epsilon: float = DEFAULT_EPSILON,
) -> List[Point2D]:
    """Return ``points`` plus ``count - 1`` copies rotated in ``360 / count`` steps.

    Copy ``i`` is the whole input rotated by ``i * 360 / count`` degrees. The
    concatenation is deduplicated (see :func:`_dedupe`), keeping first
    occurrences in order.

    Raises
    ------
    ArgumentError
        If ``count`` is not a positive integer.
    """
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
        raise ArgumentError(f"Number of rotations must be an integer, got {count!r}")
    if count <= 0:
        raise ArgumentError("Number of rotations must be greater than zero.")
    eps = check_epsilon(epsilon)
    c = _center(center)

    coords = _as_array(points)
    step = 360.0 / int(count)
    blocks = [coords]
    for i in range(1, int(count)):
        angle = _signed_angle(step * i, clockwise)
        blocks.append(_rotate_array(coords, angle, c, eps))

    combined = np.concatenate(blocks, axis=0)
    result = _dedupe(combined, eps)
    log.debug(
        "Rotated %d point(s) into %d copies about %s: %d total, %d unique",
        len(coords),
        count,
        c,
        len(combined),
        len(result),
    )
    return result


__all__ = ["rotate_point", "rotate_points", "rotate_copies"]
