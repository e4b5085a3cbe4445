"""Angle helpers shared by the rotation and rendering layers."""

import math
from typing import Sequence, Union

from ..errors import ArgumentError, DomainError
from ..models import DEFAULT_EPSILON, Point2D

PointLike = Union[Point2D, Sequence[float]]


def degrees_to_radians(degrees: float) -> float:
    """Convert ``degrees`` to radians."""
    return degrees * math.pi / 180.0


def radians_to_degrees(radians: float) -> float:
    """Convert ``radians`` to degrees."""
    return radians * 180.0 / math.pi


def angle_between(p1: PointLike, p2: PointLike, center: PointLike) -> float:
    """Return the angle in degrees between ``p1`` and ``p2`` seen from ``center``.

    The result lies in ``[0, 180]``. A :class:`~spinpath.errors.DomainError`
    is raised when either point coincides with ``center`` since the angle of a
    zero-length vector is undefined.
    """
    a = Point2D.of(p1)
    b = Point2D.of(p2)
    c = Point2D.of(center)

    v1x = a.x - c.x
    v1y = a.y - c.y
    v2x = b.x - c.x
    v2y = b.y - c.y

    mag1 = math.hypot(v1x, v1y)
    mag2 = math.hypot(v2x, v2y)
    if mag1 == 0.0 or mag2 == 0.0:
        raise DomainError(
            "One or both points coincide with the center; "
            "the angle of a zero-length vector is undefined."
        )

    # normalise first so tiny or huge vectors neither underflow nor overflow
    cos_t = (v1x / mag1) * (v2x / mag2) + (v1y / mag1) * (v2y / mag2)
    cos_t = clamp(cos_t, -1.0, 1.0)
    return radians_to_degrees(math.acos(cos_t))


def adjust_for_precision(value: float, epsilon: float = DEFAULT_EPSILON) -> float:
    """Snap ``value`` to exactly ``0.0`` when it lies within ``epsilon`` of zero."""
    return 0.0 if abs(value) < epsilon else value


def check_epsilon(epsilon: float) -> float:
    """Validate a precision threshold and return it as a float."""
    eps = float(epsilon)
    if not eps > 0.0 or math.isinf(eps):
        raise ArgumentError(f"epsilon must be a positive finite number, got {epsilon!r}")
    return eps


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return max(lo, min(hi, value))


__all__ = [
    "DEFAULT_EPSILON",
    "PointLike",
    "degrees_to_radians",
    "radians_to_degrees",
    "angle_between",
    "adjust_for_precision",
    "check_epsilon",
    "clamp",
]
