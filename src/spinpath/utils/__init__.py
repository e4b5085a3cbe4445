"""Small numeric helpers."""

from .geometry import (
    DEFAULT_EPSILON,
    adjust_for_precision,
    angle_between,
    check_epsilon,
    clamp,
    degrees_to_radians,
    radians_to_degrees,
)

__all__ = [
    "DEFAULT_EPSILON",
    "adjust_for_precision",
    "angle_between",
    "check_epsilon",
    "clamp",
    "degrees_to_radians",
    "radians_to_degrees",
]
