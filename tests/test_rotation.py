"""Tests for single, batch and multi-copy rotation."""

from __future__ import annotations

import math
from typing import List, Tuple

from hypothesis import given, settings
from hypothesis import strategies as st
import numpy as np
from numpy.testing import assert_allclose
import pytest

from spinpath.errors import ArgumentError
from spinpath.models import Point2D
from spinpath.rotation import rotate_copies, rotate_point, rotate_points
from spinpath.utils import degrees_to_radians

SHAPE = [(-2.0, 2.0), (-1.0, 4.0), (0.0, 7.0), (1.0, 4.0), (2.0, 2.0)]


def _coords(points: List[Point2D]) -> np.ndarray:
    return np.array([p.as_tuple() for p in points], dtype=np.float64)


def test_quarter_turn_counterclockwise_is_exact() -> None:
    assert rotate_point((1.0, 0.0), 90.0, clockwise=False) == Point2D(0.0, 1.0)


def test_quarter_turn_clockwise_is_exact() -> None:
    assert rotate_point((1.0, 0.0), 90.0) == Point2D(0.0, -1.0)
    assert rotate_point((1.0, 0.0), 90.0, (0.0, 0.0), True) == Point2D(0.0, -1.0)


def test_half_turn_about_center() -> None:
    assert rotate_point((3.0, 1.0), 180.0, center=(1.0, 1.0)) == Point2D(-1.0, 1.0)


@pytest.mark.parametrize("center", [(0.0, 0.0), (0.7, -2.2), (1e6, 3.0)])
@pytest.mark.parametrize("angle", [0.0, 360.0, -720.0])
def test_full_turns_return_point_unchanged(
    center: Tuple[float, float], angle: float
) -> None:
    p = Point2D(0.1, 0.3)
    assert rotate_point(p, angle, center) == p
    assert rotate_point(p, angle, center, clockwise=False) == p


def test_counterclockwise_matches_rotation_formula() -> None:
    point = (-28.336, 74.175 - 28.336)
    center = (74.175, 0.0)
    angle = 24.092

    theta = degrees_to_radians(angle)
    ox = point[0] - center[0]
    oy = point[1] - center[1]
    expected_x = ox * math.cos(theta) - oy * math.sin(theta) + center[0]
    expected_y = ox * math.sin(theta) + oy * math.cos(theta) + center[1]

    result = rotate_point(point, angle, center=center, clockwise=False)
    assert result.x == pytest.approx(expected_x, rel=1e-12)
    assert result.y == pytest.approx(expected_y, rel=1e-12)


def test_clockwise_negates_angle() -> None:
    cw = rotate_point((2.0, 5.0), 33.0, (1.0, -1.0), clockwise=True)
    ccw = rotate_point((2.0, 5.0), -33.0, (1.0, -1.0), clockwise=False)
    assert cw.x == pytest.approx(ccw.x)
    assert cw.y == pytest.approx(ccw.y)


def test_near_zero_coordinates_are_snapped() -> None:
    result = rotate_point((1.0, 1.0), 45.0, clockwise=False)
    assert result.x == 0.0
    assert result.y == pytest.approx(math.sqrt(2.0))


def test_epsilon_is_configurable() -> None:
    result = rotate_point((1.0, 0.5), 90.0, clockwise=False, epsilon=0.75)
    # (-0.5, 1.0): only |x| falls under the threshold
    assert result == Point2D(0.0, 1.0)

    with pytest.raises(ArgumentError):
        rotate_point((1.0, 0.5), 90.0, epsilon=0.0)


finite = st.floats(min_value=-1000.0, max_value=1000.0, allow_nan=False)
angles = st.floats(min_value=-720.0, max_value=720.0, allow_nan=False)


@given(x=finite, y=finite, cx=finite, cy=finite, angle=angles, clockwise=st.booleans())
@settings(deadline=None, max_examples=60)
def test_inverse_rotation_round_trip(
    x: float, y: float, cx: float, cy: float, angle: float, clockwise: bool
) -> None:
    """Rotating forth and back lands on the original point."""
    center = (cx, cy)
    there = rotate_point((x, y), angle, center, clockwise)
    back = rotate_point(there, -angle, center, clockwise)
    assert back.x == pytest.approx(x, abs=1e-5)
    assert back.y == pytest.approx(y, abs=1e-5)


def test_rotate_points_preserves_order_and_length() -> None:
    result = rotate_points(SHAPE, 10.0, (0.0, 0.0), True)
    assert len(result) == len(SHAPE)
    assert result == [rotate_point(p, 10.0) for p in SHAPE]
    assert all(isinstance(p, Point2D) for p in result)


def test_rotate_points_matches_rotation_matrix() -> None:
    theta = degrees_to_radians(-10.0)
    matrix = np.array(
        [[math.cos(theta), -math.sin(theta)], [math.sin(theta), math.cos(theta)]]
    )
    expected = np.array(SHAPE) @ matrix.T

    assert_allclose(_coords(rotate_points(SHAPE, 10.0)), expected, atol=1e-12)


def test_rotate_points_empty_input() -> None:
    assert rotate_points([], 45.0) == []


def test_rotate_points_rejects_malformed_point() -> None:
    with pytest.raises(ArgumentError):
        rotate_points([(1.0, 2.0, 3.0)], 45.0)


def test_rotate_copies_quarter_turns() -> None:
    result = rotate_copies([(1.0, 0.0)], 4)
    assert result == [
        Point2D(1.0, 0.0),
        Point2D(0.0, -1.0),
        Point2D(-1.0, 0.0),
        Point2D(0.0, 1.0),
    ]


def test_rotate_copies_counterclockwise_order() -> None:
    result = rotate_copies([(1.0, 0.0)], 4, clockwise=False)
    assert result[1] == Point2D(0.0, 1.0)


def test_rotate_copies_starts_with_originals() -> None:
    result = rotate_copies(SHAPE, 3, center=(0.5, 0.5))
    assert [p.as_tuple() for p in result[: len(SHAPE)]] == SHAPE
    assert len(result) == 3 * len(SHAPE)
    assert result[len(SHAPE)] == rotate_point(SHAPE[0], 120.0, (0.5, 0.5))
    assert result[2 * len(SHAPE)] == rotate_point(SHAPE[0], 240.0, (0.5, 0.5))


def test_rotate_copies_single_count_is_the_input() -> None:
    assert rotate_copies(SHAPE, 1) == [Point2D(x, y) for x, y in SHAPE]


def test_rotate_copies_drops_exact_duplicates() -> None:
    # the center maps onto itself in every copy
    result = rotate_copies([(0.0, 0.0), (1.0, 0.0)], 4)
    assert len(result) == 5
    assert result.count(Point2D(0.0, 0.0)) == 1


def test_rotate_copies_collapses_trigonometric_noise() -> None:
    hexagon = [
        (math.cos(k * math.pi / 3.0), math.sin(k * math.pi / 3.0)) for k in range(6)
    ]
    result = rotate_copies(hexagon, 6, clockwise=False)
    assert len(result) == 6


def test_rotate_copies_collapses_noise_across_decimal_boundaries() -> None:
    # both values straddle 0.1234565, the midpoint between two 6-decimal steps
    boundary = 0.1234565
    result = rotate_copies([(boundary - 1e-10, 0.0), (boundary + 1e-10, 0.0)], 1)
    assert result == [Point2D(boundary - 1e-10, 0.0)]


def test_rotate_copies_keeps_points_further_apart_than_epsilon() -> None:
    points = [(0.0, 0.0), (1e-3, 0.0), (0.0, 1e-3)]
    assert rotate_copies(points, 1) == [Point2D.of(p) for p in points]
    assert len(rotate_copies(points, 1, epsilon=1e-2)) == 1


@pytest.mark.parametrize("count", [0, -3])
def test_rotate_copies_rejects_non_positive_count(count: int) -> None:
    with pytest.raises(ArgumentError, match="greater than zero"):
        rotate_copies(SHAPE, count)


@pytest.mark.parametrize("count", [2.5, True, "3"])
def test_rotate_copies_rejects_non_integer_count(count) -> None:
    with pytest.raises(ArgumentError):
        rotate_copies(SHAPE, count)


def test_rotate_copies_accepts_numpy_integer() -> None:
    assert len(rotate_copies([(1.0, 0.0)], np.int64(2))) == 2


small_ints = st.integers(min_value=-20, max_value=20).map(float)


@given(
    points=st.lists(st.tuples(small_ints, small_ints), min_size=1, max_size=6),
    count=st.integers(min_value=1, max_value=12),
)
@settings(deadline=None, max_examples=60)
def test_rotate_copies_cardinality(
    points: List[Tuple[float, float]], count: int
) -> None:
    """Deduplication never loses an input point nor invents new ones."""
    result = rotate_copies(points, count, center=(0.5, -1.5))
    distinct = set(points)
    assert len(distinct) <= len(result) <= count * len(points)
    assert {p.as_tuple() for p in result[: len(distinct)]} == distinct
