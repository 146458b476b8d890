"""Unit tests for the squircle control and connection points."""

import math

import pytest

from squircle.core import error as sq_error
from squircle.core import types as sq
from squircle.operators.corner_geometry import (
    check_finite, connection_points, effective_radius, squircle_control_points,
)


def _xy(points):
    return [(p.x, p.y) for p in points]


def test_control_points_sit_on_corners_by_default():
    points = squircle_control_points(sq.Rect(0, 0, 100, 100))
    expected = [(100, 0), (100, 100), (0, 100), (0, 0)]
    for (x, y), (ex, ey) in zip(_xy(points), expected):
        assert x == pytest.approx(ex)
        assert y == pytest.approx(ey)


def test_control_points_follow_smoothing_formula():
    """Smoothing 0 gives an inset of 100 - 97 = 3 toward the interior."""
    points = squircle_control_points(sq.Rect(10, 20, 100, 50), smoothing=0)
    assert _xy(points) == [(107, 23), (107, 67), (13, 67), (13, 23)]


def test_connection_points_unclamped():
    """100x100 at origin, radius 10: (10 + 4) * 2.5 = 35."""
    points = connection_points(sq.Rect(0, 0, 100, 100), 10, use_height_for_radius=False)
    assert _xy(points) == [
        (35, 0), (65, 0),
        (100, 35), (100, 65),
        (65, 100), (35, 100),
        (0, 65), (0, 35),
    ]


def test_connection_points_clamped_to_half_shorter_side():
    rect = sq.Rect(0, 0, 100, 40)
    assert connection_points(rect, 10)[0] == sq.Point(20, 0)
    assert connection_points(rect, 10, use_height_for_radius=False)[0] == sq.Point(35, 0)


def test_zero_radius_uses_fallback():
    rect = sq.Rect(0, 0, 100, 100)
    assert effective_radius(rect, 0, fallback_radius=6) == 25
    assert effective_radius(rect, 0) == 10
    assert connection_points(rect, 0, fallback_radius=6)[0] == sq.Point(25, 0)


def test_nonzero_radius_ignores_fallback():
    rect = sq.Rect(0, 0, 200, 200)
    assert effective_radius(rect, 10, fallback_radius=30) == 35


def test_glitch_fix_moves_only_lower_left_point():
    rect = sq.Rect(0, 0, 100, 100)
    plain = connection_points(rect, 10)
    fixed = connection_points(rect, 10, glitch_fix=True)
    assert fixed[6] == sq.Point(-0.01, 65)
    assert fixed[:6] == plain[:6]
    assert fixed[7] == plain[7]


def test_glitch_fix_epsilon_is_configurable():
    points = connection_points(sq.Rect(0, 0, 100, 100), 10, glitch_fix=True, glitch_fix_epsilon=0.5)
    assert points[6].x == -0.5


def test_check_finite_reports_first_bad_point():
    points = [sq.Point(0, 0), sq.Point(math.nan, 1), sq.Point(math.inf, 0)]
    with pytest.raises(sq_error.NonFinitePointError) as excinfo:
        check_finite(points, "connection")
    assert excinfo.value.index == 1
    assert excinfo.value.kind == "connection"


def test_check_finite_accepts_finite_points():
    check_finite([sq.Point(0, 0), sq.Point(-5.5, 1e9)], "control")
