"""Unit tests for the squircle border path."""

import math

import pytest

from squircle.core import error as sq_error
from squircle.core import types as sq
from squircle.operators.border import build_border_path
from squircle.operators.path_query import (
    curve_count, is_closed, is_primitive, path_forall, segment_count, subpath_endpoints,
)

RECT = sq.Rect(0, 0, 100, 100)


def _points(path):
    return [p for _, points in path_forall(path) for p in points]


def test_all_corners_is_one_closed_chain():
    path = build_border_path(RECT, 10, sq.ALL_CORNERS, 4)
    assert len(path) == 1
    assert is_closed(path[0])
    assert curve_count(path) == 4
    assert segment_count(path) == 8
    # drawn in the rect inset by half the border width
    assert path[0][0] == sq.MoveTo(sq.Point(37, 2))


def test_top_pair_is_two_open_chains_without_bottom_edge():
    path = build_border_path(RECT, 10, sq.TOP_CORNERS, 2)
    assert len(path) == 2
    assert curve_count(path) == 2
    assert not any(is_closed(subpath) for subpath in path)

    # inset rect is (1, 1, 98, 98); its bottom corners are never visited
    points = _points(path)
    assert sq.Point(1, 99) not in points
    assert sq.Point(99, 99) not in points

    right_start, right_end = subpath_endpoints(path[0])
    left_start, left_end = subpath_endpoints(path[1])
    assert right_end == sq.Point(99, 100)
    assert left_start == sq.Point(1, 100)
    assert right_start == left_end


def test_corner_sets_are_matched_as_supersets():
    three = sq.TOP_CORNERS | sq.CORNER_BOTTOM_LEFT
    assert build_border_path(RECT, 10, three, 2) == build_border_path(RECT, 10, sq.TOP_CORNERS, 2)


def test_bottom_pair_is_one_open_chain():
    path = build_border_path(RECT, 10, sq.BOTTOM_CORNERS, 2)
    assert len(path) == 1
    assert curve_count(path) == 2
    start, end = subpath_endpoints(path[0])
    assert start == sq.Point(99, 0)
    assert end == sq.Point(1, 0)
    assert sq.Point(1, 1) not in _points(path)
    assert sq.Point(99, 1) not in _points(path)


@pytest.mark.parametrize("corners", [sq.NO_CORNERS, sq.CORNER_TOP_LEFT, sq.CORNER_BOTTOM_RIGHT])
def test_left_and_right_sides_only(corners):
    path = build_border_path(RECT, 10, corners, 2)
    assert curve_count(path) == 0
    assert [subpath_endpoints(subpath) for subpath in path] == [
        (sq.Point(99, 0), sq.Point(99, 100)),
        (sq.Point(1, 100), sq.Point(1, 0)),
    ]


def test_zero_border_width_has_no_extension():
    path = build_border_path(RECT, 10, sq.NO_CORNERS, 0)
    assert subpath_endpoints(path[0]) == (sq.Point(100, 0), sq.Point(100, 100))


def test_circle_shortcut_for_all_corners():
    path = build_border_path(RECT, 50, sq.ALL_CORNERS, 2)
    assert path[0][0] == sq.Oval(sq.Rect(1, 1, 98, 98))


def test_capsule_shortcut_for_all_corners():
    path = build_border_path(sq.Rect(0, 0, 200, 100), 80, sq.ALL_CORNERS, 0)
    assert path[0][0] == sq.RoundedRect(sq.Rect(0, 0, 200, 100), 50)


def test_shortcuts_skipped_for_partial_corner_sets():
    path = build_border_path(RECT, 50, sq.TOP_CORNERS, 2)
    assert not is_primitive(path)
    assert len(path) == 2


def test_non_finite_geometry_fails():
    with pytest.raises(sq_error.NonFinitePointError):
        build_border_path(sq.Rect(0, 0, math.nan, 100), 10, sq.TOP_CORNERS, 2)


def test_shortcut_rejects_non_finite_bounds():
    with pytest.raises(sq_error.NonFinitePointError):
        build_border_path(sq.Rect(0, 0, math.inf, 10), 20, sq.ALL_CORNERS, 2)


def test_top_pair_without_border_ends_on_bottom_corners():
    # with no border inset the open ends land on the literal bottom corners
    path = build_border_path(RECT, 10, sq.TOP_CORNERS, 0)
    right_start, right_end = subpath_endpoints(path[0])
    left_start, left_end = subpath_endpoints(path[1])
    assert right_end == sq.Point(100, 100)
    assert left_start == sq.Point(0, 100)
    # but no bottom edge runs between them
    assert segment_count(path) == 5
