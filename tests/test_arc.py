"""Unit tests for Oval / RoundedRect expansion."""

import pytest

from squircle.core import types as sq
from squircle.operators.arc import expand_primitives, oval_subpath, rounded_rect_subpath
from squircle.operators.outline import build_outline_path
from squircle.operators.path_query import curve_count, segment_count


def test_oval_is_four_quarter_curves():
    subpath = oval_subpath(sq.Rect(0, 0, 2, 2))
    assert subpath[0] == sq.MoveTo(sq.Point(2, 1))
    curves = subpath[1:]
    assert len(curves) == 4
    assert all(isinstance(c, sq.CurveTo) for c in curves)
    # first quarter runs from the right extreme down to the bottom one
    assert curves[0].p1.x == pytest.approx(2)
    assert curves[0].p1.y == pytest.approx(1.5523, abs=1e-3)
    assert curves[0].p3.x == pytest.approx(1)
    assert curves[0].p3.y == pytest.approx(2)
    assert curves[-1].p3.x == pytest.approx(2)
    assert curves[-1].p3.y == pytest.approx(1)


def test_rounded_rect_corners():
    subpath = rounded_rect_subpath(sq.Rect(0, 0, 200, 100), 50)
    assert subpath[0] == sq.MoveTo(sq.Point(50, 0))
    assert subpath[1] == sq.LineTo(sq.Point(150, 0))
    first_arc = subpath[2]
    assert first_arc.p3.x == pytest.approx(200)
    assert first_arc.p3.y == pytest.approx(50)
    path = sq.Path([subpath])
    assert curve_count(path) == 4
    assert segment_count(path) == 8


def test_rounded_rect_radius_is_clamped():
    assert rounded_rect_subpath(sq.Rect(0, 0, 200, 100), 80) == \
        rounded_rect_subpath(sq.Rect(0, 0, 200, 100), 50)


def test_rounded_rect_zero_radius_is_plain_rect():
    path = sq.Path([rounded_rect_subpath(sq.Rect(0, 0, 10, 10), 0)])
    assert curve_count(path) == 0
    assert segment_count(path) == 4


def test_expand_primitives_leaves_squircles_alone():
    outline = build_outline_path(sq.Rect(0, 0, 100, 100), 10)
    assert expand_primitives(outline) == outline


def test_expand_primitives_expands_shortcuts():
    oval = build_outline_path(sq.Rect(0, 0, 100, 100), 50)
    expanded = expand_primitives(oval)
    assert curve_count(expanded) == 4
    assert isinstance(expanded[0][0], sq.MoveTo)
