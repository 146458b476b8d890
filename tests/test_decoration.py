"""Unit tests for cached paths and view decoration."""

import math

from squircle.core import types as sq
from squircle.core.path_cache import PathCache
from squircle.operators import decoration as sq_decoration
from squircle.operators.decoration import decorate, squircle_border_path, squircle_path

RECT = sq.Rect(0, 0, 100, 100)


def test_zero_radius_removes_decoration():
    assert decorate(RECT, sq.SquircleStyle(corner_radius=0), cache=PathCache()) is None


def test_decoration_without_border():
    decoration = decorate(RECT, sq.SquircleStyle(corner_radius=10), cache=PathCache())
    assert decoration.border is None
    assert decoration.line_width == 0.0
    assert decoration.mask[0][0] == sq.MoveTo(sq.Point(35, 0))


def test_all_corners_stroke_the_mask_at_double_width():
    style = sq.SquircleStyle(corner_radius=10, border=sq.BorderConfig(2))
    decoration = decorate(RECT, style, cache=PathCache())
    assert decoration.border is decoration.mask
    assert decoration.line_width == 4
    # mask is inset by the border width
    assert decoration.mask[0][0] == sq.MoveTo(sq.Point(37, 2))


def test_partial_corners_stroke_the_border_path():
    style = sq.SquircleStyle(
        corner_radius=10, corners=sq.TOP_CORNERS, border=sq.BorderConfig(2),
    )
    decoration = decorate(RECT, style, cache=PathCache())
    assert decoration.border is not decoration.mask
    assert len(decoration.border) == 2
    assert decoration.line_width == 2


def test_non_finite_geometry_gives_none():
    rect = sq.Rect(0, 0, math.nan, 100)
    assert decorate(rect, sq.SquircleStyle(corner_radius=10), cache=PathCache()) is None
    style = sq.SquircleStyle(corner_radius=10, corners=sq.TOP_CORNERS, border=sq.BorderConfig(1))
    assert decorate(rect, style, cache=PathCache()) is None


def test_repeated_requests_hit_the_cache():
    cache = PathCache()
    first = squircle_path(RECT, 10, cache=cache)
    second = squircle_path(RECT, 10, cache=cache)
    assert first is second
    assert cache.stats()["hits"] == 1


def test_outline_and_border_entries_do_not_collide():
    cache = PathCache()
    outline = squircle_path(RECT, 10, sq.TOP_CORNERS, 2, cache=cache)
    border = squircle_border_path(RECT, 10, sq.TOP_CORNERS, 2, cache=cache)
    assert outline is not border
    assert len(outline) == 1
    assert len(border) == 2
    assert len(cache) == 2


def test_fallback_radius_is_used_for_zero_radius():
    cache = PathCache()
    path = squircle_path(RECT, 0, fallback_radius=10, cache=cache)
    assert path[0][0] == sq.MoveTo(sq.Point(35, 0))


def test_module_caches():
    sq_decoration.clear_caches()
    squircle_path(RECT, 12)
    squircle_path(RECT, 12)
    stats = sq_decoration.cache_stats()
    assert set(stats) == {"outline", "border"}
    assert stats["outline"]["entries"] == 1
    assert stats["outline"]["hits"] == 1
    sq_decoration.clear_caches()
    assert sq_decoration.cache_stats()["outline"]["entries"] == 0


def test_cached_paths_cannot_be_changed_by_callers():
    cache = PathCache()
    first = squircle_path(RECT, 10, cache=cache)
    try:
        first[0].clear()
    except AttributeError:
        pass
    second = squircle_path(RECT, 10, cache=cache)
    assert second is first
    assert len(second[0]) == 9


def test_shortcut_with_infinite_bounds_gives_none():
    cache = PathCache()
    rect = sq.Rect(0, 0, math.inf, 10)
    assert squircle_path(rect, 16, cache=cache) is None
    assert squircle_border_path(rect, 16, border_width=2, cache=cache) is None
    assert len(cache) == 0
