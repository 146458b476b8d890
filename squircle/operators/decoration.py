# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Cached squircle paths and view decoration.

This is the layer a view system talks to. It keys built paths by their
geometry in a PathCache and turns a NonFinitePointError into None, which a
caller treats as "skip the decoration for this layout pass".

decorate() produces everything needed to squircle a rectangular view: the
mask path that clips its content and the path and line width to stroke its
border with.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from ..core import types as sq
from ..core.path_cache import PathCache, make_cache_key
from .border import build_border_path
from .outline import build_outline_path

logger = logging.getLogger(__name__)

_outline_cache = PathCache()
_border_cache = PathCache()


@dataclass(frozen=True)
class Decoration:
    """Paths for one decorated rectangle.

    mask: closed outline used to clip (or fill) the content.
    border: path to stroke, or None when no border is configured.
    line_width: stroke width for border.
    """
    mask: sq.Path
    border: Optional[sq.Path]
    line_width: float


def squircle_path(
    rect: sq.Rect,
    corner_radius: Union[int, float],
    corners: int = sq.ALL_CORNERS,
    border_width: Union[int, float] = 0.0,
    use_height_for_radius: bool = True,
    glitch_fix: bool = False,
    fallback_radius: Union[int, float] = 0.0,
    cache: Optional[PathCache] = None,
) -> Optional[sq.Path]:
    """Cached build_outline_path(); returns None if the geometry is not finite."""
    cache = _outline_cache if cache is None else cache
    key = make_cache_key(
        sq.KIND_OUTLINE, rect, corner_radius, corners, border_width,
        fallback_radius, use_height_for_radius, glitch_fix,
    )
    return cache.get_or_build(key, lambda: build_outline_path(
        rect, corner_radius, corners, border_width,
        use_height_for_radius=use_height_for_radius,
        glitch_fix=glitch_fix,
        fallback_radius=fallback_radius,
    ))


def squircle_border_path(
    rect: sq.Rect,
    corner_radius: Union[int, float],
    corners: int = sq.ALL_CORNERS,
    border_width: Union[int, float] = 0.0,
    use_height_for_radius: bool = True,
    fallback_radius: Union[int, float] = 0.0,
    cache: Optional[PathCache] = None,
) -> Optional[sq.Path]:
    """Cached build_border_path(); returns None if the geometry is not finite."""
    cache = _border_cache if cache is None else cache
    key = make_cache_key(
        sq.KIND_BORDER, rect, corner_radius, corners, border_width,
        fallback_radius, use_height_for_radius,
    )
    return cache.get_or_build(key, lambda: build_border_path(
        rect, corner_radius, corners, border_width,
        use_height_for_radius=use_height_for_radius,
        fallback_radius=fallback_radius,
    ))


def decorate(
    rect: sq.Rect,
    style: sq.SquircleStyle,
    fallback_radius: Union[int, float] = 0.0,
    cache: Optional[PathCache] = None,
) -> Optional[Decoration]:
    """
    Build the mask and border paths for rect.

    Returns None when style.corner_radius is 0 (the caller removes any
    existing decoration) or when the geometry produces non-finite points
    (the caller keeps its previous state until the next layout).

    Border selection:
        With all four corners the border strokes the mask outline itself
        at twice the border width; the outline sits one border width
        inside rect, so half the stroke falls inside the shape and half
        outside. With a partial corner set the open border path is used at
        the plain border width so unrounded edges get no stroke.
    """
    if style.corner_radius == 0:
        return None

    border_width = style.border_width
    mask = squircle_path(
        rect, style.corner_radius, style.corners, border_width,
        use_height_for_radius=style.use_height_for_radius,
        glitch_fix=style.glitch_fix,
        fallback_radius=fallback_radius,
        cache=cache,
    )
    if mask is None:
        logger.debug("No squircle mask for %s", rect)
        return None

    if style.border is None:
        return Decoration(mask, None, 0.0)

    if style.corners == sq.ALL_CORNERS:
        return Decoration(mask, mask, 2 * border_width)

    border = squircle_border_path(
        rect, style.corner_radius, style.corners, border_width,
        use_height_for_radius=style.use_height_for_radius,
        fallback_radius=fallback_radius,
        cache=cache,
    )
    if border is None:
        logger.debug("No squircle border for %s", rect)
        return None
    return Decoration(mask, border, border_width)


def clear_caches() -> None:
    """Empty the module level outline and border caches."""
    _outline_cache.clear()
    _border_cache.clear()


def cache_stats() -> dict:
    """Statistics of the module level caches, keyed by path kind."""
    return {
        sq.KIND_OUTLINE: _outline_cache.stats(),
        sq.KIND_BORDER: _border_cache.stats(),
    }
