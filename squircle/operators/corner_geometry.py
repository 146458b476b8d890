# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Corner geometry for squircle paths.

A squircle corner is drawn as one cubic curve whose two handles are the
same control point. Each side of the rectangle contributes two connection
points where the straight edge meets a corner curve.

Reference: https://www.figma.com/blog/desperately-seeking-squircles/
"""

from typing import Iterable, List, Union

from ..core import error as sq_error
from ..core import types as sq


def squircle_control_points(rect: sq.Rect, smoothing: Union[int, float] = sq.SMOOTHING) -> List[sq.Point]:
    """
    Return the four corner control points, clockwise from the top right.

    Order: top-right, bottom-right, bottom-left, top-left. Each point is
    moved ``100 - (97 + 0.03 * smoothing)`` toward the interior of rect,
    which is 0 for the default smoothing of 100.
    """
    inset = 100 - (97 + (3 / 100) * smoothing)

    top_right = sq.Point(rect.max_x - inset, rect.min_y + inset)
    bottom_right = sq.Point(rect.max_x - inset, rect.max_y - inset)
    bottom_left = sq.Point(rect.min_x + inset, rect.max_y - inset)
    top_left = sq.Point(rect.min_x + inset, rect.min_y + inset)
    return [top_right, bottom_right, bottom_left, top_left]


def effective_radius(
    rect: sq.Rect,
    corner_radius: Union[int, float],
    use_height_for_radius: bool = True,
    fallback_radius: Union[int, float] = 0.0,
) -> float:
    """
    Distance of the connection points from each corner.

    A zero corner_radius falls back to fallback_radius (the radius the caller
    already has on its layer). The padded radius is scaled by RADIUS_SCALE
    and, only when use_height_for_radius is set, clamped to half the shorter
    side. Callers that want elongated corners pass False.
    """
    if corner_radius != 0.0:
        padded = corner_radius + sq.RADIUS_PADDING
    else:
        padded = fallback_radius + sq.RADIUS_PADDING

    if use_height_for_radius:
        return min(rect.min_side / 2, sq.RADIUS_SCALE * padded)
    return sq.RADIUS_SCALE * padded


def connection_points(
    rect: sq.Rect,
    corner_radius: Union[int, float],
    use_height_for_radius: bool = True,
    glitch_fix: bool = False,
    fallback_radius: Union[int, float] = 0.0,
    glitch_fix_epsilon: float = sq.GLITCH_FIX_EPSILON,
) -> List[sq.Point]:
    """
    Return the eight points where edges meet corners, clockwise.

    Two points per side starting with the left point of the top side:
    top (p0, p1), right (p2, p3), bottom (p4, p5), left (p6, p7).

    With glitch_fix, p6 is pushed left by glitch_fix_epsilon. This hides a
    seam at the lower left corner while the bounds animate.
    """
    radius = effective_radius(rect, corner_radius, use_height_for_radius, fallback_radius)

    # top side
    p0 = sq.Point(rect.min_x + radius, rect.min_y)
    p1 = sq.Point(rect.max_x - radius, rect.min_y)

    # right side
    p2 = sq.Point(rect.max_x, rect.min_y + radius)
    p3 = sq.Point(rect.max_x, rect.max_y - radius)

    # bottom side
    p4 = sq.Point(rect.max_x - radius, rect.max_y)
    p5 = sq.Point(rect.min_x + radius, rect.max_y)

    # left side
    inset_correction = glitch_fix_epsilon if glitch_fix else 0.0
    p6 = sq.Point(rect.min_x - inset_correction, rect.max_y - radius)
    p7 = sq.Point(rect.min_x, rect.min_y + radius)

    return [p0, p1, p2, p3, p4, p5, p6, p7]


def check_finite(points: Iterable[sq.Point], kind: str) -> None:
    """Raise NonFinitePointError for the first point with a NaN/inf coordinate."""
    for index, point in enumerate(points):
        if not point.is_finite:
            raise sq_error.NonFinitePointError(point, index, kind)
