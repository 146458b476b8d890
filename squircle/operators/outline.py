# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Closed squircle outline.

The outline walks the rectangle clockwise from connection point 0 (left end
of the top edge). Each requested corner becomes a curve; every other corner
is drawn as two straight segments through the literal rectangle corner, so
the result is always one closed loop.
"""

from typing import List, Optional, Union

from ..core import types as sq
from .corner_geometry import check_finite, connection_points, squircle_control_points

CORNER_ORDER = (sq.CORNER_TOP_LEFT, sq.CORNER_TOP_RIGHT, sq.CORNER_BOTTOM_LEFT, sq.CORNER_BOTTOM_RIGHT)


def rect_corners(rect: sq.Rect) -> List[sq.Point]:
    """Literal corners of rect: top-left, top-right, bottom-left, bottom-right."""
    return [rect.corner(flag) for flag in CORNER_ORDER]


def degenerate_shortcut(
    bounds: sq.Rect, corner_radius: Union[int, float], rect: sq.Rect
) -> Optional[sq.Path]:
    """
    Circle / capsule pre-check, applied before any corner geometry.

    bounds is the caller's rectangle, rect the inset rectangle the path is
    drawn in. A square whose height is exactly twice the radius becomes an
    Oval; a radius larger than half the shorter side becomes a RoundedRect
    with circular corners of half the shorter side.

    Both tests compare floats exactly. They are heuristics for the common
    "make it a circle / pill" inputs, not a guarantee: a radius a rounding
    error away from the circle case takes the squircle path instead.

    Returns None when neither shortcut applies.

    Raises:
        NonFinitePointError: If a shortcut applies but a corner of rect is
            NaN or infinite.
    """
    if bounds.width == bounds.height and bounds.height == 2 * corner_radius:
        primitive = sq.Oval(rect)
    elif corner_radius > bounds.min_side / 2:
        primitive = sq.RoundedRect(rect, bounds.min_side / 2)
    else:
        return None
    check_finite(rect_corners(rect), "bounds")
    return sq.Path([sq.SubPath([primitive])])


def build_outline_path(
    rect: sq.Rect,
    corner_radius: Union[int, float],
    corners: int = sq.ALL_CORNERS,
    border_width: Union[int, float] = 0.0,
    use_height_for_radius: bool = True,
    glitch_fix: bool = False,
    fallback_radius: Union[int, float] = 0.0,
) -> sq.Path:
    """
    Build the closed squircle outline for rect.

    Args:
        rect: Bounds of the decorated area.
        corner_radius: Requested corner radius; 0 uses fallback_radius.
        corners: Corner bitmask of corners to round.
        border_width: The outline is drawn inset by this amount on every side.
        use_height_for_radius: Clamp the corner size to half the shorter side.
        glitch_fix: Apply the lower left seam nudge (see connection_points).
        fallback_radius: Radius used when corner_radius is 0.

    Returns:
        A Path with a single SubPath. The circle and capsule shortcuts (all
        corners only) return a single Oval or RoundedRect primitive instead.

    Raises:
        NonFinitePointError: If any derived point is NaN or infinite.
    """
    inset_rect = rect.inset_by(border_width, border_width)

    if corners == sq.ALL_CORNERS:
        shortcut = degenerate_shortcut(rect, corner_radius, inset_rect)
        if shortcut is not None:
            return shortcut

    control = squircle_control_points(inset_rect)
    points = connection_points(
        inset_rect, corner_radius,
        use_height_for_radius=use_height_for_radius,
        glitch_fix=glitch_fix,
        fallback_radius=fallback_radius,
    )
    check_finite(control, "control")
    check_finite(points, "connection")

    elements = [sq.MoveTo(points[0])]

    # (corner, control point index, end point index)
    walk = (
        (sq.CORNER_TOP_RIGHT, 0, 2),
        (sq.CORNER_BOTTOM_RIGHT, 1, 4),
        (sq.CORNER_BOTTOM_LEFT, 2, 6),
        (sq.CORNER_TOP_LEFT, 3, 0),
    )
    for corner, cp_index, end_index in walk:
        # straight edge leading into the corner
        elements.append(sq.LineTo(points[end_index - 1 if end_index else 7]))
        if corners & corner:
            cp = control[cp_index]
            elements.append(sq.CurveTo(cp, cp, points[end_index]))
        else:
            elements.append(sq.LineTo(inset_rect.corner(corner)))
            elements.append(sq.LineTo(points[end_index]))

    return sq.Path([sq.SubPath(elements)])
