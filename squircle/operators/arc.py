# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Expansion of the Oval and RoundedRect shortcut primitives into curves.

Arcs are approximated by one cubic Bézier per quarter turn. Angles are
measured in radians with y growing downward, so increasing angles run
clockwise on screen, the same direction the squircle builders walk.
"""

import math
from typing import Union

from ..core import types as sq

HALF_PI = math.pi / 2


def _acute_arc_to_bezier(start: Union[int, float], size: Union[int, float]):
    """Control polygon of a unit circle arc of at most 90 degrees."""
    alpha = size / 2.0

    cos_alpha = math.cos(alpha)
    sin_alpha = math.sin(alpha)

    cot_alpha = 1.0 / math.tan(alpha)
    phi = start + alpha  # how far the arc needs to be rotated

    cos_phi = math.cos(phi)
    sin_phi = math.sin(phi)

    lmbda = (4.0 - cos_alpha) / 3.0
    mu = sin_alpha + (cos_alpha - lmbda) * cot_alpha

    return (
        math.cos(start),  # p0.x
        math.sin(start),  # p0.y
        lmbda * cos_phi + mu * sin_phi,  # p1.x
        lmbda * sin_phi - mu * cos_phi,  # p1.y
        lmbda * cos_phi - mu * sin_phi,  # p2.x
        lmbda * sin_phi + mu * cos_phi,  # p2.y
        math.cos(start + size),  # p3.x
        math.sin(start + size),  # p3.y
    )


def _append_arc(elements: list, cx, cy, rx, ry, start, stop) -> None:
    """Append quarter-turn curves from angle start to stop (stop > start)."""
    epsilon = 0.00001
    while stop - start > epsilon:
        arc_to_draw = min(stop - start, HALF_PI)
        _, _, p1_x, p1_y, p2_x, p2_y, p3_x, p3_y = _acute_arc_to_bezier(start, arc_to_draw)
        elements.append(sq.CurveTo(
            sq.Point(cx + rx * p1_x, cy + ry * p1_y),
            sq.Point(cx + rx * p2_x, cy + ry * p2_y),
            sq.Point(cx + rx * p3_x, cy + ry * p3_y),
        ))
        start += arc_to_draw


def oval_subpath(rect: sq.Rect) -> sq.SubPath:
    """Ellipse inscribed in rect, starting at the right-hand extreme."""
    rx = rect.width / 2
    ry = rect.height / 2
    cx = rect.min_x + rx
    cy = rect.min_y + ry

    elements = [sq.MoveTo(sq.Point(cx + rx, cy))]
    _append_arc(elements, cx, cy, rx, ry, 0.0, 2 * math.pi)
    return sq.SubPath(elements)


def rounded_rect_subpath(rect: sq.Rect, radius: Union[int, float]) -> sq.SubPath:
    """Rectangle with circular corners, clockwise from the top edge.

    The radius is clamped to half of each side of rect.
    """
    r = max(0.0, min(radius, rect.width / 2, rect.height / 2))
    min_x, min_y, max_x, max_y = rect.min_x, rect.min_y, rect.max_x, rect.max_y

    elements = [sq.MoveTo(sq.Point(min_x + r, min_y))]
    elements.append(sq.LineTo(sq.Point(max_x - r, min_y)))
    if r:
        _append_arc(elements, max_x - r, min_y + r, r, r, -HALF_PI, 0.0)
    elements.append(sq.LineTo(sq.Point(max_x, max_y - r)))
    if r:
        _append_arc(elements, max_x - r, max_y - r, r, r, 0.0, HALF_PI)
    elements.append(sq.LineTo(sq.Point(min_x + r, max_y)))
    if r:
        _append_arc(elements, min_x + r, max_y - r, r, r, HALF_PI, math.pi)
    elements.append(sq.LineTo(sq.Point(min_x, min_y + r)))
    if r:
        _append_arc(elements, min_x + r, min_y + r, r, r, math.pi, 3 * HALF_PI)
    return sq.SubPath(elements)


def expand_primitives(path: sq.Path) -> sq.Path:
    """Return path with its Oval / RoundedRect subpaths turned into curves."""
    expanded = []
    for subpath in path:
        if len(subpath) == 1 and isinstance(subpath[0], sq.Oval):
            expanded.append(oval_subpath(subpath[0].rect))
        elif len(subpath) == 1 and isinstance(subpath[0], sq.RoundedRect):
            expanded.append(rounded_rect_subpath(subpath[0].rect, subpath[0].radius))
        else:
            expanded.append(subpath)
    return sq.Path(expanded)
