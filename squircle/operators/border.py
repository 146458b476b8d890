# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Squircle border path.

Unlike the outline, the border path only covers the requested corners and
the edges next to them. When fewer than four corners are rounded the result
is several open SubPaths, so a stroke never runs along an edge that sits
between two unrounded corners.

The path is drawn inset by half the border width (the border inset) so a
stroke of the full width is centred on the nominal edge. Open chains that
end on a vertical edge are extended by the border inset past the rectangle,
which keeps the butt end of the stroke flush with the neighbouring edge.
"""

from typing import Union

from ..core import types as sq
from .corner_geometry import check_finite, connection_points, squircle_control_points
from .outline import degenerate_shortcut


def build_border_path(
    rect: sq.Rect,
    corner_radius: Union[int, float],
    corners: int = sq.ALL_CORNERS,
    border_width: Union[int, float] = 0.0,
    use_height_for_radius: bool = True,
    fallback_radius: Union[int, float] = 0.0,
) -> sq.Path:
    """
    Build the stroke path for a squircle border.

    Corner sets are tested as supersets, in order:

    - all four corners: one chain around the whole shape
    - top pair: two chains (top edge + right side, left side + top left)
    - bottom pair: one chain down the right side, along the bottom and up
      the left side
    - anything else: the left and right sides as two straight segments

    Raises:
        NonFinitePointError: If any derived point is NaN or infinite.
    """
    border_inset = border_width / 2
    inset_rect = rect.inset_by(border_inset, border_inset)

    if corners & sq.ALL_CORNERS == sq.ALL_CORNERS:
        shortcut = degenerate_shortcut(rect, corner_radius, inset_rect)
        if shortcut is not None:
            return shortcut

    cp = squircle_control_points(inset_rect)
    p = connection_points(
        inset_rect, corner_radius,
        use_height_for_radius=use_height_for_radius,
        fallback_radius=fallback_radius,
    )
    check_finite(cp, "control")
    check_finite(p, "connection")

    min_x, min_y = inset_rect.min_x, inset_rect.min_y
    max_x, max_y = inset_rect.max_x, inset_rect.max_y

    if corners & sq.ALL_CORNERS == sq.ALL_CORNERS:
        return sq.Path([sq.SubPath([
            sq.MoveTo(p[0]),
            sq.LineTo(p[1]),
            sq.CurveTo(cp[0], cp[0], p[2]),
            sq.LineTo(p[3]),
            sq.CurveTo(cp[1], cp[1], p[4]),
            sq.LineTo(p[5]),
            sq.CurveTo(cp[2], cp[2], p[6]),
            sq.LineTo(p[7]),
            sq.CurveTo(cp[3], cp[3], p[0]),
        ])])

    if corners & sq.TOP_CORNERS == sq.TOP_CORNERS:
        return sq.Path([
            sq.SubPath([
                sq.MoveTo(p[0]),
                sq.LineTo(p[1]),
                sq.CurveTo(cp[0], cp[0], p[2]),
                sq.LineTo(sq.Point(max_x, max_y + border_inset)),
            ]),
            sq.SubPath([
                sq.MoveTo(sq.Point(min_x, max_y + border_inset)),
                sq.LineTo(p[7]),
                sq.CurveTo(cp[3], cp[3], p[0]),
            ]),
        ])

    if corners & sq.BOTTOM_CORNERS == sq.BOTTOM_CORNERS:
        return sq.Path([sq.SubPath([
            sq.MoveTo(sq.Point(max_x, min_y - border_inset)),
            sq.LineTo(p[3]),
            sq.CurveTo(cp[1], cp[1], p[4]),
            sq.LineTo(p[5]),
            sq.CurveTo(cp[2], cp[2], p[6]),
            sq.LineTo(sq.Point(min_x, min_y - border_inset)),
        ])])

    # left and right sides only
    return sq.Path([
        sq.SubPath([
            sq.MoveTo(sq.Point(max_x, min_y - border_inset)),
            sq.LineTo(sq.Point(max_x, max_y + border_inset)),
        ]),
        sq.SubPath([
            sq.MoveTo(sq.Point(min_x, max_y + border_inset)),
            sq.LineTo(sq.Point(min_x, min_y - border_inset)),
        ]),
    ])
