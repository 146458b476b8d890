# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Shared Cairo Rendering Module

Replays squircle paths onto a Cairo context and paints a Decoration. Used
by the PNG, SVG and PDF devices; callers with their own Cairo surface can
use append_path() directly to clip or stroke with a squircle.
"""

import math

import cairo

from ...core import types as sq
from ...operators.arc import expand_primitives
from ...operators.decoration import Decoration


def append_path(cairo_ctx, path: sq.Path) -> None:
    """
    Append path to the current Cairo path.

    Shortcut primitives are expanded to curves and closed. Squircle
    subpaths are not closed explicitly: an outline already ends on its
    first point and border chains must stay open.
    """
    for subpath in path:
        is_primitive = len(subpath) == 1 and isinstance(subpath[0], sq.PRIMITIVE_TYPES)
        if is_primitive:
            subpath = expand_primitives(sq.Path([subpath]))[0]
        for pc_item in subpath:
            if isinstance(pc_item, sq.MoveTo):
                cairo_ctx.move_to(pc_item.p.x, pc_item.p.y)
                continue
            if isinstance(pc_item, sq.LineTo):
                cairo_ctx.line_to(pc_item.p.x, pc_item.p.y)
                continue
            if isinstance(pc_item, sq.CurveTo):
                cairo_ctx.curve_to(
                    pc_item.p1.x, pc_item.p1.y,
                    pc_item.p2.x, pc_item.p2.y,
                    pc_item.p3.x, pc_item.p3.y,
                )
        if is_primitive:
            cairo_ctx.close_path()


def page_size(rect: sq.Rect) -> tuple:
    """Canvas size holding rect with the same margin on both sides."""
    return (
        max(1, math.ceil(rect.max_x + rect.min_x)),
        max(1, math.ceil(rect.max_y + rect.min_y)),
    )


def render_decoration(cairo_ctx, decoration: Decoration, style: sq.SquircleStyle) -> None:
    """
    Paint a decoration: fill the mask with the style's fill color, then
    stroke the border path (if any) with the border color.

    A zero line width strokes nothing.
    """
    cairo_ctx.save()
    cairo_ctx.new_path()
    append_path(cairo_ctx, decoration.mask)
    cairo_ctx.set_fill_rule(cairo.FILL_RULE_WINDING)
    cairo_ctx.set_source_rgb(*style.fill_color)
    cairo_ctx.fill()

    if decoration.border is not None and decoration.line_width > 0:
        cairo_ctx.new_path()
        append_path(cairo_ctx, decoration.border)
        cairo_ctx.set_source_rgb(*style.border.color)
        cairo_ctx.set_line_width(decoration.line_width)
        cairo_ctx.set_line_cap(cairo.LINE_CAP_BUTT)
        cairo_ctx.set_line_join(cairo.LINE_JOIN_MITER)
        cairo_ctx.stroke()
    cairo_ctx.restore()
