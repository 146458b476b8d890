# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PNG Output Device

Renders a decorated squircle to a PNG image using Cairo. The image is
transparent outside the mask.
"""

import cairo

from ...core import types as sq
from ...operators.decoration import Decoration
from ..common.cairo_renderer import page_size, render_decoration

# Anti-aliasing mode for Cairo rendering.
ANTIALIAS_MODE = cairo.ANTIALIAS_GRAY

ANTIALIAS_MAP = {
    "none": cairo.ANTIALIAS_NONE,
    "fast": cairo.ANTIALIAS_FAST,
    "good": cairo.ANTIALIAS_GOOD,
    "best": cairo.ANTIALIAS_BEST,
    "gray": cairo.ANTIALIAS_GRAY,
    "subpixel": cairo.ANTIALIAS_SUBPIXEL,
}


def showpage(decoration: Decoration, style: sq.SquircleStyle, rect: sq.Rect,
             output_file: str, antialias: str = None) -> None:
    """
    Render decoration to a PNG file.

    Args:
        decoration: Paths to paint
        style: Colors and border settings
        rect: Decorated rectangle, used to size the image
        output_file: Destination path
        antialias: Optional key of ANTIALIAS_MAP
    """
    width, height = page_size(rect)

    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
    cc = cairo.Context(surface)
    cc.set_antialias(ANTIALIAS_MAP.get(antialias, ANTIALIAS_MODE))

    render_decoration(cc, decoration, style)

    surface.flush()
    surface.write_to_png(output_file)
