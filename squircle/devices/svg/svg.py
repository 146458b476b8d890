# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
SVG Output Device

Renders a decorated squircle to an SVG file through Cairo's SVGSurface.
Path coordinates map one to one onto SVG user units (points).
"""

import cairo

from ...core import types as sq
from ...operators.decoration import Decoration
from ..common.cairo_renderer import page_size, render_decoration


def showpage(decoration: Decoration, style: sq.SquircleStyle, rect: sq.Rect,
             output_file: str) -> None:
    """
    Render decoration to an SVG file.

    Args:
        decoration: Paths to paint
        style: Colors and border settings
        rect: Decorated rectangle, used to size the document
        output_file: Destination path
    """
    width, height = page_size(rect)

    surface = cairo.SVGSurface(output_file, width, height)
    surface.set_document_unit(cairo.SVG_UNIT_PT)
    cc = cairo.Context(surface)

    render_decoration(cc, decoration, style)

    # Finish Cairo surface to flush SVG output
    surface.finish()
