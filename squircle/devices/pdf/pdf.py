# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PDF Output Device

Renders a decorated squircle onto a single PDF page using Cairo's
PDFSurface. One path unit is one PDF point.
"""

import cairo

from ...core import types as sq
from ...operators.decoration import Decoration
from ..common.cairo_renderer import page_size, render_decoration


def showpage(decoration: Decoration, style: sq.SquircleStyle, rect: sq.Rect,
             output_file: str) -> None:
    """
    Render decoration to a one page PDF file.

    Args:
        decoration: Paths to paint
        style: Colors and border settings
        rect: Decorated rectangle, used to size the page
        output_file: Destination path
    """
    width, height = page_size(rect)

    surface = cairo.PDFSurface(output_file, width, height)
    cc = cairo.Context(surface)

    render_decoration(cc, decoration, style)

    cc.show_page()
    surface.finish()
