# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Squircle execution logic.

Validates parsed arguments, builds the requested paths and hands them to
an output device (or prints SVG path data).
"""

import logging
import os

from .cli_args import get_output_file, parse_color
from .core import error as sq_error
from .core import types as sq
from .devices.pdf import pdf
from .devices.png import png
from .devices.svg import svg
from .operators import decoration as sq_decoration
from .operators.path_query import path_to_svg_data

logger = logging.getLogger(__name__)


def _build_style(args) -> sq.SquircleStyle:
    """Turn parsed arguments into a SquircleStyle.

    Raises:
        ValueError: On invalid sizes, colors or corner names.
    """
    if args.width <= 0 or args.height <= 0:
        raise ValueError("Width and height must be positive.")
    if args.radius < 0 or args.fallback_radius < 0:
        raise ValueError("Radii must not be negative.")
    if args.border_width < 0:
        raise ValueError("Border width must not be negative.")
    if args.margin < 0:
        raise ValueError("Margin must not be negative.")

    border = None
    if args.border_width > 0:
        border = sq.BorderConfig(args.border_width, parse_color(args.border_color))

    return sq.SquircleStyle(
        corner_radius=args.radius,
        corners=sq.parse_corners(args.corners),
        border=border,
        fill_color=parse_color(args.fill_color),
        use_height_for_radius=args.use_height_for_radius,
        glitch_fix=args.glitch_fix,
    )


def _print_path(args, rect: sq.Rect, style: sq.SquircleStyle) -> int:
    if args.border_only:
        path = sq_decoration.squircle_border_path(
            rect, style.corner_radius, style.corners, style.border_width,
            use_height_for_radius=style.use_height_for_radius,
            fallback_radius=args.fallback_radius,
        )
    else:
        path = sq_decoration.squircle_path(
            rect, style.corner_radius, style.corners, style.border_width,
            use_height_for_radius=style.use_height_for_radius,
            glitch_fix=style.glitch_fix,
            fallback_radius=args.fallback_radius,
        )
    if path is None:
        print("Squircle Error: the geometry produced a non-finite point.")
        return 1
    print(path_to_svg_data(path))
    return 0


def _render(args, rect: sq.Rect, style: sq.SquircleStyle) -> int:
    decoration = sq_decoration.decorate(rect, style, fallback_radius=args.fallback_radius)
    if decoration is None:
        print("Squircle Error: nothing to draw (radius is 0 or the geometry is not finite).")
        return 1

    output_file = get_output_file(args.outputfile, args.output_dir, args.device,
                                  args.width, args.height)
    output_dir = os.path.dirname(output_file)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    if args.device == "png":
        png.showpage(decoration, style, rect, output_file, antialias=args.antialias)
    elif args.device == "svg":
        svg.showpage(decoration, style, rect, output_file)
    else:
        pdf.showpage(decoration, style, rect, output_file)

    logger.info("Wrote %s", output_file)
    if args.verbose:
        print(f"Output: {output_file}")
    return 0


def run(args) -> int:
    """
    Execute one CLI invocation.

    Returns:
        Exit code: 0 for success, 1 for error
    """
    try:
        style = _build_style(args)
    except ValueError as e:
        print(f"Squircle Error: {e}")
        return 1

    rect = sq.Rect(args.margin, args.margin, args.width, args.height)
    logger.debug("Rect %s, style %s", rect, style)

    try:
        if args.device == "path":
            status = _print_path(args, rect, style)
        else:
            status = _render(args, rect, style)
    except sq_error.SquircleError as e:
        print(f"Squircle Error: {e}")
        status = 1

    if args.cache_stats:
        for kind, stats in sq_decoration.cache_stats().items():
            print(f"{kind} cache: {stats['entries']} entries, "
                  f"{stats['hits']} hits, {stats['misses']} misses")
    return status
