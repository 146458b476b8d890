# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for Squircle.

Handles command-line argument definition, color and corner specifications,
and output file naming.
"""

from __future__ import annotations

import argparse
import os
from importlib import metadata

DEVICES = ["png", "svg", "pdf", "path"]


def parse_color(spec: str) -> tuple[float, float, float]:
    """Parse a ``#rrggbb`` (or ``rrggbb``) color into RGB floats in 0..1.

    Raises:
        ValueError: If the specification is malformed.
    """
    text = spec.strip().lstrip("#")
    if len(text) != 6:
        raise ValueError(f"Invalid color: '{spec}' (expected #rrggbb)")
    try:
        components = [int(text[i:i + 2], 16) for i in (0, 2, 4)]
    except ValueError:
        raise ValueError(f"Invalid color: '{spec}' (expected #rrggbb)")
    r, g, b = (c / 255.0 for c in components)
    return r, g, b


def get_output_file(outputfile: str | None, output_dir: str, device: str,
                    width: float, height: float) -> str:
    """
    Derive the output file path from command-line arguments.

    Args:
        outputfile: The -o argument value (or None)
        output_dir: Directory used when no -o is given
        device: Output device name, used as the extension
        width, height: Rectangle size, used in the default name

    Returns:
        Path of the file to write
    """
    if outputfile:
        return outputfile
    return os.path.join(output_dir, f"squircle-{width:g}x{height:g}.{device}")


def _get_version() -> str:
    try:
        return metadata.version("squircle")
    except metadata.PackageNotFoundError:
        return "unknown"


def build_argument_parser(available_devices: list[str] = DEVICES) -> argparse.ArgumentParser:
    """
    Create and configure the Squircle argument parser.

    Args:
        available_devices: List of available output device names.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="squircle",
        description="Squircle - squircle outline and border paths",
        epilog="With -d path the SVG path data is printed instead of writing a file.",
    )

    parser.add_argument(
        "-V", "--version", action="version",
        version=f"Squircle {_get_version()}"
    )
    parser.add_argument("width", type=float, help="Rectangle width")
    parser.add_argument("height", type=float, help="Rectangle height")
    parser.add_argument(
        "-r", "--radius", type=float, default=16.0,
        help="Requested corner radius (default: 16)"
    )
    parser.add_argument(
        "--fallback-radius", type=float, default=0.0,
        help="Radius used when --radius is 0 (default: 0)"
    )
    parser.add_argument(
        "--corners", default="all",
        help="Corners to round: all, top, bottom, none or a list such as tl,br (default: all)"
    )
    parser.add_argument(
        "--border-width", type=float, default=0.0,
        help="Border width; 0 draws no border (default: 0)"
    )
    parser.add_argument(
        "--border-color", default="#000000",
        help="Border color as #rrggbb (default: #000000)"
    )
    parser.add_argument(
        "--fill-color", default="#ffffff",
        help="Fill color as #rrggbb (default: #ffffff)"
    )
    parser.add_argument(
        "--margin", type=float, default=0.0,
        help="Space around the rectangle in the output (default: 0)"
    )
    parser.add_argument(
        "--no-height-clamp", dest="use_height_for_radius", action="store_false",
        help="Do not clamp the corner size to half the shorter side"
    )
    parser.add_argument(
        "--glitch-fix", action="store_true",
        help="Nudge the lower left connection point outward"
    )
    parser.add_argument(
        "--border-only", action="store_true",
        help="With -d path, print the border path instead of the outline"
    )
    parser.add_argument(
        "-d",
        "--device",
        choices=available_devices,
        default="path",
        help=f'Specify output device ({", ".join(available_devices)}; default: path)',
    )
    parser.add_argument(
        "-o", "--output", dest="outputfile", help="Specify output filename"
    )
    parser.add_argument(
        "--output-dir", dest="output_dir", default="sq_output",
        help="Specify output directory (default: sq_output)"
    )
    parser.add_argument(
        "--antialias",
        choices=["none", "fast", "good", "best", "gray", "subpixel"],
        help="Set anti-aliasing mode for PNG rendering (default: gray)"
    )
    parser.add_argument(
        "--cache-stats", action="store_true",
        help="Print path cache statistics after rendering"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    return parser
