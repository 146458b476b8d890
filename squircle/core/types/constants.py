# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Squircle Types Constants Module

This module contains the corner flags and tunable geometry constants used
throughout the squircle path builders. Corner sets are plain integer
bitmasks so they can be combined with ``|`` and tested with ``&``.
"""

# corner flags (same bit values as UIKit's UIRectCorner)
CORNER_TOP_LEFT = 1
CORNER_TOP_RIGHT = 2
CORNER_BOTTOM_LEFT = 4
CORNER_BOTTOM_RIGHT = 8

# named corner sets
NO_CORNERS = 0
TOP_CORNERS = CORNER_TOP_LEFT | CORNER_TOP_RIGHT
BOTTOM_CORNERS = CORNER_BOTTOM_LEFT | CORNER_BOTTOM_RIGHT
ALL_CORNERS = TOP_CORNERS | BOTTOM_CORNERS

# Text names accepted by parse_corners(), both single corners and unions
CORNER_NAMES = {
    "top-left": CORNER_TOP_LEFT,
    "tl": CORNER_TOP_LEFT,
    "top-right": CORNER_TOP_RIGHT,
    "tr": CORNER_TOP_RIGHT,
    "bottom-left": CORNER_BOTTOM_LEFT,
    "bl": CORNER_BOTTOM_LEFT,
    "bottom-right": CORNER_BOTTOM_RIGHT,
    "br": CORNER_BOTTOM_RIGHT,
    "top": TOP_CORNERS,
    "bottom": BOTTOM_CORNERS,
    "all": ALL_CORNERS,
    "none": NO_CORNERS,
}

# Corner geometry tuning
SMOOTHING = 100                             # control point smoothing; 100 puts the handle on the rect corner
RADIUS_PADDING = 4.0                        # added to the requested (or fallback) corner radius
RADIUS_SCALE = 2.5                          # padded radius -> distance of connection points from the corner

# Nudge applied to the lower left connection point when the glitch fix is
# requested. Empirical value for a seam seen while bounds animate; not
# derived from the geometry.
GLITCH_FIX_EPSILON = 0.01

# Path cache sizing
DEFAULT_CACHE_ENTRIES = 512

# Path cache kinds
KIND_OUTLINE = "outline"
KIND_BORDER = "border"


def parse_corners(spec: str) -> int:
    """Build a corner bitmask from a comma separated list of names.

    Accepts single corners (``top-left``/``tl`` ...) and the unions
    ``top``, ``bottom``, ``all`` and ``none``; names are case-insensitive.

    Raises:
        ValueError: If a name is not recognised or no name is given.
    """
    corners = NO_CORNERS
    names = [part.strip().lower() for part in spec.split(",") if part.strip()]
    if not names:
        raise ValueError("Empty corner specification")
    for name in names:
        if name not in CORNER_NAMES:
            raise ValueError(f"Unknown corner: '{name}'")
        corners |= CORNER_NAMES[name]
    return corners


def corner_key(corners: int) -> str:
    """Return a four character flag string in top-left, top-right,
    bottom-left, bottom-right order, e.g. ``"1100"`` for the top pair."""
    return "".join(
        "1" if corners & flag else "0"
        for flag in (CORNER_TOP_LEFT, CORNER_TOP_RIGHT, CORNER_BOTTOM_LEFT, CORNER_BOTTOM_RIGHT)
    )
