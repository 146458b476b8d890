# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Squircle Types Package - Public API

All value types, path elements and constants are re-exported here to
support the import pattern used across the package::

    from ..core import types as sq

    rect = sq.Rect(0, 0, 100, 100)
    path = sq.Path([sq.SubPath([sq.MoveTo(sq.Point(0, 0))])])

**Internal Module Organization:**
- constants.py: corner flags, tuning constants, parse_corners()
- geometry.py: Point, Rect, BorderConfig, SquircleStyle
- graphics.py: Path, SubPath and the path construction elements
"""

from .constants import *
from .geometry import *
from .graphics import *
