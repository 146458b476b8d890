# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Squircle Types Geometry Module

Immutable value types describing the input geometry: points, rectangles,
border configuration and the decoration style requested by a caller.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import (
    ALL_CORNERS, CORNER_TOP_LEFT, CORNER_TOP_RIGHT, CORNER_BOTTOM_LEFT, CORNER_BOTTOM_RIGHT
)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass(frozen=True)
class Rect:
    """Axis aligned rectangle given by its origin and size.

    Y grows downward (screen coordinates), so ``min_y`` is the top edge.
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def min_side(self) -> float:
        return min(self.width, self.height)

    def inset_by(self, dx: float, dy: float) -> "Rect":
        """Shrink every side by dx (left/right) and dy (top/bottom).

        Negative values grow the rectangle.
        """
        return Rect(self.x + dx, self.y + dy, self.width - 2 * dx, self.height - 2 * dy)

    def corner(self, flag: int) -> Point:
        """Return the literal corner point for a single corner flag."""
        if flag == CORNER_TOP_LEFT:
            return Point(self.min_x, self.min_y)
        if flag == CORNER_TOP_RIGHT:
            return Point(self.max_x, self.min_y)
        if flag == CORNER_BOTTOM_LEFT:
            return Point(self.min_x, self.max_y)
        if flag == CORNER_BOTTOM_RIGHT:
            return Point(self.max_x, self.max_y)
        raise ValueError(f"Not a single corner flag: {flag}")


@dataclass(frozen=True)
class BorderConfig:
    """Border stroke settings. A width of 0 means no border is stroked."""
    width: float
    color: Tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"Border width must be >= 0, got {self.width}")


@dataclass(frozen=True)
class SquircleStyle:
    """Decoration requested for a rectangle.

    A corner_radius of 0 means "no squircle": decorate() returns None and
    the caller clears any mask or border it applied before.
    """
    corner_radius: float
    corners: int = ALL_CORNERS
    border: Optional[BorderConfig] = None
    fill_color: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    use_height_for_radius: bool = True
    glitch_fix: bool = False

    @property
    def border_width(self) -> float:
        return self.border.width if self.border is not None else 0.0
