# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Squircle errors.

The path builders have a single failure mode: a derived control or
connection point with a NaN or infinite coordinate. The whole path is
rejected in that case; nothing partial is ever returned.
"""

from __future__ import annotations

from .types import Point


class SquircleError(Exception):
    """Base class for errors raised by the squircle package."""


class NonFinitePointError(SquircleError, ValueError):
    """A derived path point has a non-finite coordinate.

    The computation is deterministic, so retrying with the same inputs will
    fail again. Callers should skip the decoration until the geometry
    changes.
    """

    def __init__(self, point: Point, index: int, kind: str) -> None:
        self.point = point
        self.index = index
        self.kind = kind
        super().__init__(
            f"non-finite {kind} point #{index}: ({point.x}, {point.y})"
        )
