# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Squircle Types Graphics Module

Path construction elements produced by the outline and border builders.

A Path is a tuple of SubPaths. Both are immutable, so a cached path can
be handed to any number of callers. SubPaths consist of path construction
elements: MoveTo, LineTo and CurveTo. A SubPath may instead hold exactly
one shape primitive (Oval or RoundedRect) when a degenerate shortcut was
taken; operators.arc.expand_primitives() turns those into curves.

There is no ClosePath element. Outline paths end on their first point, and
border paths are deliberately left open.
"""

from dataclasses import dataclass

from .geometry import Point, Rect


# Path Elements
class Path(tuple):
    __slots__ = ()


class SubPath(tuple):
    __slots__ = ()


# SubPath Elements
@dataclass(frozen=True)
class MoveTo:
    p: Point


@dataclass(frozen=True)
class LineTo:
    p: Point


@dataclass(frozen=True)
class CurveTo:
    """Cubic Bézier segment in curveto operand order.

    p1 and p2 are the control handles, p3 is the end point. The squircle
    builders pass the same point for p1 and p2.
    """
    p1: Point
    p2: Point
    p3: Point


# Shape primitives for the degenerate shortcuts
@dataclass(frozen=True)
class Oval:
    """Ellipse inscribed in rect."""
    rect: Rect


@dataclass(frozen=True)
class RoundedRect:
    """Rectangle with uniform circular corners of the given radius."""
    rect: Rect
    radius: float


SEGMENT_TYPES = (LineTo, CurveTo)
PRIMITIVE_TYPES = (Oval, RoundedRect)
