# Squircle - Squircle Path Construction
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Read-only queries over built paths: element enumeration, segment counts,
endpoints, bounding boxes and SVG path data.
"""

import math
from typing import Iterator, List, Tuple

from ..core import error as sq_error
from ..core import types as sq
from .arc import expand_primitives


def path_forall(path: sq.Path) -> Iterator[Tuple[str, List[sq.Point]]]:
    """
    Enumerate path elements in order as (name, points) pairs.

    Names are "moveto", "lineto", "curveto" (points p1, p2, p3), "oval"
    (top left and bottom right of its rect) and "roundedrect" (same).
    """
    for subpath in path:
        for element in subpath:
            if isinstance(element, sq.MoveTo):
                yield "moveto", [element.p]
            elif isinstance(element, sq.LineTo):
                yield "lineto", [element.p]
            elif isinstance(element, sq.CurveTo):
                yield "curveto", [element.p1, element.p2, element.p3]
            elif isinstance(element, sq.Oval):
                r = element.rect
                yield "oval", [sq.Point(r.min_x, r.min_y), sq.Point(r.max_x, r.max_y)]
            elif isinstance(element, sq.RoundedRect):
                r = element.rect
                yield "roundedrect", [sq.Point(r.min_x, r.min_y), sq.Point(r.max_x, r.max_y)]
            else:
                raise sq_error.SquircleError(f"unknown path element {element!r}")


def segment_count(path: sq.Path) -> int:
    """Number of LineTo and CurveTo elements in path."""
    return sum(
        1 for subpath in path for element in subpath
        if isinstance(element, sq.SEGMENT_TYPES)
    )


def curve_count(path: sq.Path) -> int:
    return sum(
        1 for subpath in path for element in subpath
        if isinstance(element, sq.CurveTo)
    )


def is_primitive(path: sq.Path) -> bool:
    """True when path is a single Oval or RoundedRect shortcut."""
    return (
        len(path) == 1 and len(path[0]) == 1
        and isinstance(path[0][0], sq.PRIMITIVE_TYPES)
    )


def _end_point(element) -> sq.Point:
    if isinstance(element, sq.CurveTo):
        return element.p3
    return element.p


def subpath_endpoints(subpath: sq.SubPath) -> Tuple[sq.Point, sq.Point]:
    """First and last point of a subpath of move/line/curve elements."""
    if not subpath or not isinstance(subpath[0], sq.MoveTo):
        raise sq_error.SquircleError("subpath does not start with a moveto")
    return subpath[0].p, _end_point(subpath[-1])


def is_closed(subpath: sq.SubPath, tolerance: float = 1e-9) -> bool:
    """True when the subpath ends where it started."""
    start, end = subpath_endpoints(subpath)
    return abs(start.x - end.x) <= tolerance and abs(start.y - end.y) <= tolerance


def path_bbox(path: sq.Path) -> Tuple[float, float, float, float]:
    """
    Smallest axis aligned box holding every point of the path.

    Control points are included, so for curves this may be larger than the
    painted area. Primitives contribute their rect.

    Returns:
        (llx, lly, urx, ury)

    Raises:
        SquircleError: If the path has no points.
    """
    xs = []
    ys = []
    for _, points in path_forall(path):
        for point in points:
            xs.append(point.x)
            ys.append(point.y)
    if not xs:
        raise sq_error.SquircleError("cannot compute the bounding box of an empty path")
    return min(xs), min(ys), max(xs), max(ys)


def _fmt(value: float) -> str:
    # SVG has no representation for non-finite numbers
    if not math.isfinite(value):
        raise sq_error.SquircleError(f"non-finite coordinate {value}")
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def path_to_svg_data(path: sq.Path) -> str:
    """
    Serialize path to an SVG ``d`` attribute string.

    Shortcut primitives are expanded to curves and closed with ``Z``; the
    squircle subpaths are emitted as is (outlines already end on their
    start point, border chains stay open).
    """
    primitive_subpaths = {
        index for index, subpath in enumerate(path)
        if len(subpath) == 1 and isinstance(subpath[0], sq.PRIMITIVE_TYPES)
    }
    commands = []
    for index, subpath in enumerate(expand_primitives(path)):
        for element in subpath:
            if isinstance(element, sq.MoveTo):
                commands.append(f"M {_fmt(element.p.x)} {_fmt(element.p.y)}")
            elif isinstance(element, sq.LineTo):
                commands.append(f"L {_fmt(element.p.x)} {_fmt(element.p.y)}")
            elif isinstance(element, sq.CurveTo):
                commands.append(
                    f"C {_fmt(element.p1.x)} {_fmt(element.p1.y)} "
                    f"{_fmt(element.p2.x)} {_fmt(element.p2.y)} "
                    f"{_fmt(element.p3.x)} {_fmt(element.p3.y)}"
                )
        if index in primitive_subpaths:
            commands.append("Z")
    return " ".join(commands)
