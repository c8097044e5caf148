"""Geometry queries over layout elements, backed by Shapely.

Elements store vertex offsets relative to their (x, y) origin; these
helpers resolve them to absolute coordinates and build Shapely shapes for
area and bounding-box queries.  No validity checking happens here.
"""

from __future__ import annotations

import math

from shapely.geometry import LineString, Point, Polygon as ShapelyPolygon, box as shapely_box
from shapely.geometry.base import BaseGeometry

from .models import (
    Element, Cell, Rectangle, Polygon, Path, Placement, Text, Circle,
)


Bounds = tuple[float, float, float, float]


def absolute_points(element: Polygon | Path) -> list[tuple[int, int]]:
    """Vertex offsets shifted by the element origin."""
    return [(element.x + dx, element.y + dy) for dx, dy in element.points]


def _extend(p_from: tuple[float, float], p_to: tuple[float, float], amount: float) -> tuple[float, float]:
    """Move ``p_to`` further along the direction p_from -> p_to."""
    dx = p_to[0] - p_from[0]
    dy = p_to[1] - p_from[1]
    length = math.hypot(dx, dy)
    if length == 0 or amount == 0:
        return p_to
    return p_to[0] + dx / length * amount, p_to[1] + dy / length * amount


def path_centerline(path: Path) -> list[tuple[float, float]]:
    """Absolute centerline with the scheme's end extensions applied."""
    pts: list[tuple[float, float]] = list(absolute_points(path))
    if len(pts) < 2:
        return pts
    start_ext, end_ext = path.extensions
    pts[0] = _extend(pts[1], pts[0], start_ext)
    pts[-1] = _extend(pts[-2], pts[-1], end_ext)
    return pts


def element_shape(element: Element) -> BaseGeometry | None:
    """Shapely geometry covering the element, or None if it has no own area."""
    if isinstance(element, Rectangle):
        return shapely_box(element.x, element.y,
                           element.x + element.width, element.y + element.height)
    if isinstance(element, Polygon):
        pts = absolute_points(element)
        if len(set(pts)) < 3:
            return None
        return ShapelyPolygon(pts)
    if isinstance(element, Path):
        if len(element.points) < 2:
            return None
        line = LineString(path_centerline(element))
        if element.half_width == 0:
            return line
        return line.buffer(element.half_width, cap_style="flat", join_style="mitre")
    if isinstance(element, Circle):
        centre = Point(element.x, element.y)
        return centre.buffer(element.radius) if element.radius else centre
    if isinstance(element, (Placement, Text)):
        return None
    raise TypeError(f"Unknown layout element: {type(element).__name__}")


def element_bounds(element: Element) -> Bounds | None:
    shape = element_shape(element)
    if shape is None or shape.is_empty:
        return None
    return shape.bounds


def cell_bounds(cell: Cell) -> Bounds | None:
    """(min_x, min_y, max_x, max_y) over the cell's own drawable elements.

    Placements are not expanded.
    """
    boxes = [b for b in (element_bounds(e) for e in cell.elements) if b is not None]
    if not boxes:
        return None
    return (
        min(b[0] for b in boxes),
        min(b[1] for b in boxes),
        max(b[2] for b in boxes),
        max(b[3] for b in boxes),
    )
