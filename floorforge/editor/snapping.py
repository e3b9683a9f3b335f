"""Editor Snapping and Measurement Utilities."""
from __future__ import annotations

import math
from typing import Optional, Union

from floorforge.config import runtime_config
from floorforge.geometry.models import Vec2
from floorforge.ir.models import Point

PointLike = Union[Point, Vec2]


def snap_to_grid(pos: PointLike, grid_size: Optional[int] = None) -> Point:
    """Snaps a position to the nearest grid increment (halves round up)."""
    step = grid_size if grid_size is not None else runtime_config.get_grid_size_mm()
    if step <= 0:
        raise ValueError("grid_size must be positive")

    def _snap(val: float) -> int:
        return int(math.floor(val / step + 0.5)) * step

    return Point(x=_snap(pos.x), y=_snap(pos.y))


def distance(p1: PointLike, p2: PointLike) -> float:
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.sqrt(dx * dx + dy * dy)


def point_to_line_distance(point: PointLike, line_start: PointLike, line_end: PointLike) -> float:
    """
    Distance from point to the segment start-end (clamped to the endpoints).
    Used for hit-testing walls.
    """
    cx = line_end.x - line_start.x
    cy = line_end.y - line_start.y
    len_sq = cx * cx + cy * cy

    param = -1.0
    if len_sq != 0:
        param = ((point.x - line_start.x) * cx + (point.y - line_start.y) * cy) / len_sq

    if param < 0:
        xx, yy = line_start.x, line_start.y
    elif param > 1:
        xx, yy = line_end.x, line_end.y
    else:
        xx = line_start.x + param * cx
        yy = line_start.y + param * cy

    return math.hypot(point.x - xx, point.y - yy)


def point_along_line(line_start: PointLike, line_end: PointLike, dist: float) -> Optional[Vec2]:
    """Point `dist` from line_start, or None when outside [0, length]."""
    length = distance(line_start, line_end)
    if dist < 0 or dist > length:
        return None
    if length == 0:
        return Vec2(x=line_start.x, y=line_start.y)

    t = dist / length
    return Vec2(
        x=line_start.x + t * (line_end.x - line_start.x),
        y=line_start.y + t * (line_end.y - line_start.y),
    )


def canvas_to_world(canvas_x: float, canvas_y: float, scale: float, offset: Vec2) -> Vec2:
    """Undo the viewport zoom/pan."""
    return Vec2(x=(canvas_x - offset.x) / scale, y=(canvas_y - offset.y) / scale)


def world_to_canvas(world_x: float, world_y: float, scale: float, offset: Vec2) -> Vec2:
    return Vec2(x=world_x * scale + offset.x, y=world_y * scale + offset.y)
