"""
Wall Geometry Derivation.

Converts IR walls (centerline + thickness) into outline polygons for
rendering and export.
"""

from __future__ import annotations

import math
from typing import List

from floorforge.geometry.models import Centerline, Polygon, Vec2, WallGeometry
from floorforge.ir.models import Point, Wall


def perpendicular_offset(start: Point, end: Point, distance: float) -> Vec2:
    """
    Offset of `distance` perpendicular to start->end, on the side of
    (-dy, dx). Zero-length segments yield (0, 0) instead of NaN.

    Wall outlines and opening rectangles must both use this so openings sit
    inside their wall's thickness band.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.sqrt(dx * dx + dy * dy)
    if length == 0:
        return Vec2(x=0, y=0)
    return Vec2(x=-dy / length * distance, y=dx / length * distance)


def derive_wall_geometry(wall: Wall) -> WallGeometry:
    """
    Build the 4-point outline [a+p, b+p, b-p, a-p] where p is the half
    thickness perpendicular.
    """
    offset = perpendicular_offset(wall.a, wall.b, wall.thicknessMm / 2)
    a = Vec2.of(wall.a)
    b = Vec2.of(wall.b)

    return WallGeometry(
        wallId=wall.id,
        outline=Polygon(points=[a.add(offset), b.add(offset), b.sub(offset), a.sub(offset)]),
        centerline=Centerline(start=wall.a.model_copy(), end=wall.b.model_copy()),
        thickness=wall.thicknessMm,
    )


def derive_walls_geometry(walls: List[Wall]) -> List[WallGeometry]:
    return [derive_wall_geometry(wall) for wall in walls]
