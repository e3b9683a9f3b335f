"""
Opening Geometry Derivation.

Converts IR openings (offset + width on a wall) into cut-out rectangles.
"""

from __future__ import annotations

import math
from typing import Dict, List

from floorforge.geometry.models import OpeningGeometry, OpeningRectangle, Vec2
from floorforge.geometry.walls import perpendicular_offset
from floorforge.ir.models import Opening, Wall


class UnresolvedWallError(LookupError):
    """An opening's wallId does not match any wall handed to the deriver."""

    def __init__(self, opening: Opening):
        self.opening_id = opening.id
        self.wall_id = opening.wallId
        super().__init__(f"Opening {opening.id} references non-existent wall {opening.wallId}")


def point_along_wall(wall: Wall, distance_mm: float) -> Vec2:
    """Point `distance_mm` from wall.a towards wall.b (t = distance / length)."""
    dx = wall.b.x - wall.a.x
    dy = wall.b.y - wall.a.y
    length = math.sqrt(dx * dx + dy * dy)
    if length == 0:
        return Vec2.of(wall.a)
    t = distance_mm / length
    return Vec2(x=wall.a.x + dx * t, y=wall.a.y + dy * t)


def derive_opening_geometry(opening: Opening, wall: Wall) -> OpeningGeometry:
    """
    Rectangle [start+p, end+p, end-p, start-p] where start/end lie on the
    wall centerline and p is the wall's own half-thickness perpendicular.
    """
    start = point_along_wall(wall, opening.offsetMm)
    end = point_along_wall(wall, opening.offsetMm + opening.widthMm)
    center = point_along_wall(wall, opening.offsetMm + opening.widthMm / 2)
    offset = perpendicular_offset(wall.a, wall.b, wall.thicknessMm / 2)

    return OpeningGeometry(
        openingId=opening.id,
        wallId=opening.wallId,
        type=opening.type,
        rectangle=OpeningRectangle(
            topLeft=start.add(offset),
            topRight=end.add(offset),
            bottomRight=end.sub(offset),
            bottomLeft=start.sub(offset),
        ),
        width=opening.widthMm,
        position=center,
    )


def derive_openings_geometry(openings: List[Opening], walls: List[Wall]) -> List[OpeningGeometry]:
    """
    Derive every opening against its wall.

    Raises:
        UnresolvedWallError: if an opening's wall is missing. Callers must
            pass a wall-resolvable subset; the Validator reports the same
            condition as WALL_NOT_FOUND.
    """
    walls_by_id: Dict[str, Wall] = {}
    for wall in walls:
        walls_by_id.setdefault(wall.id, wall)

    geometries = []
    for opening in openings:
        wall = walls_by_id.get(opening.wallId)
        if wall is None:
            raise UnresolvedWallError(opening)
        geometries.append(derive_opening_geometry(opening, wall))
    return geometries
