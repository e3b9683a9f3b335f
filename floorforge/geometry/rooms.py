"""Room detection helpers.

Rooms are not part of the IR; they are derived from walls for labelling.
"""
from __future__ import annotations

from typing import List, Sequence, Union

from pydantic import BaseModel, Field

from floorforge.geometry.models import Vec2
from floorforge.ir.models import Point, Wall

MM2_PER_M2 = 1_000_000

PointLike = Union[Point, Vec2]


class Room(BaseModel):
    id: str
    label: str
    center: Vec2
    area: float  # square meters
    wallIds: List[str] = Field(default_factory=list)


def calculate_centroid(points: Sequence[PointLike]) -> Vec2:
    """Vertex average of a polygon; (0, 0) for an empty one."""
    if not points:
        return Vec2(x=0, y=0)
    sum_x = sum(p.x for p in points)
    sum_y = sum(p.y for p in points)
    return Vec2(x=sum_x / len(points), y=sum_y / len(points))


def calculate_polygon_area(points: Sequence[PointLike]) -> float:
    """Shoelace formula; result in square millimeters."""
    if len(points) < 3:
        return 0.0

    area = 0.0
    for i, p in enumerate(points):
        q = points[(i + 1) % len(points)]
        area += p.x * q.y
        area -= q.x * p.y
    return abs(area / 2)


def detect_rooms(walls: List[Wall]) -> List[Room]:
    """
    Detect rooms from walls.

    Simplified heuristic: one room spanning the bounding box of every wall
    endpoint. Enclosed-polygon detection would replace this.
    """
    if not walls:
        return []

    xs = [p.x for w in walls for p in (w.a, w.b)]
    ys = [p.y for w in walls for p in (w.a, w.b)]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)

    bounding_box = [
        Vec2(x=min_x, y=min_y),
        Vec2(x=max_x, y=min_y),
        Vec2(x=max_x, y=max_y),
        Vec2(x=min_x, y=max_y),
    ]

    return [
        Room(
            id="room-1",
            label="Room",
            center=calculate_centroid(bounding_box),
            area=calculate_polygon_area(bounding_box) / MM2_PER_M2,
            wallIds=[w.id for w in walls],
        )
    ]


def format_area(area_m2: float) -> str:
    return f"{area_m2:.2f} m²"
