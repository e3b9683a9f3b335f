"""Derived geometry types for FloorForge.

Derived points are floats: they come out of normalization and
interpolation, unlike the integer IR points they are computed from.
"""
from __future__ import annotations

import math
from typing import List

from pydantic import BaseModel, Field

from floorforge.ir.models import OpeningType, Point


class Vec2(BaseModel):
    x: float
    y: float

    @classmethod
    def of(cls, point: Point) -> Vec2:
        return cls(x=point.x, y=point.y)

    def add(self, other: Vec2) -> Vec2:
        return Vec2(x=self.x + other.x, y=self.y + other.y)

    def sub(self, other: Vec2) -> Vec2:
        return Vec2(x=self.x - other.x, y=self.y - other.y)

    def mul(self, scalar: float) -> Vec2:
        return Vec2(x=self.x * scalar, y=self.y * scalar)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)


class Polygon(BaseModel):
    points: List[Vec2] = Field(default_factory=list)


class Centerline(BaseModel):
    start: Point
    end: Point


class WallGeometry(BaseModel):
    """Wall footprint: the centerline widened by the wall thickness."""
    wallId: str
    outline: Polygon
    centerline: Centerline
    thickness: int


class OpeningRectangle(BaseModel):
    topLeft: Vec2
    topRight: Vec2
    bottomRight: Vec2
    bottomLeft: Vec2

    def as_polygon(self) -> Polygon:
        return Polygon(points=[self.topLeft, self.topRight, self.bottomRight, self.bottomLeft])


class OpeningGeometry(BaseModel):
    """Cut-out rectangle of an opening across its wall's thickness band."""
    openingId: str
    wallId: str
    type: OpeningType
    rectangle: OpeningRectangle
    width: int
    position: Vec2  # label/handle anchor at the opening's midpoint
