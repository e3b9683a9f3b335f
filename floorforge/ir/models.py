"""
FloorForge IR Models.

The Intermediate Representation is the single source of truth for floor plan
data; every rendered shape is derived from it on demand.

- All dimensions are integer millimeters.
- Every entity carries an id so commands can address it.
- The IR stores intent ("door on wall w1 at offset 2500"), never geometry.

Field names match the persisted JSON layout one-to-one.
"""

from __future__ import annotations

import re
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, Field, field_validator

_TIMESTAMP_PATTERN = re.compile(r"(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(\.\d+)?Z")


def _millimeters(value: Any) -> Any:
    # JSON does not distinguish 200 from 200.0, so integral floats are accepted.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Input should be a valid integer")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError("Input should be a valid integer, got a number with a fractional part")
        return int(value)
    return value


# Integer millimeters. Bools, strings and fractional numbers are rejected.
Millimeters = Annotated[int, BeforeValidator(_millimeters)]


def _id_format(prefix: str, label: str):
    pattern = re.compile(rf"{prefix}[0-9]+")

    def check(value: str) -> str:
        if not pattern.fullmatch(value):
            raise ValueError(f"{label} ID must be in format {prefix}1, {prefix}2, etc.")
        return value

    return check


ProjectId = Annotated[str, AfterValidator(_id_format("p", "Project"))]
LevelId = Annotated[str, AfterValidator(_id_format("l", "Level"))]
WallId = Annotated[str, AfterValidator(_id_format("w", "Wall"))]
OpeningId = Annotated[str, AfterValidator(_id_format("o", "Opening"))]


class OpeningType(str, Enum):
    """Kind of opening cut into a wall."""
    DOOR = "door"
    WINDOW = "window"


class Point(BaseModel):
    """Coordinate in millimeters. Origin is typically the top-left of the lot."""
    x: Millimeters
    y: Millimeters


class Wall(BaseModel):
    """
    Straight structural segment along the centerline from `a` to `b`.
    """
    id: WallId
    a: Point
    b: Point
    thicknessMm: Millimeters = Field(..., ge=100, le=500)
    heightMm: Millimeters = Field(default=2700, ge=1800, le=4000)

    def length(self) -> float:
        dx = self.b.x - self.a.x
        dy = self.b.y - self.a.y
        return (dx * dx + dy * dy) ** 0.5


class Opening(BaseModel):
    """
    Door or window placed on a wall.

    Occupies the interval [offsetMm, offsetMm + widthMm] measured from the
    wall's `a` endpoint towards `b`.
    """
    id: OpeningId
    wallId: str
    type: OpeningType
    offsetMm: Millimeters = Field(..., ge=0)
    widthMm: Millimeters = Field(..., ge=600, le=3000)
    heightMm: Millimeters = Field(..., ge=600, le=2400)
    sillHeightMm: Millimeters = Field(default=0, ge=0, le=1500)

    @property
    def end_mm(self) -> int:
        return self.offsetMm + self.widthMm


class Level(BaseModel):
    """A single floor. Walls and openings are owned by the level."""
    id: LevelId
    name: str = Field(default="Ground Floor", min_length=1)
    walls: List[Wall]
    openings: List[Opening]

    def find_wall(self, wall_id: str) -> Optional[Wall]:
        return next((w for w in self.walls if w.id == wall_id), None)

    def find_opening(self, opening_id: str) -> Optional[Opening]:
        return next((o for o in self.openings if o.id == opening_id), None)


class Project(BaseModel):
    """Top-level aggregate. Commands mutate it in place."""
    id: ProjectId
    name: str = Field(..., min_length=1)
    units: Literal["mm"]
    levels: List[Level] = Field(..., min_length=1)
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None

    @field_validator("createdAt", "updatedAt")
    @classmethod
    def validate_timestamp(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        match = _TIMESTAMP_PATTERN.fullmatch(value)
        if not match:
            raise ValueError("must be an ISO-8601 UTC datetime (YYYY-MM-DDTHH:MM:SSZ)")
        try:
            # Fraction digits are free-form; only the calendar part needs checking.
            datetime.strptime(match.group(1), "%Y-%m-%dT%H:%M:%S")
        except ValueError as exc:
            raise ValueError(f"invalid datetime: {exc}") from exc
        return value

    def to_document(self) -> Dict[str, Any]:
        """Persisted JSON layout (optional timestamps omitted when unset)."""
        return self.model_dump(mode="json", exclude_none=True)
