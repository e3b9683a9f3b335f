"""FloorForge IR - typed floor plan entities and schema parsing."""

from floorforge.ir.models import (
    Level,
    Opening,
    OpeningType,
    Point,
    Project,
    Wall,
)
from floorforge.ir.schema import (
    ParseResult,
    SchemaError,
    SchemaIssue,
    create_empty_project,
    parse_project,
    parse_project_json,
    safe_parse_project,
)

__all__ = [
    "Level",
    "Opening",
    "OpeningType",
    "Point",
    "Project",
    "Wall",
    "ParseResult",
    "SchemaError",
    "SchemaIssue",
    "create_empty_project",
    "parse_project",
    "parse_project_json",
    "safe_parse_project",
]
