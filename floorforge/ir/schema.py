"""
IR schema entry points.

Parsing is total: any JSON-compatible value (or JSON document) is accepted as
input, and every mismatch is reported instead of crashing the parser.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from floorforge.common.error_envelope import ErrorEnvelope, build_error_envelope
from floorforge.ir.models import Level, Project


class SchemaIssue(BaseModel):
    """One field-level schema violation."""
    path: List[Union[str, int]] = Field(default_factory=list)
    message: str
    code: str


class SchemaError(ValueError):
    """Raised when data does not conform to the IR schema.

    `issues` enumerates every violation, not just the first one.
    """

    def __init__(self, issues: List[SchemaIssue]):
        self.issues = issues
        super().__init__(self._summary())

    def _summary(self) -> str:
        parts = []
        for issue in self.issues:
            where = ".".join(str(p) for p in issue.path) or "<root>"
            parts.append(f"{where}: {issue.message}")
        return f"{len(self.issues)} schema issue(s): " + "; ".join(parts)

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "SchemaError":
        issues = [
            SchemaIssue(path=list(err["loc"]), message=err["msg"], code=err["type"])
            for err in exc.errors()
        ]
        return cls(issues)

    def to_envelope(self) -> ErrorEnvelope:
        return build_error_envelope(
            code="floorplan.schema_invalid",
            message=str(self),
            details={"issues": [issue.model_dump() for issue in self.issues]},
        )


class ParseResult(BaseModel):
    """Outcome of a non-throwing parse."""
    success: bool
    project: Optional[Project] = None
    errors: List[SchemaIssue] = Field(default_factory=list)


def parse_project(data: Any) -> Project:
    """Validate `data` against the IR schema.

    Raises:
        SchemaError: listing every field violation.
    """
    try:
        return Project.model_validate(data)
    except ValidationError as exc:
        raise SchemaError.from_validation_error(exc) from exc


def parse_project_json(text: Union[str, bytes, bytearray]) -> Project:
    """Validate a JSON document against the IR schema."""
    if not isinstance(text, (str, bytes, bytearray)):
        raise SchemaError(
            [SchemaIssue(path=[], message="JSON document must be str or bytes", code="json_type")]
        )
    try:
        return Project.model_validate_json(text)
    except ValidationError as exc:
        raise SchemaError.from_validation_error(exc) from exc


def safe_parse_project(data: Any) -> ParseResult:
    """Non-throwing variant of parse_project."""
    try:
        project = parse_project(data)
    except SchemaError as exc:
        return ParseResult(success=False, errors=exc.issues)
    return ParseResult(success=True, project=project)


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def create_empty_project(name: str) -> Project:
    """New single-level project with no walls or openings."""
    timestamp = _utc_timestamp()
    return Project(
        id=f"p{int(time.time() * 1000)}",
        name=name,
        units="mm",
        levels=[Level(id="l1", name="Ground Floor", walls=[], openings=[])],
        createdAt=timestamp,
        updatedAt=timestamp,
    )
