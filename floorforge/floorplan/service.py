"""
Floor Plan Service - entry points for import, render and export collaborators.

Implements:
- Import: schema parse + validation, with a single "ready to edit/export" flag
- Level derivation: wall outlines, opening rectangles and rooms for a renderer
- Export: JSON serialization gated on zero validation errors
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field

from floorforge.common.error_envelope import ErrorEnvelope, build_error_envelope
from floorforge.geometry.models import OpeningGeometry, WallGeometry
from floorforge.geometry.openings import derive_openings_geometry
from floorforge.geometry.rooms import Room, detect_rooms
from floorforge.geometry.walls import derive_walls_geometry
from floorforge.ir.models import Project
from floorforge.ir.schema import SchemaError, SchemaIssue, parse_project_json, safe_parse_project
from floorforge.validator.rules import ValidationIssue, get_errors, has_errors, validate_project

logger = logging.getLogger(__name__)


class ImportResult(BaseModel):
    """Outcome of importing raw project data."""
    success: bool
    project: Optional[Project] = None
    schema_errors: List[SchemaIssue] = Field(default_factory=list)
    issues: List[ValidationIssue] = Field(default_factory=list)
    ready: bool = False


class LevelGeometry(BaseModel):
    """Everything a renderer needs to draw one level."""
    levelId: str
    walls: List[WallGeometry] = Field(default_factory=list)
    openings: List[OpeningGeometry] = Field(default_factory=list)
    rooms: List[Room] = Field(default_factory=list)


class ExportBlockedError(RuntimeError):
    """Export refused because the project has validation errors."""

    def __init__(self, errors: List[ValidationIssue]):
        self.errors = errors
        super().__init__(f"Export blocked by {len(errors)} validation error(s)")

    def to_envelope(self) -> ErrorEnvelope:
        return build_error_envelope(
            code="floorplan.export_blocked",
            message=str(self),
            details={"issues": [issue.model_dump(exclude_none=True) for issue in self.errors]},
        )


class FloorplanService:
    """Parse, validate, derive and export floor plans."""

    def import_project(self, data: Any) -> ImportResult:
        """
        Parse raw (JSON-compatible) data and validate it.

        `ready` is only true with no schema errors and no validation errors;
        warnings do not block.
        """
        parsed = safe_parse_project(data)
        if not parsed.success:
            logger.warning(f"Project import rejected: {len(parsed.errors)} schema issue(s)")
            return ImportResult(success=False, schema_errors=parsed.errors)
        return self._validated(parsed.project)

    def import_project_json(self, text: Union[str, bytes]) -> ImportResult:
        try:
            project = parse_project_json(text)
        except SchemaError as exc:
            logger.warning(f"Project import rejected: {len(exc.issues)} schema issue(s)")
            return ImportResult(success=False, schema_errors=exc.issues)
        return self._validated(project)

    def _validated(self, project: Project) -> ImportResult:
        issues = validate_project(project)
        ready = not has_errors(issues)
        logger.info(f"Imported project {project.id}: {len(issues)} issue(s), ready={ready}")
        return ImportResult(success=True, project=project, issues=issues, ready=ready)

    def derive_level(self, project: Project, level_index: int = 0) -> LevelGeometry:
        """
        Derive renderable geometry for one level.

        Openings whose wall cannot be resolved are left out; the Validator
        reports them as WALL_NOT_FOUND.
        """
        level = project.levels[level_index]
        wall_ids = {wall.id for wall in level.walls}

        resolvable = []
        for opening in level.openings:
            if opening.wallId in wall_ids:
                resolvable.append(opening)
            else:
                logger.warning(f"Skipping opening {opening.id}: wall {opening.wallId} not found")

        return LevelGeometry(
            levelId=level.id,
            walls=derive_walls_geometry(level.walls),
            openings=derive_openings_geometry(resolvable, level.walls),
            rooms=detect_rooms(level.walls),
        )

    def export_project_json(self, project: Project, indent: Optional[int] = 2) -> str:
        """
        Serialize to the persisted JSON layout.

        Raises:
            ExportBlockedError: if validation reports any error.
        """
        errors = get_errors(validate_project(project))
        if errors:
            logger.warning(f"Export of project {project.id} blocked by {len(errors)} error(s)")
            raise ExportBlockedError(errors)

        logger.info(f"Exported project {project.id}")
        return json.dumps(project.to_document(), indent=indent)


# Module-level default service
_default_service: Optional[FloorplanService] = None


def get_floorplan_service() -> FloorplanService:
    """Get default floor plan service."""
    global _default_service
    if _default_service is None:
        _default_service = FloorplanService()
    return _default_service


def set_floorplan_service(service: FloorplanService) -> None:
    """Override default service (for testing)."""
    global _default_service
    _default_service = service
