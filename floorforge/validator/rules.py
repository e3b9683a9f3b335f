"""
FloorForge Validation Engine.

Pure rule functions run after every IR change. Each returns a list of
structured issues (empty list = rule satisfied); none of them raise or
mutate their inputs. `suggestedFix` carries a partial entity (or a
delete action) an agent can apply to repair the plan.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from floorforge.ir.models import Level, Opening, OpeningType, Project, Wall

IssueSeverity = Literal["error", "warning"]

MIN_WALL_LENGTH_MM = 100
SHORT_WALL_WARNING_MM = 500
MIN_DOOR_WIDTH_MM = 700
MIN_DOOR_HEIGHT_MM = 1800
DOOR_SILL_HEIGHT_MM = 0
MIN_WINDOW_SILL_MM = 600


class ValidationIssue(BaseModel):
    """Structured validation issue, shared by the UI and AI self-repair."""
    code: str
    severity: IssueSeverity
    message: str
    entityId: str
    suggestedFix: Optional[Dict[str, Any]] = None


class IssueSummary(BaseModel):
    """Error/warning split for issue-display surfaces."""
    errors: List[ValidationIssue] = Field(default_factory=list)
    warnings: List[ValidationIssue] = Field(default_factory=list)
    blocking: bool = False


def validate_wall_length(wall: Wall) -> List[ValidationIssue]:
    """Walls below 100mm are unsalvageable; below 500mm are suspicious."""
    length = wall.length()

    if length < MIN_WALL_LENGTH_MM:
        return [
            ValidationIssue(
                code="WALL_TOO_SHORT",
                severity="error",
                message=f"Wall {wall.id} length {length:.0f}mm is below minimum {MIN_WALL_LENGTH_MM}mm",
                entityId=wall.id,
                suggestedFix={
                    "action": "delete",
                    "reason": "Wall too short to be structurally valid",
                },
            )
        ]

    if length < SHORT_WALL_WARNING_MM:
        return [
            ValidationIssue(
                code="WALL_UNUSUALLY_SHORT",
                severity="warning",
                message=f"Wall {wall.id} length {length:.0f}mm is unusually short",
                entityId=wall.id,
            )
        ]

    return []


def validate_opening_fits_wall(opening: Opening, walls: List[Wall]) -> List[ValidationIssue]:
    """Opening must reference an existing wall and end within its length.

    The suggested offset uses the floored wall length so it stays an integer.
    """
    wall = next((w for w in walls if w.id == opening.wallId), None)

    if wall is None:
        return [
            ValidationIssue(
                code="WALL_NOT_FOUND",
                severity="error",
                message=f"Opening {opening.id} references non-existent wall {opening.wallId}",
                entityId=opening.id,
                suggestedFix={
                    "action": "delete",
                    "reason": "Wall does not exist",
                },
            )
        ]

    wall_length = wall.length()
    opening_end = opening.end_mm

    if opening_end > wall_length:
        # Negative when the opening is wider than the wall; callers re-validate.
        return [
            ValidationIssue(
                code="OPENING_EXCEEDS_WALL",
                severity="error",
                message=(
                    f"Opening {opening.id} end position {opening_end}mm exceeds "
                    f"wall {wall.id} length {wall_length:.0f}mm"
                ),
                entityId=opening.id,
                suggestedFix={"offsetMm": math.floor(wall_length) - opening.widthMm},
            )
        ]

    return []


def validate_opening_dimensions(opening: Opening) -> List[ValidationIssue]:
    """Door and window dimension rules.

    Door rules are checked in the order width, height, sill and only the
    first one violated is reported.
    """
    if opening.type == OpeningType.DOOR:
        if opening.widthMm < MIN_DOOR_WIDTH_MM:
            return [
                ValidationIssue(
                    code="DOOR_TOO_NARROW",
                    severity="error",
                    message=f"Door {opening.id} width {opening.widthMm}mm is below minimum {MIN_DOOR_WIDTH_MM}mm",
                    entityId=opening.id,
                    suggestedFix={"widthMm": MIN_DOOR_WIDTH_MM},
                )
            ]

        if opening.heightMm < MIN_DOOR_HEIGHT_MM:
            return [
                ValidationIssue(
                    code="DOOR_TOO_SHORT",
                    severity="error",
                    message=f"Door {opening.id} height {opening.heightMm}mm is below minimum {MIN_DOOR_HEIGHT_MM}mm",
                    entityId=opening.id,
                    suggestedFix={"heightMm": MIN_DOOR_HEIGHT_MM},
                )
            ]

        if opening.sillHeightMm != DOOR_SILL_HEIGHT_MM:
            return [
                ValidationIssue(
                    code="DOOR_INVALID_SILL",
                    severity="error",
                    message=(
                        f"Door {opening.id} must have sill height of 0mm "
                        f"(currently {opening.sillHeightMm}mm)"
                    ),
                    entityId=opening.id,
                    suggestedFix={"sillHeightMm": DOOR_SILL_HEIGHT_MM},
                )
            ]

    if opening.type == OpeningType.WINDOW:
        if opening.sillHeightMm < MIN_WINDOW_SILL_MM:
            return [
                ValidationIssue(
                    code="WINDOW_SILL_TOO_LOW",
                    severity="error",
                    message=(
                        f"Window {opening.id} sill height {opening.sillHeightMm}mm "
                        f"is below minimum {MIN_WINDOW_SILL_MM}mm"
                    ),
                    entityId=opening.id,
                    suggestedFix={"sillHeightMm": MIN_WINDOW_SILL_MM},
                )
            ]

    return []


def validate_unique_ids(project: Project) -> List[ValidationIssue]:
    """Ids must be unique within each category (levels, walls, openings)."""
    issues: List[ValidationIssue] = []
    level_ids: set[str] = set()
    wall_ids: set[str] = set()
    opening_ids: set[str] = set()

    for level in project.levels:
        if level.id in level_ids:
            issues.append(
                ValidationIssue(
                    code="DUPLICATE_LEVEL_ID",
                    severity="error",
                    message=f"Duplicate level ID: {level.id}",
                    entityId=level.id,
                )
            )
        level_ids.add(level.id)

        for wall in level.walls:
            if wall.id in wall_ids:
                issues.append(
                    ValidationIssue(
                        code="DUPLICATE_WALL_ID",
                        severity="error",
                        message=f"Duplicate wall ID: {wall.id}",
                        entityId=wall.id,
                    )
                )
            wall_ids.add(wall.id)

        for opening in level.openings:
            if opening.id in opening_ids:
                issues.append(
                    ValidationIssue(
                        code="DUPLICATE_OPENING_ID",
                        severity="error",
                        message=f"Duplicate opening ID: {opening.id}",
                        entityId=opening.id,
                    )
                )
            opening_ids.add(opening.id)

    return issues


def validate_level_has_walls(level: Level) -> List[ValidationIssue]:
    if not level.walls:
        return [
            ValidationIssue(
                code="EMPTY_LEVEL",
                severity="warning",
                message=f"Level {level.id} has no walls",
                entityId=level.id,
            )
        ]
    return []


def validate_openings_no_overlap(level: Level) -> List[ValidationIssue]:
    """Openings sharing a wall must not overlap; touching ends are allowed.

    Only neighbours in offset order are compared: with non-negative widths a
    non-adjacent pair cannot overlap unless an adjacent pair does too.
    """
    issues: List[ValidationIssue] = []

    openings_by_wall: Dict[str, List[Opening]] = {}
    for opening in level.openings:
        openings_by_wall.setdefault(opening.wallId, []).append(opening)

    for wall_id, openings in openings_by_wall.items():
        if len(openings) < 2:
            continue

        ordered = sorted(openings, key=lambda o: o.offsetMm)
        for current, nxt in zip(ordered, ordered[1:]):
            if current.end_mm > nxt.offsetMm:
                issues.append(
                    ValidationIssue(
                        code="OPENINGS_OVERLAP",
                        severity="error",
                        message=f"Openings {current.id} and {nxt.id} overlap on wall {wall_id}",
                        entityId=current.id,
                    )
                )

    return issues


def validate_project(project: Project) -> List[ValidationIssue]:
    """Run every rule over the project.

    Issue order is fixed: unique ids, then per level the empty-level check,
    wall lengths, opening fit and dimensions, and opening overlap.
    Schema validity is assumed (see floorforge.ir.schema).
    """
    issues: List[ValidationIssue] = []

    issues.extend(validate_unique_ids(project))

    for level in project.levels:
        issues.extend(validate_level_has_walls(level))

        for wall in level.walls:
            issues.extend(validate_wall_length(wall))

        for opening in level.openings:
            issues.extend(validate_opening_fits_wall(opening, level.walls))
            issues.extend(validate_opening_dimensions(opening))

        issues.extend(validate_openings_no_overlap(level))

    return issues


def has_errors(issues: List[ValidationIssue]) -> bool:
    return any(issue.severity == "error" for issue in issues)


def get_errors(issues: List[ValidationIssue]) -> List[ValidationIssue]:
    return [issue for issue in issues if issue.severity == "error"]


def get_warnings(issues: List[ValidationIssue]) -> List[ValidationIssue]:
    return [issue for issue in issues if issue.severity == "warning"]


def summarize_issues(issues: List[ValidationIssue]) -> IssueSummary:
    """Errors block save/export; warnings never do."""
    errors = get_errors(issues)
    return IssueSummary(errors=errors, warnings=get_warnings(issues), blocking=bool(errors))
