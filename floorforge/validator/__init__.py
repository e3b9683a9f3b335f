"""FloorForge Validator - structural and dimensional rules over the IR."""

from floorforge.validator.rules import (
    IssueSummary,
    ValidationIssue,
    get_errors,
    get_warnings,
    has_errors,
    summarize_issues,
    validate_level_has_walls,
    validate_opening_dimensions,
    validate_opening_fits_wall,
    validate_openings_no_overlap,
    validate_project,
    validate_unique_ids,
    validate_wall_length,
)

__all__ = [
    "IssueSummary",
    "ValidationIssue",
    "get_errors",
    "get_warnings",
    "has_errors",
    "summarize_issues",
    "validate_level_has_walls",
    "validate_opening_dimensions",
    "validate_opening_fits_wall",
    "validate_openings_no_overlap",
    "validate_project",
    "validate_unique_ids",
    "validate_wall_length",
]
