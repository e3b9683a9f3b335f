"""Canonical error envelope for floorforge failures.

Standardized structure:
{
  "error": {
    "code": "string",
    "message": "string",
    "details": {}
  }
}

Codes are dotted, ``<domain>.<reason>`` (e.g. ``floorplan.schema_invalid``).
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Canonical error detail structure."""
    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class ErrorEnvelope(BaseModel):
    """Top-level error envelope handed to collaborators."""
    error: ErrorDetail


def build_error_envelope(
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> ErrorEnvelope:
    """Construct an ErrorEnvelope (without raising).

    Args:
        code: Machine-readable error code (e.g., "floorplan.export_blocked")
        message: Human-readable error message
        details: Additional context dict

    Returns:
        ErrorEnvelope wrapping the detail
    """
    error_detail = ErrorDetail(
        code=code,
        message=message,
        details=details or {},
    )
    return ErrorEnvelope(error=error_detail)
