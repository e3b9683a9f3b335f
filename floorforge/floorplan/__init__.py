"""Floor Plan Engine - import, derive and export façade over the IR core."""

from floorforge.floorplan.service import (
    ExportBlockedError,
    FloorplanService,
    ImportResult,
    LevelGeometry,
    get_floorplan_service,
    set_floorplan_service,
)

__all__ = [
    "ExportBlockedError",
    "FloorplanService",
    "ImportResult",
    "LevelGeometry",
    "get_floorplan_service",
    "set_floorplan_service",
]
