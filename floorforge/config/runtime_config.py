"""Runtime configuration helpers for floorforge engines."""
from __future__ import annotations

import os
from typing import Dict, Optional

DEFAULT_HISTORY_MAX_SIZE = 50
DEFAULT_GRID_SIZE_MM = 1000
DEFAULT_WALL_THICKNESS_MM = 200
DEFAULT_DOOR_WIDTH_MM = 900
DEFAULT_WINDOW_WIDTH_MM = 1200
DEFAULT_PICK_TOLERANCE_MM = 150


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(name, default)


def _get_positive_int(name: str, default: int) -> int:
    """Read a positive integer setting; malformed values fall back to default."""
    raw = _get_env(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_history_max_size() -> int:
    return _get_positive_int("FLOORFORGE_HISTORY_MAX_SIZE", DEFAULT_HISTORY_MAX_SIZE)


def get_grid_size_mm() -> int:
    return _get_positive_int("FLOORFORGE_GRID_SIZE_MM", DEFAULT_GRID_SIZE_MM)


def get_default_wall_thickness_mm() -> int:
    return _get_positive_int("FLOORFORGE_DEFAULT_WALL_THICKNESS_MM", DEFAULT_WALL_THICKNESS_MM)


def get_default_door_width_mm() -> int:
    return _get_positive_int("FLOORFORGE_DEFAULT_DOOR_WIDTH_MM", DEFAULT_DOOR_WIDTH_MM)


def get_default_window_width_mm() -> int:
    return _get_positive_int("FLOORFORGE_DEFAULT_WINDOW_WIDTH_MM", DEFAULT_WINDOW_WIDTH_MM)


def get_pick_tolerance_mm() -> int:
    return _get_positive_int("FLOORFORGE_PICK_TOLERANCE_MM", DEFAULT_PICK_TOLERANCE_MM)


def config_snapshot() -> Dict[str, int]:
    return {
        "history_max_size": get_history_max_size(),
        "grid_size_mm": get_grid_size_mm(),
        "default_wall_thickness_mm": get_default_wall_thickness_mm(),
        "default_door_width_mm": get_default_door_width_mm(),
        "default_window_width_mm": get_default_window_width_mm(),
        "pick_tolerance_mm": get_pick_tolerance_mm(),
    }
