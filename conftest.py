import logging
import sys
from pathlib import Path

import pytest

# Ensure repo root on sys.path for imports from anywhere in tests tree.
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from floorforge.floorplan import service as floorplan_service  # noqa: E402

_CONFIG_ENV_VARS = (
    "FLOORFORGE_HISTORY_MAX_SIZE",
    "FLOORFORGE_GRID_SIZE_MM",
    "FLOORFORGE_DEFAULT_WALL_THICKNESS_MM",
    "FLOORFORGE_DEFAULT_DOOR_WIDTH_MM",
    "FLOORFORGE_DEFAULT_WINDOW_WIDTH_MM",
    "FLOORFORGE_PICK_TOLERANCE_MM",
)


@pytest.fixture(autouse=True)
def isolated_runtime(monkeypatch):
    """Default config and a fresh floor plan service for every test."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    floorplan_service.set_floorplan_service(floorplan_service.FloorplanService())
    logging.getLogger("floorforge").setLevel(logging.DEBUG)
    yield
