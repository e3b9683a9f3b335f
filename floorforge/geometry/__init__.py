"""FloorForge Geometry - renderable shapes derived from IR entities."""

from floorforge.geometry.models import (
    Centerline,
    OpeningGeometry,
    OpeningRectangle,
    Polygon,
    Vec2,
    WallGeometry,
)
from floorforge.geometry.openings import (
    UnresolvedWallError,
    derive_opening_geometry,
    derive_openings_geometry,
)
from floorforge.geometry.rooms import Room, detect_rooms
from floorforge.geometry.walls import derive_wall_geometry, derive_walls_geometry

__all__ = [
    "Centerline",
    "OpeningGeometry",
    "OpeningRectangle",
    "Polygon",
    "Vec2",
    "WallGeometry",
    "UnresolvedWallError",
    "derive_opening_geometry",
    "derive_openings_geometry",
    "Room",
    "detect_rooms",
    "derive_wall_geometry",
    "derive_walls_geometry",
]
