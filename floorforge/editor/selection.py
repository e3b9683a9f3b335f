"""Editor Selection Utilities."""
from __future__ import annotations

from typing import List, Optional, Tuple

from floorforge.config import runtime_config
from floorforge.editor.snapping import PointLike, distance, point_to_line_distance
from floorforge.geometry.openings import point_along_wall
from floorforge.ir.models import Level


def pick_wall(level: Level, point: PointLike, tolerance: Optional[float] = None) -> Optional[str]:
    """
    Returns the id of the wall whose centerline is nearest to `point`,
    if within tolerance. Ties go to the earlier wall.
    """
    limit = tolerance if tolerance is not None else runtime_config.get_pick_tolerance_mm()

    best: Optional[Tuple[float, str]] = None
    for wall in level.walls:
        d = point_to_line_distance(point, wall.a, wall.b)
        if d <= limit and (best is None or d < best[0]):
            best = (d, wall.id)
    return best[1] if best else None


def pick_opening(level: Level, point: PointLike, tolerance: Optional[float] = None) -> Optional[str]:
    """
    Returns the id of the opening whose centre is nearest to `point`.
    Openings on missing walls cannot be picked.
    """
    limit = tolerance if tolerance is not None else runtime_config.get_pick_tolerance_mm()

    hits: List[Tuple[float, str]] = []
    for opening in level.openings:
        wall = level.find_wall(opening.wallId)
        if wall is None:
            continue
        center = point_along_wall(wall, opening.offsetMm + opening.widthMm / 2)
        d = distance(point, center)
        if d <= limit:
            hits.append((d, opening.id))

    if not hits:
        return None
    # min() keeps the first of equal distances
    return min(hits, key=lambda h: h[0])[1]
