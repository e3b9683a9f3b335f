"""
End-to-end editing session over the canonical room:
import -> derive -> edit -> validate -> undo -> export.
"""
import json

from floorforge.editor.commands import (
    AddOpeningCommand,
    MoveOpeningCommand,
    RemoveOpeningCommand,
    RemoveWallCommand,
)
from floorforge.editor.state import EditorState
from floorforge.floorplan.service import get_floorplan_service
from floorforge.floorplan.tests.fixtures import CANONICAL_ROOM_JSON, canonical_room_data
from floorforge.ir.models import Opening


def test_canonical_room_session():
    service = get_floorplan_service()

    # 1. Import
    result = service.import_project_json(CANONICAL_ROOM_JSON)
    assert result.ready is True
    project = result.project

    # 2. Derive
    geometry = service.derive_level(project)
    assert len(geometry.walls) == 4
    assert all(len(w.outline.points) == 4 for w in geometry.walls)
    assert len(geometry.openings) == 2

    # 3. Remove the door, then undo
    state = EditorState(project)
    state.execute(RemoveOpeningCommand("o1", project))
    assert [o.id for o in project.levels[0].openings] == ["o2"]

    state.undo()
    restored = project.levels[0].find_opening("o1")
    assert restored.model_dump() == canonical_room_data()["levels"][0]["openings"][0]
    assert state.issues == []


def test_invalid_edit_blocks_export_until_undone():
    service = get_floorplan_service()
    project = service.import_project(canonical_room_data()).project
    state = EditorState(project)

    # Slide the door past the end of w1.
    state.execute(MoveOpeningCommand("o1", 4500, project))
    assert [i.code for i in state.issues] == ["OPENING_EXCEEDS_WALL"]
    fix = state.issues[0].suggestedFix

    # Apply the suggested fix as a further command.
    state.execute(MoveOpeningCommand("o1", fix["offsetMm"], project))
    assert state.issues == []
    assert json.loads(service.export_project_json(project))["levels"][0]["openings"][0]["offsetMm"] == 4100

    state.undo()
    state.undo()
    assert project.levels[0].find_opening("o1").offsetMm == 2500


def test_overlapping_window_then_wall_removal():
    project = get_floorplan_service().import_project(canonical_room_data()).project
    state = EditorState(project)

    window = Opening(
        id="o3", wallId="w1", type="window", offsetMm=3000, widthMm=1200, heightMm=1200, sillHeightMm=900
    )
    state.execute(AddOpeningCommand(window, project))
    assert [(i.code, i.entityId) for i in state.issues] == [("OPENINGS_OVERLAP", "o1")]

    state.execute(RemoveWallCommand("w1", project))
    codes = [i.code for i in state.issues]
    assert codes.count("WALL_NOT_FOUND") == 2

    # The renderer still gets a level without the orphaned openings.
    geometry = get_floorplan_service().derive_level(project)
    assert [o.openingId for o in geometry.openings] == ["o2"]

    state.undo()
    state.undo()
    assert state.issues == []
    assert project.model_dump() == get_floorplan_service().import_project(canonical_room_data()).project.model_dump()
