from floorforge.editor.commands import AddWallCommand, RemoveWallCommand, UpdateOpeningCommand
from floorforge.editor.history import CommandHistory
from floorforge.editor.state import EditorState, SelectedElement, ToolKind
from floorforge.floorplan.tests.fixtures import canonical_room
from floorforge.geometry.models import Vec2
from floorforge.ir.models import OpeningType, Point, Wall
from floorforge.ir.schema import create_empty_project


def test_initial_state():
    state = EditorState()
    assert state.project is None
    assert state.issues == []
    assert state.current_tool == ToolKind.SELECT
    assert state.selected_element is None
    assert state.drawing_start_point is None
    assert state.wall_thickness == 200
    assert state.opening_width == 900
    assert state.next_opening_type == OpeningType.DOOR
    assert state.history.state == "empty"


def test_defaults_from_config(monkeypatch):
    monkeypatch.setenv("FLOORFORGE_DEFAULT_WALL_THICKNESS_MM", "250")
    monkeypatch.setenv("FLOORFORGE_DEFAULT_DOOR_WIDTH_MM", "800")
    state = EditorState()
    assert state.wall_thickness == 250
    assert state.opening_width == 800


def test_uses_given_history_even_when_empty():
    history = CommandHistory(max_size=5)
    state = EditorState(history=history)
    assert state.history is history


def test_set_project_validates():
    state = EditorState(create_empty_project("Empty"))
    assert [i.code for i in state.issues] == ["EMPTY_LEVEL"]

    state.set_project(canonical_room())
    assert state.issues == []


def test_set_project_resets_session():
    state = EditorState(canonical_room())
    state.execute(AddWallCommand(Wall(id="w5", a=Point(x=0, y=0), b=Point(x=0, y=900), thicknessMm=200), state.project))
    state.select_element(SelectedElement(type="wall", id="w1"))
    state.set_drawing_start_point(Vec2(x=0, y=0))

    state.set_project(canonical_room())

    assert state.history.can_undo() is False
    assert state.selected_element is None
    assert state.drawing_start_point is None


def test_execute_revalidates():
    state = EditorState(canonical_room())
    state.execute(UpdateOpeningCommand("o1", {"widthMm": 650}, state.project))
    assert [i.code for i in state.issues] == ["DOOR_TOO_NARROW"]

    assert state.undo() is True
    assert state.issues == []

    assert state.redo() is True
    assert [i.code for i in state.issues] == ["DOOR_TOO_NARROW"]


def test_undo_redo_without_history():
    state = EditorState(canonical_room())
    assert state.undo() is False
    assert state.redo() is False


def test_stale_selection_cleared_after_remove():
    state = EditorState(canonical_room())
    state.select_element(SelectedElement(type="wall", id="w2"))
    state.execute(RemoveWallCommand("w2", state.project))

    assert state.selected_element is None
    # o2 now references a missing wall
    assert [i.code for i in state.issues] == ["WALL_NOT_FOUND"]


def test_selection_kept_when_entity_survives():
    state = EditorState(canonical_room())
    selected = SelectedElement(type="opening", id="o1")
    state.select_element(selected)
    state.execute(UpdateOpeningCommand("o1", {"offsetMm": 1000}, state.project))
    assert state.selected_element == selected


def test_set_current_tool():
    state = EditorState(canonical_room())
    state.select_element(SelectedElement(type="wall", id="w1"))
    state.set_drawing_start_point(Vec2(x=10, y=10))

    state.set_current_tool(ToolKind.SELECT)
    assert state.selected_element is not None
    assert state.drawing_start_point is None

    state.set_current_tool("draw-wall")
    assert state.current_tool == ToolKind.DRAW_WALL
    assert state.selected_element is None


def test_clear_selection():
    state = EditorState()
    state.select_element(SelectedElement(type="opening", id="o1"))
    state.clear_selection()
    assert state.selected_element is None


def test_opening_type_switch_resets_width():
    state = EditorState()
    state.set_next_opening_type(OpeningType.WINDOW)
    assert state.opening_width == 1200

    state.set_opening_width(1500)
    assert state.opening_width == 1500

    state.set_next_opening_type("door")
    assert state.next_opening_type == OpeningType.DOOR
    assert state.opening_width == 900


def test_wall_thickness_setting():
    state = EditorState()
    state.set_wall_thickness(300)
    assert state.wall_thickness == 300


def test_reset():
    state = EditorState(canonical_room())
    state.execute(UpdateOpeningCommand("o1", {"offsetMm": 1000}, state.project))
    state.set_current_tool(ToolKind.ADD_WINDOW)
    state.set_wall_thickness(300)

    state.reset()

    assert state.project is None
    assert state.issues == []
    assert state.current_tool == ToolKind.SELECT
    assert state.wall_thickness == 200
    assert len(state.history) == 0
