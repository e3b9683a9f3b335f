"""Editor session state.

Holds the project being edited, the active tool, the selection, drawing
state and placement settings. All project mutations go through the
session's CommandHistory; validation is re-run after each of them.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel

from floorforge.config import runtime_config
from floorforge.editor.history import Command, CommandHistory
from floorforge.geometry.models import Vec2
from floorforge.ir.models import OpeningType, Project
from floorforge.validator.rules import ValidationIssue, validate_project

logger = logging.getLogger(__name__)


class ToolKind(str, Enum):
    SELECT = "select"
    DRAW_WALL = "draw-wall"
    ADD_DOOR = "add-door"
    ADD_WINDOW = "add-window"


class SelectedElement(BaseModel):
    type: Literal["wall", "opening"]
    id: str
    levelIndex: int = 0


def default_opening_width(opening_type: OpeningType) -> int:
    if opening_type == OpeningType.DOOR:
        return runtime_config.get_default_door_width_mm()
    return runtime_config.get_default_window_width_mm()


class EditorState:
    def __init__(self, project: Optional[Project] = None, history: Optional[CommandHistory] = None):
        self.history = history if history is not None else CommandHistory()
        self._init_settings()
        self.project: Optional[Project] = None
        self.issues: List[ValidationIssue] = []
        if project is not None:
            self.set_project(project)

    def _init_settings(self) -> None:
        self.current_tool = ToolKind.SELECT
        self.selected_element: Optional[SelectedElement] = None
        self.drawing_start_point: Optional[Vec2] = None
        self.wall_thickness = runtime_config.get_default_wall_thickness_mm()
        self.opening_width = runtime_config.get_default_door_width_mm()
        self.next_opening_type = OpeningType.DOOR

    # --- Project ---

    def set_project(self, project: Optional[Project]) -> None:
        """Switches the edited project; history of the previous one is dropped."""
        self.project = project
        self.selected_element = None
        self.drawing_start_point = None
        self.history.clear()
        self.revalidate()

    def revalidate(self) -> List[ValidationIssue]:
        self.issues = validate_project(self.project) if self.project is not None else []
        return self.issues

    # --- Commands ---

    def execute(self, cmd: Command) -> None:
        self.history.execute(cmd)
        self._after_change()

    def undo(self) -> bool:
        if not self.history.undo():
            return False
        self._after_change()
        return True

    def redo(self) -> bool:
        if not self.history.redo():
            return False
        self._after_change()
        return True

    def _after_change(self) -> None:
        self.revalidate()
        if self.selected_element is not None and not self._selection_exists(self.selected_element):
            logger.debug(f"Clearing stale selection {self.selected_element.id}")
            self.selected_element = None

    def _selection_exists(self, selected: SelectedElement) -> bool:
        if self.project is None or not 0 <= selected.levelIndex < len(self.project.levels):
            return False
        level = self.project.levels[selected.levelIndex]
        if selected.type == "wall":
            return level.find_wall(selected.id) is not None
        return level.find_opening(selected.id) is not None

    # --- Tools & selection ---

    def set_current_tool(self, tool: ToolKind) -> None:
        self.current_tool = ToolKind(tool)
        self.drawing_start_point = None
        # Selection survives only a switch to the select tool.
        if self.current_tool != ToolKind.SELECT:
            self.selected_element = None

    def select_element(self, element: Optional[SelectedElement]) -> None:
        self.selected_element = element

    def clear_selection(self) -> None:
        self.selected_element = None

    def set_drawing_start_point(self, point: Optional[Vec2]) -> None:
        self.drawing_start_point = point

    # --- Settings ---

    def set_wall_thickness(self, thickness: int) -> None:
        self.wall_thickness = thickness

    def set_opening_width(self, width: int) -> None:
        self.opening_width = width

    def set_next_opening_type(self, opening_type: OpeningType) -> None:
        self.next_opening_type = OpeningType(opening_type)
        self.opening_width = default_opening_width(self.next_opening_type)

    def reset(self) -> None:
        self._init_settings()
        self.project = None
        self.issues = []
        self.history.clear()
