"""FloorForge Editor - commands, undo/redo history and session state."""

from floorforge.editor.commands import (
    AddOpeningCommand,
    AddWallCommand,
    EntityNotFoundError,
    MoveOpeningCommand,
    OpeningChanges,
    RemoveOpeningCommand,
    RemoveWallCommand,
    UpdateOpeningCommand,
    UpdateWallCommand,
    WallChanges,
)
from floorforge.editor.history import Command, CommandHistory
from floorforge.editor.state import EditorState, SelectedElement, ToolKind

__all__ = [
    "AddOpeningCommand",
    "AddWallCommand",
    "EntityNotFoundError",
    "MoveOpeningCommand",
    "OpeningChanges",
    "RemoveOpeningCommand",
    "RemoveWallCommand",
    "UpdateOpeningCommand",
    "UpdateWallCommand",
    "WallChanges",
    "Command",
    "CommandHistory",
    "EditorState",
    "SelectedElement",
    "ToolKind",
]
