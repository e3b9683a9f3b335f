"""Floor plan editing commands.

Each command captures, at construction, enough prior state to reverse
itself, and mutates the shared Project in place. Remove/Update/Move
constructors fail fast on unknown ids so a stale reference never reaches the
history.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from floorforge.editor.history import Command
from floorforge.ir.models import Level, Millimeters, Opening, OpeningType, Point, Project, Wall


class EntityNotFoundError(LookupError):
    """A command was built for an entity (or level) that does not exist."""
    pass


# --- Change sets ---

class _ChangeSet(BaseModel):
    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def reject_explicit_none(self):
        cleared = sorted(name for name in self.model_fields_set if getattr(self, name) is None)
        if cleared:
            raise ValueError(f"fields cannot be cleared: {', '.join(cleared)}")
        return self


class WallChanges(_ChangeSet):
    """Fields of a Wall an update may touch. Unset fields are left alone."""

    a: Optional[Point] = None
    b: Optional[Point] = None
    thicknessMm: Optional[Millimeters] = Field(default=None, ge=100, le=500)
    heightMm: Optional[Millimeters] = Field(default=None, ge=1800, le=4000)


class OpeningChanges(_ChangeSet):
    """Fields of an Opening an update may touch. Unset fields are left alone."""

    wallId: Optional[str] = None
    type: Optional[OpeningType] = None
    offsetMm: Optional[Millimeters] = Field(default=None, ge=0)
    widthMm: Optional[Millimeters] = Field(default=None, ge=600, le=3000)
    heightMm: Optional[Millimeters] = Field(default=None, ge=600, le=2400)
    sillHeightMm: Optional[Millimeters] = Field(default=None, ge=0, le=1500)


def _copy_value(value: Any) -> Any:
    # Points are models; copy so history never aliases a live entity.
    return value.model_copy() if isinstance(value, BaseModel) else value


def _changed_fields(changes: BaseModel) -> Dict[str, Any]:
    return {name: getattr(changes, name) for name in changes.model_fields_set}


def _resolve_level(project: Project, level_index: int) -> Level:
    if not 0 <= level_index < len(project.levels):
        raise EntityNotFoundError(f"Level index {level_index} not found")
    return project.levels[level_index]


def _index_of(entities: List[Any], entity_id: str) -> int:
    return next((i for i, e in enumerate(entities) if e.id == entity_id), -1)


def _opening_label(opening: Opening) -> str:
    return "Door" if opening.type == OpeningType.DOOR else "Window"


class LevelCommand(Command):
    """Base for commands addressing one level of a project."""

    def __init__(self, project: Project, level_index: int = 0):
        super().__init__()
        self.project = project
        self.level_index = level_index

    @property
    def level(self) -> Level:
        return self.project.levels[self.level_index]


# --- Add ---

class AddWallCommand(LevelCommand):
    def __init__(self, wall: Wall, project: Project, level_index: int = 0):
        super().__init__(project, level_index)
        self.wall = wall

    def execute(self) -> None:
        self.level.walls.append(self.wall)

    def undo(self) -> None:
        walls = self.level.walls
        index = _index_of(walls, self.wall.id)
        if index != -1:
            del walls[index]

    @property
    def description(self) -> str:
        return f"Add Wall {self.wall.id}"


class AddOpeningCommand(LevelCommand):
    def __init__(self, opening: Opening, project: Project, level_index: int = 0):
        super().__init__(project, level_index)
        self.opening = opening

    def execute(self) -> None:
        self.level.openings.append(self.opening)

    def undo(self) -> None:
        openings = self.level.openings
        index = _index_of(openings, self.opening.id)
        if index != -1:
            del openings[index]

    @property
    def description(self) -> str:
        return f"Add {_opening_label(self.opening)} {self.opening.id}"


# --- Remove ---

class _RemoveCommand(LevelCommand):
    """
    Removes an entity by id; undo re-inserts it at its original index, or
    appends if the list has since shrunk below it. Ordering is best effort
    when other structural edits were interleaved.
    """

    collection = ""
    kind = ""

    def __init__(self, entity_id: str, project: Project, level_index: int = 0):
        super().__init__(project, level_index)
        entities = getattr(_resolve_level(project, level_index), self.collection)
        index = _index_of(entities, entity_id)
        if index == -1:
            raise EntityNotFoundError(f"{self.kind} with id {entity_id} not found")
        self.entity = entities[index]
        self.original_index = index

    def _entities(self) -> List[Any]:
        return getattr(self.level, self.collection)

    def execute(self) -> None:
        entities = self._entities()
        index = _index_of(entities, self.entity.id)
        if index != -1:
            del entities[index]

    def undo(self) -> None:
        entities = self._entities()
        if self.original_index <= len(entities):
            entities.insert(self.original_index, self.entity)
        else:
            entities.append(self.entity)


class RemoveWallCommand(_RemoveCommand):
    """Removes a wall. Openings referencing it are kept (no cascade)."""

    collection = "walls"
    kind = "Wall"

    @property
    def wall(self) -> Wall:
        return self.entity

    @property
    def description(self) -> str:
        return f"Remove Wall {self.entity.id}"


class RemoveOpeningCommand(_RemoveCommand):
    collection = "openings"
    kind = "Opening"

    @property
    def opening(self) -> Opening:
        return self.entity

    @property
    def description(self) -> str:
        return f"Remove {_opening_label(self.entity)} {self.entity.id}"


# --- Update ---

class _UpdateCommand(LevelCommand):
    """
    Shallow-merges a change set into one entity. Only the fields set on the
    change set are snapshotted and restored.
    """

    collection = ""
    kind = ""
    changes_model: type = BaseModel

    def __init__(
        self,
        entity_id: str,
        changes: Union[BaseModel, Dict[str, Any]],
        project: Project,
        level_index: int = 0,
    ):
        super().__init__(project, level_index)
        if not isinstance(changes, self.changes_model):
            # A change set built for another entity kind is re-checked field by field.
            if isinstance(changes, BaseModel):
                changes = changes.model_dump(exclude_unset=True)
            changes = self.changes_model.model_validate(changes)
        self.entity_id = entity_id
        self.changes = changes

        entities = getattr(_resolve_level(project, level_index), self.collection)
        entity = next((e for e in entities if e.id == entity_id), None)
        if entity is None:
            raise EntityNotFoundError(f"{self.kind} {entity_id} not found")

        self.new_values = _changed_fields(changes)
        self.old_values = {name: _copy_value(getattr(entity, name)) for name in self.new_values}

    def _find(self) -> Optional[Any]:
        entities = getattr(self.level, self.collection)
        return next((e for e in entities if e.id == self.entity_id), None)

    def _apply(self, values: Dict[str, Any]) -> None:
        entity = self._find()
        if entity is None:
            return
        for name, value in values.items():
            setattr(entity, name, _copy_value(value))

    def execute(self) -> None:
        self._apply(self.new_values)

    def undo(self) -> None:
        self._apply(self.old_values)


class UpdateWallCommand(_UpdateCommand):
    collection = "walls"
    kind = "Wall"
    changes_model = WallChanges

    @property
    def description(self) -> str:
        return f"Update wall {self.entity_id} properties"


class UpdateOpeningCommand(_UpdateCommand):
    collection = "openings"
    kind = "Opening"
    changes_model = OpeningChanges

    @property
    def description(self) -> str:
        return f"Update opening {self.entity_id} properties"


class MoveOpeningCommand(UpdateOpeningCommand):
    """Slides an opening along its wall by changing offsetMm only."""

    def __init__(self, opening_id: str, new_offset: int, project: Project, level_index: int = 0):
        super().__init__(opening_id, OpeningChanges(offsetMm=new_offset), project, level_index)
        self.new_offset = new_offset
        self.old_offset = self.old_values["offsetMm"]

    @property
    def description(self) -> str:
        return f"Move opening {self.entity_id} to offset {self.new_offset}mm"
