"""Editor History Engine (Undo/Redo)."""
from __future__ import annotations

import abc
import logging
import time
from typing import List, Literal, Optional, Tuple

from floorforge.config import runtime_config

logger = logging.getLogger(__name__)

HistoryState = Literal["empty", "mid-stack", "at-head"]


class Command(abc.ABC):
    """Abstract base class for reversible edits of a Project."""

    def __init__(self):
        self.timestamp = int(time.time() * 1000)

    @abc.abstractmethod
    def execute(self) -> None:
        """Applies the change to the project in place."""
        pass

    @abc.abstractmethod
    def undo(self) -> None:
        """Reverts the change."""
        pass

    def redo(self) -> None:
        """Reapplies the change (default execution)."""
        self.execute()

    @property
    @abc.abstractmethod
    def description(self) -> str:
        """Human readable label, e.g. "Add Wall w3"."""
        pass


class CommandHistory:
    """
    Linear, bounded history with a cursor on the last applied command.

    Not thread safe: one history per open project, driven by a single owner.
    """

    def __init__(self, max_size: Optional[int] = None):
        self.max_size = max_size if max_size is not None else runtime_config.get_history_max_size()
        if self.max_size < 1:
            raise ValueError("max_size must be >= 1")
        self._history: List[Command] = []
        self._current_index = -1

    def execute(self, cmd: Command) -> None:
        """Executes a command and records it, discarding the redo branch."""
        # A raising command never reaches the history.
        cmd.execute()

        del self._history[self._current_index + 1:]
        self._history.append(cmd)

        if len(self._history) > self.max_size:
            evicted = self._history.pop(0)  # Remove oldest
            logger.debug(f"History full ({self.max_size}), evicted '{evicted.description}'")
        else:
            self._current_index += 1
        logger.debug(f"Executed '{cmd.description}' (cursor={self._current_index})")

    def undo(self) -> bool:
        if not self.can_undo():
            return False

        cmd = self._history[self._current_index]
        cmd.undo()
        self._current_index -= 1
        logger.debug(f"Undid '{cmd.description}' (cursor={self._current_index})")
        return True

    def redo(self) -> bool:
        if not self.can_redo():
            return False

        self._current_index += 1
        cmd = self._history[self._current_index]
        cmd.redo()
        logger.debug(f"Redid '{cmd.description}' (cursor={self._current_index})")
        return True

    def can_undo(self) -> bool:
        return self._current_index >= 0

    def can_redo(self) -> bool:
        return self._current_index < len(self._history) - 1

    @property
    def undo_command(self) -> Optional[Command]:
        return self._history[self._current_index] if self.can_undo() else None

    @property
    def redo_command(self) -> Optional[Command]:
        return self._history[self._current_index + 1] if self.can_redo() else None

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def commands(self) -> Tuple[Command, ...]:
        return tuple(self._history)

    @property
    def state(self) -> HistoryState:
        if self._current_index < 0:
            return "empty"
        if self._current_index < len(self._history) - 1:
            return "mid-stack"
        return "at-head"

    def clear(self) -> None:
        self._history.clear()
        self._current_index = -1

    def __len__(self) -> int:
        return len(self._history)
