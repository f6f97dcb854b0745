"""
CommandStack - linear undo/redo history for chart edits.

Every user action that mutates chart state is wrapped in a Command and
run through the stack. History is strictly linear: executing a new
command discards everything that could have been redone.

Design decisions:
- Commands report whether they changed anything (``execute()`` and
  ``undo()`` return bool) instead of toggling a global dirty flag
- Undo/redo on an empty stack is a silent no-op returning False
- Commands are re-executed on redo; they must be safe to run again
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Tuple

from famchart.exceptions import require

logger = logging.getLogger(__name__)


# ============================================================================
# Command Protocol
# ============================================================================

class Command(ABC):
    """A reversible unit of state mutation."""

    @abstractmethod
    def execute(self) -> bool:
        """Apply the change. Returns True if state changed."""
        ...

    @abstractmethod
    def undo(self) -> bool:
        """Revert the change. Returns True if state changed."""
        ...

    @property
    def name(self) -> str:
        """Human-readable label for menus ("Undo MoveNodeCommand")."""
        return type(self).__name__

    def __repr__(self) -> str:
        return f"<{self.name}>"


# ============================================================================
# Stack
# ============================================================================

class CommandStack:
    """Undo and redo stacks holding executed commands.

    Example:
        stack = CommandStack()
        stack.execute(MoveNodeCommand.capture(store, "I1", 10, 20))
        stack.undo()   # back to the original position
        stack.redo()   # moved again
    """

    def __init__(self):
        self._undo: List[Command] = []
        self._redo: List[Command] = []

    def execute(self, command: Command) -> bool:
        """Run a command and record it for undo.

        Clears the redo history.

        Returns:
            The command's changed flag

        Raises:
            InvalidArgumentError: If command is None
        """
        require(command, "command")
        changed = command.execute()
        self._undo.append(command)
        if self._redo:
            logger.debug(f"Discarding {len(self._redo)} redoable commands")
        self._redo.clear()
        logger.debug(f"Executed {command.name} (undo depth {len(self._undo)})")
        return bool(changed)

    def undo(self) -> bool:
        """Undo the most recent command; no-op if there is none."""
        if not self._undo:
            return False
        command = self._undo.pop()
        changed = command.undo()
        self._redo.append(command)
        logger.debug(f"Undid {command.name}")
        return bool(changed)

    def redo(self) -> bool:
        """Re-execute the most recently undone command; no-op if there is none."""
        if not self._redo:
            return False
        command = self._redo.pop()
        changed = command.execute()
        self._undo.append(command)
        logger.debug(f"Redid {command.name}")
        return bool(changed)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_size(self) -> int:
        return len(self._undo)

    @property
    def redo_size(self) -> int:
        return len(self._redo)

    @property
    def undo_stack(self) -> Tuple[Command, ...]:
        """Undo history, oldest first (top of stack last)."""
        return tuple(self._undo)

    @property
    def redo_stack(self) -> Tuple[Command, ...]:
        """Redo history, oldest undo first (next redo last)."""
        return tuple(self._redo)

    def peek_undo(self):
        """Command that ``undo()`` would revert next, or None."""
        return self._undo[-1] if self._undo else None

    def peek_redo(self):
        """Command that ``redo()`` would apply next, or None."""
        return self._redo[-1] if self._redo else None

    def clear(self) -> None:
        """Forget all history (e.g. after loading a different chart)."""
        self._undo.clear()
        self._redo.clear()


__all__ = ["Command", "CommandStack"]
