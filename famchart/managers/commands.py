"""Concrete commands for interactive chart edits."""

import logging
from typing import Callable, Iterable, List, Optional

from famchart.core.position_store import PositionStore
from famchart.exceptions import InvalidArgumentError, require
from famchart.managers.command_stack import Command

logger = logging.getLogger(__name__)


class MoveNodeCommand(Command):
    """Move one node, remembering where it was.

    The old coordinates are fixed at construction time. ``on_changed``
    runs after every execute/undo; if it raises, the error is logged and
    the move itself still stands.
    """

    def __init__(
        self,
        store: PositionStore,
        node_id: str,
        old_x: float,
        old_y: float,
        new_x: float,
        new_y: float,
        on_changed: Optional[Callable[[], None]] = None,
    ):
        self.store = require(store, "store")
        self.node_id = require(node_id, "node_id")
        self.old_x = old_x
        self.old_y = old_y
        self.new_x = new_x
        self.new_y = new_y
        self.on_changed = on_changed

    @classmethod
    def capture(
        cls,
        store: PositionStore,
        node_id: str,
        new_x: float,
        new_y: float,
        on_changed: Optional[Callable[[], None]] = None,
    ) -> "MoveNodeCommand":
        """Build a move whose old position is read from the store now.

        Raises:
            InvalidArgumentError: If the node has no recorded position
        """
        require(store, "store")
        current = store.get(node_id)
        if current is None:
            raise InvalidArgumentError(f"Node {node_id} has no position to move from")
        return cls(store, node_id, current.x, current.y, new_x, new_y, on_changed)

    def execute(self) -> bool:
        self.store.set(self.node_id, self.new_x, self.new_y)
        self._notify()
        return (self.old_x, self.old_y) != (self.new_x, self.new_y)

    def undo(self) -> bool:
        self.store.set(self.node_id, self.old_x, self.old_y)
        self._notify()
        return (self.old_x, self.old_y) != (self.new_x, self.new_y)

    def _notify(self) -> None:
        if self.on_changed is None:
            return
        try:
            self.on_changed()
        except Exception:
            logger.exception(f"on_changed callback failed for move of {self.node_id}")

    def __repr__(self) -> str:
        return (
            f"<MoveNodeCommand {self.node_id} "
            f"({self.old_x}, {self.old_y}) -> ({self.new_x}, {self.new_y})>"
        )


class CompositeCommand(Command):
    """Group several commands into one undo step.

    Children execute in order and undo in reverse order. ``on_changed``
    fires once per execute/undo, after all children ran.
    """

    def __init__(
        self,
        label: str,
        commands: Iterable[Command],
        on_changed: Optional[Callable[[], None]] = None,
    ):
        self.label = label
        self.commands: List[Command] = list(commands)
        self.on_changed = on_changed

    @property
    def name(self) -> str:
        return self.label

    def execute(self) -> bool:
        changed = False
        for command in self.commands:
            changed = command.execute() or changed
        self._notify()
        return changed

    def undo(self) -> bool:
        changed = False
        for command in reversed(self.commands):
            changed = command.undo() or changed
        self._notify()
        return changed

    def _notify(self) -> None:
        if self.on_changed is None:
            return
        try:
            self.on_changed()
        except Exception:
            logger.exception(f"on_changed callback failed for {self.label}")

    def __len__(self) -> int:
        return len(self.commands)


__all__ = ["MoveNodeCommand", "CompositeCommand"]
