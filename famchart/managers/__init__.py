"""Command history for chart edits."""

from .command_stack import Command, CommandStack
from .commands import CompositeCommand, MoveNodeCommand
from .undo_redo import ChartMetadata, UndoRedoService

__all__ = [
    "Command",
    "CommandStack",
    "CompositeCommand",
    "MoveNodeCommand",
    "ChartMetadata",
    "UndoRedoService",
]
