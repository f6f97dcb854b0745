"""
UndoRedoService - command history bound to chart metadata.

Thin wrapper over CommandStack that stamps ``modified_at`` on the bound
chart metadata whenever history moves, so "unsaved changes" indicators
can compare timestamps instead of reading a global dirty flag.

Usage:
    from famchart.managers.undo_redo import UndoRedoService, ChartMetadata

    meta = ChartMetadata(chart_id="smith-family")
    service = UndoRedoService()
    service.bind_metadata(meta)
    service.execute(command)
    meta.modified_at  # updated
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from famchart.managers.command_stack import Command, CommandStack

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ChartMetadata:
    """Metadata tracked for an open chart.

    Attributes:
        chart_id: Identifier of the chart being edited
        created_at: When the chart session started
        modified_at: Timestamp of the last executed, undone or redone command
        tags: User-defined key-value tags
    """
    chart_id: str
    created_at: datetime = field(default_factory=_utcnow)
    modified_at: datetime = field(default_factory=_utcnow)
    tags: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert metadata to dictionary for serialization."""
        return {
            "chart_id": self.chart_id,
            "created_at": self.created_at.isoformat(),
            "modified_at": self.modified_at.isoformat(),
            "tags": self.tags,
        }


class UndoRedoService:
    """Command history that keeps chart metadata timestamps current."""

    def __init__(self, stack: Optional[CommandStack] = None):
        self.stack = stack if stack is not None else CommandStack()
        self._metadata: Optional[ChartMetadata] = None

    def bind_metadata(self, metadata: Optional[ChartMetadata]) -> None:
        self._metadata = metadata

    def execute(self, command: Command) -> bool:
        changed = self.stack.execute(command)
        self._touch()
        return changed

    def undo(self) -> bool:
        changed = self.stack.undo()
        self._touch()
        return changed

    def redo(self) -> bool:
        changed = self.stack.redo()
        self._touch()
        return changed

    def can_undo(self) -> bool:
        return self.stack.can_undo()

    def can_redo(self) -> bool:
        return self.stack.can_redo()

    @property
    def undo_count(self) -> int:
        return self.stack.undo_size

    @property
    def redo_count(self) -> int:
        return self.stack.redo_size

    def _touch(self) -> None:
        if self._metadata is not None:
            self._metadata.modified_at = _utcnow()


__all__ = ["ChartMetadata", "UndoRedoService"]
