"""Copy/cut/paste of selected nodes.

The controller only manages ids; creating and removing the underlying
genealogy records is delegated to a ClipboardDataAdapter supplied by
the embedding application.
"""

import logging
from typing import List, Protocol

from famchart.editor.selection import SelectionModel
from famchart.exceptions import require

logger = logging.getLogger(__name__)


class ClipboardDataAdapter(Protocol):
    """Creates and removes entities on behalf of the clipboard."""

    def duplicate(self, source_id: str) -> str:
        """Duplicate an entity and return the new entity's id."""
        ...

    def remove(self, entity_id: str) -> None:
        ...


class ClipboardController:
    """Id-level clipboard working on the current selection."""

    def __init__(self, selection: SelectionModel, adapter: ClipboardDataAdapter):
        self.selection = require(selection, "selection")
        self.adapter = require(adapter, "adapter")
        self._clipboard: List[str] = []

    @property
    def contents(self) -> List[str]:
        return list(self._clipboard)

    def copy(self) -> List[str]:
        """Remember the selected ids; returns them."""
        self._clipboard = self.selection.ordered_ids()
        return list(self._clipboard)

    def cut(self) -> List[str]:
        """Remember the selected ids, remove them and clear the selection."""
        self._clipboard = self.selection.ordered_ids()
        for entity_id in self._clipboard:
            self.adapter.remove(entity_id)
        self.selection.clear()
        logger.debug(f"Cut {len(self._clipboard)} entities")
        return list(self._clipboard)

    def paste(self) -> List[str]:
        """Duplicate every remembered id; returns the new ids."""
        new_ids = [self.adapter.duplicate(entity_id) for entity_id in self._clipboard]
        logger.debug(f"Pasted {len(new_ids)} entities")
        return new_ids


__all__ = ["ClipboardDataAdapter", "ClipboardController"]
