"""Position Store Module - single source of truth for node coordinates.

Maps node ids to layout-space top-left positions. The layout engine
fills it once; interactive moves and commands mutate it afterwards.

Positions are never evicted: a node that disappears from the graph keeps
its last position until the store is rebuilt by a fresh layout.

Usage:
    from famchart.core.position_store import PositionStore

    store = PositionStore()
    store.set("I1", 0.0, 0.0)
    store.get("I1")          # NodePosition(x=0.0, y=0.0)
    store.get("missing")     # None
    list(store.all_ids())    # ["I1"]
"""

import logging
from typing import Dict, Iterator, Optional

from famchart.exceptions import InvalidArgumentError
from famchart.models.geometry import NodePosition

logger = logging.getLogger(__name__)


class PositionStore:
    """Mutable id -> (x, y) map with insertion-ordered iteration.

    Not thread-safe; all access is expected on the UI thread.
    """

    def __init__(self):
        """Initialize an empty store."""
        self._positions: Dict[str, NodePosition] = {}

    def set(self, node_id: str, x: float, y: float) -> None:
        """Insert or overwrite a node position.

        Args:
            node_id: Node identifier
            x: Horizontal coordinate
            y: Vertical coordinate

        Raises:
            InvalidArgumentError: If node_id is None
        """
        if node_id is None:
            raise InvalidArgumentError("node_id must not be None")
        # Overwriting keeps the original insertion slot
        self._positions[node_id] = NodePosition(x=x, y=y)
        logger.debug(f"Set position {node_id} -> ({x:.1f}, {y:.1f})")

    def get(self, node_id: str) -> Optional[NodePosition]:
        """Return the position of a node, or None if it was never set."""
        if node_id is None:
            return None
        return self._positions.get(node_id)

    def all_ids(self) -> Iterator[str]:
        """Iterate positioned ids in insertion order.

        Each call returns a fresh iterator over a snapshot of the keys,
        so callers may write to the store while iterating.
        """
        return iter(list(self._positions.keys()))

    def snapshot(self) -> Dict[str, NodePosition]:
        """Return a shallow copy of all positions."""
        return dict(self._positions)

    def __contains__(self, node_id: str) -> bool:
        """Support 'node_id in store' syntax."""
        return node_id in self._positions

    def __len__(self) -> int:
        """Return number of positioned nodes."""
        return len(self._positions)

    def __iter__(self):
        """Iterate over positioned node ids."""
        return self.all_ids()


__all__ = ["PositionStore"]
