"""Align and distribute tools for the current selection.

The controller talks to node geometry only through a PositionAccessor,
so it can run against the real position store or a test double.
"""

import logging
from enum import Enum
from typing import Dict, List, Protocol, Tuple

from famchart.core.metrics import NodeMetrics
from famchart.core.position_store import PositionStore
from famchart.editor.selection import SelectionModel
from famchart.exceptions import require

logger = logging.getLogger(__name__)

# node_id -> target (x, y)
Plan = Dict[str, Tuple[float, float]]


class Alignment(Enum):
    """Edge or center to snap the selection to."""
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @property
    def horizontal(self) -> bool:
        """True when the mode moves nodes along x."""
        return self in (Alignment.LEFT, Alignment.CENTER, Alignment.RIGHT)


class Distribution(Enum):
    """Axis along which to even out spacing."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class PositionAccessor(Protocol):
    """Minimal read/write rectangle interface keyed by node id."""

    def get_x(self, node_id: str) -> float: ...
    def get_y(self, node_id: str) -> float: ...
    def get_width(self, node_id: str) -> float: ...
    def get_height(self, node_id: str) -> float: ...
    def set_x(self, node_id: str, x: float) -> None: ...
    def set_y(self, node_id: str, y: float) -> None: ...


class StorePositionAccessor:
    """PositionAccessor backed by a PositionStore and NodeMetrics.

    Unpositioned ids read as (0, 0) and writes to them are ignored.
    """

    def __init__(self, store: PositionStore, metrics: NodeMetrics):
        self.store = require(store, "store")
        self.metrics = require(metrics, "metrics")

    def get_x(self, node_id: str) -> float:
        pos = self.store.get(node_id)
        return pos.x if pos is not None else 0.0

    def get_y(self, node_id: str) -> float:
        pos = self.store.get(node_id)
        return pos.y if pos is not None else 0.0

    def get_width(self, node_id: str) -> float:
        return self.metrics.width(node_id)

    def get_height(self, node_id: str) -> float:
        return self.metrics.height(node_id)

    def set_x(self, node_id: str, x: float) -> None:
        pos = self.store.get(node_id)
        if pos is not None:
            self.store.set(node_id, x, pos.y)

    def set_y(self, node_id: str, y: float) -> None:
        pos = self.store.get(node_id)
        if pos is not None:
            self.store.set(node_id, pos.x, y)


class AlignDistributeController:
    """Geometric align/distribute over the selected ids.

    ``plan_*`` methods compute target positions without touching the
    accessor; ``align``/``distribute`` compute and apply in one go.
    """

    def __init__(self, selection: SelectionModel, accessor: PositionAccessor):
        self.selection = require(selection, "selection")
        self.accessor = require(accessor, "accessor")

    def _snapshot(self, ids: List[str]) -> Dict[str, Tuple[float, float, float, float]]:
        a = self.accessor
        return {
            i: (a.get_x(i), a.get_y(i), a.get_width(i), a.get_height(i))
            for i in ids
        }

    def plan_align(self, mode: Alignment) -> Plan:
        """Target positions for ``align(mode)``; empty if fewer than 2 selected."""
        require(mode, "mode")
        ids = self.selection.ordered_ids()
        if len(ids) <= 1:
            return {}

        # Bounding box is taken once, before anything moves
        snap = self._snapshot(ids)
        min_x = min(x for x, _, _, _ in snap.values())
        min_y = min(y for _, y, _, _ in snap.values())
        max_x = max(x + w for x, _, w, _ in snap.values())
        max_y = max(y + h for _, y, _, h in snap.values())
        center_x = (min_x + max_x) / 2.0
        center_y = (min_y + max_y) / 2.0

        plan: Plan = {}
        for node_id, (x, y, w, h) in snap.items():
            if mode is Alignment.LEFT:
                x = min_x
            elif mode is Alignment.RIGHT:
                x = max_x - w
            elif mode is Alignment.CENTER:
                x = center_x - w / 2.0
            elif mode is Alignment.TOP:
                y = min_y
            elif mode is Alignment.BOTTOM:
                y = max_y - h
            elif mode is Alignment.MIDDLE:
                y = center_y - h / 2.0
            plan[node_id] = (x, y)
        return plan

    def plan_distribute(self, mode: Distribution) -> Plan:
        """Target positions for ``distribute(mode)``; empty if fewer than 3 selected."""
        require(mode, "mode")
        ids = self.selection.ordered_ids()
        if len(ids) <= 2:
            return {}

        snap = self._snapshot(ids)
        horizontal = mode is Distribution.HORIZONTAL
        axis = 0 if horizontal else 1
        size = 2 if horizontal else 3

        ordered = sorted(ids, key=lambda i: snap[i][axis])
        first, last = snap[ordered[0]], snap[ordered[-1]]
        start = first[axis]
        end = last[axis] + last[size]
        total = sum(snap[i][size] for i in ordered)
        # Negative when the members don't fit; overlap is accepted
        gap = (end - start - total) / (len(ordered) - 1)

        plan: Plan = {}
        cursor = start
        for node_id in ordered:
            x, y, _, _ = snap[node_id]
            plan[node_id] = (cursor, y) if horizontal else (x, cursor)
            cursor += snap[node_id][size] + gap
        return plan

    def _apply(self, plan: Plan, horizontal: bool) -> bool:
        for node_id, (x, y) in plan.items():
            if horizontal:
                self.accessor.set_x(node_id, x)
            else:
                self.accessor.set_y(node_id, y)
        return bool(plan)

    def align(self, mode: Alignment) -> bool:
        """Snap every selected node to the selection's edge or center.

        Returns:
            False when fewer than two nodes are selected
        """
        plan = self.plan_align(mode)
        if plan:
            logger.debug(f"Aligning {len(plan)} nodes: {mode.value}")
        return self._apply(plan, mode.horizontal)

    def distribute(self, mode: Distribution) -> bool:
        """Space selected nodes evenly between the outermost two.

        Returns:
            False when fewer than three nodes are selected
        """
        plan = self.plan_distribute(mode)
        if plan:
            logger.debug(f"Distributing {len(plan)} nodes: {mode.value}")
        return self._apply(plan, mode is Distribution.HORIZONTAL)


__all__ = [
    "Alignment",
    "Distribution",
    "PositionAccessor",
    "StorePositionAccessor",
    "AlignDistributeController",
]
