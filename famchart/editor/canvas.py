"""Interaction controller tying layout, selection, viewport and history.

``ChartCanvas`` is toolkit-agnostic: a UI layer forwards pointer events
in screen coordinates and reads back a ``RenderState`` to draw. The
selection is handed to renderers and listeners explicitly; nothing is
shared through module-level state.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Set, Tuple

from famchart.core.metrics import NodeMetrics
from famchart.core.position_store import PositionStore
from famchart.editor.align import (
    AlignDistributeController,
    Alignment,
    Distribution,
    Plan,
    StorePositionAccessor,
)
from famchart.editor.selection import SelectionModel, resolve_id
from famchart.editor.zoom_pan import ZoomPanState
from famchart.managers.command_stack import CommandStack
from famchart.managers.commands import CompositeCommand, MoveNodeCommand
from famchart.models.genealogy import GenealogyGraph
from famchart.models.geometry import NodePosition, Rect

logger = logging.getLogger(__name__)


class StoreBoundsProvider:
    """BoundsProvider over a position store: every positioned id is selectable."""

    def __init__(self, store: PositionStore, metrics: NodeMetrics):
        self.store = store
        self.metrics = metrics

    def bounds_of(self, node_id: str) -> Optional[Rect]:
        pos = self.store.get(node_id)
        if pos is None:
            return None
        return Rect(
            x=pos.x,
            y=pos.y,
            width=self.metrics.width(node_id),
            height=self.metrics.height(node_id),
        )

    def all_selectable_ids(self) -> Set[str]:
        return set(self.store.all_ids())


@dataclass(frozen=True)
class RenderState:
    """Everything a renderer needs for one frame."""
    positions: Dict[str, NodePosition]
    selected_ids: FrozenSet[str]
    zoom: float
    pan_x: float
    pan_y: float


@dataclass
class _DragState:
    anchor: Tuple[float, float]                # layout-space pointer at drag start
    origins: Dict[str, Tuple[float, float]] = field(default_factory=dict)
    moved: bool = False


class ChartCanvas:
    """Hit-testing, dragging and editing glue for a laid-out chart.

    Example:
        canvas = ChartCanvas(graph=graph, store=engine.layout(graph),
                             metrics=metrics, command_stack=CommandStack())
        hit = canvas.pick_at(150, 40)
        canvas.select(hit)
        canvas.move_node_with_undo(hit, 200, 40)
        canvas.command_stack.undo()
    """

    def __init__(
        self,
        graph: Optional[GenealogyGraph] = None,
        store: Optional[PositionStore] = None,
        metrics: Optional[NodeMetrics] = None,
        command_stack: Optional[CommandStack] = None,
        on_dirty: Optional[Callable[[], None]] = None,
        zoom_pan: Optional[ZoomPanState] = None,
    ):
        self.zoom_pan = zoom_pan if zoom_pan is not None else ZoomPanState()
        self.selection = SelectionModel()
        self.command_stack = command_stack
        self.on_dirty = on_dirty
        self._graph = graph
        self._store = store
        self._metrics = metrics if metrics is not None else NodeMetrics()
        self._listeners: List[Callable[[str], None]] = []
        self._drag: Optional[_DragState] = None
        self._refresh_bounds_provider()

    # =========================================================================
    # Collaborators
    # =========================================================================

    @property
    def graph(self) -> Optional[GenealogyGraph]:
        return self._graph

    @graph.setter
    def graph(self, value: Optional[GenealogyGraph]) -> None:
        self._graph = value
        self._refresh_bounds_provider()

    @property
    def store(self) -> Optional[PositionStore]:
        return self._store

    @store.setter
    def store(self, value: Optional[PositionStore]) -> None:
        self._store = value
        self._drag = None
        self._refresh_bounds_provider()

    @property
    def metrics(self) -> NodeMetrics:
        return self._metrics

    @metrics.setter
    def metrics(self, value: NodeMetrics) -> None:
        self._metrics = value if value is not None else NodeMetrics()
        self._refresh_bounds_provider()

    def _refresh_bounds_provider(self) -> None:
        if self._store is None:
            return
        self.selection.set_bounds_provider(StoreBoundsProvider(self._store, self._metrics))

    def _mark_dirty(self) -> None:
        if self.on_dirty is None:
            return
        try:
            self.on_dirty()
        except Exception:
            logger.exception("on_dirty callback failed")

    # =========================================================================
    # Hit-testing and selection
    # =========================================================================

    def pick_at(self, screen_x: float, screen_y: float) -> Optional[str]:
        """Return the person node under a screen point, or None.

        Family nodes are connectors, not boxes, and are never picked.
        """
        if self._store is None:
            return None
        lx, ly = self.zoom_pan.to_layout(screen_x, screen_y)
        for node_id in self._store.all_ids():
            if self._graph is not None and self._graph.is_family(node_id):
                continue
            pos = self._store.get(node_id)
            bounds = Rect(
                x=pos.x,
                y=pos.y,
                width=self._metrics.width(node_id),
                height=self._metrics.height(node_id),
            )
            if bounds.contains(lx, ly):
                return node_id
        return None

    def add_selection_listener(self, listener: Callable[[str], None]) -> None:
        if listener is not None:
            self._listeners.append(listener)

    def remove_selection_listener(self, listener: Callable[[str], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def select(self, obj: Any) -> Optional[str]:
        """Select a single node and notify listeners.

        Returns:
            The newly selected id, or None if it was already the only
            selected node (listeners are not re-notified)
        """
        node_id = resolve_id(obj)
        if len(self.selection) == 1 and self.selection.first() == node_id:
            return None
        self.selection.select_single(node_id)
        for listener in list(self._listeners):
            try:
                listener(node_id)
            except Exception:
                logger.exception(f"Selection listener failed for {node_id}")
        return node_id

    def select_in_screen_rect(self, x1: float, y1: float, x2: float, y2: float) -> FrozenSet[str]:
        """Marquee-select using two screen-space corners."""
        lx1, ly1 = self.zoom_pan.to_layout(x1, y1)
        lx2, ly2 = self.zoom_pan.to_layout(x2, y2)
        self.selection.select_in_rectangle(Rect.from_corners(lx1, ly1, lx2, ly2))
        return self.selection.selected_ids

    # =========================================================================
    # Moving nodes
    # =========================================================================

    def move_node(self, node_id: Optional[str], new_x: float, new_y: float) -> bool:
        """Move a node without recording history.

        Returns:
            False (and does nothing) if there is no store or the node
            has no position yet
        """
        if self._store is None or node_id is None:
            return False
        if self._store.get(node_id) is None:
            return False
        self._store.set(node_id, new_x, new_y)
        self._mark_dirty()
        return True

    def move_node_with_undo(self, node_id: Optional[str], new_x: float, new_y: float) -> bool:
        """Move a node through the command stack, if one is attached."""
        if self._store is None or node_id is None:
            return False
        if self._store.get(node_id) is None:
            return False
        if self.command_stack is None:
            return self.move_node(node_id, new_x, new_y)

        command = MoveNodeCommand.capture(
            self._store, node_id, new_x, new_y, on_changed=self._mark_dirty
        )
        self.command_stack.execute(command)
        return True

    def begin_drag(self, screen_x: float, screen_y: float) -> Optional[str]:
        """Start dragging the node under the pointer (and the rest of the selection).

        Clicking an unselected node selects it alone first.

        Returns:
            Id of the grabbed node, or None if nothing is under the pointer
        """
        hit = self.pick_at(screen_x, screen_y)
        if hit is None:
            self._drag = None
            return None
        if not self.selection.is_selected(hit):
            self.select(hit)

        drag = _DragState(anchor=self.zoom_pan.to_layout(screen_x, screen_y))
        for node_id in self.selection.ordered_ids():
            pos = self._store.get(node_id)
            if pos is not None:
                drag.origins[node_id] = (pos.x, pos.y)
        self._drag = drag
        return hit

    def drag_to(self, screen_x: float, screen_y: float) -> bool:
        """Live-move dragged nodes; history is recorded in ``end_drag``."""
        drag = self._drag
        if drag is None:
            return False
        lx, ly = self.zoom_pan.to_layout(screen_x, screen_y)
        dx, dy = lx - drag.anchor[0], ly - drag.anchor[1]
        for node_id, (ox, oy) in drag.origins.items():
            self._store.set(node_id, ox + dx, oy + dy)
        drag.moved = drag.moved or dx != 0 or dy != 0
        self._mark_dirty()
        return True

    def end_drag(self) -> bool:
        """Finish a drag, recording one undoable step for all moved nodes.

        Returns:
            True if any node ended up somewhere other than where it started
        """
        drag, self._drag = self._drag, None
        if drag is None or not drag.moved:
            return False

        moves = []
        for node_id, (ox, oy) in drag.origins.items():
            pos = self._store.get(node_id)
            if pos is not None and (pos.x, pos.y) != (ox, oy):
                moves.append(MoveNodeCommand(self._store, node_id, ox, oy, pos.x, pos.y))
        if not moves:
            return False

        if self.command_stack is not None:
            self.command_stack.execute(
                CompositeCommand(f"Move {len(moves)} node(s)", moves, on_changed=self._mark_dirty)
            )
        return True

    # =========================================================================
    # Align / distribute
    # =========================================================================

    def _align_controller(self) -> Optional[AlignDistributeController]:
        if self._store is None:
            return None
        return AlignDistributeController(
            self.selection, StorePositionAccessor(self._store, self._metrics)
        )

    def _apply_plan(self, label: str, plan: Plan) -> bool:
        moves = []
        for node_id, (x, y) in plan.items():
            pos = self._store.get(node_id)
            if pos is not None:
                moves.append(MoveNodeCommand(self._store, node_id, pos.x, pos.y, x, y))
        if not moves:
            return False

        command = CompositeCommand(label, moves, on_changed=self._mark_dirty)
        if self.command_stack is not None:
            return self.command_stack.execute(command)
        return command.execute()

    def align_selection(self, mode: Alignment) -> bool:
        """Align the selection; undoable when a command stack is attached."""
        controller = self._align_controller()
        if controller is None:
            return False
        return self._apply_plan(f"Align {mode.value}", controller.plan_align(mode))

    def distribute_selection(self, mode: Distribution) -> bool:
        """Distribute the selection; undoable when a command stack is attached."""
        controller = self._align_controller()
        if controller is None:
            return False
        return self._apply_plan(f"Distribute {mode.value}", controller.plan_distribute(mode))

    # =========================================================================
    # History and viewport
    # =========================================================================

    def undo(self) -> bool:
        if self.command_stack is None:
            return False
        return self.command_stack.undo()

    def redo(self) -> bool:
        if self.command_stack is None:
            return False
        return self.command_stack.redo()

    def pan_by(self, dx: float, dy: float) -> None:
        self.zoom_pan.pan_by(dx, dy)

    def zoom_in(self) -> None:
        self.zoom_pan.zoom_in()

    def zoom_out(self) -> None:
        self.zoom_pan.zoom_out()

    def set_zoom(self, level: float) -> None:
        self.zoom_pan.set_zoom(level)

    def zoom_at(self, screen_x: float, screen_y: float, zoom_in: bool) -> bool:
        return self.zoom_pan.zoom_at(screen_x, screen_y, zoom_in)

    def render_state(self) -> RenderState:
        """Snapshot positions, selection and viewport for a renderer."""
        return RenderState(
            positions=self._store.snapshot() if self._store is not None else {},
            selected_ids=self.selection.selected_ids,
            zoom=self.zoom_pan.zoom,
            pan_x=self.zoom_pan.pan_x,
            pan_y=self.zoom_pan.pan_y,
        )


__all__ = ["ChartCanvas", "RenderState", "StoreBoundsProvider"]
