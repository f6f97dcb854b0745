"""Layered pedigree layout.

Arranges people and family (union) nodes into generation rows:

1. Layering: BFS from root individuals (those who are nobody's child).
   A family shares its spouses' layer; its children sit one layer below.
   The first layer assigned to a node is final.
2. Row placement (``place_layers``): per layer, families are packed left
   to right with spouse A, the family node and spouse B side by side,
   followed by individuals not yet placed.
3. Child centering (``center_children``): each family's children are
   placed as one contiguous block centered under the family node. This
   pass runs after every row is placed and overwrites row positions of
   the same nodes (last writer wins).

No overlap correction is performed; siblings of different families can
overlap in a crowded generation.

Input order is the only tie-breaker: roots are visited in individual
order, a person's families in family-record order, children in the
order listed on the family.
"""

import logging
from collections import deque
from typing import Deque, Dict, List, Optional

import networkx as nx

from famchart.config.settings import get_setting
from famchart.core.metrics import NodeMetrics
from famchart.core.position_store import PositionStore
from famchart.layout.engines.base import LayoutEngine
from famchart.models.genealogy import FamilyUnion, GenealogyGraph

logger = logging.getLogger(__name__)

# Id passed to metrics when asking for the uniform row height
_ROW_PROBE_ID = "__row__"


class PedigreeLayoutEngine(LayoutEngine):
    """Generation-row layout for individuals and family nodes.

    Example:
        engine = PedigreeLayoutEngine(NodeMetrics(), h_gap=40, v_gap=80)
        store = engine.layout(graph)

        # Or step by step, to inspect the intermediate result
        layers = engine.assign_layers(graph)
        store = PositionStore()
        engine.place_layers(graph, layers, store)
        engine.center_children(graph, layers, store)
    """

    def __init__(
        self,
        metrics: Optional[NodeMetrics] = None,
        h_gap: Optional[float] = None,
        v_gap: Optional[float] = None,
    ):
        """Initialize the engine.

        Args:
            metrics: Node width/height provider (fixed defaults if omitted)
            h_gap: Horizontal gap between neighbours in a row
            v_gap: Vertical gap between generation rows
        """
        self.metrics = metrics if metrics is not None else NodeMetrics()
        self.h_gap = h_gap if h_gap is not None else get_setting('h_gap')
        self.v_gap = v_gap if v_gap is not None else get_setting('v_gap')

    @property
    def name(self) -> str:
        return "pedigree"

    def layout(self, graph: GenealogyGraph) -> PositionStore:
        """Run all three stages and return the populated store."""
        store = PositionStore()
        if graph is None or not graph.individuals:
            logger.debug("Empty graph, nothing to lay out")
            return store

        layers = self.assign_layers(graph)
        self.place_layers(graph, layers, store)
        self.center_children(graph, layers, store)

        logger.info(
            f"Pedigree layout placed {len(store)} nodes in "
            f"{len(set(layers.values()))} generations"
        )
        return store

    # =========================================================================
    # Stage 1: layering
    # =========================================================================

    def find_roots(self, graph: GenealogyGraph) -> List[str]:
        """Individuals that are not a child in any family.

        Falls back to every individual when each one has parents
        (e.g. a cyclic or truncated dataset).
        """
        g = graph.to_networkx()
        roots = [
            ind.id for ind in graph.individuals
            if not any(g.nodes[p].get("kind") == "family" for p in g.predecessors(ind.id))
        ]
        if not roots:
            logger.warning("No root individuals found; treating all individuals as roots")
            roots = [ind.id for ind in graph.individuals]
        return roots

    def assign_layers(self, graph: GenealogyGraph) -> Dict[str, int]:
        """Assign a generation number to every reachable node.

        Returns:
            Mapping node_id -> layer, in assignment order. Nodes not
            reachable from a root are absent.
        """
        roots = self.find_roots(graph)
        layers: Dict[str, int] = {r: 0 for r in roots}
        queue: Deque[str] = deque(roots)

        while queue:
            person_id = queue.popleft()
            layer = layers.get(person_id, 0)

            for family in graph.families_of(person_id):
                if family.id not in layers:
                    layers[family.id] = layer

                for spouse_id in family.spouse_ids:
                    if spouse_id not in layers:
                        layers[spouse_id] = layer
                        queue.append(spouse_id)

                for child_id in family.child_ids:
                    if child_id not in layers:
                        layers[child_id] = layer + 1
                        queue.append(child_id)

        unreached = len(graph) - sum(1 for node_id in layers if node_id in graph)
        if unreached:
            components = nx.number_weakly_connected_components(graph.to_networkx())
            logger.warning(
                f"{unreached} nodes unreachable from roots were left unlayered "
                f"({components} connected components in graph)"
            )
        return layers

    # =========================================================================
    # Stage 2: row placement
    # =========================================================================

    def row_y(self, layer: int) -> float:
        """Top y coordinate of a generation row (uniform row height)."""
        return layer * (self.metrics.height(_ROW_PROBE_ID) + self.v_gap)

    def place_layers(
        self,
        graph: GenealogyGraph,
        layers: Dict[str, int],
        store: PositionStore,
    ) -> None:
        """Place every layered node in its generation row."""
        # Bucket once, keeping record order within each row
        family_rows: Dict[int, List[FamilyUnion]] = {}
        for family in graph.families:
            layer = layers.get(family.id)
            if layer is not None:
                family_rows.setdefault(layer, []).append(family)

        individual_rows: Dict[int, List[str]] = {}
        for individual in graph.individuals:
            layer = layers.get(individual.id)
            if layer is not None:
                individual_rows.setdefault(layer, []).append(individual.id)

        for layer in sorted(set(family_rows) | set(individual_rows)):
            y = self.row_y(layer)
            cursor_x = 0.0
            placed = set()

            for family in family_rows.get(layer, []):
                cursor_x = self._place_family(graph, family, y, cursor_x, store, placed)

            for node_id in individual_rows.get(layer, []):
                if node_id not in placed:
                    store.set(node_id, cursor_x, y)
                    placed.add(node_id)
                    cursor_x += self.metrics.width(node_id) + self.h_gap

            logger.debug(f"Layer {layer}: placed {len(placed)} nodes, row width {cursor_x:.1f}")

    def _place_family(
        self,
        graph: GenealogyGraph,
        family: FamilyUnion,
        y: float,
        cursor_x: float,
        store: PositionStore,
        placed: set,
    ) -> float:
        """Place spouse A, family node and spouse B; return the new cursor."""
        a, b = family.spouse_a_id, family.spouse_b_id
        fam_w = self.metrics.width(family.id)

        if a is not None and graph.is_individual(a):
            store.set(a, cursor_x, y)
            placed.add(a)
            cursor_x += self.metrics.width(a) + self.h_gap

        if a is not None and b is not None:
            w_a = self.metrics.width(a)
            pos_a = store.get(a)
            a_x = pos_a.x if pos_a is not None else cursor_x - (w_a + self.h_gap)
            b_x = a_x + w_a + self.h_gap  # provisional left edge of spouse B
            fam_x = (a_x + w_a + b_x) / 2.0 - fam_w / 2.0
        else:
            fam_x = cursor_x
        store.set(family.id, fam_x, y)
        placed.add(family.id)

        if b is not None and graph.is_individual(b):
            b_x = max(cursor_x, fam_x + fam_w / 2.0 + self.h_gap / 2.0)
            store.set(b, b_x, y)
            placed.add(b)
            cursor_x = b_x + self.metrics.width(b) + self.h_gap

        return cursor_x

    # =========================================================================
    # Stage 3: child centering
    # =========================================================================

    def center_children(
        self,
        graph: GenealogyGraph,
        layers: Dict[str, int],
        store: PositionStore,
    ) -> None:
        """Center each family's children under the family node.

        Overwrites any row position a child received in ``place_layers``.
        Running it twice on unchanged input gives the same positions.
        """
        for family in graph.families:
            fam_layer = layers.get(family.id)
            if fam_layer is None or not family.child_ids:
                continue

            pos = store.get(family.id)
            fam_x = pos.x if pos is not None else 0.0
            mid_x = fam_x + self.metrics.width(family.id) / 2.0

            total_w = sum(self.metrics.width(cid) for cid in family.child_ids)
            total_w += self.h_gap * (len(family.child_ids) - 1)

            y = self.row_y(fam_layer + 1)
            x = mid_x - total_w / 2.0
            for child_id in family.child_ids:
                if not graph.is_individual(child_id):
                    continue
                store.set(child_id, x, y)
                x += self.metrics.width(child_id) + self.h_gap


__all__ = ["PedigreeLayoutEngine"]
