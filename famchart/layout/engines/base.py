"""Base layout engine protocol.

Defines the interface that all layout engines must implement.
"""

from abc import ABC, abstractmethod

from famchart.core.position_store import PositionStore
from famchart.models.genealogy import GenealogyGraph


class LayoutEngine(ABC):
    """Abstract base class for layout engines.

    Layout engines convert a genealogy snapshot into a fully populated
    position store. Layout is one-shot and synchronous: it runs to
    completion and cannot be interrupted.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Engine name (e.g., 'pedigree')."""
        ...

    @abstractmethod
    def layout(self, graph: GenealogyGraph) -> PositionStore:
        """Compute positions for every reachable node of a graph.

        Args:
            graph: Genealogy snapshot to lay out

        Returns:
            PositionStore with one entry per placed node
        """
        ...
