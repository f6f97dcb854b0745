"""Genealogy graph snapshot consumed by the layout engine.

People and family (union) nodes share one id space. Both are
represented as members of a tagged union (``ChartNode``) discriminated
by ``kind``, so layout and hit-testing can branch on the tag instead of
inspecting concrete types.

Edges are never stored explicitly: every spouse and parent-child link is
derived from the family records.
"""

import logging
from typing import Annotated, Dict, Iterable, List, Literal, Optional, Union

import networkx as nx
from pydantic import BaseModel, Field

from famchart.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class Individual(BaseModel):
    """A person node.

    Name and date fields are optional and only feed text-aware sizing.
    """

    kind: Literal["individual"] = "individual"
    id: str = Field(..., min_length=1, description="Node identifier")
    first_name: Optional[str] = Field(default=None, description="Given name(s)")
    last_name: Optional[str] = Field(default=None, description="Family name")
    birth_date: Optional[str] = Field(default=None, description="Free-form birth date")
    death_date: Optional[str] = Field(default=None, description="Free-form death date")


class FamilyUnion(BaseModel):
    """A marriage/partnership node linking two spouses and their children.

    Attributes:
        id: Node identifier
        spouse_a_id: First spouse (placed left of the family node)
        spouse_b_id: Second spouse (placed right of the family node)
        child_ids: Ordered children of this union
    """

    kind: Literal["family"] = "family"
    id: str = Field(..., min_length=1, description="Node identifier")
    spouse_a_id: Optional[str] = Field(default=None, description="First spouse id")
    spouse_b_id: Optional[str] = Field(default=None, description="Second spouse id")
    child_ids: List[str] = Field(default_factory=list, description="Ordered child ids")

    @property
    def spouse_ids(self) -> List[str]:
        """Spouse ids that are set, in A, B order."""
        return [s for s in (self.spouse_a_id, self.spouse_b_id) if s is not None]

    @property
    def has_both_spouses(self) -> bool:
        return self.spouse_a_id is not None and self.spouse_b_id is not None


# A family record is the union node itself; the alias keeps call sites readable.
FamilyRecord = FamilyUnion

ChartNode = Annotated[Union[Individual, FamilyUnion], Field(discriminator="kind")]


class GenealogyGraph:
    """Read-only snapshot of individuals and family records.

    Input order is preserved and drives every tie-break in the layout,
    so the same snapshot always produces the same chart.

    Example:
        graph = GenealogyGraph(
            individuals=[Individual(id="I1"), Individual(id="I2"), Individual(id="I3")],
            families=[FamilyRecord(id="F1", spouse_a_id="I1", spouse_b_id="I2", child_ids=["I3"])],
        )
        graph.node("F1").kind  # "family"
    """

    def __init__(
        self,
        individuals: Optional[Iterable[Individual]] = None,
        families: Optional[Iterable[FamilyUnion]] = None,
    ):
        self._individuals: Dict[str, Individual] = {}
        self._families: Dict[str, FamilyUnion] = {}
        # spouse id -> families, record order
        self._spouse_families: Dict[str, List[FamilyUnion]] = {}

        for individual in individuals or []:
            if individual is None:
                raise InvalidArgumentError("individual must not be None")
            if individual.id in self._individuals:
                raise InvalidArgumentError(f"Duplicate individual id: {individual.id}")
            self._individuals[individual.id] = individual

        for family in families or []:
            if family is None:
                raise InvalidArgumentError("family must not be None")
            if family.id in self._families or family.id in self._individuals:
                raise InvalidArgumentError(f"Duplicate node id: {family.id}")
            self._families[family.id] = family
            for spouse_id in family.spouse_ids:
                indexed = self._spouse_families.setdefault(spouse_id, [])
                if not indexed or indexed[-1] is not family:
                    indexed.append(family)

        logger.debug(
            f"Graph snapshot: {len(self._individuals)} individuals, "
            f"{len(self._families)} families"
        )

    @property
    def individuals(self) -> List[Individual]:
        return list(self._individuals.values())

    @property
    def families(self) -> List[FamilyUnion]:
        return list(self._families.values())

    def individual(self, node_id: str) -> Optional[Individual]:
        return self._individuals.get(node_id)

    def family(self, node_id: str) -> Optional[FamilyUnion]:
        return self._families.get(node_id)

    def node(self, node_id: str) -> Optional[Union[Individual, FamilyUnion]]:
        """Resolve any node id to its tagged variant, or None if unknown."""
        return self._individuals.get(node_id) or self._families.get(node_id)

    def is_individual(self, node_id: str) -> bool:
        return node_id in self._individuals

    def is_family(self, node_id: str) -> bool:
        return node_id in self._families

    def families_of(self, person_id: str) -> List[FamilyUnion]:
        """Families in which ``person_id`` is a spouse, in record order."""
        return list(self._spouse_families.get(person_id, ()))

    def child_ids(self) -> set:
        """Ids that appear as a child in at least one family."""
        return {cid for f in self._families.values() for cid in f.child_ids}

    def to_networkx(self) -> nx.DiGraph:
        """Build a directed graph: spouse -> family -> child.

        Nodes carry a ``kind`` attribute ("individual" or "family").
        Ids referenced by families but missing from the individual list
        are added as nodes with ``kind="unknown"``.
        """
        g = nx.DiGraph()
        for individual in self._individuals.values():
            g.add_node(individual.id, kind="individual")
        for family in self._families.values():
            g.add_node(family.id, kind="family")
            for spouse_id in family.spouse_ids:
                if spouse_id not in g:
                    g.add_node(spouse_id, kind="unknown")
                g.add_edge(spouse_id, family.id, relation="spouse")
            for cid in family.child_ids:
                if cid not in g:
                    g.add_node(cid, kind="unknown")
                g.add_edge(family.id, cid, relation="child")
        return g

    def __len__(self) -> int:
        return len(self._individuals) + len(self._families)

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._individuals or node_id in self._families


__all__ = [
    "Individual",
    "FamilyUnion",
    "FamilyRecord",
    "ChartNode",
    "GenealogyGraph",
]
