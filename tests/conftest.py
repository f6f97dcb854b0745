"""Shared fixtures: small genealogy graphs with fixed-size metrics."""

import pytest

from famchart.core.metrics import NodeMetrics
from famchart.layout.engines.pedigree import PedigreeLayoutEngine
from famchart.models.genealogy import FamilyRecord, GenealogyGraph, Individual


@pytest.fixture
def metrics():
    """120 x 60 boxes for every node."""
    return NodeMetrics(default_width=120.0, default_height=60.0)


@pytest.fixture
def engine(metrics):
    """Pedigree engine with explicit spacing (independent of environment)."""
    return PedigreeLayoutEngine(metrics, h_gap=40.0, v_gap=80.0)


@pytest.fixture
def nuclear_family():
    """Two parents (I1, I2) joined by F1 with two children (I3, I4)."""
    return GenealogyGraph(
        individuals=[
            Individual(id="I1", first_name="John", last_name="Smith"),
            Individual(id="I2", first_name="Mary", last_name="Smith"),
            Individual(id="I3", first_name="Anna"),
            Individual(id="I4", first_name="Peter"),
        ],
        families=[
            FamilyRecord(id="F1", spouse_a_id="I1", spouse_b_id="I2", child_ids=["I3", "I4"]),
        ],
    )


@pytest.fixture
def three_generations():
    """Two sets of grandparents whose children marry and have two kids.

    Layers: I1, I2, I8, I9, F1, F3 = 0; I3, I4, I5, F2 = 1; I6, I7 = 2.
    """
    return GenealogyGraph(
        individuals=[Individual(id=f"I{n}") for n in range(1, 10)],
        families=[
            FamilyRecord(id="F1", spouse_a_id="I1", spouse_b_id="I2", child_ids=["I3", "I4"]),
            FamilyRecord(id="F2", spouse_a_id="I3", spouse_b_id="I5", child_ids=["I6", "I7"]),
            FamilyRecord(id="F3", spouse_a_id="I8", spouse_b_id="I9", child_ids=["I5"]),
        ],
    )
