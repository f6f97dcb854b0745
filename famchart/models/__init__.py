"""Data models for the chart core."""

from .genealogy import (
    ChartNode,
    FamilyRecord,
    FamilyUnion,
    GenealogyGraph,
    Individual,
)
from .geometry import NodePosition, Rect

__all__ = [
    "ChartNode",
    "FamilyRecord",
    "FamilyUnion",
    "GenealogyGraph",
    "Individual",
    "NodePosition",
    "Rect",
]
