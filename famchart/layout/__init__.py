"""Layout module for automatic chart positioning.

This module provides:
- Layout engine abstraction (LayoutEngine)
- Pedigree layout: generation rows, spouse grouping, child centering

Layout only writes coordinates; it never changes the genealogy graph.
"""

from famchart.layout.engines.base import LayoutEngine
from famchart.layout.engines.pedigree import PedigreeLayoutEngine

__all__ = [
    "LayoutEngine",
    "PedigreeLayoutEngine",
]
