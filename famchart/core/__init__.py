"""
Core Layer - coordinates and sizing shared by layout and editor.

Modules:
- position_store: id -> (x, y) map filled by layout, mutated by moves
- metrics: node width/height lookups (fixed and text-aware)
- InvalidArgumentError re-exported from famchart.exceptions
"""

from famchart.exceptions import InvalidArgumentError, require
from .metrics import NodeMetrics, TextAwareNodeMetrics
from .position_store import PositionStore

__all__ = [
    "InvalidArgumentError",
    "require",
    "NodeMetrics",
    "TextAwareNodeMetrics",
    "PositionStore",
]
