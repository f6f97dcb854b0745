"""Interactive editing: viewport, selection, align/distribute, clipboard, canvas glue."""

from .align import (
    AlignDistributeController,
    Alignment,
    Distribution,
    PositionAccessor,
    StorePositionAccessor,
)
from .canvas import ChartCanvas, RenderState, StoreBoundsProvider
from .clipboard import ClipboardController, ClipboardDataAdapter
from .selection import BoundsProvider, SelectionModel, resolve_id
from .zoom_pan import ZoomPanState

__all__ = [
    "AlignDistributeController",
    "Alignment",
    "Distribution",
    "PositionAccessor",
    "StorePositionAccessor",
    "ChartCanvas",
    "RenderState",
    "StoreBoundsProvider",
    "ClipboardController",
    "ClipboardDataAdapter",
    "BoundsProvider",
    "SelectionModel",
    "resolve_id",
    "ZoomPanState",
]
