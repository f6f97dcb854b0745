"""Selection model: which node ids are currently selected.

Rectangular (marquee) selection needs a BoundsProvider to map ids to
rectangles; until one is registered, it does nothing.
"""

import logging
from typing import Any, FrozenSet, Optional, Protocol, Set

from famchart.exceptions import InvalidArgumentError
from famchart.models.geometry import Rect

logger = logging.getLogger(__name__)


class BoundsProvider(Protocol):
    """Supplies layout-space rectangles for selectable nodes."""

    def bounds_of(self, node_id: str) -> Optional[Rect]:
        ...

    def all_selectable_ids(self) -> Set[str]:
        ...


def resolve_id(obj: Any) -> str:
    """Turn a selection target into a node id.

    Accepts a plain string, an object with a string ``id`` attribute
    (e.g. ``Individual``), or an object exposing ``get_id()``.

    Raises:
        InvalidArgumentError: If obj is None or no string id can be found
    """
    if obj is None:
        raise InvalidArgumentError("Selection target must not be None")
    if isinstance(obj, str):
        return obj

    node_id = getattr(obj, "id", None)
    if isinstance(node_id, str):
        return node_id

    getter = getattr(obj, "get_id", None)
    if callable(getter):
        node_id = getter()
        if isinstance(node_id, str):
            return node_id

    raise InvalidArgumentError(
        f"Selection requires a str id or an object exposing 'id'/'get_id()', "
        f"got {type(obj).__name__}"
    )


class SelectionModel:
    """Tracks selected ids.

    Ids are kept in insertion order so that operations iterating the
    selection (align, distribute, clipboard) are deterministic.
    """

    def __init__(self, bounds_provider: Optional[BoundsProvider] = None):
        self._selected: dict = {}
        self._bounds_provider = bounds_provider

    def set_bounds_provider(self, provider: Optional[BoundsProvider]) -> None:
        self._bounds_provider = provider

    @property
    def bounds_provider(self) -> Optional[BoundsProvider]:
        return self._bounds_provider

    def select_single(self, obj: Any) -> str:
        """Replace the selection with a single id and return it."""
        node_id = resolve_id(obj)
        self._selected = {node_id: None}
        return node_id

    def add_to_selection(self, obj: Any) -> str:
        """Add an id to the selection (no duplicates) and return it."""
        node_id = resolve_id(obj)
        self._selected[node_id] = None
        return node_id

    def select_in_rectangle(self, rect: Optional[Rect]) -> None:
        """Replace the selection with every node whose bounds overlap ``rect``.

        Nodes that merely touch the rectangle's edge are not selected.
        Does nothing when rect is None or no bounds provider is set.
        """
        if rect is None or self._bounds_provider is None:
            return
        provider = self._bounds_provider
        hits = {}
        for node_id in provider.all_selectable_ids():
            bounds = provider.bounds_of(node_id)
            if bounds is not None and rect.intersects(bounds):
                hits[node_id] = None
        self._selected = hits
        logger.debug(f"Marquee selected {len(hits)} nodes")

    def clear(self) -> None:
        self._selected = {}

    def is_selected(self, node_id: str) -> bool:
        return node_id in self._selected

    @property
    def selected_ids(self) -> FrozenSet[str]:
        """Read-only view of the current selection."""
        return frozenset(self._selected)

    def ordered_ids(self) -> list:
        """Selected ids in the order they were selected."""
        return list(self._selected)

    def first(self) -> Optional[str]:
        return next(iter(self._selected), None)

    def __len__(self) -> int:
        return len(self._selected)

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._selected


__all__ = ["BoundsProvider", "SelectionModel", "resolve_id"]
