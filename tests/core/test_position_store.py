"""Tests for PositionStore."""

import pytest

from famchart.core.position_store import PositionStore
from famchart.exceptions import InvalidArgumentError
from famchart.models.geometry import NodePosition


class TestPositionStore:
    """Test upsert, lookup and iteration semantics."""

    def test_get_unset_returns_none(self):
        store = PositionStore()
        assert store.get("missing") is None
        assert store.get(None) is None

    def test_set_then_get(self):
        store = PositionStore()
        store.set("I1", 10.0, 20.0)
        assert store.get("I1") == NodePosition(x=10.0, y=20.0)

    def test_set_overwrites(self):
        store = PositionStore()
        store.set("I1", 10.0, 20.0)
        store.set("I1", -5.0, 7.5)
        assert store.get("I1").to_tuple() == (-5.0, 7.5)
        assert len(store) == 1

    def test_none_id_rejected(self):
        store = PositionStore()
        with pytest.raises(InvalidArgumentError):
            store.set(None, 0.0, 0.0)

    def test_all_ids_insertion_order(self):
        store = PositionStore()
        for node_id in ("b", "a", "c"):
            store.set(node_id, 0.0, 0.0)
        # Overwrite keeps original slot
        store.set("b", 1.0, 1.0)
        assert list(store.all_ids()) == ["b", "a", "c"]

    def test_all_ids_is_restartable(self):
        store = PositionStore()
        store.set("x", 0.0, 0.0)
        store.set("y", 0.0, 0.0)
        assert list(store.all_ids()) == list(store.all_ids()) == ["x", "y"]

    def test_write_while_iterating(self):
        """Iteration works on a snapshot, so moves during iteration are safe."""
        store = PositionStore()
        store.set("x", 0.0, 0.0)
        for node_id in store.all_ids():
            store.set(node_id + "2", 1.0, 1.0)
        assert len(store) == 2

    def test_contains_and_iter(self):
        store = PositionStore()
        store.set("I1", 0.0, 0.0)
        assert "I1" in store
        assert "I2" not in store
        assert list(store) == ["I1"]

    def test_snapshot_is_a_copy(self):
        store = PositionStore()
        store.set("I1", 1.0, 2.0)
        snap = store.snapshot()
        store.set("I2", 3.0, 4.0)
        assert list(snap) == ["I1"]
