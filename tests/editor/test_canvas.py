"""Tests for ChartCanvas interaction glue."""

import pytest

from famchart.editor.align import Alignment, Distribution
from famchart.editor.canvas import ChartCanvas, RenderState
from famchart.managers.command_stack import CommandStack
from famchart.models.genealogy import Individual


@pytest.fixture
def dirty():
    return []


@pytest.fixture
def canvas(nuclear_family, engine, metrics, dirty):
    """Nuclear family laid out at I1 (0,0), F1 (80,0), I2 (160,0), I3 (0,140), I4 (160,140)."""
    return ChartCanvas(
        graph=nuclear_family,
        store=engine.layout(nuclear_family),
        metrics=metrics,
        command_stack=CommandStack(),
        on_dirty=lambda: dirty.append(1),
    )


# ============================================================================
# Hit-testing and selection
# ============================================================================

class TestPicking:

    def test_pick_individual(self, canvas):
        assert canvas.pick_at(10, 10) == "I1"
        assert canvas.pick_at(170, 150) == "I4"

    def test_family_node_never_picked(self, canvas):
        # Inside F1's box only
        assert canvas.pick_at(140, 30) is None

    def test_empty_space(self, canvas):
        assert canvas.pick_at(1000, 1000) is None

    def test_pick_respects_zoom_and_pan(self, canvas):
        canvas.set_zoom(2.0)
        canvas.pan_by(10, 10)
        assert canvas.pick_at(350, 310) == "I4"

    def test_no_store(self, nuclear_family):
        assert ChartCanvas(graph=nuclear_family).pick_at(0, 0) is None


class TestSelect:

    def test_select_notifies_listeners(self, canvas):
        seen = []
        canvas.add_selection_listener(seen.append)
        assert canvas.select(Individual(id="I2")) == "I2"
        assert seen == ["I2"]
        assert canvas.selection.selected_ids == frozenset({"I2"})

    def test_reselect_is_silent(self, canvas):
        seen = []
        canvas.add_selection_listener(seen.append)
        canvas.select("I2")
        assert canvas.select("I2") is None
        assert seen == ["I2"]

    def test_failing_listener_does_not_block_others(self, canvas):
        seen = []

        def boom(node_id):
            raise RuntimeError("listener broke")

        canvas.add_selection_listener(boom)
        canvas.add_selection_listener(seen.append)
        canvas.select("I3")
        assert seen == ["I3"]

    def test_remove_listener(self, canvas):
        seen = []
        canvas.add_selection_listener(seen.append)
        canvas.remove_selection_listener(seen.append)
        canvas.select("I1")
        assert seen == []

    def test_marquee_in_screen_space(self, canvas):
        selected = canvas.select_in_screen_rect(-10, 130, 300, 170)
        assert selected == frozenset({"I3", "I4"})

    def test_marquee_after_store_swap(self, canvas, engine, nuclear_family):
        canvas.store = engine.layout(nuclear_family)
        assert canvas.select_in_screen_rect(-10, -10, 10, 10) == frozenset({"I1"})


# ============================================================================
# Moving
# ============================================================================

class TestMoving:

    def test_move_without_history(self, canvas, dirty):
        assert canvas.move_node("I1", 5, 5) is True
        assert canvas.store.get("I1").to_tuple() == (5.0, 5.0)
        assert not canvas.command_stack.can_undo()
        assert dirty == [1]

    def test_move_unknown_node(self, canvas):
        assert canvas.move_node("ghost", 5, 5) is False
        assert canvas.move_node(None, 5, 5) is False
        assert canvas.move_node_with_undo("ghost", 5, 5) is False

    def test_move_with_undo(self, canvas, dirty):
        assert canvas.move_node_with_undo("I2", 300, 0) is True
        assert canvas.store.get("I2").x == 300
        assert canvas.undo() is True
        assert canvas.store.get("I2").to_tuple() == (160.0, 0.0)
        assert len(dirty) == 2
        canvas.redo()
        assert canvas.store.get("I2").x == 300

    def test_move_with_undo_without_stack(self, nuclear_family, engine, metrics):
        canvas = ChartCanvas(nuclear_family, engine.layout(nuclear_family), metrics)
        assert canvas.move_node_with_undo("I1", 1, 1) is True
        assert canvas.store.get("I1").to_tuple() == (1.0, 1.0)
        assert canvas.undo() is False


class TestDrag:

    def test_drag_records_single_step(self, canvas):
        assert canvas.begin_drag(10, 150) == "I3"
        canvas.drag_to(15, 155)
        canvas.drag_to(20, 160)
        assert canvas.store.get("I3").to_tuple() == (10.0, 150.0)
        assert canvas.end_drag() is True
        assert canvas.command_stack.undo_size == 1

        canvas.undo()
        assert canvas.store.get("I3").to_tuple() == (0.0, 140.0)

    def test_drag_moves_whole_selection(self, canvas):
        canvas.select("I3")
        canvas.selection.add_to_selection("I4")
        canvas.begin_drag(10, 150)
        canvas.drag_to(10, 200)
        canvas.end_drag()
        assert canvas.store.get("I3").y == 190
        assert canvas.store.get("I4").y == 190
        canvas.undo()
        assert canvas.store.get("I4").y == 140

    def test_click_without_motion_records_nothing(self, canvas):
        canvas.begin_drag(10, 150)
        assert canvas.end_drag() is False
        assert not canvas.command_stack.can_undo()

    def test_drag_on_empty_space(self, canvas):
        assert canvas.begin_drag(1000, 1000) is None
        assert canvas.drag_to(1010, 1010) is False
        assert canvas.end_drag() is False


# ============================================================================
# Align / distribute through history
# ============================================================================

class TestAlignSelection:

    def test_align_is_undoable(self, canvas):
        canvas.move_node("I4", 160, 200)
        canvas.select("I3")
        canvas.selection.add_to_selection("I4")
        assert canvas.align_selection(Alignment.TOP) is True
        assert canvas.store.get("I4").y == 140
        canvas.undo()
        assert canvas.store.get("I4").y == 200

    def test_align_single_is_noop(self, canvas):
        canvas.select("I3")
        assert canvas.align_selection(Alignment.LEFT) is False
        assert not canvas.command_stack.can_undo()

    def test_distribute_selection(self, canvas):
        canvas.move_node("I2", 600, 0)
        canvas.select("I1")
        canvas.selection.add_to_selection("I2")
        canvas.selection.add_to_selection("I4")
        assert canvas.distribute_selection(Distribution.HORIZONTAL) is True
        # span 0..720, total width 360, gap 180
        assert canvas.store.get("I4").x == pytest.approx(300)
        assert canvas.command_stack.peek_undo().name == "Distribute horizontal"


# ============================================================================
# Viewport and render state
# ============================================================================

class TestRenderState:

    def test_snapshot(self, canvas):
        canvas.select("I1")
        canvas.zoom_in()
        canvas.pan_by(3, 4)
        state = canvas.render_state()
        assert isinstance(state, RenderState)
        assert state.selected_ids == frozenset({"I1"})
        assert state.zoom == pytest.approx(1.1)
        assert (state.pan_x, state.pan_y) == (3, 4)
        assert state.positions["F1"].to_tuple() == (80.0, 0.0)

    def test_zoom_at_delegates(self, canvas):
        assert canvas.zoom_at(50, 50, zoom_in=False) is True
        canvas.zoom_out()
        assert canvas.render_state().zoom < 1.0
