"""Tests for ClipboardController."""

import pytest

from famchart.editor.clipboard import ClipboardController
from famchart.editor.selection import SelectionModel


class RecordingAdapter:

    def __init__(self):
        self.removed = []
        self.counter = 0

    def duplicate(self, source_id):
        self.counter += 1
        return f"{source_id}-copy{self.counter}"

    def remove(self, entity_id):
        self.removed.append(entity_id)


@pytest.fixture
def selection():
    selection = SelectionModel()
    selection.add_to_selection("I1")
    selection.add_to_selection("I2")
    return selection


class TestClipboardController:

    def test_copy_keeps_selection(self, selection):
        controller = ClipboardController(selection, RecordingAdapter())
        assert controller.copy() == ["I1", "I2"]
        assert len(selection) == 2
        assert controller.contents == ["I1", "I2"]

    def test_cut_removes_and_clears(self, selection):
        adapter = RecordingAdapter()
        controller = ClipboardController(selection, adapter)
        controller.cut()
        assert adapter.removed == ["I1", "I2"]
        assert len(selection) == 0

    def test_paste_duplicates_each_time(self, selection):
        controller = ClipboardController(selection, RecordingAdapter())
        controller.copy()
        assert controller.paste() == ["I1-copy1", "I2-copy2"]
        assert controller.paste() == ["I1-copy3", "I2-copy4"]

    def test_paste_empty_clipboard(self, selection):
        controller = ClipboardController(selection, RecordingAdapter())
        assert controller.paste() == []
