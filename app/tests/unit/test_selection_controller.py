"""Tests for SelectionController: hit-testing, multi-select and grid-snapped dragging."""

import pytest
from controllers.selection_controller import SelectionController

from conftest import assert_selection_consistent, make_element


@pytest.fixture
def selection(model):
    return SelectionController(model)


class TestPointerDown:
    def test_hit_selects_and_starts_drag(self, selection, model):
        element = model.add_element(make_element("resistor", 0, 0))
        assert selection.pointer_down(30, 10) is element
        assert model.selected == [element]
        assert selection.dragging

    def test_miss_clears_selection(self, selection, model):
        element = model.add_element(make_element("resistor", 0, 0))
        model.select(element)
        assert selection.pointer_down(500, 500) is None
        assert model.selected == []
        assert not selection.dragging

    def test_hits_topmost(self, overlapping_circuit):
        model, _bottom, top = overlapping_circuit
        selection = SelectionController(model)
        assert selection.pointer_down(50, 10) is top

    def test_modifier_adds_to_selection(self, selection, model):
        a = model.add_element(make_element("resistor", 0, 0))
        b = model.add_element(make_element("resistor", 0, 100))
        selection.pointer_down(10, 10)
        selection.pointer_up()
        selection.pointer_down(10, 110, multi=True)
        assert model.selected == [a, b]
        assert_selection_consistent(model)

    def test_modifier_on_selected_does_not_toggle(self, selection, model):
        a = model.add_element(make_element("resistor", 0, 0))
        selection.pointer_down(10, 10)
        selection.pointer_down(10, 10, multi=True)
        assert model.selected == [a]

    def test_plain_click_replaces_selection(self, selection, model):
        a = model.add_element(make_element("resistor", 0, 0))
        b = model.add_element(make_element("resistor", 0, 100))
        model.select(a)
        selection.pointer_down(10, 110)
        assert model.selected == [b]
        assert not a.selected


class TestDrag:
    def test_drag_keeps_grab_offset_and_snaps(self, selection, model):
        element = model.add_element(make_element("resistor", 0, 0))
        selection.pointer_down(10, 10)
        assert selection.pointer_move(53, 47) is True
        # origin = (53 - 10, 47 - 10) = (43, 37) -> snapped (40, 40)
        assert element.position == (40, 40)

    def test_move_within_same_cell_reports_no_change(self, selection, model):
        model.add_element(make_element("resistor", 0, 0))
        selection.pointer_down(10, 10)
        assert selection.pointer_move(13, 12) is False

    def test_size_unchanged_by_drag(self, selection, model):
        element = model.add_element(make_element("wire", 0, 0, width=120))
        selection.pointer_down(5, 1)
        selection.pointer_move(205, 101)
        assert element.width == 120
        assert element.height == 2

    def test_pointer_up_ends_drag(self, selection, model):
        element = model.add_element(make_element("resistor", 0, 0))
        selection.pointer_down(10, 10)
        selection.pointer_up()
        assert not selection.dragging
        assert selection.pointer_move(200, 200) is False
        assert element.position == (0, 0)

    def test_move_without_drag_is_noop(self, selection):
        assert selection.pointer_move(10, 10) is False

    def test_drag_of_removed_element_is_dropped(self, selection, model):
        element = model.add_element(make_element("resistor", 0, 0))
        selection.pointer_down(10, 10)
        model.remove_element(element)
        assert selection.pointer_move(100, 100) is False
        assert not selection.dragging
        assert element.position == (0, 0)
