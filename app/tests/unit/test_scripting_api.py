"""Tests for the scripting API (app/scripting/)."""

import pytest
from controllers.circuit_controller import CircuitController
from models.component import COMPONENT_TYPES, UnknownKindError
from scripting import Schematic


class TestSchematicCreation:
    def test_empty_schematic(self):
        sch = Schematic()
        assert len(sch) == 0
        assert sch.elements == []
        assert repr(sch) == "Schematic(0 elements)"

    def test_component_types(self):
        assert Schematic.component_types == COMPONENT_TYPES

    def test_wraps_existing_controller(self):
        ctrl = CircuitController()
        sch = Schematic(ctrl)
        sch.place("node", (0, 0))
        assert sch.controller is ctrl
        assert len(ctrl.model) == 1


class TestPlace:
    def test_place_path_component(self):
        sch = Schematic()
        element = sch.place("resistor", (0, 0), (60, 0))
        assert element.position == (0, 0)
        assert (element.width, element.height) == (60, 20)
        assert sch.elements == [element]

    def test_default_end_uses_kind_width(self):
        sch = Schematic()
        element = sch.place("inductor", (40, 20))
        assert element.width == 60

    def test_long_path_component(self):
        element = Schematic().place("wire", (0, 0), (200, 0))
        assert element.width == 200

    def test_place_point_component(self):
        sch = Schematic()
        element = sch.place("ground", (40, 40), (400, 400))
        assert element.position == (40, 40)
        assert (element.width, element.height) == (30, 30)

    def test_positions_snap_like_canvas(self):
        element = Schematic().place("node", (13, 27))
        assert element.position == (20, 20)

    def test_label_and_value(self):
        element = Schematic().place("resistor", (0, 0), label="R1", value="10k")
        assert element.label == "R1"
        assert element.value == "10k"

    def test_placement_leaves_tool_active(self):
        sch = Schematic()
        sch.place("capacitor", (0, 0))
        assert sch.controller.active_tool.kind_id == "capacitor"
        assert sch.controller.placement.preview is None

    def test_unknown_kind(self):
        with pytest.raises(UnknownKindError):
            Schematic().place("transistor", (0, 0))

    def test_unaffected_by_zoomed_view(self):
        sch = Schematic()
        sch.controller.set_zoom(2.5)
        sch.controller.wheel(30, -70)
        element = sch.place("resistor", (20, 40), (140, 40))
        assert element.position == (20, 40)
        assert element.width == 120


class TestRemoveAndClear:
    def test_remove(self):
        sch = Schematic()
        a = sch.place("resistor", (0, 0))
        b = sch.place("ground", (0, 40))
        sch.remove(a)
        assert sch.elements == [b]

    def test_clear(self):
        sch = Schematic()
        sch.place("resistor", (0, 0))
        sch.clear()
        assert len(sch) == 0


class TestExport:
    def test_to_latex(self):
        sch = Schematic()
        sch.place("resistor", (0, 0), (60, 0), label="R1")
        sch.place("ground", (40, 40))
        assert sch.to_latex() == (
            "\\begin{circuitikz}\n"
            "  \\draw (0,0) to[resistor, l=R1] (3,0);\n"
            "  \\draw (2,-2) to[ground] (2,-2);\n"
            "\\end{circuitikz}"
        )

    def test_empty_to_latex(self):
        assert Schematic().to_latex() == "% Empty circuit\n\\begin{circuitikz}\n\\end{circuitikz}"

    def test_save_latex_standalone(self, tmp_path):
        sch = Schematic()
        sch.place("node", (0, 0))
        path = sch.save_latex(tmp_path / "circuit.tex")
        text = path.read_text()
        assert text.startswith("\\documentclass{standalone}")
        assert text.endswith("\\end{document}\n")
        assert not text.endswith("\n\n")

    def test_save_latex_fragment(self, tmp_path):
        path = Schematic().save_latex(str(tmp_path / "fragment.tex"), standalone=False)
        assert path.read_text() == "% Empty circuit\n\\begin{circuitikz}\n\\end{circuitikz}\n"
