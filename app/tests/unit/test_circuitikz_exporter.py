"""Tests for export/circuitikz_exporter.py: CircuiTikZ markup generation."""

import pytest
from export.circuitikz_exporter import (
    EMPTY_CIRCUIT,
    element_endpoints,
    element_to_latex,
    generate,
)

from conftest import make_element


class TestEmptyCircuit:
    def test_exact_output(self):
        assert generate([]) == "% Empty circuit\n\\begin{circuitikz}\n\\end{circuitikz}"

    def test_constant_matches(self):
        assert generate([]) == EMPTY_CIRCUIT

    def test_accepts_any_iterable(self):
        assert generate(iter(())) == EMPTY_CIRCUIT


class TestElementStatements:
    def test_resistor(self):
        element = make_element("resistor", 0, 0, width=60)
        assert element_to_latex(element) == "\\draw (0,0) to[resistor] (3,0);"

    def test_ground_is_point_kind(self):
        element = make_element("ground", 40, 40)
        assert element_to_latex(element) == "\\draw (2,-2) to[ground] (2,-2);"

    def test_node(self):
        element = make_element("node", 60, 20)
        assert element_to_latex(element) == "\\draw (3,-1) to[node] (3,-1);"

    def test_y_axis_inverted(self):
        element = make_element("capacitor", 20, 100, width=40)
        assert element_to_latex(element) == "\\draw (1,-5) to[capacitor] (3,-5);"

    def test_negative_model_y_becomes_positive(self):
        element = make_element("inductor", -40, -60)
        assert element_to_latex(element) == "\\draw (-2,3) to[inductor] (1,3);"

    @pytest.mark.parametrize(
        "kind_id, keyword",
        [
            ("voltage", "voltage source"),
            ("current", "current source"),
            ("wire", "short"),
        ],
    )
    def test_keywords(self, kind_id, keyword):
        element = make_element(kind_id, 0, 0, width=80)
        assert element_to_latex(element) == f"\\draw (0,0) to[{keyword}] (4,0);"

    def test_stretched_width(self):
        element = make_element("wire", 0, 0, width=200)
        assert element_endpoints(element) == ((0, 0), (10, 0))

    def test_off_grid_values_round_half_away(self):
        # 30/20 = 1.5 -> 2, -30/20 = -1.5 -> -2
        element = make_element("resistor", 30, -30, width=70)
        assert element_endpoints(element) == ((2, 2), (6, 2))

    def test_custom_grid_size(self):
        element = make_element("resistor", 20, 0, width=60)
        assert element_to_latex(element, grid_size=10) == "\\draw (2,0) to[resistor] (8,0);"


class TestLabels:
    def test_label_clause(self):
        element = make_element("resistor", 0, 0, width=60, label="R1")
        assert element_to_latex(element) == "\\draw (0,0) to[resistor, l=R1] (3,0);"

    def test_empty_label_omitted(self):
        element = make_element("resistor", 0, 0, width=60, label="")
        assert "l=" not in element_to_latex(element)

    def test_value_not_exported(self):
        element = make_element("resistor", 0, 0, width=60, value="10k")
        assert "10k" not in element_to_latex(element)

    def test_latex_passes_through(self):
        element = make_element("resistor", 0, 0, width=60, label="$R_1$")
        assert element_to_latex(element) == "\\draw (0,0) to[resistor, l=$R_1$] (3,0);"

    @pytest.mark.parametrize("label", ["a,b", "x]", "k=v"])
    def test_option_delimiters_are_braced(self, label):
        element = make_element("ground", 0, 0, label=label)
        assert f"l={{{label}}}]" in element_to_latex(element)


class TestGenerate:
    def test_full_block(self):
        elements = [
            make_element("resistor", 0, 0, width=60, label="R1"),
            make_element("ground", 40, 40),
        ]
        assert generate(elements) == (
            "\\begin{circuitikz}\n"
            "  \\draw (0,0) to[resistor, l=R1] (3,0);\n"
            "  \\draw (2,-2) to[ground] (2,-2);\n"
            "\\end{circuitikz}"
        )

    def test_one_statement_per_element_in_order(self):
        elements = [make_element("node", 20 * i, 0) for i in range(5)]
        lines = generate(elements).splitlines()
        assert lines[0] == "\\begin{circuitikz}"
        assert lines[-1] == "\\end{circuitikz}"
        assert lines[1:-1] == [f"  \\draw ({i},0) to[node] ({i},0);" for i in range(5)]

    def test_standalone_wrapper(self):
        text = generate([make_element("ground", 0, 0)], standalone=True)
        assert text == (
            "\\documentclass{standalone}\n"
            "\\usepackage{circuitikz}\n"
            "\\begin{document}\n"
            "\\begin{circuitikz}\n"
            "  \\draw (0,0) to[ground] (0,0);\n"
            "\\end{circuitikz}\n"
            "\\end{document}\n"
        )

    def test_standalone_empty(self):
        text = generate([], standalone=True)
        assert EMPTY_CIRCUIT in text
        assert text.startswith("\\documentclass{standalone}")
