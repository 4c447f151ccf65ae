"""
CircuiTikZ exporter - Translates placed elements into LaTeX markup.

Every element becomes one ``\\draw`` statement in z-order. Model coordinates
are divided by the grid size and rounded half away from zero; the y-axis
is inverted (model y grows downward, TikZ y grows upward).

    \\begin{circuitikz}
      \\draw (0,0) to[resistor] (3,0);
      \\draw (2,-2) to[ground] (2,-2);
    \\end{circuitikz}
"""

from typing import Iterable

from models.constants import EMPTY_CIRCUIT_COMMENT, GRID_SIZE
from models.element import CircuitElement
from models.view import round_half_away

BEGIN_BLOCK = "\\begin{circuitikz}"
END_BLOCK = "\\end{circuitikz}"

EMPTY_CIRCUIT = f"{EMPTY_CIRCUIT_COMMENT}\n{BEGIN_BLOCK}\n{END_BLOCK}"

STANDALONE_PREAMBLE = (
    "\\documentclass{standalone}\n"
    "\\usepackage{circuitikz}\n"
    "\\begin{document}\n"
)
STANDALONE_END = "\n\\end{document}\n"

# Characters that would end the option list or the key/value pair early
_OPTION_DELIMITERS = ",]="


def _to_grid(value: float, grid_size: float) -> int:
    return round_half_away(value / grid_size)


def _coord(x: int, y: int) -> str:
    return f"({x},{y})"


def _label_option(label: str) -> str:
    if any(ch in label for ch in _OPTION_DELIMITERS):
        return f", l={{{label}}}"
    return f", l={label}"


def element_endpoints(element: CircuitElement,
                      grid_size: float = GRID_SIZE) -> tuple[tuple[int, int], tuple[int, int]]:
    """
    Return the (start, end) grid coordinates of *element* in TikZ orientation.

    Point kinds start and end at the same coordinate. Path kinds end
    ``width`` to the right of the start; the vertical offset is the span
    between the kind's first and last terminal (zero for horizontal kinds).
    """
    gx = _to_grid(element.x, grid_size)
    gy = _to_grid(element.y, grid_size)
    start = (gx, -gy)

    kind = element.kind
    if not kind.is_path:
        return start, start

    span_y = kind.terminals[-1][1] - kind.terminals[0][1]
    end = (
        start[0] + _to_grid(element.width, grid_size),
        start[1] - _to_grid(span_y, grid_size),
    )
    return start, end


def element_to_latex(element: CircuitElement, grid_size: float = GRID_SIZE) -> str:
    """Return the single ``\\draw`` statement for *element*."""
    start, end = element_endpoints(element, grid_size)
    options = element.kind.circuitikz
    if element.label:
        options += _label_option(element.label)
    return f"\\draw {_coord(*start)} to[{options}] {_coord(*end)};"


def generate(elements: Iterable[CircuitElement], grid_size: float = GRID_SIZE,
             standalone: bool = False) -> str:
    """
    Generate the CircuiTikZ block for *elements*.

    An empty input yields a commented, empty block so the output is always
    syntactically complete. With *standalone* the block is wrapped in a
    minimal compilable LaTeX document.
    """
    lines = [f"  {element_to_latex(element, grid_size)}" for element in elements]

    if lines:
        block = "\n".join([BEGIN_BLOCK, *lines, END_BLOCK])
    else:
        block = EMPTY_CIRCUIT

    if standalone:
        return STANDALONE_PREAMBLE + block + STANDALONE_END
    return block
