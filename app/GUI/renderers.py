"""Strategy-table renderers for circuit component symbols.

Each kind identifier maps to a function that returns the drawing primitives
for an element of a given width and height, in the element's local frame
(origin at the top-left of its box, y growing downward). The table is
closed over the catalog kinds and is looked up with ``get_renderer``.

Nothing here touches Qt: the primitives are plain data that a rendering
backend (``GUI.qt_painter`` or ``scripting.preview``) replays.
"""

import math
from dataclasses import dataclass
from typing import Callable, Optional, Union

from models.circuit import CircuitModel
from models.constants import (GRID_COLOR, GRID_LINE_WIDTH, GRID_SIZE,
                              LABEL_FONT_SIZE, LABEL_OFFSET, LINE_WIDTH,
                              PREVIEW_OPACITY, SELECTION_COLOR, SELECTION_DASH,
                              SELECTION_OUTSET, SIGN_FONT_SIZE, STROKE_COLOR,
                              VALUE_OFFSET)
from models.element import CircuitElement
from models.view import ViewState

# ---------------------------------------------------------------------------
# Drawing primitives
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Save:
    pass


@dataclass(frozen=True)
class Restore:
    pass


@dataclass(frozen=True)
class Translate:
    dx: float
    dy: float


@dataclass(frozen=True)
class Rotate:
    angle: float  # radians, clockwise on screen


@dataclass(frozen=True)
class Scale:
    sx: float
    sy: float


@dataclass(frozen=True)
class SetPen:
    color: str
    width: float
    dash: tuple[float, ...] = ()


@dataclass(frozen=True)
class SetOpacity:
    alpha: float


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class Polyline:
    points: tuple[tuple[float, float], ...]


@dataclass(frozen=True)
class Arc:
    """Stroked arc; angles in radians measured clockwise from +x on screen."""

    cx: float
    cy: float
    radius: float
    start: float
    end: float
    anticlockwise: bool = False


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    radius: float
    filled: bool = False


@dataclass(frozen=True)
class Rect:
    """Stroked rectangle."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Text:
    """Text anchored at its baseline; *align* is 'left', 'center' or 'right'."""

    text: str
    x: float
    y: float
    size: float = LABEL_FONT_SIZE
    align: str = "center"


DrawOp = Union[Save, Restore, Translate, Rotate, Scale, SetPen, SetOpacity,
               Line, Polyline, Arc, Circle, Rect, Text]

# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

SymbolRenderer = Callable[[float, float], list]

_registry: dict[str, SymbolRenderer] = {}


def register(kind_id: str):
    """Decorator registering a symbol renderer for *kind_id*."""

    def decorator(func: SymbolRenderer) -> SymbolRenderer:
        _registry[kind_id] = func
        return func

    return decorator


def get_renderer(kind_id: str) -> SymbolRenderer:
    """Look up the renderer for *kind_id*.

    Raises ``KeyError`` if no renderer is registered.
    """
    renderer = _registry.get(kind_id)
    if renderer is not None:
        return renderer
    raise KeyError(f"No renderer for {kind_id!r}")


def _leads(w, h, inner_left, inner_right):
    """Horizontal terminal leads from both box edges to the symbol body."""
    return [Line(0, h / 2, w * inner_left, h / 2), Line(w * inner_right, h / 2, w, h / 2)]


# ---------------------------------------------------------------------------
# Symbols
# ---------------------------------------------------------------------------


@register("resistor")
def draw_resistor(w, h):
    points = [(w * 0.2, h / 2)]
    for i in range(6):
        x = w * 0.2 + i * w * 0.6 / 6
        y = h / 2 + (-h / 4 if i % 2 == 0 else h / 4)
        points.append((x, y))
    points.append((w * 0.8, h / 2))
    return _leads(w, h, 0.2, 0.8) + [Polyline(tuple(points))]


@register("capacitor")
def draw_capacitor(w, h):
    return _leads(w, h, 0.4, 0.6) + [
        Line(w * 0.4, h * 0.2, w * 0.4, h * 0.8),
        Line(w * 0.6, h * 0.2, w * 0.6, h * 0.8),
    ]


@register("inductor")
def draw_inductor(w, h):
    ops = _leads(w, h, 0.2, 0.8)
    radius = w * 0.6 / 8
    for i in range(4):
        cx = w * 0.2 + (i + 0.5) * w * 0.6 / 4
        ops.append(Arc(cx, h / 2, radius, 0, math.pi, anticlockwise=True))
    return ops


@register("voltage")
def draw_voltage_source(w, h):
    return _leads(w, h, 0.2, 0.8) + [
        Circle(w / 2, h / 2, w * 0.3),
        Text("+", w * 0.35, h / 2 + 5, size=SIGN_FONT_SIZE),
        Text("−", w * 0.65, h / 2 + 5, size=SIGN_FONT_SIZE),
    ]


@register("current")
def draw_current_source(w, h):
    return _leads(w, h, 0.2, 0.8) + [
        Circle(w / 2, h / 2, w * 0.3),
        Line(w * 0.4, h / 2, w * 0.6, h / 2),
        Polyline(((w * 0.55, h * 0.4), (w * 0.6, h / 2), (w * 0.55, h * 0.6))),
    ]


@register("ground")
def draw_ground(w, h):
    return [
        Line(w / 2, 0, w / 2, h * 0.4),
        Line(w * 0.2, h * 0.4, w * 0.8, h * 0.4),
        Line(w * 0.3, h * 0.6, w * 0.7, h * 0.6),
        Line(w * 0.4, h * 0.8, w * 0.6, h * 0.8),
    ]


@register("wire")
def draw_wire(w, h):
    return [Line(0, h / 2, w, h / 2)]


@register("node")
def draw_node(w, h):
    return [Circle(w / 2, h / 2, w / 2, filled=True)]


# ---------------------------------------------------------------------------
# Element and scene composition
# ---------------------------------------------------------------------------


def element_ops(element: CircuitElement) -> list:
    """Return the full primitive sequence for one element in model space."""
    w, h = element.width, element.height
    ops = [
        Save(),
        Translate(element.x + w / 2, element.y + h / 2),
        Rotate(element.rotation),
        Translate(-w / 2, -h / 2),
    ]

    if element.selected:
        ops.append(SetPen(SELECTION_COLOR, LINE_WIDTH, SELECTION_DASH))
        ops.append(Rect(-SELECTION_OUTSET, -SELECTION_OUTSET,
                        w + 2 * SELECTION_OUTSET, h + 2 * SELECTION_OUTSET))

    ops.append(SetPen(STROKE_COLOR, LINE_WIDTH))
    ops.extend(get_renderer(element.kind_id)(w, h))

    if element.label:
        ops.append(Text(element.label, w / 2, -LABEL_OFFSET))
    if element.value:
        ops.append(Text(element.value, w / 2, h + VALUE_OFFSET))

    ops.append(Restore())
    return ops


def scene_ops(model: CircuitModel, view: ViewState,
              preview: Optional[CircuitElement] = None) -> list:
    """Return primitives for every element (z-order) plus the placement preview."""
    ops = [Save(), Translate(*view.pan), Scale(view.zoom, view.zoom)]
    for element in model.elements:
        ops.extend(element_ops(element))
    if preview is not None:
        ops.extend([Save(), SetOpacity(PREVIEW_OPACITY)])
        ops.extend(element_ops(preview))
        ops.append(Restore())
    ops.append(Restore())
    return ops


def grid_lines(view: ViewState, width: float, height: float,
               grid_size: float = GRID_SIZE) -> list:
    """Return screen-space grid lines covering a *width* x *height* viewport."""
    spacing = grid_size * view.zoom
    ops = [SetPen(GRID_COLOR, GRID_LINE_WIDTH)]

    x = view.pan[0] % spacing
    while x <= width:
        ops.append(Line(x, 0, x, height))
        x += spacing

    y = view.pan[1] % spacing
    while y <= height:
        ops.append(Line(0, y, width, y))
        y += spacing
    return ops


def frame_ops(model: CircuitModel, view: ViewState, width: float, height: float,
              preview: Optional[CircuitElement] = None,
              grid_size: float = GRID_SIZE) -> list:
    """Everything needed to repaint a viewport: grid lines, then the scene."""
    ops = grid_lines(view, width, height, grid_size)
    ops.extend(scene_ops(model, view, preview))
    return ops
