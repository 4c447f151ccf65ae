"""Matplotlib rendering of schematics for headless previews and notebooks.

Replays the primitives from ``GUI.renderers`` onto a matplotlib Figure.
The transform stack is tracked here as 3x3 affine matrices, so arcs and
circles are sampled into polylines before being transformed.
"""

import math
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union

import numpy as np
from matplotlib.figure import Figure

from GUI import renderers as r
from models.circuit import CircuitModel
from models.constants import BACKGROUND_COLOR, STROKE_COLOR
from models.element import CircuitElement
from models.view import ViewState

PX_TO_PT = 0.75
ARC_SAMPLES = 24
PREVIEW_PADDING = 40


@dataclass
class _State:
    matrix: np.ndarray
    color: str = STROKE_COLOR
    width: float = 1.0
    dash: tuple = ()
    alpha: float = 1.0


def _translation(dx, dy):
    return np.array([[1.0, 0.0, dx], [0.0, 1.0, dy], [0.0, 0.0, 1.0]])


def _rotation(angle):
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def _scaling(sx, sy):
    return np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])


def arc_points(arc: r.Arc, samples: int = ARC_SAMPLES) -> np.ndarray:
    """Sample *arc* into an (n, 2) array following its sweep direction."""
    if abs(arc.end - arc.start) >= 2 * math.pi:
        sweep = 2 * math.pi
    elif arc.anticlockwise:
        sweep = -((arc.start - arc.end) % (2 * math.pi))
    else:
        sweep = (arc.end - arc.start) % (2 * math.pi)
    theta = arc.start + np.linspace(0.0, sweep, samples)
    return np.column_stack([arc.cx + arc.radius * np.cos(theta),
                            arc.cy + arc.radius * np.sin(theta)])


class MatplotlibBackend:
    """Draws primitive sequences onto a matplotlib Axes (y axis pointing down)."""

    def __init__(self, ax):
        self.ax = ax
        self._state = _State(np.identity(3))
        self._stack: list[_State] = []

    def replay(self, ops) -> None:
        for op in ops:
            getattr(self, f"_do_{type(op).__name__.lower()}")(op)

    def _apply(self, points) -> np.ndarray:
        pts = np.asarray(points, dtype=float).reshape(-1, 2)
        homogeneous = np.column_stack([pts, np.ones(len(pts))])
        return (self._state.matrix @ homogeneous.T).T[:, :2]

    def _stroke(self, points, closed=False):
        pts = self._apply(points)
        if closed:
            pts = np.vstack([pts, pts[:1]])
        state = self._state
        linestyle = (0, state.dash) if state.dash else "solid"
        self.ax.plot(pts[:, 0], pts[:, 1], color=state.color,
                     linewidth=state.width * PX_TO_PT, linestyle=linestyle,
                     alpha=state.alpha, solid_capstyle="round")

    def _do_save(self, op):
        self._stack.append(replace(self._state))

    def _do_restore(self, op):
        if self._stack:
            self._state = self._stack.pop()

    def _do_translate(self, op):
        self._state.matrix = self._state.matrix @ _translation(op.dx, op.dy)

    def _do_rotate(self, op):
        self._state.matrix = self._state.matrix @ _rotation(op.angle)

    def _do_scale(self, op):
        self._state.matrix = self._state.matrix @ _scaling(op.sx, op.sy)

    def _do_setpen(self, op):
        self._state.color = op.color
        self._state.width = op.width
        self._state.dash = tuple(op.dash)

    def _do_setopacity(self, op):
        self._state.alpha = op.alpha

    def _do_line(self, op):
        self._stroke([(op.x1, op.y1), (op.x2, op.y2)])

    def _do_polyline(self, op):
        self._stroke(op.points)

    def _do_arc(self, op):
        self._stroke(arc_points(op))

    def _do_circle(self, op):
        outline = arc_points(r.Arc(op.cx, op.cy, op.radius, 0.0, 2 * math.pi))
        if op.filled:
            pts = self._apply(outline)
            self.ax.fill(pts[:, 0], pts[:, 1], color=self._state.color, alpha=self._state.alpha)
        else:
            self._stroke(outline)

    def _do_rect(self, op):
        self._stroke([(op.x, op.y), (op.x + op.width, op.y),
                      (op.x + op.width, op.y + op.height), (op.x, op.y + op.height)],
                     closed=True)

    def _do_text(self, op):
        (x, y), = self._apply([(op.x, op.y)])
        self.ax.text(x, y, op.text, ha=op.align, va="baseline",
                     fontsize=op.size * PX_TO_PT, color=self._state.color,
                     alpha=self._state.alpha)


def render_figure(model: CircuitModel, preview: Optional[CircuitElement] = None,
                  padding: float = PREVIEW_PADDING) -> Figure:
    """Render *model* into a new Figure framed around the circuit bounds."""
    fig = Figure(figsize=(6, 4))
    fig.patch.set_facecolor(BACKGROUND_COLOR)
    ax = fig.add_subplot(111)
    ax.set_aspect("equal")
    ax.axis("off")

    MatplotlibBackend(ax).replay(r.scene_ops(model, ViewState(), preview))

    box = model.bounds()
    ax.set_xlim(box.x - padding, box.right + padding)
    # y grows downward on the canvas
    ax.set_ylim(box.bottom + padding, box.y - padding)
    return fig


def save_preview(model: CircuitModel, path: Union[str, Path], **savefig_kwargs) -> Path:
    """Write a PNG/SVG/PDF preview of *model*; the format follows the suffix."""
    path = Path(path)
    fig = render_figure(model)
    fig.savefig(path, **savefig_kwargs)
    return path
