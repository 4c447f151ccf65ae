"""
ViewState - Pan/zoom state and the screen <-> model coordinate mapping.

This module contains no Qt dependencies. Screen coordinates are pixels
relative to the canvas' top-left corner; model coordinates are the units
elements are stored in.
"""

import math
from dataclasses import dataclass

from .constants import GRID_SIZE, ZOOM_MAX, ZOOM_MIN


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def snap(x: float, y: float, grid_size: float = GRID_SIZE) -> tuple[float, float]:
    """Round each coordinate independently to the nearest multiple of *grid_size*."""
    return (
        float(round_half_away(x / grid_size) * grid_size),
        float(round_half_away(y / grid_size) * grid_size),
    )


def clamp_zoom(zoom: float) -> float:
    return max(ZOOM_MIN, min(ZOOM_MAX, zoom))


@dataclass
class ViewState:
    """Zoom factor (always within [ZOOM_MIN, ZOOM_MAX]) and pan offset in pixels."""

    zoom: float = 1.0
    pan: tuple[float, float] = (0.0, 0.0)

    def __post_init__(self):
        self.zoom = clamp_zoom(self.zoom)

    def set_zoom(self, zoom: float) -> float:
        """Store *zoom* clamped to the allowed range and return the stored value."""
        self.zoom = clamp_zoom(zoom)
        return self.zoom

    def pan_by(self, dx: float, dy: float) -> None:
        self.pan = (self.pan[0] + dx, self.pan[1] + dy)

    def reset(self) -> None:
        self.zoom = 1.0
        self.pan = (0.0, 0.0)

    def screen_to_model(self, px: float, py: float) -> tuple[float, float]:
        return ((px - self.pan[0]) / self.zoom, (py - self.pan[1]) / self.zoom)

    def model_to_screen(self, x: float, y: float) -> tuple[float, float]:
        return (x * self.zoom + self.pan[0], y * self.zoom + self.pan[1])
