"""
Controllers for the schematic editor.

This package contains Qt-free controller classes that turn UI gestures into
model changes and notify views using an observer pattern.
"""

from .circuit_controller import CircuitController
from .placement_controller import (
    Idle,
    PlacementController,
    PlacingPath,
    ToolSelected,
    resize_path_element,
)
from .selection_controller import DragSession, SelectionController

__all__ = [
    "CircuitController",
    "PlacementController",
    "SelectionController",
    "DragSession",
    "Idle",
    "ToolSelected",
    "PlacingPath",
    "resize_path_element",
]
