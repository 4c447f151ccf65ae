"""
CircuitController - Editor session facade used by the UI layer.

This module contains no Qt dependencies. It owns the CircuitModel and the
ViewState, routes pointer/keyboard gestures to the placement and selection
state machines, and notifies views of changes through an observer pattern.

All inputs are explicit parameters: pointer positions are screen pixels
relative to the canvas, modifier keys are booleans. Every method runs to
completion before returning; callers must dispatch events serially.
"""

import logging
from typing import Any, Callable, Optional

from export.circuitikz_exporter import generate
from models.circuit import CircuitModel
from models.constants import GRID_SIZE, WHEEL_ZOOM_IN, WHEEL_ZOOM_OUT, ZOOM_STEP
from models.element import CircuitElement
from models.view import ViewState

from .placement_controller import PlacementController
from .selection_controller import SelectionController

logger = logging.getLogger(__name__)


class CircuitController:
    """
    Controller for one editing session.

    Observer events:
        tool_changed (ComponentKind | None) - Active placement tool changed
        preview_changed (CircuitElement | None) - Placement preview changed
        element_added (CircuitElement) - An element was committed
        element_removed (CircuitElement) - An element was deleted
        element_moved (CircuitElement) - An element was dragged
        element_changed (CircuitElement) - Label, value or rotation edited
        selection_changed (list[CircuitElement]) - Selection set changed
        circuit_cleared (None) - The entire circuit was cleared
        zoom_changed (float) - Zoom level changed
        view_changed (ViewState) - Pan offset changed
    """

    def __init__(self, model: Optional[CircuitModel] = None,
                 view: Optional[ViewState] = None,
                 grid_size: float = GRID_SIZE):
        self.model = model if model is not None else CircuitModel()
        self.view = view if view is not None else ViewState()
        self.grid_size = grid_size
        self.placement = PlacementController(self.model, grid_size)
        self.selection = SelectionController(self.model, grid_size)
        self._observers: list[Callable[[str, Any], None]] = []

    def add_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Register a callback for model change events."""
        if callback not in self._observers:
            self._observers.append(callback)

    def remove_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Unregister a previously registered callback."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self, event: str, data: Any) -> None:
        """Notify all observers of a model change."""
        for observer in self._observers:
            try:
                observer(event, data)
            except (TypeError, AttributeError, RuntimeError) as e:
                logger.error("Error notifying observer: %s", e)

    def _selection_changed(self) -> None:
        self._notify("selection_changed", list(self.model.selected))

    # --- Tools ---

    @property
    def active_tool(self):
        return self.placement.tool

    def select_tool(self, kind_id: str) -> None:
        """Activate a placement tool. Raises UnknownKindError for unknown kinds."""
        had_preview = self.placement.is_placing
        kind = self.placement.select_tool(kind_id)
        self.selection.pointer_up()
        if had_preview:
            self._notify("preview_changed", None)
        self._notify("tool_changed", kind)

    def escape(self) -> None:
        """Cancel placement, deactivate the tool and clear the selection."""
        had_preview = self.placement.is_placing
        self.placement.cancel()
        self.selection.pointer_up()
        self.model.clear_selection()
        if had_preview:
            self._notify("preview_changed", None)
        self._notify("tool_changed", None)
        self._selection_changed()

    # --- Pointer gestures ---

    def pointer_down(self, px: float, py: float, multi: bool = False) -> Optional[CircuitElement]:
        """
        Handle a primary-button press at screen point (px, py).

        With a tool active this is a placement click; otherwise it selects
        (additively when *multi*) and starts dragging the element under the
        pointer. Returns the committed or hit element, if any.
        """
        x, y = self.view.screen_to_model(px, py)

        if self.placement.tool is None:
            element = self.selection.pointer_down(x, y, multi)
            self._selection_changed()
            return element

        element = self.placement.click(x, y)
        if element is None:
            self._notify("preview_changed", self.placement.preview)
            return None

        self._notify("preview_changed", None)
        self._notify("element_added", element)
        self._selection_changed()
        return element

    def pointer_move(self, px: float, py: float) -> None:
        x, y = self.view.screen_to_model(px, py)

        if self.selection.dragging:
            if self.selection.pointer_move(x, y):
                self._notify("element_moved", self.selection.drag.element)
        elif self.placement.pointer_move(x, y):
            self._notify("preview_changed", self.placement.preview)

    def pointer_up(self) -> None:
        self.selection.pointer_up()

    def click(self, px: float, py: float, multi: bool = False) -> Optional[CircuitElement]:
        """Press and release at screen point (px, py) without moving."""
        element = self.pointer_down(px, py, multi)
        self.pointer_up()
        return element

    def wheel(self, delta_x: float, delta_y: float, zoom_modifier: bool = False) -> None:
        """
        Zoom with the modifier held (scroll up zooms in), otherwise pan.

        Deltas follow the scroll direction: positive delta_y scrolls down.
        """
        if zoom_modifier:
            factor = WHEEL_ZOOM_OUT if delta_y > 0 else WHEEL_ZOOM_IN
            self.set_zoom(self.view.zoom * factor)
        else:
            self.view.pan_by(-delta_x, -delta_y)
            self._notify("view_changed", self.view)

    # --- View ---

    def set_zoom(self, zoom: float) -> float:
        """Set the zoom level, clamped to the allowed range. Returns the stored value."""
        stored = self.view.set_zoom(zoom)
        self._notify("zoom_changed", stored)
        return stored

    def zoom_in(self) -> float:
        return self.set_zoom(self.view.zoom * ZOOM_STEP)

    def zoom_out(self) -> float:
        return self.set_zoom(self.view.zoom / ZOOM_STEP)

    def reset_view(self) -> None:
        self.view.reset()
        self._notify("zoom_changed", self.view.zoom)
        self._notify("view_changed", self.view)

    # --- Editing ---

    def delete_selected(self) -> list[CircuitElement]:
        """Delete every selected element (Delete/Backspace)."""
        removed = self.model.delete_selected()
        if not removed:
            return removed
        for element in removed:
            logger.debug("Deleted %r", element)
            self._notify("element_removed", element)
        self._selection_changed()
        return removed

    def remove_element(self, element: CircuitElement) -> None:
        if self.model.remove_element(element):
            self._notify("element_removed", element)
            self._selection_changed()

    def select_all(self) -> None:
        self.model.select_all()
        self._selection_changed()

    def clear_circuit(self) -> None:
        """Clear the entire circuit."""
        self.selection.pointer_up()
        self.model.clear()
        logger.debug("Circuit cleared")
        self._notify("circuit_cleared", None)

    def set_label(self, element: CircuitElement, label: str) -> None:
        element.label = label
        self._notify("element_changed", element)

    def set_value(self, element: CircuitElement, value: str) -> None:
        element.value = value
        self._notify("element_changed", element)

    def rotate_selected(self, angle: float) -> None:
        """Add *angle* radians to the rotation of every selected element."""
        for element in self.model.selected:
            element.rotation += angle
            self._notify("element_changed", element)

    # --- Export ---

    def export_latex(self, standalone: bool = False) -> str:
        return generate(self.model.elements, self.grid_size, standalone=standalone)
