"""
SelectionController - Hit-testing, selection and dragging of placed elements.

This module contains no Qt dependencies. Used while no placement tool is
active: a pointer-down selects the element under the pointer and starts a
drag; subsequent moves reposition it on the grid.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from models.circuit import CircuitModel
from models.constants import GRID_SIZE
from models.element import CircuitElement
from models.view import snap

logger = logging.getLogger(__name__)


@dataclass
class DragSession:
    """Element being dragged and the pointer offset from its origin."""

    element: CircuitElement
    offset: tuple[float, float]


class SelectionController:
    def __init__(self, model: CircuitModel, grid_size: float = GRID_SIZE):
        self.model = model
        self.grid_size = grid_size
        self.drag: Optional[DragSession] = None

    @property
    def dragging(self) -> bool:
        return self.drag is not None

    def pointer_down(self, x: float, y: float, multi: bool = False) -> Optional[CircuitElement]:
        """
        Select the topmost element at model point (x, y) and start dragging it.

        Clicking empty space clears the selection. Returns the hit element.
        """
        element = self.model.element_at(x, y)
        if element is None:
            self.model.clear_selection()
            self.drag = None
            return None

        self.model.select(element, multi)
        self.drag = DragSession(element, (x - element.x, y - element.y))
        return element

    def pointer_move(self, x: float, y: float) -> bool:
        """
        Move the dragged element so the grab offset is kept, origin snapped.

        Returns True if an element moved.
        """
        drag = self.drag
        if drag is None:
            return False
        if drag.element not in self.model:
            logger.debug("Dropping drag of removed element %s", drag.element.element_id)
            self.drag = None
            return False

        new_position = snap(x - drag.offset[0], y - drag.offset[1], self.grid_size)
        if new_position == drag.element.position:
            return False
        drag.element.position = new_position
        return True

    def pointer_up(self) -> None:
        self.drag = None
