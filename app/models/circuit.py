"""
CircuitModel - Central data store for circuit state.

This module contains no Qt dependencies. It holds the placed elements in
z-order (last = topmost) and the current selection.

Invariant: an element is in ``selected`` exactly when it is in
``elements`` and its ``selected`` flag is True. Every method below
preserves this; callers must not edit the flags or lists directly.
"""

from dataclasses import dataclass, field
from typing import Optional

from .element import Bounds, CircuitElement


def _contains(items: list, element: CircuitElement) -> bool:
    return any(item is element for item in items)


@dataclass
class CircuitModel:
    """
    Ordered collection of elements plus the selection set.

    Removal and selection of elements that are not present are no-ops:
    UI events can arrive after the element they refer to is gone.
    """

    elements: list[CircuitElement] = field(default_factory=list)
    selected: list[CircuitElement] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def __contains__(self, element) -> bool:
        return _contains(self.elements, element)

    # --- Element operations ---

    def add_element(self, element: CircuitElement) -> CircuitElement:
        """Append *element* on top of the z-order and return it."""
        self.elements.append(element)
        return element

    def remove_element(self, element: CircuitElement) -> bool:
        """
        Remove *element* (matched by identity) and drop it from the selection.

        Returns False if the element was not in the circuit.
        """
        for index, item in enumerate(self.elements):
            if item is element:
                del self.elements[index]
                break
        else:
            return False

        self.selected = [item for item in self.selected if item is not element]
        element.selected = False
        return True

    def element_at(self, x: float, y: float) -> Optional[CircuitElement]:
        """Return the topmost element containing (x, y), or None."""
        for element in reversed(self.elements):
            if element.contains_point(x, y):
                return element
        return None

    # --- Selection operations ---

    def select(self, element: Optional[CircuitElement], multi: bool = False) -> None:
        """
        Select *element*.

        Without *multi* the previous selection is cleared first. Selecting an
        element that is already selected never toggles it off or duplicates it.
        """
        if not multi:
            self.clear_selection()

        if element is None or element.selected or element not in self:
            return
        element.selected = True
        self.selected.append(element)

    def select_all(self) -> None:
        for element in self.elements:
            self.select(element, multi=True)

    def clear_selection(self) -> None:
        for element in self.selected:
            element.selected = False
        self.selected = []

    def delete_selected(self) -> list[CircuitElement]:
        """Remove every selected element and return them."""
        removed = list(self.selected)
        for element in removed:
            self.remove_element(element)
        return removed

    # --- Circuit operations ---

    def clear(self) -> None:
        """Clear all circuit data."""
        for element in self.selected:
            element.selected = False
        self.elements = []
        self.selected = []

    def bounds(self) -> Bounds:
        """Union of all element bounds; a zero box when the circuit is empty."""
        if not self.elements:
            return Bounds(0, 0, 0, 0)

        boxes = [element.bounds() for element in self.elements]
        min_x = min(b.x for b in boxes)
        min_y = min(b.y for b in boxes)
        max_x = max(b.right for b in boxes)
        max_y = max(b.bottom for b in boxes)
        return Bounds(min_x, min_y, max_x - min_x, max_y - min_y)
