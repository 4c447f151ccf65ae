"""
PlacementController - Turns pointer gestures into new circuit elements.

This module contains no Qt dependencies. All coordinates it receives are
model coordinates; they are snapped to the grid before being written into
any element.

States:
    Idle                               no tool active
    ToolSelected(kind)                 waiting for a click
    PlacingPath(kind, anchor, preview) first click of a path kind done,
                                       preview element follows the pointer

Point kinds commit on a single click and stay in ToolSelected so the same
kind can be placed again. Path kinds commit on the second click.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from models.circuit import CircuitModel
from models.component import ComponentKind, lookup
from models.constants import GRID_SIZE
from models.element import CircuitElement
from models.view import snap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class ToolSelected:
    kind: ComponentKind


@dataclass(frozen=True)
class PlacingPath:
    """Transient session: the snapped anchor and the uncommitted preview."""

    kind: ComponentKind
    anchor: tuple[float, float]
    preview: CircuitElement


PlacementState = Union[Idle, ToolSelected, PlacingPath]


def resize_path_element(element: CircuitElement, anchor: tuple[float, float],
                        point: tuple[float, float]) -> None:
    """
    Stretch a path element from *anchor* towards *point*.

    Path elements are always laid out horizontally: the width follows the
    horizontal distance whichever axis the pointer moved along, and the
    height stays at the kind's default. The width never drops below the
    kind's default width.
    """
    dx = point[0] - anchor[0]
    element.width = max(abs(dx), element.kind.width)
    element.height = element.kind.height


class PlacementController:
    """
    State machine for placing elements with the active tool.

    Committed elements are appended to *model* and selected exclusively.
    """

    def __init__(self, model: CircuitModel, grid_size: float = GRID_SIZE):
        self.model = model
        self.grid_size = grid_size
        self.state: PlacementState = Idle()

    @property
    def tool(self) -> Optional[ComponentKind]:
        """The active kind, or None when idle."""
        if isinstance(self.state, Idle):
            return None
        return self.state.kind

    @property
    def preview(self) -> Optional[CircuitElement]:
        if isinstance(self.state, PlacingPath):
            return self.state.preview
        return None

    @property
    def is_placing(self) -> bool:
        return isinstance(self.state, PlacingPath)

    def select_tool(self, kind_id: str) -> ComponentKind:
        """
        Activate *kind_id*, discarding any in-progress preview.

        Raises:
            UnknownKindError: If the kind is not in the catalog.
        """
        kind = lookup(kind_id)
        if isinstance(self.state, PlacingPath):
            logger.debug("Discarding %s preview on tool change", self.state.kind.kind_id)
        self.state = ToolSelected(kind)
        return kind

    def cancel(self) -> None:
        """Discard the preview (if any) and deactivate the tool."""
        self.state = Idle()

    def click(self, x: float, y: float) -> Optional[CircuitElement]:
        """
        Handle a click at model point (x, y).

        Returns the committed element, or None when the click only opened a
        path placement session or no tool is active.
        """
        state = self.state
        point = snap(x, y, self.grid_size)

        if isinstance(state, Idle):
            logger.debug("Ignoring placement click at %s: no active tool", point)
            return None

        if isinstance(state, PlacingPath):
            element = state.preview
            resize_path_element(element, state.anchor, point)
            self.state = ToolSelected(state.kind)
            return self._commit(element)

        if state.kind.is_point:
            return self._commit(CircuitElement.create(state.kind, *point))

        preview = CircuitElement.create(state.kind, *point)
        self.state = PlacingPath(state.kind, point, preview)
        return None

    def pointer_move(self, x: float, y: float) -> bool:
        """
        Update the preview extent towards model point (x, y).

        Returns False (and changes nothing) when no placement session is open.
        """
        state = self.state
        if not isinstance(state, PlacingPath):
            return False
        resize_path_element(state.preview, state.anchor, snap(x, y, self.grid_size))
        return True

    def _commit(self, element: CircuitElement) -> CircuitElement:
        self.model.add_element(element)
        self.model.select(element)
        logger.debug("Placed %r", element)
        return element
