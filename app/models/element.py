"""
CircuitElement - Pure Python data model for a placed component.

This module contains no Qt dependencies. Positions are (x, y) tuples in
model units; the origin of an element is the top-left corner of its
unrotated bounding box.
"""

from dataclasses import dataclass, field
from typing import NamedTuple, Union

from .component import ComponentKind, lookup

# Module-level counter for generating unique element IDs
_element_counter = 0


def reset_element_counter():
    """Reset the element ID counter. Call when starting a new session."""
    global _element_counter
    _element_counter = 0


def _next_element_id(kind: ComponentKind) -> str:
    global _element_counter
    _element_counter += 1
    return f"{kind.kind_id}{_element_counter}"


class Bounds(NamedTuple):
    """Axis-aligned box in model units."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(eq=False)
class CircuitElement:
    """
    A placed instance of a catalog kind.

    Equality is identity: two elements with identical fields are still
    distinct parts of the circuit.

    Width and height start at the kind's defaults and may diverge from them
    (path elements are stretched while being placed). Rotation is in radians
    and only affects drawing; bounds and terminals are reported in the
    unrotated frame.
    """

    element_id: str
    kind: ComponentKind
    position: tuple[float, float]
    width: float
    height: float
    rotation: float = 0.0
    label: str = ""
    value: str = ""
    selected: bool = field(default=False, repr=False)

    @classmethod
    def create(cls, kind: Union[ComponentKind, str], x: float, y: float) -> "CircuitElement":
        """
        Create an unselected element of *kind* at (x, y) with a fresh ID.

        *kind* may be a ComponentKind or a catalog identifier.

        Raises:
            UnknownKindError: If *kind* is an identifier not in the catalog.
        """
        if isinstance(kind, str):
            kind = lookup(kind)
        return cls(
            element_id=_next_element_id(kind),
            kind=kind,
            position=(x, y),
            width=kind.width,
            height=kind.height,
        )

    @property
    def kind_id(self) -> str:
        return self.kind.kind_id

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    def bounds(self) -> Bounds:
        """Return the unrotated bounding box at the current position/size."""
        return Bounds(self.position[0], self.position[1], self.width, self.height)

    def contains_point(self, px: float, py: float) -> bool:
        """Check if (px, py) lies inside bounds(), edges included."""
        b = self.bounds()
        return b.x <= px <= b.right and b.y <= py <= b.bottom

    def terminals(self) -> list[tuple[float, float]]:
        """
        Return terminal positions in world coordinates.

        Offsets come from the kind's template and are translated by the
        element position; rotation is not applied.
        """
        x, y = self.position
        return [(x + tx, y + ty) for tx, ty in self.kind.terminals]

    def __repr__(self) -> str:
        return (
            f"CircuitElement(id={self.element_id!r}, kind={self.kind_id!r}, "
            f"pos={self.position}, size=({self.width}, {self.height}))"
        )
