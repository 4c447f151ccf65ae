"""
Component catalog - Pure Python registry of placeable component kinds.

This module contains no Qt dependencies. Terminal offsets are (x, y) tuples
relative to the element origin (its top-left corner).

Kinds use short lowercase identifiers as canonical keys:
'resistor', 'capacitor', 'inductor', 'voltage', 'current', 'ground',
'wire', 'node'

A kind with more than one terminal is a path component (stretched between
two points during placement); a kind with exactly one terminal is a point
component (placed with a single click).
"""

from dataclasses import dataclass


class UnknownKindError(ValueError):
    """Raised when a kind identifier is not present in the catalog."""

    def __init__(self, kind_id):
        self.kind_id = kind_id
        super().__init__(
            f"Unknown component kind {kind_id!r}. "
            f"Valid kinds: {', '.join(COMPONENT_TYPES)}"
        )


@dataclass(frozen=True)
class ComponentKind:
    """
    Immutable catalog entry describing a class of circuit component.

    Width and height are the default drawing extent of a freshly created
    element; path elements may be stretched beyond the default width.
    """

    kind_id: str
    name: str
    symbol: str
    circuitikz: str  # keyword emitted inside to[...]
    width: float
    height: float
    terminals: tuple[tuple[float, float], ...]

    @property
    def terminal_count(self) -> int:
        return len(self.terminals)

    @property
    def is_path(self) -> bool:
        """True for kinds drawn along a line between two ends."""
        return len(self.terminals) > 1

    @property
    def is_point(self) -> bool:
        """True for kinds placed at a single location."""
        return len(self.terminals) == 1


# Catalog in palette order
COMPONENT_KINDS: dict[str, ComponentKind] = {
    kind.kind_id: kind
    for kind in (
        ComponentKind("resistor", "Resistor", "R", "resistor", 60, 20, ((0, 0), (60, 0))),
        ComponentKind("capacitor", "Capacitor", "C", "capacitor", 40, 30, ((0, 0), (40, 0))),
        ComponentKind("inductor", "Inductor", "L", "inductor", 60, 25, ((0, 0), (60, 0))),
        ComponentKind("voltage", "Voltage Source", "V", "voltage source", 40, 40, ((0, 0), (40, 0))),
        ComponentKind("current", "Current Source", "I", "current source", 40, 40, ((0, 0), (40, 0))),
        ComponentKind("ground", "Ground", "⏚", "ground", 30, 30, ((15, 0),)),
        ComponentKind("wire", "Wire", "—", "short", 40, 2, ((0, 0), (40, 0))),
        ComponentKind("node", "Node", "•", "node", 8, 8, ((4, 4),)),
    )
}

COMPONENT_TYPES = list(COMPONENT_KINDS)


def lookup(kind_id: str) -> ComponentKind:
    """
    Return the catalog entry for *kind_id*.

    Raises:
        UnknownKindError: If the identifier is not in the catalog.
    """
    try:
        return COMPONENT_KINDS[kind_id]
    except KeyError:
        raise UnknownKindError(kind_id) from None


def is_path_kind(kind_id: str) -> bool:
    return lookup(kind_id).is_path


def is_point_kind(kind_id: str) -> bool:
    return lookup(kind_id).is_point
