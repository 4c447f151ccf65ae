"""
Pure Python data models for the schematic editor.

This package contains Qt-free data classes that represent the component
catalog, placed elements, the circuit aggregate and the view transform.
"""

from .circuit import CircuitModel
from .component import (
    COMPONENT_KINDS,
    COMPONENT_TYPES,
    ComponentKind,
    UnknownKindError,
    is_path_kind,
    is_point_kind,
    lookup,
)
from .element import Bounds, CircuitElement, reset_element_counter
from .view import ViewState, round_half_away, snap

__all__ = [
    "CircuitModel",
    "CircuitElement",
    "Bounds",
    "ComponentKind",
    "COMPONENT_KINDS",
    "COMPONENT_TYPES",
    "UnknownKindError",
    "lookup",
    "is_path_kind",
    "is_point_kind",
    "reset_element_counter",
    "ViewState",
    "round_half_away",
    "snap",
]
