"""Markup export for the schematic editor."""

from .circuitikz_exporter import EMPTY_CIRCUIT, element_to_latex, generate

__all__ = ["EMPTY_CIRCUIT", "element_to_latex", "generate"]
