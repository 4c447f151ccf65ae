"""
Scripting API - programmatic schematic creation and export.

This package provides a headless Python API for building schematics and
exporting CircuiTikZ markup without the GUI or PyQt6.

Usage::

    from scripting import Schematic

    sch = Schematic()
    sch.place("voltage", (0, 0), (60, 0), label="$V_s$")
    sch.place("resistor", (60, 0), (120, 0), label="$R_1$")
    sch.place("ground", (120, 20))

    print(sch.to_latex())
    sch.save_latex("divider.tex")
    sch.save_preview("divider.png")
"""

from scripting.preview import render_figure, save_preview
from scripting.schematic import Schematic

__all__ = ["Schematic", "render_figure", "save_preview"]
