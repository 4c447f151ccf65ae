"""
GUI package for the schematic editor.

``GUI.renderers`` is Qt-free and is shared with headless rendering; the
widget modules (``circuit_canvas``, ``main_window`` and friends) import
PyQt6 and are imported explicitly by callers that need them.
"""
