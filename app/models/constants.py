"""
constants.py - Centralized constants for the editor.

This file is the SINGLE SOURCE OF TRUTH for:
- GRID_SIZE: Used for snapping placement/drag coordinates and for export
- Zoom bounds and zoom steps used by the view transform
- Drawing style shared by every rendering backend
"""

# Grid settings
GRID_SIZE = 20

# Zoom settings
ZOOM_MIN = 0.1                 # Minimum zoom level (10%)
ZOOM_MAX = 5.0                 # Maximum zoom level (500%)
ZOOM_STEP = 1.2                # Toolbar zoom in/out multiplier
WHEEL_ZOOM_IN = 1.1            # Modifier + wheel up
WHEEL_ZOOM_OUT = 0.9           # Modifier + wheel down

# Drawing style (hex strings)
STROKE_COLOR = "#333333"
SELECTION_COLOR = "#2563eb"
GRID_COLOR = "#f0f0f0"
BACKGROUND_COLOR = "#ffffff"
LINE_WIDTH = 2
GRID_LINE_WIDTH = 1
SELECTION_OUTSET = 5           # Dashed outline distance from element bounds
SELECTION_DASH = (5, 5)
PREVIEW_OPACITY = 0.7          # Uncommitted path element during placement
LABEL_FONT_SIZE = 12
SIGN_FONT_SIZE = 14
LABEL_OFFSET = 8               # Label baseline above the element
VALUE_OFFSET = 20              # Value baseline below the element

# Export
EMPTY_CIRCUIT_COMMENT = "% Empty circuit"

# Window layout
DEFAULT_WINDOW_SIZE = (1200, 800)
