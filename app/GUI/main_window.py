"""Main application window with MVC architecture"""

import logging

from controllers.circuit_controller import CircuitController
from models.circuit import CircuitModel
from models.constants import DEFAULT_WINDOW_SIZE
from PyQt6.QtCore import QSettings
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QMessageBox, QVBoxLayout, QWidget

from .circuit_canvas import CircuitCanvas
from .component_palette import ComponentPalette
from .export_dialog import ExportDialog

logger = logging.getLogger(__name__)

SETTINGS_ORG = "CircuitSketch"
SETTINGS_APP = "Circuit Sketch"


class MainWindow(QMainWindow):
    """Main application window

    Builds the palette, canvas and toolbar. Editing logic lives in the
    CircuitController; this class only wires widgets to it.
    """

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Circuit Sketch")
        self.resize(*DEFAULT_WINDOW_SIZE)

        # Create model (single source of truth)
        self.model = CircuitModel()
        self.circuit_ctrl = CircuitController(self.model)

        self.init_ui()
        self.create_toolbar()
        self._connect_signals()
        self._restore_settings()

    def init_ui(self):
        """Initialize user interface"""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QHBoxLayout(central_widget)

        left_panel = QVBoxLayout()
        left_panel.addWidget(QLabel("Components"))
        self.palette = ComponentPalette()
        left_panel.addWidget(self.palette)
        instructions = QLabel(
            "Click a component, then click the canvas to place it\n"
            "Two-terminal parts: click start, then click end\n"
            "Drag placed parts to move them\n"
            "Ctrl+wheel to zoom, wheel to pan\n"
            "Delete removes the selection, Esc cancels"
        )
        instructions.setWordWrap(True)
        left_panel.addWidget(instructions)
        main_layout.addLayout(left_panel, 1)

        self.canvas = CircuitCanvas(self.circuit_ctrl)
        main_layout.addWidget(self.canvas, 4)

        self.zoom_label = QLabel()
        self.statusBar().addPermanentWidget(self.zoom_label)
        self._on_zoom_changed(self.circuit_ctrl.view.zoom)

    def create_toolbar(self):
        toolbar = self.addToolBar("Main")

        self.export_action = QAction("Export LaTeX", self)
        self.export_action.triggered.connect(self.show_export_dialog)
        toolbar.addAction(self.export_action)

        self.clear_action = QAction("Clear", self)
        self.clear_action.triggered.connect(self.clear_canvas)
        toolbar.addAction(self.clear_action)

        toolbar.addSeparator()

        zoom_in = QAction("Zoom In", self)
        zoom_in.setShortcut(QKeySequence.StandardKey.ZoomIn)
        zoom_in.triggered.connect(self.circuit_ctrl.zoom_in)
        toolbar.addAction(zoom_in)

        zoom_out = QAction("Zoom Out", self)
        zoom_out.setShortcut(QKeySequence.StandardKey.ZoomOut)
        zoom_out.triggered.connect(self.circuit_ctrl.zoom_out)
        toolbar.addAction(zoom_out)

        reset = QAction("Reset View", self)
        reset.triggered.connect(self.circuit_ctrl.reset_view)
        toolbar.addAction(reset)

    def _connect_signals(self):
        """Connect signals between UI components"""
        self.palette.toolSelected.connect(self._on_tool_selected)
        self.canvas.toolChanged.connect(self._on_tool_changed)
        self.canvas.zoomChanged.connect(self._on_zoom_changed)
        self.canvas.selectionChanged.connect(self._on_selection_changed)

    def _on_tool_selected(self, kind_id):
        self.circuit_ctrl.select_tool(kind_id)
        self.canvas.setFocus()

    def _on_tool_changed(self, kind):
        self.palette.set_active(kind.kind_id if kind is not None else None)
        if kind is not None:
            self.statusBar().showMessage(f"Placing {kind.name}")
        else:
            self.statusBar().clearMessage()

    def _on_zoom_changed(self, level):
        """Update the zoom level display"""
        self.zoom_label.setText(f"{level * 100:.0f}%")

    def _on_selection_changed(self, selection):
        if selection:
            self.statusBar().showMessage(f"{len(selection)} selected")
        elif self.circuit_ctrl.active_tool is None:
            self.statusBar().clearMessage()

    def show_export_dialog(self):
        ExportDialog(self.circuit_ctrl, self).exec()

    def clear_canvas(self):
        """Clear the canvas"""
        reply = QMessageBox.question(
            self,
            "Clear Circuit",
            "Are you sure you want to clear the circuit?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        if reply == QMessageBox.StandardButton.Yes:
            self.circuit_ctrl.clear_circuit()

    # Settings Persistence

    def _save_settings(self):
        """Save user preferences via QSettings"""
        settings = QSettings(SETTINGS_ORG, SETTINGS_APP)
        settings.setValue("window/geometry", self.saveGeometry())
        settings.setValue("view/zoom", self.circuit_ctrl.view.zoom)

    def _restore_settings(self):
        """Restore user preferences from QSettings"""
        settings = QSettings(SETTINGS_ORG, SETTINGS_APP)

        geometry = settings.value("window/geometry")
        if geometry:
            self.restoreGeometry(geometry)

        zoom = settings.value("view/zoom")
        if zoom is not None:
            try:
                self.circuit_ctrl.set_zoom(float(zoom))
            except (TypeError, ValueError):
                logger.warning("Ignoring invalid saved zoom level: %r", zoom)

    def closeEvent(self, event):
        self._save_settings()
        super().closeEvent(event)
