"""Canvas widget: forwards input to the CircuitController and paints its scene."""

import logging

from controllers.circuit_controller import CircuitController
from models.constants import BACKGROUND_COLOR
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor, QPainter
from PyQt6.QtWidgets import QWidget

from .qt_painter import QtPainterBackend
from .renderers import frame_ops

logger = logging.getLogger(__name__)


class CircuitCanvas(QWidget):
    """Infinite schematic canvas backed by a CircuitController.

    The widget keeps no circuit state of its own; it translates Qt events
    into controller gestures and repaints whenever the controller notifies.
    """

    zoomChanged = pyqtSignal(float)
    toolChanged = pyqtSignal(object)  # ComponentKind or None
    selectionChanged = pyqtSignal(list)

    def __init__(self, controller: CircuitController = None, parent=None):
        super().__init__(parent)
        self.controller = controller if controller is not None else CircuitController()
        self.controller.add_observer(self._on_model_event)

        self.setMouseTracking(True)  # placement preview follows the pointer
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMinimumSize(200, 200)

    def _on_model_event(self, event, data):
        if event == "zoom_changed":
            self.zoomChanged.emit(data)
        elif event == "tool_changed":
            self.toolChanged.emit(data)
        elif event == "selection_changed":
            self.selectionChanged.emit(data)
        self.update()

    # --- Painting ---

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))
            ops = frame_ops(
                self.controller.model,
                self.controller.view,
                self.width(),
                self.height(),
                preview=self.controller.placement.preview,
                grid_size=self.controller.grid_size,
            )
            QtPainterBackend(painter).replay(ops)
        finally:
            painter.end()

    # --- Input ---

    def mousePressEvent(self, event):
        if event is None:
            return
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        pos = event.position()
        modifiers = event.modifiers()
        multi = bool(modifiers & (Qt.KeyboardModifier.ControlModifier | Qt.KeyboardModifier.MetaModifier))
        self.setFocus()
        self.controller.pointer_down(pos.x(), pos.y(), multi=multi)
        event.accept()

    def mouseMoveEvent(self, event):
        if event is None:
            return
        pos = event.position()
        self.controller.pointer_move(pos.x(), pos.y())

    def mouseReleaseEvent(self, event):
        if event is None:
            return
        if event.button() == Qt.MouseButton.LeftButton:
            self.controller.pointer_up()
        super().mouseReleaseEvent(event)

    def wheelEvent(self, event):
        if event is None:
            return
        # Qt reports scroll-up as positive; the controller expects scroll-down positive
        delta = event.angleDelta()
        modifiers = event.modifiers()
        zoom = bool(modifiers & (Qt.KeyboardModifier.ControlModifier | Qt.KeyboardModifier.MetaModifier))
        self.controller.wheel(-delta.x(), -delta.y(), zoom_modifier=zoom)
        event.accept()

    def keyPressEvent(self, event):
        """Handle keyboard shortcuts"""
        if event is None:
            return

        key = event.key()
        if key in (Qt.Key.Key_Delete, Qt.Key.Key_Backspace):
            self.controller.delete_selected()
        elif key == Qt.Key.Key_Escape:
            self.controller.escape()
        elif key == Qt.Key.Key_A and event.modifiers() & (
            Qt.KeyboardModifier.ControlModifier | Qt.KeyboardModifier.MetaModifier
        ):
            self.controller.select_all()
        else:
            super().keyPressEvent(event)
