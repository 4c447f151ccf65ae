from models.component import COMPONENT_KINDS
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QListWidget, QListWidgetItem


class ComponentPalette(QListWidget):
    """Component palette: clicking an entry activates it as the placement tool"""

    toolSelected = pyqtSignal(str)  # kind_id

    def __init__(self):
        super().__init__()
        for kind in COMPONENT_KINDS.values():
            item = QListWidgetItem(f"{kind.symbol}  {kind.name}")
            item.setData(Qt.ItemDataRole.UserRole, kind.kind_id)
            self.addItem(item)
        self.itemClicked.connect(self._on_item_clicked)

    def _on_item_clicked(self, item):
        self.toolSelected.emit(item.data(Qt.ItemDataRole.UserRole))

    def set_active(self, kind_id):
        """Highlight the entry for *kind_id*, or nothing when None."""
        self.blockSignals(True)
        try:
            self.clearSelection()
            self.setCurrentItem(None)
            for row in range(self.count()):
                item = self.item(row)
                if item.data(Qt.ItemDataRole.UserRole) == kind_id:
                    self.setCurrentItem(item)
                    break
        finally:
            self.blockSignals(False)

    def active_kind(self):
        item = self.currentItem()
        return item.data(Qt.ItemDataRole.UserRole) if item is not None else None
