"""
Schematic - high-level scripting API for building circuits programmatically.

No GUI or PyQt6 dependency. Every placement replays the same gestures a user
would perform on the canvas (select tool, click, move, click), so scripted
circuits obey exactly the same snapping and sizing rules as drawn ones.
"""

from pathlib import Path
from typing import Optional, Union

from controllers.circuit_controller import CircuitController
from models.component import COMPONENT_TYPES, lookup
from models.element import CircuitElement
from scripting.preview import render_figure, save_preview


class Schematic:
    """A scriptable schematic that can be built and exported headlessly.

    Args:
        controller: An existing CircuitController to drive. If None, creates
            an empty session.
    """

    component_types = COMPONENT_TYPES

    def __init__(self, controller: Optional[CircuitController] = None):
        self._controller = controller if controller is not None else CircuitController()

    @property
    def controller(self) -> CircuitController:
        return self._controller

    @property
    def elements(self) -> list[CircuitElement]:
        return list(self._controller.model.elements)

    def __len__(self) -> int:
        return len(self._controller.model)

    # --- Element operations ---

    def place(
        self,
        kind_id: str,
        start: tuple[float, float],
        end: Optional[tuple[float, float]] = None,
        label: str = "",
        value: str = "",
    ) -> CircuitElement:
        """Place a component by replaying the canvas gestures.

        Args:
            kind_id: Catalog identifier (see ``Schematic.component_types``).
            start: Model point of the (first) click.
            end: Model point of the second click for path components.
                Defaults to the kind's default width to the right of *start*.
                Ignored for point components.
            label: Optional label, emitted as ``l=...`` in the export.
            value: Optional value text drawn below the element.

        Returns:
            The committed element.

        Raises:
            UnknownKindError: If *kind_id* is not in the catalog.
        """
        kind = lookup(kind_id)
        ctrl = self._controller
        to_screen = ctrl.view.model_to_screen

        ctrl.select_tool(kind_id)
        element = ctrl.click(*to_screen(*start))
        if kind.is_path:
            if end is None:
                end = (start[0] + kind.width, start[1])
            ctrl.pointer_move(*to_screen(*end))
            element = ctrl.click(*to_screen(*end))

        if label:
            ctrl.set_label(element, label)
        if value:
            ctrl.set_value(element, value)
        return element

    def remove(self, element: CircuitElement) -> None:
        self._controller.remove_element(element)

    def clear(self) -> None:
        self._controller.clear_circuit()

    # --- Export ---

    def to_latex(self, standalone: bool = False) -> str:
        return self._controller.export_latex(standalone=standalone)

    def save_latex(self, path: Union[str, Path], standalone: bool = True) -> Path:
        """Write the CircuiTikZ export to *path* and return it."""
        path = Path(path)
        path.write_text(self.to_latex(standalone=standalone).rstrip("\n") + "\n")
        return path

    def preview(self):
        """Return a matplotlib Figure of the schematic."""
        return render_figure(self._controller.model)

    def save_preview(self, path: Union[str, Path], **savefig_kwargs) -> Path:
        return save_preview(self._controller.model, path, **savefig_kwargs)

    def __repr__(self) -> str:
        return f"Schematic({len(self)} elements)"
