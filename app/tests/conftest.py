"""
Shared test fixtures for the schematic editor test suite.

Most fixtures build pure-Python model objects (no Qt dependencies); the
canvas tests use pytest-qt's ``qtbot`` on the offscreen platform.
"""

import os
import sys
from pathlib import Path

# Ensure app/ is on sys.path so bare imports (models, controllers, export, GUI)
# work when running individual test files (e.g., python -m pytest app/tests/unit/test_foo.py).
_app_dir = str(Path(__file__).resolve().parent.parent)
if _app_dir not in sys.path:
    sys.path.insert(0, _app_dir)

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest
from controllers.circuit_controller import CircuitController
from models.circuit import CircuitModel
from models.element import CircuitElement, reset_element_counter


@pytest.fixture(autouse=True)
def _reset_ids():
    """Reset the element ID counter before each test."""
    reset_element_counter()


def make_element(kind_id, x=0.0, y=0.0, width=None, height=None, label="", value=""):
    """Helper to create a CircuitElement with minimal boilerplate."""
    element = CircuitElement.create(kind_id, x, y)
    if width is not None:
        element.width = width
    if height is not None:
        element.height = height
    element.label = label
    element.value = value
    return element


@pytest.fixture
def model():
    return CircuitModel()


@pytest.fixture
def controller():
    return CircuitController()


@pytest.fixture
def events():
    """Fixture that returns a list and a callback that appends events to it."""
    recorded = []

    def callback(event, data):
        recorded.append((event, data))

    return recorded, callback


@pytest.fixture
def overlapping_circuit():
    """
    Two resistors whose boxes overlap between x=40 and x=60:

        R_a at (0, 0)  60x20
        R_b at (40, 0) 60x20 (added last, topmost)
    """
    model = CircuitModel()
    bottom = model.add_element(make_element("resistor", 0, 0))
    top = model.add_element(make_element("resistor", 40, 0))
    return model, bottom, top


def assert_selection_consistent(model):
    """The selected list and the per-element flags must agree."""
    assert len({id(e) for e in model.selected}) == len(model.selected)
    for element in model.selected:
        assert element in model
        assert element.selected
    for element in model.elements:
        if not any(element is s for s in model.selected):
            assert not element.selected
