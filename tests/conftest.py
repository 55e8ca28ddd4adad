import os

import pytest

from chartaxis.logic.ticks import AxisTick, TextSize

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

CHAR_WIDTH = 10.0
LINE_HEIGHT = 12.0


def fixed_width_measure(text: str) -> TextSize:
    """Every character is 10 px wide, every line 12 px tall."""
    return TextSize(CHAR_WIDTH * len(text), LINE_HEIGHT)


def make_ticks(coordinates, values=None) -> list[AxisTick]:
    values = list(range(len(coordinates))) if values is None else list(values)
    return [AxisTick(value=v, coordinate=float(c)) for v, c in zip(values, coordinates)]


@pytest.fixture
def measure():
    return fixed_width_measure


@pytest.fixture(scope="session")
def qapp():
    pytest.importorskip("PySide6")
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app
