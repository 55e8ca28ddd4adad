from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import Sequence

import numpy as np
import pyqtgraph as pg
from PySide6.QtWidgets import QApplication

from .logic.ticks import IntervalPolicy, ViewBox
from .logic.time_ticks import SECONDS_PER_DAY
from .ui.axis_item import TickSelectingAxisItem
from .ui.axis_preferences import AxisPreferences

DEMO_START = datetime(2024, 1, 1, tzinfo=timezone.utc)
DEMO_DAYS = 200


def _demo_series() -> tuple[np.ndarray, np.ndarray]:
    start = DEMO_START.timestamp()
    timestamps = start + SECONDS_PER_DAY * np.arange(DEMO_DAYS + 1, dtype=float)
    rng = np.random.default_rng(0)
    values = 50.0 + np.cumsum(rng.normal(0.0, 1.5, timestamps.size))
    return timestamps, values


def create_application(argv: Sequence[str]) -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication(list(argv))
    return app


def create_main_widget(preferences: AxisPreferences | None = None) -> pg.PlotWidget:
    """Build a plot with a calendar bottom axis and a percentage left axis."""
    preferences = preferences if preferences is not None else AxisPreferences()
    timestamps, values = _demo_series()

    bottom = TickSelectingAxisItem(
        "bottom",
        config=preferences.axis_config("bottom", ViewBox(), interval=IntervalPolicy.TIME),
    )
    # Every day is a candidate; the time policy keeps Sundays or month starts.
    bottom.set_candidate_values(timestamps)
    left = TickSelectingAxisItem(
        "left",
        config=preferences.axis_config(
            "left", ViewBox(), interval=IntervalPolicy.PRESERVE_START_END, unit="%"
        ),
    )

    widget = pg.PlotWidget(axisItems={"bottom": bottom, "left": left})
    widget.setWindowTitle("chartaxis")
    widget.plot(timestamps, values, pen=pg.mkPen(color=(0, 200, 255), width=2))
    return widget


def run(argv: Sequence[str] | None = None) -> int:
    """Entry point used by the launcher script and tests."""
    argv = argv if argv is not None else sys.argv
    app = create_application(argv)
    widget = create_main_widget()
    widget.resize(900, 500)
    widget.show()
    return app.exec()
