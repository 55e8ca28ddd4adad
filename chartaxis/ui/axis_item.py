"""pyqtgraph axis whose labels are chosen by :mod:`chartaxis.logic.selection`."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

import numpy as np
import pyqtgraph as pg

from ..logic.selection import get_visible_ticks, resolve_interval
from ..logic.ticks import (
    AxisConfig,
    AxisTick,
    IntervalPolicy,
    TextExtentProvider,
    ViewBox,
    tick_text,
)
from ..logic.time_ticks import SECONDS_PER_DAY
from .text_metrics import QtTextExtentProvider

logger = logging.getLogger(__name__)

# About 13 years of days; wider time ranges use pyqtgraph's own ticks.
MAX_DAILY_CANDIDATES = 5000


class TickSelectingAxisItem(pg.AxisItem):
    """Axis that drops crowded tick labels instead of overlapping them.

    Candidates are the explicit values within the visible range once
    :meth:`set_candidate_values` has been called. Otherwise a time axis uses
    every UTC midnight in range and other axes use the values pyqtgraph
    would tick. They are mapped to pixels along the axis and filtered with
    :func:`~chartaxis.logic.selection.get_visible_ticks` according to the
    axis configuration. pyqtgraph still positions the labels itself, so a
    label shifted inward by the scan is drawn centred on its tick.
    """

    def __init__(
        self,
        orientation: str,
        config: AxisConfig | None = None,
        measure: TextExtentProvider | None = None,
        **kwargs,
    ):
        super().__init__(orientation=orientation, **kwargs)
        self._config = replace(config or AxisConfig(), orientation=orientation)
        self._measure = measure
        self._text_metrics: QtTextExtentProvider | None = None
        self._candidate_values: np.ndarray | None = None
        self._labels: dict[float, str] = {}

    @property
    def axis_config(self) -> AxisConfig:
        return self._config

    def set_axis_config(self, config: AxisConfig) -> None:
        """Replace the configuration; the orientation stays the item's own."""
        self._config = replace(config, orientation=self.orientation)
        self._invalidate()

    def set_candidate_values(self, values: Sequence[float] | None) -> None:
        """Use ``values`` as tick candidates, or pyqtgraph's ticks when None."""
        if values is None:
            self._candidate_values = None
        else:
            self._candidate_values = np.unique(np.asarray(values, dtype=float).ravel())
        self._invalidate()

    def setTickFont(self, font) -> None:  # noqa: N802 - pyqtgraph API
        super().setTickFont(font)
        self._text_metrics = None

    def _invalidate(self) -> None:
        self.picture = None
        self.update()

    def _text_extent(self) -> TextExtentProvider:
        if self._measure is not None:
            return self._measure
        if self._text_metrics is None:
            font = self.style.get("tickFont") or self.font()
            self._text_metrics = QtTextExtentProvider(font)
        return self._text_metrics

    def _is_inverted(self) -> bool:
        view = self.linkedView()
        if view is None:
            return False
        return bool(view.xInverted() if self._config.is_horizontal else view.yInverted())

    def _candidates(self, minVal: float, maxVal: float, size: float) -> np.ndarray:
        if self._candidate_values is not None:
            values = self._candidate_values
            return values[(values >= minVal) & (values <= maxVal)]
        if resolve_interval(self._config.interval) is IntervalPolicy.TIME:
            days = _daily_candidates(minVal, maxVal)
            if days is not None:
                return days
        levels = super().tickValues(minVal, maxVal, size)
        if not levels:
            return np.empty(0, dtype=float)
        return np.unique(np.concatenate([np.asarray(vals, dtype=float) for _, vals in levels]))

    def tickValues(self, minVal, maxVal, size):  # noqa: N802 - pyqtgraph API
        if self.logMode:
            return super().tickValues(minVal, maxVal, size)

        minVal, maxVal = sorted((float(minVal), float(maxVal)))
        values = self._candidates(minVal, maxVal, size)
        self._labels = {}
        if values.size == 0 or maxVal == minVal or size <= 0:
            return []

        spacing = float(np.min(np.diff(values))) if values.size > 1 else maxVal - minVal
        fraction = (values - minVal) / (maxVal - minVal)
        # Screen y grows downward, so vertical axes run backward unless inverted.
        descending = (not self._config.is_horizontal) != self._is_inverted()
        coords = size * (1.0 - fraction) if descending else size * fraction

        config = replace(self._config, view_box=ViewBox(0.0, 0.0, float(size), float(size)))
        if (
            config.tick_formatter is None
            and resolve_interval(config.interval) is not IntervalPolicy.TIME
        ):
            strings = super().tickStrings(
                values.tolist(), self.autoSIPrefixScale * self.scale, spacing
            )
            by_value = dict(zip(values.tolist(), strings))
            config = replace(config, tick_formatter=lambda value, index: by_value[value])

        value_at = dict(zip(coords.tolist(), values.tolist()))
        candidates = [AxisTick(value=v, coordinate=c) for v, c in zip(values.tolist(), coords.tolist())]
        selected = get_visible_ticks(candidates, config, self._text_extent())

        kept: list[float] = []
        for index, tick in enumerate(selected):
            value = value_at[tick.coordinate]
            self._labels[value] = tick_text(tick.value, index, config)
            kept.append(value)

        logger.debug(
            "%s axis: %d/%d tick labels kept", self.orientation, len(kept), len(candidates)
        )
        return [(spacing, kept)]

    def tickStrings(self, values, scale, spacing):  # noqa: N802 - pyqtgraph API
        if self.logMode:
            return super().tickStrings(values, scale, spacing)

        strings: list[str] = []
        for value in values:
            label = self._labels.get(float(value))
            if label is None:
                return super().tickStrings(values, scale, spacing)
            strings.append(label)
        return strings


def _daily_candidates(minVal: float, maxVal: float) -> np.ndarray | None:
    """UTC midnights within ``[minVal, maxVal]``, or None when there are too many."""
    first = np.ceil(minVal / SECONDS_PER_DAY)
    last = np.floor(maxVal / SECONDS_PER_DAY)
    if last - first + 1 > MAX_DAILY_CANDIDATES:
        return None
    return np.arange(first, last + 1, dtype=float) * SECONDS_PER_DAY
