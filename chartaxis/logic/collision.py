"""
Greedy label collision avoidance along one axis.

Candidates are scanned from one end of the axis. Each label that fits between
the current bounds is accepted and the bound is pulled past it, plus the
minimum gap, so that later labels cannot overlap it. Labels that do not fit are
dropped and leave the bounds untouched. Only the tick next to the anchored end
of the axis may have its label moved inward; interior ticks are either shown at
their own coordinate or not at all.

The direction ``sign`` is +1 when coordinates grow with the index and -1
otherwise, in which case the bounds are swapped. All comparisons are multiplied
by ``sign`` so the same code handles both directions.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from typing import Sequence

from .ticks import AxisConfig, AxisTick, TextExtentProvider, ViewBox, format_tick_value

logger = logging.getLogger(__name__)


class ScanAnchor(str, Enum):
    """End of the axis whose label is guaranteed first."""

    START = "start"
    END = "end"
    BOTH = "both"


def _direction(ticks: Sequence[AxisTick]) -> int:
    # Equal leading coordinates scan forward, so stacked labels still collide.
    if len(ticks) < 2:
        return 1
    return -1 if ticks[1].coordinate - ticks[0].coordinate < 0 else 1


def axis_bounds(view_box: ViewBox, size_key: str, sign: int) -> tuple[float, float]:
    """Return the ``(start, end)`` bounds of the view box in scan direction."""

    if size_key == "width":
        low, high = view_box.x, view_box.x + view_box.width
    else:
        low, high = view_box.y, view_box.y + view_box.height
    return (low, high) if sign == 1 else (high, low)


def _fits(coord: float, size: float, start: float, end: float, sign: int) -> bool:
    return (
        sign * (coord - sign * size / 2 - start) >= 0
        and sign * (coord + sign * size / 2 - end) <= 0
    )


class _LabelSizer:
    """Measure formatted labels along the axis, unit suffix included."""

    def __init__(self, config: AxisConfig, measure: TextExtentProvider):
        self._config = config
        self._measure = measure
        self._size_key = config.size_key
        # The unit only widens labels of horizontal axes.
        if config.unit and self._size_key == "width":
            self._unit_size = float(getattr(measure(config.unit), self._size_key))
        else:
            self._unit_size = 0.0

    def __call__(self, value, index: int) -> float:
        content = format_tick_value(value, index, self._config)
        return float(getattr(self._measure(content), self._size_key)) + self._unit_size


def _shift_last(tick: AxisTick, size: float, end: float, sign: int) -> AxisTick:
    gap = sign * (tick.coordinate + sign * size / 2 - end)
    coord = tick.coordinate - gap * sign if gap > 0 else tick.coordinate
    return replace(tick, tick_coord=coord)


def _shift_first(tick: AxisTick, size: float, start: float, sign: int) -> AxisTick:
    gap = sign * (tick.coordinate - sign * size / 2 - start)
    coord = tick.coordinate - gap * sign if gap < 0 else tick.coordinate
    return replace(tick, tick_coord=coord)


def _scan_from_end(
    ticks: Sequence[AxisTick], config: AxisConfig, measure: TextExtentProvider
) -> list[AxisTick]:
    sizer = _LabelSizer(config, measure)
    sign = _direction(ticks)
    start, end = axis_bounds(config.view_box, config.size_key, sign)
    count = len(ticks)
    annotated = list(ticks)

    for i in range(count - 1, -1, -1):
        tick = ticks[i]
        size = sizer(tick.value, count - i - 1)
        if i == count - 1:
            entry = _shift_last(tick, size, end, sign)
        else:
            entry = replace(tick, tick_coord=tick.coordinate)

        is_show = _fits(entry.tick_coord, size, start, end, sign)
        if is_show:
            end = entry.tick_coord - sign * (size / 2 + config.min_tick_gap)
        annotated[i] = replace(entry, is_show=is_show)

    return [tick for tick in annotated if tick.is_show]


def _scan_from_start(
    ticks: Sequence[AxisTick],
    config: AxisConfig,
    measure: TextExtentProvider,
    preserve_end: bool = False,
) -> list[AxisTick]:
    sizer = _LabelSizer(config, measure)
    sign = _direction(ticks)
    start, end = axis_bounds(config.view_box, config.size_key, sign)
    count = len(ticks)
    annotated = list(ticks)

    if preserve_end:
        # Resolve the tail first so the forward scan cannot crowd it out.
        tail_size = sizer(ticks[-1].value, count - 1)
        tail = _shift_last(ticks[-1], tail_size, end, sign)
        tail_shown = _fits(tail.tick_coord, tail_size, start, end, sign)
        if tail_shown:
            end = tail.tick_coord - sign * (tail_size / 2 + config.min_tick_gap)
        annotated[-1] = replace(tail, is_show=tail_shown)

    for i in range(count - 1 if preserve_end else count):
        tick = ticks[i]
        size = sizer(tick.value, i)
        if i == 0:
            entry = _shift_first(tick, size, start, sign)
        else:
            entry = replace(tick, tick_coord=tick.coordinate)

        is_show = _fits(entry.tick_coord, size, start, end, sign)
        if is_show:
            start = entry.tick_coord + sign * (size / 2 + config.min_tick_gap)
        annotated[i] = replace(entry, is_show=is_show)

    return [tick for tick in annotated if tick.is_show]


def scan_ticks(
    ticks: Sequence[AxisTick],
    config: AxisConfig,
    anchor: ScanAnchor | str,
    measure: TextExtentProvider,
) -> list[AxisTick]:
    """
    Drop the labels that would overlap or overflow the axis.

    Parameters:
        ticks (Sequence[AxisTick]): candidates in axis order. The direction of
            the axis is inferred from the first two coordinates.
        config (AxisConfig): orientation, view box, minimum gap, formatter and
            unit of the axis.
        anchor (ScanAnchor | str): ``start`` scans forward, ``end`` scans
            backward and ``both`` secures the last label before scanning
            forward.
        measure (TextExtentProvider): label measurement function.

    Returns:
        ticks (list[AxisTick]): the shown ticks, annotated with ``tick_coord``.
    """
    anchor = ScanAnchor(anchor)
    if not ticks:
        return []

    if anchor is ScanAnchor.END:
        result = _scan_from_end(ticks, config, measure)
    else:
        result = _scan_from_start(
            ticks, config, measure, preserve_end=anchor is ScanAnchor.BOTH
        )

    logger.debug(
        "Collision scan (%s): %d/%d labels kept", anchor.value, len(result), len(ticks)
    )
    return result
