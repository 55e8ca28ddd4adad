"""Choice of the tick selection strategy and per-pass axis layout."""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Sequence

from .collision import ScanAnchor, scan_ticks
from .geometry import TickGeometry, compute_tick_geometry, tick_text_anchor, tick_vertical_anchor
from .interval import select_by_interval
from .ticks import AxisConfig, AxisTick, IntervalPolicy, TextExtentProvider, tick_text
from .time_ticks import select_time_ticks

logger = logging.getLogger(__name__)

_SCAN_ANCHORS = {
    IntervalPolicy.PRESERVE_START: ScanAnchor.START,
    IntervalPolicy.PRESERVE_END: ScanAnchor.END,
    IntervalPolicy.PRESERVE_START_END: ScanAnchor.BOTH,
}


def resolve_interval(interval) -> int | IntervalPolicy:
    """
    Normalise a configured interval.

    Non-negative integers, numpy scalars and integral floats included but
    booleans excluded, are returned as ``int``. Policy members and their string values are returned
    as :class:`IntervalPolicy`. Anything else falls back to
    ``IntervalPolicy.PRESERVE_END``.
    """
    if isinstance(interval, IntervalPolicy):
        return interval
    if isinstance(interval, str):
        try:
            return IntervalPolicy(interval)
        except ValueError:
            pass
    elif isinstance(interval, numbers.Real) and not isinstance(interval, bool):
        if math.isfinite(interval) and float(interval).is_integer() and interval >= 0:
            return int(interval)

    logger.debug("Unrecognised tick interval %r, using preserveEnd", interval)
    return IntervalPolicy.PRESERVE_END


def get_visible_ticks(
    ticks: Sequence[AxisTick],
    config: AxisConfig,
    measure: TextExtentProvider | None = None,
) -> list[AxisTick]:
    """
    Select the ticks whose label is rendered.

    Parameters:
        ticks (Sequence[AxisTick]): candidates in axis order.
        config (AxisConfig): axis configuration. ``config.interval`` picks the
            strategy; ``config.server_render`` forces the interval strategy
            since no text can be measured.
        measure (TextExtentProvider | None): label measurement, required by
            the ``preserve*`` policies.

    Returns:
        ticks (list[AxisTick]): shown ticks in axis order.

    Raises:
        ValueError: if a collision scan is needed and ``measure`` is None.
    """
    if not ticks or not config.show_ticks:
        return []

    policy = resolve_interval(config.interval)
    if isinstance(policy, int) or config.server_render:
        step = policy if isinstance(policy, int) else 0
        logger.debug("Selecting every %d-th of %d ticks", step + 1, len(ticks))
        return select_by_interval(ticks, step)

    if policy is IntervalPolicy.TIME:
        return select_time_ticks(ticks)

    if measure is None:
        raise ValueError(
            f"A text measurement function is required for the '{policy.value}' interval."
        )
    return scan_ticks(ticks, config, _SCAN_ANCHORS[policy], measure)


@dataclass(frozen=True)
class RenderedTick:
    """Everything a renderer needs to draw one tick."""

    tick: AxisTick
    geometry: TickGeometry
    text: str
    text_anchor: str
    vertical_anchor: str


def layout_axis(
    ticks: Sequence[AxisTick],
    config: AxisConfig,
    measure: TextExtentProvider | None = None,
) -> list[RenderedTick]:
    """
    Run a full layout pass: select the visible ticks and place them.

    A hidden axis, or an axis box without area, renders nothing.
    """
    box = config.box
    if config.hide or box.width <= 0 or box.height <= 0:
        return []

    text_anchor = tick_text_anchor(config)
    vertical_anchor = tick_vertical_anchor(config)
    return [
        RenderedTick(
            tick=tick,
            geometry=compute_tick_geometry(tick, config),
            text=tick_text(tick.value, index, config),
            text_anchor=text_anchor,
            vertical_anchor=vertical_anchor,
        )
        for index, tick in enumerate(get_visible_ticks(ticks, config, measure))
    ]
