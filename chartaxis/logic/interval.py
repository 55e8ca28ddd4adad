"""Index based thinning of candidate ticks."""

from dataclasses import replace
from typing import Sequence

from .ticks import AxisTick


def select_by_interval(ticks: Sequence[AxisTick], interval: int) -> list[AxisTick]:
    """
    Keep every ``(interval + 1)``-th tick, starting with the first one.

    Parameters:
        ticks (Sequence[AxisTick]): candidates in axis order.
        interval (int): number of candidates skipped between two kept ones.

    Returns:
        ticks (list[AxisTick]): the kept candidates, marked as shown.
    """
    if interval < 0:
        raise ValueError("Tick interval must be a non-negative integer.")
    step = int(interval) + 1
    return [replace(tick, is_show=True) for tick in ticks[::step]]
