"""
Calendar aware sampling of time axis ticks.

Tick values are Unix timestamps in seconds. Depending on the time span covered
by the candidates the labels are sampled per day, per week (Sundays only) or
per month (first day of the month only), all dates being taken in UTC.
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Sequence

from .ticks import AxisTick

SECONDS_PER_DAY = 24 * 60 * 60
SECONDS_PER_WEEK = 7 * SECONDS_PER_DAY
# 1970-01-04, the first Sunday after the epoch
REFERENCE_SUNDAY = 3 * SECONDS_PER_DAY

# Span thresholds in days
DAILY_SPAN_LIMIT = 10
WEEKLY_SPAN_LIMIT = 120
WEEK_STRIDE_2_LIMIT = 60
MONTH_STRIDE_1_LIMIT = 260
MONTH_STRIDE_2_LIMIT = 400

SHORT_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_SUNDAY = 6


def _utc_date(value: float) -> datetime:
    return _EPOCH + timedelta(seconds=float(value))


def format_time_label(value: float, monthly: bool) -> str:
    """Label of a timestamp: ``"Mar 5"``, or ``"Mar '24"`` when ``monthly``."""

    date = _utc_date(value)
    month = SHORT_MONTHS[date.month - 1]
    if monthly:
        return f"{month} '{date.year % 100:02d}"
    return f"{month} {date.day}"


def week_stride(span_days: float) -> int:
    if span_days < DAILY_SPAN_LIMIT:
        return 1
    if span_days < WEEK_STRIDE_2_LIMIT:
        return 2
    return 3


def month_stride(span_days: float) -> int:
    if span_days < MONTH_STRIDE_1_LIMIT:
        return 1
    if span_days < MONTH_STRIDE_2_LIMIT:
        return 2
    return 3


def show_for_week(value: float, stride: int) -> bool:
    """Whether the Sunday at ``value`` starts a labelled week."""

    if stride == 1:
        return True
    weeks_since_reference = int((float(value) - REFERENCE_SUNDAY) // SECONDS_PER_WEEK)
    return weeks_since_reference % (2 if stride == 2 else 3) == 0


def show_for_month(value: float, stride: int) -> bool:
    """Whether the first day of the month at ``value`` is labelled."""

    if stride == 1:
        return True
    month = _utc_date(value).month
    return month % (2 if stride == 2 else 3) == 1


def _formatted(ticks: Sequence[AxisTick], shown: Sequence[bool], monthly: bool) -> list[AxisTick]:
    return [
        replace(tick, value=format_time_label(tick.value, monthly), is_show=True)
        for tick, is_show in zip(ticks, shown)
        if is_show
    ]


def select_time_ticks(ticks: Sequence[AxisTick]) -> list[AxisTick]:
    """
    Select and label time ticks according to the span they cover.

    Parameters:
        ticks (Sequence[AxisTick]): candidates whose values are Unix timestamps
            in seconds, in ascending time order.

    Returns:
        ticks (list[AxisTick]): shown ticks whose value is the display label.
    """
    count = len(ticks)
    if count < 2:
        return _formatted(ticks, [True] * count, monthly=False)

    span_days = (float(ticks[-1].value) - float(ticks[0].value)) / SECONDS_PER_DAY
    if span_days < DAILY_SPAN_LIMIT:
        return _formatted(ticks, [True] * count, monthly=False)

    if span_days < WEEKLY_SPAN_LIMIT:
        stride = week_stride(span_days)
        shown = [
            _utc_date(tick.value).weekday() == _SUNDAY and show_for_week(tick.value, stride)
            for tick in ticks
        ]
        return _formatted(ticks, shown, monthly=False)

    stride = month_stride(span_days)
    shown = [
        _utc_date(tick.value).day == 1 and show_for_month(tick.value, stride)
        for tick in ticks
    ]
    return _formatted(ticks, shown, monthly=True)
