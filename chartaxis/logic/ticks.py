"""Data model shared by the tick selection strategies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Literal, NamedTuple, Protocol

Orientation = Literal["top", "bottom", "left", "right"]


class TextSize(NamedTuple):
    """Rendered extent of a label in pixels."""

    width: float
    height: float


class TextExtentProvider(Protocol):
    """Measure the rendered size of a label string.

    Implementations must be pure: the same text always yields the same size,
    otherwise the greedy scans are not reproducible.
    """

    def __call__(self, text: str) -> TextSize:
        """Return the width and height of ``text`` in pixels."""


class IntervalPolicy(str, Enum):
    """Named label selection policies.

    An axis may also be configured with a plain non-negative integer, which
    selects every ``(n + 1)``-th candidate instead.
    """

    PRESERVE_START = "preserveStart"
    PRESERVE_END = "preserveEnd"
    PRESERVE_START_END = "preserveStartEnd"
    TIME = "time"


@dataclass(frozen=True)
class ViewBox:
    """Rectangle in pixel space."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class AxisTick:
    """A candidate tick, optionally annotated by a selection pass.

    Attributes:
        value: domain value. Unix timestamp in seconds for time axes; replaced
            by its display label once the time selector has run.
        coordinate: pixel position along the measured dimension of the axis.
        tick_coord (float | None): coordinate used to place the label. Only the
            tick next to an axis bound is ever moved away from ``coordinate``.
        is_show (bool): whether the tick survived selection.
        tick_size (float | None): tick mark length overriding the axis default.
    """

    value: Any
    coordinate: float
    tick_coord: float | None = None
    is_show: bool = False
    tick_size: float | None = None

    @property
    def label_coord(self) -> float:
        return self.coordinate if self.tick_coord is None else self.tick_coord


TickFormatter = Callable[[Any, int], str]


@dataclass(frozen=True)
class AxisConfig:
    """Per-pass configuration of a cartesian axis.

    ``view_box`` bounds the labels during collision avoidance while
    ``axis_box`` is the rectangle the axis itself occupies; tick marks are
    drawn from its edge. When ``axis_box`` is omitted the view box is used.
    """

    orientation: Orientation = "bottom"
    view_box: ViewBox = ViewBox()
    axis_box: ViewBox | None = None
    min_tick_gap: float = 5.0
    tick_size: float = 6.0
    tick_margin: float = 2.0
    mirror: bool = False
    interval: int | IntervalPolicy | str = IntervalPolicy.PRESERVE_END
    tick_formatter: TickFormatter | None = None
    unit: str | None = None
    show_ticks: bool = True
    hide: bool = False
    server_render: bool = False

    @property
    def is_horizontal(self) -> bool:
        return self.orientation in ("top", "bottom")

    @property
    def size_key(self) -> str:
        """Name of the :class:`TextSize` field measured along the axis."""
        return "width" if self.is_horizontal else "height"

    @property
    def box(self) -> ViewBox:
        return self.view_box if self.axis_box is None else self.axis_box


def default_tick_formatter(value: Any, index: int = 0) -> str:
    """Render ``value`` as text, dropping the ``.0`` of integral floats."""

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_tick_value(value: Any, index: int, config: AxisConfig) -> str:
    """Apply the configured formatter, or the default one, to ``value``."""

    formatter = config.tick_formatter or default_tick_formatter
    return formatter(value, index)


def tick_text(value: Any, index: int, config: AxisConfig) -> str:
    """Full label text as rendered, unit suffix included."""

    return f"{format_tick_value(value, index, config)}{config.unit or ''}"
