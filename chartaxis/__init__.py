from .logic.collision import ScanAnchor, scan_ticks
from .logic.geometry import (
    Point,
    TickGeometry,
    TickLine,
    compute_tick_geometry,
    tick_text_anchor,
    tick_vertical_anchor,
)
from .logic.interval import select_by_interval
from .logic.selection import RenderedTick, get_visible_ticks, layout_axis, resolve_interval
from .logic.ticks import (
    AxisConfig,
    AxisTick,
    IntervalPolicy,
    TextExtentProvider,
    TextSize,
    ViewBox,
    tick_text,
)
from .logic.time_ticks import format_time_label, select_time_ticks
