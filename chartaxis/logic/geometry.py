"""Screen geometry of tick marks and their labels."""

from dataclasses import dataclass

from .ticks import AxisConfig, AxisTick


@dataclass(frozen=True)
class TickLine:
    """Tick mark segment.

    ``(x1, y1)`` is the end next to the label, ``(x2, y2)`` the end on the
    axis line.
    """

    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class TickGeometry:
    """Tick mark and label anchor of one rendered tick."""

    line: TickLine
    label: Point


def compute_tick_geometry(tick: AxisTick, config: AxisConfig) -> TickGeometry:
    """
    Compute the tick mark endpoints and the label anchor of ``tick``.

    The tick mark stays on ``tick.coordinate`` whereas the label follows
    ``tick.tick_coord`` when a collision scan moved it inward. Mirroring flips
    the side of the axis the mark points to.

    Parameters:
        tick (AxisTick): tick to place.
        config (AxisConfig): axis configuration; ``config.box`` locates the axis.

    Returns:
        geometry (TickGeometry): line endpoints and label anchor in pixels.
    """
    box = config.box
    mirror = bool(config.mirror)
    sign = -1 if mirror else 1
    size = tick.tick_size or config.tick_size
    margin = config.tick_margin
    label_coord = tick.label_coord

    if config.orientation == "top":
        x1 = x2 = tick.coordinate
        y2 = box.y + (not mirror) * box.height
        y1 = y2 - sign * size
        label = Point(label_coord, y1 - sign * margin)
    elif config.orientation == "left":
        y1 = y2 = tick.coordinate
        x2 = box.x + (not mirror) * box.width
        x1 = x2 - sign * size
        label = Point(x1 - sign * margin, label_coord)
    elif config.orientation == "right":
        y1 = y2 = tick.coordinate
        x2 = box.x + mirror * box.width
        x1 = x2 + sign * size
        label = Point(x1 + sign * margin, label_coord)
    else:
        x1 = x2 = tick.coordinate
        y2 = box.y + mirror * box.height
        y1 = y2 + sign * size
        label = Point(label_coord, y1 + sign * margin)

    return TickGeometry(line=TickLine(x1, y1, x2, y2), label=label)


def tick_text_anchor(config: AxisConfig) -> str:
    """Horizontal text alignment of the labels: ``start``, ``middle`` or ``end``."""

    if config.orientation == "left":
        return "start" if config.mirror else "end"
    if config.orientation == "right":
        return "end" if config.mirror else "start"
    return "middle"


def tick_vertical_anchor(config: AxisConfig) -> str:
    """Vertical text alignment of the labels: ``start``, ``middle`` or ``end``."""

    if config.orientation in ("left", "right"):
        return "middle"
    if config.orientation == "top":
        return "start" if config.mirror else "end"
    return "end" if config.mirror else "start"
