"""Lightweight wrapper around :class:`~PySide6.QtCore.QSettings`.

Axis defaults (gaps, tick lengths, label policy) are user preferences rather
than per-chart data. This helper reads and writes them in the platform
settings backend and turns them into an :class:`~chartaxis.logic.ticks.AxisConfig`
for a given axis.
"""

from __future__ import annotations

from dataclasses import fields

from PySide6.QtCore import QSettings

from ..logic.selection import resolve_interval
from ..logic.ticks import AxisConfig, IntervalPolicy, Orientation, ViewBox

_DEFAULTS = {field.name: field.default for field in fields(AxisConfig)}


class AxisPreferences:
    """Store axis defaults in the platform settings backend."""

    _ORG = "ChartAxis"
    _APP = "AxisTicks"
    _KEY_MIN_TICK_GAP = "axis/min_tick_gap"
    _KEY_TICK_SIZE = "axis/tick_size"
    _KEY_TICK_MARGIN = "axis/tick_margin"
    _KEY_MIRROR = "axis/mirror"
    _KEY_INTERVAL = "axis/interval"
    _KEY_UNIT = "axis/unit"

    def __init__(self, settings: QSettings | None = None) -> None:
        self._settings = settings if settings is not None else QSettings(self._ORG, self._APP)

    @staticmethod
    def _to_str(value) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return str(value)

    @staticmethod
    def _to_float(value, default: float) -> float:
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    @staticmethod
    def _to_bool(value, default: bool) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in {"1", "true", "t", "yes", "y"}:
                return True
            if lowered in {"0", "false", "f", "no", "n"}:
                return False
        return default

    @staticmethod
    def _to_interval(value) -> int | IntervalPolicy:
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return int(text)
            return resolve_interval(text)
        return resolve_interval(value)

    def sync(self) -> None:
        self._settings.sync()

    def min_tick_gap(self) -> float:
        default = _DEFAULTS["min_tick_gap"]
        return self._to_float(self._settings.value(self._KEY_MIN_TICK_GAP, default), default)

    def set_min_tick_gap(self, value: float) -> None:
        self._settings.setValue(self._KEY_MIN_TICK_GAP, float(value))

    def tick_size(self) -> float:
        default = _DEFAULTS["tick_size"]
        return self._to_float(self._settings.value(self._KEY_TICK_SIZE, default), default)

    def set_tick_size(self, value: float) -> None:
        self._settings.setValue(self._KEY_TICK_SIZE, float(value))

    def tick_margin(self) -> float:
        default = _DEFAULTS["tick_margin"]
        return self._to_float(self._settings.value(self._KEY_TICK_MARGIN, default), default)

    def set_tick_margin(self, value: float) -> None:
        self._settings.setValue(self._KEY_TICK_MARGIN, float(value))

    def mirror(self) -> bool:
        default = _DEFAULTS["mirror"]
        return self._to_bool(self._settings.value(self._KEY_MIRROR, default), default)

    def set_mirror(self, enabled: bool) -> None:
        self._settings.setValue(self._KEY_MIRROR, bool(enabled))

    def interval(self) -> int | IntervalPolicy:
        stored = self._settings.value(self._KEY_INTERVAL, None)
        if stored is None:
            return _DEFAULTS["interval"]
        return self._to_interval(stored)

    def set_interval(self, interval: int | IntervalPolicy | str) -> None:
        resolved = resolve_interval(interval)
        if isinstance(resolved, IntervalPolicy):
            self._settings.setValue(self._KEY_INTERVAL, resolved.value)
        else:
            self._settings.setValue(self._KEY_INTERVAL, str(resolved))

    def unit(self) -> str | None:
        text = self._to_str(self._settings.value(self._KEY_UNIT, ""))
        return text or None

    def set_unit(self, unit: str | None) -> None:
        self._settings.setValue(self._KEY_UNIT, unit or "")

    def axis_config(
        self, orientation: Orientation, view_box: ViewBox, **overrides
    ) -> AxisConfig:
        """Build an :class:`AxisConfig` from the stored defaults.

        ``overrides`` are passed to :class:`AxisConfig` and take precedence.
        """
        values = {
            "orientation": orientation,
            "view_box": view_box,
            "min_tick_gap": self.min_tick_gap(),
            "tick_size": self.tick_size(),
            "tick_margin": self.tick_margin(),
            "mirror": self.mirror(),
            "interval": self.interval(),
            "unit": self.unit(),
        }
        values.update(overrides)
        return AxisConfig(**values)
