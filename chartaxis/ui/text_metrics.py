"""Label measurement backed by Qt font metrics."""

from __future__ import annotations

from PySide6.QtGui import QFont, QFontMetricsF

from ..logic.ticks import TextSize

MAX_CACHE_SIZE = 2000


class QtTextExtentProvider:
    """Measure label strings with :class:`~PySide6.QtGui.QFontMetricsF`.

    Results are memoised per string. The memo is dropped as a whole once it
    holds more than ``max_cache`` entries.

    A ``QGuiApplication`` must exist before the first measurement.
    """

    def __init__(self, font: QFont | None = None, max_cache: int = MAX_CACHE_SIZE):
        self._font = QFont(font) if font is not None else QFont()
        self._metrics = QFontMetricsF(self._font)
        self._max_cache = max_cache
        self._cache: dict[str, TextSize] = {}

    @property
    def font(self) -> QFont:
        return QFont(self._font)

    def __call__(self, text: str) -> TextSize:
        text = str(text)
        size = self._cache.get(text)
        if size is None:
            size = TextSize(
                float(self._metrics.horizontalAdvance(text)),
                float(self._metrics.height()),
            )
            if len(self._cache) >= self._max_cache:
                self._cache.clear()
            self._cache[text] = size
        return size

    def cache_size(self) -> int:
        return len(self._cache)
