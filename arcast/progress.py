"""A one-line progress bar with a title and a percentage."""

from __future__ import annotations

import math

_PERCENT_WIDTH = 5
_LEFT, _FILL, _EMPTY, _RIGHT = "[", "#", "-", "]"


class TitledBar:
    """A progress bar laid out as ``title [###---] pct%`` across a given width."""

    def __init__(self, title: str, width: int) -> None:
        self.title = title
        self.title_width = min(len(title), width // 2)
        if width <= self.title_width:
            raise ValueError("width must exceed the title width")
        self.bar_width = width - self.title_width - 1 - _PERCENT_WIDTH
        if self.bar_width < 0:
            raise ValueError(f"width {width} is too narrow for a progress bar")
        self._progress = 0.0

    @property
    def progress(self) -> float:
        """The current progress, between 0 and 1."""
        return self._progress

    def set(self, progress: float) -> None:
        """Set the progress, clamped to the range 0 to 1."""
        value = float(progress)
        if math.isnan(value):
            value = 0.0
        self._progress = min(1.0, max(0.0, value))

    def _bar(self) -> str:
        inner = max(self.bar_width - 2, 0)
        filled = min(inner, int(self._progress * inner))
        return f"{_LEFT}{_FILL * filled}{_EMPTY * (inner - filled)}{_RIGHT}"

    def _percent(self) -> str:
        text = f"{int(self._progress * 100):3d}%"
        assert len(text) < _PERCENT_WIDTH
        return text

    def __str__(self) -> str:
        return f"{self.title[: self.title_width]} {self._bar()} {self._percent()}"