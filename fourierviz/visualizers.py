"""Spectrum visualizers that turn amplitude frames into rectangles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum

from fourierviz.circular import CircularBuffer

MAX_LOUDNESS = 0.05
EASE_FACTOR = 0.95

Rect = tuple[float, float, float, float]


class Rotation(Enum):
    """Direction in which bars grow."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Visualizer(ABC):
    """Consumes amplitude frames and describes what to draw."""

    @abstractmethod
    def push(self, data: Sequence[float]) -> None:
        """Feed one frame of amplitudes."""

    @abstractmethod
    def rectangles(self) -> list[Rect]:
        """Rectangles to draw as (x, y, width, height)."""


class BarVisualizer(Visualizer):
    """Eased bar chart of amplitude averaged into a fixed number of bars."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        rotation: Rotation,
        num_bars: int,
    ) -> None:
        if num_bars <= 0:
            raise ValueError("Number of bars must be greater than 0.")
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.rotation = rotation
        self._bars = [0.0] * num_bars

    def push(self, data: Sequence[float]) -> None:
        if len(data) < len(self._bars):
            raise ValueError("Need at least one value per bar.")
        per_bar = len(data) // len(self._bars)
        for i, bar in enumerate(self._bars):
            start = i * per_bar
            total = sum(data[start : start + per_bar])
            self._bars[i] = bar * EASE_FACTOR + total / per_bar * (1.0 - EASE_FACTOR)

    def rectangles(self) -> list[Rect]:
        vertical = self.rotation in (Rotation.UP, Rotation.DOWN)
        along = self.height if vertical else self.width
        across = self.width if vertical else self.height
        count = len(self._bars)
        thickness = across / count * 0.8

        rects: list[Rect] = []
        for i, value in enumerate(self._bars):
            offset = (i / count) * (across - 10.0) + thickness * 0.1 + 5.0
            length = min(abs(value) / MAX_LOUDNESS * along, along)
            if self.rotation is Rotation.UP:
                rect = (self.x + offset, self.y + self.height, thickness, -length)
            elif self.rotation is Rotation.DOWN:
                rect = (self.x + offset, self.y, thickness, length)
            elif self.rotation is Rotation.LEFT:
                rect = (self.x, self.y + offset, length, thickness)
            else:
                rect = (self.x + self.width, self.y + offset, -length, thickness)
            rects.append(rect)
        return rects


class ScrollingVisualizer(Visualizer):
    """History of overall loudness scrolling right to left, one pixel a frame."""

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self._columns: CircularBuffer[float] = CircularBuffer(int(width))
        self._max_amp = 0.0

    def push(self, data: Sequence[float]) -> None:
        if not data:
            raise ValueError("Cannot push an empty frame.")
        level = sum(data) / len(data) * self.height
        self._max_amp = max(self._max_amp, level)
        self._columns.push(level)

    def rectangles(self) -> list[Rect]:
        count = len(self._columns)
        scale = max(self._max_amp, 1.0)
        rects: list[Rect] = []
        for i, column in enumerate(self._columns):
            bar = min(column / scale, 1.0) * self.height
            rects.append(
                (
                    self.x + self.width - count + i,
                    self.y + self.height / 2.0 - bar / 2.0,
                    1.0,
                    bar,
                )
            )
        return rects