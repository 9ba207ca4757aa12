"""Points and rectangles on the drawing surface."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in surface coordinates (y grows downward)."""

    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width