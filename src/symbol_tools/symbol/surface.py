"""
Drawing surface contract and scoped graphics state.

Symbols draw onto any object offering the subset of the ``cairo.Context``
API listed in :class:`DrawingContext`. Every change to colour, line width
or current point is made inside :func:`saved_state` so it cannot leak into
the next pin or section.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Protocol

from .metrics import TextExtents, TextMetrics


class DrawingContext(Protocol):
    """The cairo context primitives used by the layout engine."""

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def rectangle(self, x: float, y: float, width: float, height: float) -> None: ...

    def stroke(self) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def set_source_rgb(self, red: float, green: float, blue: float) -> None: ...

    def show_text(self, text: str) -> None: ...

    def text_extents(self, text: str) -> TextExtents: ...


class TextAlign(str, Enum):
    """Which edge of the text sits on the given x position."""

    START = "start"  # text grows to the right of x
    END = "end"  # text grows to the left of x


@contextmanager
def saved_state(ctx: DrawingContext) -> Iterator[DrawingContext]:
    """Save the graphics state and restore it on every exit path."""
    ctx.save()
    try:
        yield ctx
    finally:
        ctx.restore()


def show_text_at(
    ctx: DrawingContext,
    text: str,
    x: float,
    y: float,
    align: TextAlign = TextAlign.START,
    metrics: TextMetrics | None = None,
) -> None:
    """
    Paint ``text`` with its baseline at ``y`` and the ``align`` edge at ``x``.

    Right-aligned text is measured with ``metrics`` (default ``ctx``).
    """
    if align == TextAlign.END:
        x -= (metrics or ctx).text_extents(text).width
    ctx.move_to(x, y)
    ctx.show_text(text)
