"""
Text measurement for symbol layout.

Layout code only needs ``text_extents(text)``. A ``cairo.Context`` already
provides it, so the drawing context can measure for itself; when no output
surface exists yet, :class:`CairoTextMetrics` measures on a scratch recording
surface with the same font.

Usage::

    from symbol_tools.symbol.metrics import CairoTextMetrics

    metrics = CairoTextMetrics("sans-serif", 10)
    extents = metrics.text_extents("i_foo")
    print(extents.width, extents.height, extents.y_bearing)
"""

from __future__ import annotations

from typing import NamedTuple, Protocol

from .style import DEFAULT_STYLE, SymbolStyle


class TextExtents(NamedTuple):
    """Same fields and order as ``cairo.TextExtents``."""

    x_bearing: float
    y_bearing: float
    width: float
    height: float
    x_advance: float
    y_advance: float


class TextMetrics(Protocol):
    """Anything that can report the extents of a string."""

    def text_extents(self, text: str) -> TextExtents: ...


def import_cairo():
    """Lazily import pycairo, raising a clear error if missing."""
    try:
        import cairo

        return cairo
    except ImportError as e:
        raise ImportError(
            "pycairo is required for text measurement and rendering. "
            "Install with: pip install pycairo"
        ) from e


def select_font(ctx, style: SymbolStyle = DEFAULT_STYLE) -> None:
    """Select the style's font on a cairo context."""
    cairo = import_cairo()
    ctx.select_font_face(style.font_family, cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL)
    ctx.set_font_size(style.font_size)


class CairoTextMetrics:
    """
    Measures text on an unbounded cairo recording surface.

    The scratch surface never produces output, so metrics can be queried
    before the page size (which depends on them) is known.
    """

    def __init__(self, font_family: str = "sans-serif", font_size: float = 10):
        cairo = import_cairo()
        self.font_family = font_family
        self.font_size = font_size
        self._surface = cairo.RecordingSurface(cairo.CONTENT_COLOR_ALPHA, None)
        self._ctx = cairo.Context(self._surface)
        self._ctx.select_font_face(font_family, cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL)
        self._ctx.set_font_size(font_size)

    @classmethod
    def for_style(cls, style: SymbolStyle) -> CairoTextMetrics:
        return cls(style.font_family, style.font_size)

    def text_extents(self, text: str) -> TextExtents:
        return TextExtents(*self._ctx.text_extents(text))

    def __repr__(self) -> str:
        return f"CairoTextMetrics(font_family={self.font_family!r}, font_size={self.font_size})"
