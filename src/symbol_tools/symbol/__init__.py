"""
Symbol layout engine.

Computes pin, section and symbol geometry from text metrics and draws the
result on a cairo-compatible context.

Example::

    import cairo

    from symbol_tools.symbol import Pin, PinDirection, Section, Symbol

    section = Section()
    section.add_pin(Pin("i_foo", PinDirection.IN, is_bus=True, type="logic [15:0]"))
    section.add_pin(Pin("o_bar", PinDirection.OUT, type="logic"))

    symbol = Symbol("My symbol")
    symbol.add_section(section)

    surface = cairo.PDFSurface("image.pdf", 320, 320)
    symbol.draw(cairo.Context(surface))
    surface.finish()
"""

from .geometry import Point, Rect
from .metrics import CairoTextMetrics, TextExtents, TextMetrics, select_font
from .pin import LayoutSide, Pin, PinDirection, row_height
from .section import Section
from .style import DEFAULT_STYLE, PLACEHOLDER_TYPE, SymbolStyle
from .surface import DrawingContext, TextAlign, saved_state, show_text_at
from .symbol import Symbol

__all__ = [
    # Model
    "Symbol",
    "Section",
    "Pin",
    "PinDirection",
    "LayoutSide",
    "row_height",
    # Style
    "SymbolStyle",
    "DEFAULT_STYLE",
    "PLACEHOLDER_TYPE",
    # Geometry
    "Point",
    "Rect",
    # Metrics
    "TextExtents",
    "TextMetrics",
    "CairoTextMetrics",
    "select_font",
    # Surface
    "DrawingContext",
    "TextAlign",
    "saved_state",
    "show_text_at",
]
