"""
Section: a bordered group of pins split into a left and a right column.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .geometry import Point, Rect
from .metrics import TextMetrics
from .pin import LayoutSide, Pin, row_height
from .style import DEFAULT_STYLE, SymbolStyle
from .surface import DrawingContext, saved_state

logger = logging.getLogger(__name__)


@dataclass
class Section:
    """
    Ordered pins sharing one rectangle.

    Pins are split into columns by direction each time the section is
    measured or drawn, so insertion order is the only stored state.

    Attributes:
        name: Optional section label (not drawn)
        pins: Pins in insertion order
    """

    name: str = ""
    pins: list[Pin] = field(default_factory=list)

    def add_pin(self, pin: Pin) -> None:
        self.pins.append(pin)

    def left_pins(self) -> list[Pin]:
        """Inbound pins in insertion order."""
        return [p for p in self.pins if p.side is LayoutSide.LEFT]

    def right_pins(self) -> list[Pin]:
        """Outbound and bidirectional pins in insertion order."""
        return [p for p in self.pins if p.side is LayoutSide.RIGHT]

    def rows(self) -> int:
        """Row count of the taller column."""
        return max(len(self.left_pins()), len(self.right_pins()))

    def height(self, metrics: TextMetrics, style: SymbolStyle = DEFAULT_STYLE) -> float:
        """
        Height of the section rectangle.

        Every row uses the same pitch, including the empty rows of the shorter
        column. A section without pins is just its top and bottom padding.
        """
        rows = self.rows()
        if rows == 0:
            return 2 * style.top_bottom_padding
        return (
            style.pin_spacing * (rows - 1)
            + rows * row_height(metrics, style)
            + 2 * style.top_bottom_padding
        )

    def min_inner_width(self, metrics: TextMetrics, style: SymbolStyle = DEFAULT_STYLE) -> float:
        """Widest left name plus the column separator plus widest right name."""
        left = max((p.inner_width(metrics, style) for p in self.left_pins()), default=0)
        right = max((p.inner_width(metrics, style) for p in self.right_pins()), default=0)
        return left + style.text_separator + right

    def min_outer_width(self, metrics: TextMetrics, style: SymbolStyle = DEFAULT_STYLE) -> float:
        """Widest stem plus type label on either side."""
        return max((p.outer_width(metrics, style) for p in self.pins), default=0)

    def draw(
        self,
        ctx: DrawingContext,
        rect: Rect,
        style: SymbolStyle = DEFAULT_STYLE,
        metrics: TextMetrics | None = None,
    ) -> None:
        """
        Draw the border at ``rect`` and every pin along its left and right edges.

        ``metrics`` measures the row pitch and pin text; it defaults to the
        drawing context itself.
        """
        with saved_state(ctx):
            with saved_state(ctx):
                ctx.set_line_width(style.border_width)
                ctx.rectangle(rect.x, rect.y, rect.width, rect.height)
                ctx.stroke()

            metrics = metrics or ctx
            pitch = row_height(metrics, style)
            for pins, x in ((self.left_pins(), rect.x), (self.right_pins(), rect.right)):
                self._draw_column(ctx, pins, x, rect.y, pitch, style, metrics)

        logger.debug(
            "Drew section %r at (%s, %s) size %sx%s with %d pins in %d rows",
            self.name,
            rect.x,
            rect.y,
            rect.width,
            rect.height,
            len(self.pins),
            self.rows(),
        )

    @staticmethod
    def _draw_column(
        ctx: DrawingContext,
        pins: list[Pin],
        x: float,
        top: float,
        pitch: float,
        style: SymbolStyle,
        metrics: TextMetrics,
    ) -> None:
        # Each anchor is on the baseline of its row, one pitch below the row top
        y = top + style.top_bottom_padding
        for pin in pins:
            y += pitch
            pin.draw(ctx, Point(x, y), style, metrics)
            y += style.pin_spacing

    def __len__(self) -> int:
        return len(self.pins)

    def __iter__(self):
        return iter(self.pins)
