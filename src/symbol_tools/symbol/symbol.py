"""
Symbol: a name above a vertical stack of column-aligned sections.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .geometry import Rect
from .metrics import TextMetrics
from .section import Section
from .style import DEFAULT_STYLE, SymbolStyle
from .surface import DrawingContext, saved_state, show_text_at

logger = logging.getLogger(__name__)


@dataclass
class Symbol:
    """
    Top-level diagram.

    Every section is drawn with the same x-origin and width, taken from the
    widest requirement of any section, so the pin columns line up.

    Usage::

        symbol = Symbol("My symbol")
        section = Section()
        section.add_pin(Pin("i_foo", PinDirection.IN, is_bus=True, type="logic [15:0]"))
        symbol.add_section(section)
        symbol.draw(ctx)
    """

    name: str
    sections: list[Section] = field(default_factory=list)

    def add_section(self, section: Section) -> None:
        self.sections.append(section)

    def inner_width(self, metrics: TextMetrics, style: SymbolStyle = DEFAULT_STYLE) -> float:
        """Shared section width: the widest ``min_inner_width`` of any section."""
        return max((s.min_inner_width(metrics, style) for s in self.sections), default=0)

    def outer_width(self, metrics: TextMetrics, style: SymbolStyle = DEFAULT_STYLE) -> float:
        """Shared stem and type margin: the widest ``min_outer_width`` of any section."""
        return max((s.min_outer_width(metrics, style) for s in self.sections), default=0)

    def body_offset(self, metrics: TextMetrics, style: SymbolStyle = DEFAULT_STYLE) -> float:
        """
        Horizontal shift of the section stack.

        Non-zero only when the name is wider than the sections and their type
        labels; the stack then moves right so the centred name starts at x = 0.
        """
        body = 2 * self.outer_width(metrics, style) + self.inner_width(metrics, style)
        return max(0, (metrics.text_extents(self.name).width - body) / 2)

    def section_rects(
        self, metrics: TextMetrics, style: SymbolStyle = DEFAULT_STYLE
    ) -> list[Rect]:
        """Rectangles of the sections in drawing order, stacked top to bottom."""
        inner = self.inner_width(metrics, style)
        x = self.body_offset(metrics, style) + self.outer_width(metrics, style)
        y = metrics.text_extents(self.name).height + style.name_spacing

        rects = []
        for section in self.sections:
            height = section.height(metrics, style)
            rects.append(Rect(x, y, inner, height))
            y += height
        return rects

    def size(self, metrics: TextMetrics, style: SymbolStyle = DEFAULT_STYLE) -> tuple[float, float]:
        """Overall (width, height) covered by the symbol, name and type labels included."""
        inner = self.inner_width(metrics, style)
        outer = self.outer_width(metrics, style)
        name_extents = metrics.text_extents(self.name)
        width = max(2 * outer + inner, name_extents.width)
        height = name_extents.height + style.name_spacing
        height += sum(s.height(metrics, style) for s in self.sections)
        return width, height

    def draw(
        self,
        ctx: DrawingContext,
        metrics: TextMetrics | None = None,
        style: SymbolStyle | None = None,
    ) -> None:
        """
        Draw the symbol name and all sections.

        Args:
            ctx: Drawing context (a ``cairo.Context`` or compatible object)
            metrics: Text metrics used for layout; defaults to ``ctx`` itself
            style: Layout constants; defaults to :data:`DEFAULT_STYLE`
        """
        metrics = metrics or ctx
        style = style or DEFAULT_STYLE

        inner = self.inner_width(metrics, style)
        outer = self.outer_width(metrics, style)
        logger.debug("Symbol %r: inner width %s, outer width %s", self.name, inner, outer)

        with saved_state(ctx):
            name_extents = metrics.text_extents(self.name)
            show_text_at(
                ctx,
                self.name,
                self.body_offset(metrics, style) + outer + (inner - name_extents.width) / 2,
                name_extents.height,
            )

        for section, rect in zip(self.sections, self.section_rects(metrics, style)):
            section.draw(ctx, rect, style, metrics)

    def __len__(self) -> int:
        return len(self.sections)
