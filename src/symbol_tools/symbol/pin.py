"""
Pin model: a labelled connection point drawn as name, stem and type.

An inbound pin sits on the left border of its section and is drawn growing
inward from the border to the right; every other pin is its mirror image on
the right border. Both cases share one drawing routine parameterised by
:class:`LayoutSide`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .geometry import Point
from .metrics import TextMetrics
from .style import DEFAULT_STYLE, PLACEHOLDER_TYPE, SymbolStyle
from .surface import DrawingContext, TextAlign, saved_state, show_text_at

logger = logging.getLogger(__name__)


class LayoutSide(Enum):
    """Section border a pin attaches to."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def sign(self) -> int:
        """Direction of the stem along x: -1 grows leftward, +1 rightward."""
        return -1 if self is LayoutSide.LEFT else 1

    @property
    def name_align(self) -> TextAlign:
        """Pin names grow away from the border, into the section."""
        return TextAlign.START if self is LayoutSide.LEFT else TextAlign.END

    @property
    def type_align(self) -> TextAlign:
        """Type labels grow away from the stem tip, out of the section."""
        return TextAlign.END if self is LayoutSide.LEFT else TextAlign.START


class PinDirection(str, Enum):
    """Signal direction of a pin."""

    IN = "in"
    OUT = "out"
    INOUT = "inout"

    @property
    def side(self) -> LayoutSide:
        # Bidirectional pins share the right column with outputs
        return LayoutSide.LEFT if self is PinDirection.IN else LayoutSide.RIGHT


def row_height(metrics: TextMetrics, style: SymbolStyle = DEFAULT_STYLE) -> float:
    """
    Uniform row pitch shared by every pin.

    Measured from a fixed reference string so that all pins of a symbol sit
    on one grid regardless of their own glyphs.
    """
    return metrics.text_extents(style.reference_text).height


@dataclass(frozen=True)
class Pin:
    """
    A single pin of a section.

    Attributes:
        name: Signal name painted inside the section border
        direction: IN pins go to the left column, everything else to the right
        is_bus: Draw a wide stem for multi-bit signals
        type: Type annotation painted outside the border (e.g. "logic [15:0]")
    """

    name: str
    direction: PinDirection
    is_bus: bool = False
    type: str = PLACEHOLDER_TYPE

    @property
    def side(self) -> LayoutSide:
        return self.direction.side

    def inner_width(self, metrics: TextMetrics, style: SymbolStyle = DEFAULT_STYLE) -> float:
        """Horizontal space taken by the name and its padding inside the border."""
        return style.text_padding + metrics.text_extents(self.name).width

    def outer_width(self, metrics: TextMetrics, style: SymbolStyle = DEFAULT_STYLE) -> float:
        """Horizontal space taken by the stem and type label outside the border."""
        return style.stem_length + style.text_padding + metrics.text_extents(self.type).width

    def height(self, metrics: TextMetrics, style: SymbolStyle = DEFAULT_STYLE) -> float:
        return row_height(metrics, style)

    def draw(
        self,
        ctx: DrawingContext,
        anchor: Point,
        style: SymbolStyle = DEFAULT_STYLE,
        metrics: TextMetrics | None = None,
    ) -> None:
        """
        Draw the pin with its stem attached to the border at ``anchor``.

        Text baselines sit on ``anchor.y``; the stem is raised by half the
        name's vertical bearing so it lines up with the middle of the glyphs.
        Text is measured with ``metrics``, the same provider used for sizing,
        and falls back to ``ctx``.
        """
        metrics = metrics or ctx
        side = self.side
        sign = side.sign

        with saved_state(ctx):
            with saved_state(ctx):
                show_text_at(
                    ctx,
                    self.name,
                    anchor.x - sign * style.text_padding,
                    anchor.y,
                    side.name_align,
                    metrics,
                )

            stem_y = anchor.y + metrics.text_extents(self.name).y_bearing / 2

            with saved_state(ctx):
                ctx.set_line_width(style.stem_width(self.is_bus))
                ctx.move_to(anchor.x, stem_y)
                ctx.line_to(anchor.x + sign * style.stem_length, stem_y)
                ctx.stroke()

            with saved_state(ctx):
                ctx.set_source_rgb(*style.type_color)
                show_text_at(
                    ctx,
                    self.type,
                    anchor.x + sign * (style.text_padding + style.stem_length),
                    anchor.y,
                    side.type_align,
                    metrics,
                )

        logger.debug(
            "Drew pin %s on %s border at (%s, %s)", self.name, side.value, anchor.x, anchor.y
        )
