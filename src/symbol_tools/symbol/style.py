"""
Layout constants for symbol rendering.

All distances are in drawing-surface units (points for PDF/SVG, pixels for PNG).
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

PLACEHOLDER_TYPE = "cc"


@dataclass(frozen=True)
class SymbolStyle:
    """
    Named layout and appearance values shared by pins, sections and symbols.

    Attributes:
        stem_length: Gap from the section border to the type label
        wire_stem_width: Stroke width of a single-bit pin stem
        bus_stem_width: Stroke width of a bus pin stem
        text_padding: Gap between border/stem and the adjacent text
        top_bottom_padding: Vertical margin inside a section
        pin_spacing: Gap between consecutive pin rows
        text_separator: Gap between the left and right name columns
        name_spacing: Gap between the symbol name and the first section
        border_width: Stroke width of the section rectangle
        type_color: RGB colour of the type labels
        font_family: Font used for measuring and painting text
        font_size: Font size
        reference_text: String whose height sets the uniform row pitch
    """

    stem_length: float = 15
    wire_stem_width: float = 1
    bus_stem_width: float = 2
    text_padding: float = 5
    top_bottom_padding: float = 10
    pin_spacing: float = 5
    text_separator: float = 10
    name_spacing: float = 5
    border_width: float = 1.5
    type_color: tuple[float, float, float] = (0.5, 0.5, 0.5)
    font_family: str = "sans-serif"
    font_size: float = 10
    reference_text: str = "Hello world"

    def stem_width(self, is_bus: bool) -> float:
        """Stroke width for a bus or wire stem."""
        return self.bus_stem_width if is_bus else self.wire_stem_width

    def with_overrides(self, **overrides: Any) -> SymbolStyle:
        """Return a copy with the given fields replaced."""
        if "type_color" in overrides:
            overrides["type_color"] = tuple(overrides["type_color"])
        return replace(self, **overrides)

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}


DEFAULT_STYLE = SymbolStyle()
