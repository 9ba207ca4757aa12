"""
symbol-tools: Schematic symbol rendering for IC documentation.

Lays out a named symbol made of stacked sections, each holding inbound pins
on the left and outbound/bidirectional pins on the right, and draws it with
cairo.

Modules:
    symbol: Layout engine (Pin, Section, Symbol) and text metrics
    loader: YAML/JSON symbol descriptions
    render: PDF, SVG and PNG output
    config: TOML configuration files
    cli: The `symbol-tools` command

Quick Start::

    from symbol_tools import Pin, PinDirection, Section, Symbol, render_symbol

    section = Section()
    section.add_pin(Pin("i_foo", PinDirection.IN, is_bus=True, type="logic [15:0]"))
    section.add_pin(Pin("o_bar", PinDirection.OUT, type="logic"))

    symbol = Symbol("My symbol")
    symbol.add_section(section)
    render_symbol(symbol, "image.pdf")
"""

__version__ = "0.1.0"

from symbol_tools.exceptions import (
    ConfigError,
    RenderError,
    SymbolDefinitionError,
    SymbolToolsError,
)
from symbol_tools.loader import load_symbol, symbol_from_dict
from symbol_tools.logging import disable_verbose, enable_verbose
from symbol_tools.render import render_symbol
from symbol_tools.symbol import (
    DEFAULT_STYLE,
    CairoTextMetrics,
    LayoutSide,
    Pin,
    PinDirection,
    Section,
    Symbol,
    SymbolStyle,
)

__all__ = [
    # Version
    "__version__",
    # Model
    "Symbol",
    "Section",
    "Pin",
    "PinDirection",
    "LayoutSide",
    "SymbolStyle",
    "DEFAULT_STYLE",
    "CairoTextMetrics",
    # I/O
    "load_symbol",
    "symbol_from_dict",
    "render_symbol",
    # Logging
    "enable_verbose",
    "disable_verbose",
    # Exceptions
    "SymbolToolsError",
    "SymbolDefinitionError",
    "RenderError",
    "ConfigError",
]
