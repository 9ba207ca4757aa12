"""Built-in sample symbol used by ``symbol-tools demo``."""

from symbol_tools.symbol import Pin, PinDirection, Section, Symbol


def build_sample_symbol() -> Symbol:
    """One section: three inputs (two of them buses) and one output."""
    section = Section()
    section.add_pin(Pin("i_foo", PinDirection.IN, is_bus=True, type="logic [15:0]"))
    section.add_pin(Pin("o_bar", PinDirection.OUT, is_bus=False, type="logic"))
    section.add_pin(Pin("i_foobar", PinDirection.IN, is_bus=False, type="logic"))
    section.add_pin(Pin("i_barfoo", PinDirection.IN, is_bus=True, type="logic [15:0]"))

    symbol = Symbol("My symbol")
    symbol.add_section(section)
    return symbol
