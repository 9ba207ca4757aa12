"""
Symbol description files.

Symbols can be described in YAML or JSON instead of Python code.

Example YAML description::

    name: My symbol
    sections:
      - name: data
        pins:
          - name: i_foo
            direction: in
            bus: true
            type: "logic [15:0]"
          - name: o_bar
            direction: out
            type: logic
      - pins:
          - {name: clk, direction: in, type: logic}

Usage::

    from symbol_tools.loader import load_symbol

    symbol = load_symbol("fifo.yaml")
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from symbol_tools.exceptions import SymbolDefinitionError
from symbol_tools.symbol.pin import Pin, PinDirection
from symbol_tools.symbol.section import Section
from symbol_tools.symbol.style import PLACEHOLDER_TYPE
from symbol_tools.symbol.symbol import Symbol

logger = logging.getLogger(__name__)

DIRECTION_NAMES = [d.value for d in PinDirection]


def _parse_direction(value: Any, context: dict[str, Any]) -> PinDirection:
    try:
        return PinDirection(str(value).lower())
    except ValueError:
        raise SymbolDefinitionError(
            f"Unknown pin direction '{value}'",
            context={**context, "direction": value},
            suggestions=[f"Use one of: {', '.join(DIRECTION_NAMES)}"],
        ) from None


def pin_from_dict(data: dict[str, Any], context: dict[str, Any] | None = None) -> Pin:
    """Create a pin from its description mapping."""
    context = context or {}
    if not isinstance(data, dict):
        raise SymbolDefinitionError("Pin entry must be a mapping", context=context)
    if "name" not in data:
        raise SymbolDefinitionError(
            "Pin is missing a name",
            context=context,
            suggestions=["Add a 'name' key to every pin"],
        )
    if "direction" not in data:
        raise SymbolDefinitionError(
            "Pin is missing a direction",
            context={**context, "pin": data["name"]},
            suggestions=[f"Add 'direction: <{'|'.join(DIRECTION_NAMES)}>'"],
        )

    name = str(data["name"])
    direction = _parse_direction(data["direction"], {**context, "pin": name})
    pin_type = data.get("type", PLACEHOLDER_TYPE)
    return Pin(
        name=name,
        direction=direction,
        is_bus=bool(data.get("bus", False)),
        type="" if pin_type is None else str(pin_type),
    )


def symbol_from_dict(data: dict[str, Any], source: str | None = None) -> Symbol:
    """
    Build a symbol from a parsed description.

    Raises:
        SymbolDefinitionError: If the description is malformed
    """
    base_context: dict[str, Any] = {"file": source} if source else {}

    if not isinstance(data, dict):
        raise SymbolDefinitionError(
            "Symbol description must be a mapping", context=base_context
        )
    if "name" not in data:
        raise SymbolDefinitionError(
            "Symbol is missing a name",
            context=base_context,
            suggestions=["Add a top-level 'name' key"],
        )

    sections = data.get("sections", [])
    if not isinstance(sections, list):
        raise SymbolDefinitionError(
            "'sections' must be a list",
            context=base_context,
            suggestions=["Write sections as a YAML sequence ('- pins: [...]')"],
        )

    symbol = Symbol(str(data["name"]))
    for s_idx, section_data in enumerate(sections):
        if not isinstance(section_data, dict):
            raise SymbolDefinitionError(
                "Section entry must be a mapping",
                context={**base_context, "section": s_idx},
            )
        pins = section_data.get("pins", [])
        if not isinstance(pins, list):
            raise SymbolDefinitionError(
                "'pins' must be a list",
                context={**base_context, "section": s_idx},
            )

        section = Section(name=str(section_data.get("name", "")))
        for p_idx, pin_data in enumerate(pins):
            pin_context = {**base_context, "section": s_idx, "pin": p_idx}
            section.add_pin(pin_from_dict(pin_data, pin_context))
        symbol.add_section(section)

    logger.debug(
        "Loaded symbol %r with %d sections, %d pins",
        symbol.name,
        len(symbol.sections),
        sum(len(s) for s in symbol.sections),
    )
    return symbol


def load_symbol(path: str | Path) -> Symbol:
    """
    Load a symbol from a YAML or JSON file.

    ``.json`` files are read with the json module, anything else as YAML.

    Raises:
        SymbolDefinitionError: If the file cannot be parsed or is malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SymbolDefinitionError(
            f"Cannot read symbol description: {e}", file_path=path
        ) from e

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SymbolDefinitionError(
            f"Invalid symbol description: {e}",
            file_path=path,
            suggestions=["Check the file for syntax errors"],
        ) from e

    return symbol_from_dict(data, source=str(path))
