"""Tests for YAML/JSON symbol descriptions."""

import json

import pytest

from symbol_tools.exceptions import SymbolDefinitionError
from symbol_tools.loader import load_symbol, pin_from_dict, symbol_from_dict
from symbol_tools.symbol import Pin, PinDirection

FIFO_YAML = """
name: fifo
sections:
  - name: data
    pins:
      - name: i_data
        direction: in
        bus: true
        type: "logic [15:0]"
      - name: o_data
        direction: OUT
        bus: true
        type: "logic [15:0]"
  - name: ctrl
    pins:
      - {name: clk, direction: in, type: logic}
      - {name: sda, direction: inout}
"""


class TestPinFromDict:
    """Tests for pin descriptions."""

    def test_full_pin(self):
        pin = pin_from_dict({"name": "i_foo", "direction": "in", "bus": True, "type": "logic"})
        assert pin == Pin("i_foo", PinDirection.IN, is_bus=True, type="logic")

    def test_defaults(self):
        pin = pin_from_dict({"name": "x", "direction": "inout"})
        assert pin.type == "cc"
        assert pin.is_bus is False

    def test_null_type_is_empty(self):
        assert pin_from_dict({"name": "x", "direction": "out", "type": None}).type == ""

    def test_unknown_direction(self):
        with pytest.raises(SymbolDefinitionError) as exc_info:
            pin_from_dict({"name": "x", "direction": "sideways"}, {"pin": 0})
        assert exc_info.value.context["direction"] == "sideways"
        assert "in, out, inout" in str(exc_info.value)

    def test_missing_name(self):
        with pytest.raises(SymbolDefinitionError, match="missing a name"):
            pin_from_dict({"direction": "in"})

    def test_missing_direction(self):
        with pytest.raises(SymbolDefinitionError, match="missing a direction"):
            pin_from_dict({"name": "x"})

    def test_not_a_mapping(self):
        with pytest.raises(SymbolDefinitionError):
            pin_from_dict(["x", "in"])


class TestSymbolFromDict:
    """Tests for whole symbol descriptions."""

    def test_sections_and_pins(self):
        symbol = symbol_from_dict(
            {
                "name": "s",
                "sections": [{"pins": [{"name": "a", "direction": "in"}]}, {"name": "empty"}],
            }
        )
        assert symbol.name == "s"
        assert [s.name for s in symbol.sections] == ["", "empty"]
        assert len(symbol.sections[0]) == 1
        assert len(symbol.sections[1]) == 0

    def test_missing_name(self):
        with pytest.raises(SymbolDefinitionError, match="missing a name"):
            symbol_from_dict({"sections": []})

    def test_sections_must_be_list(self):
        with pytest.raises(SymbolDefinitionError, match="must be a list"):
            symbol_from_dict({"name": "s", "sections": {"pins": []}})

    def test_pins_must_be_list(self):
        with pytest.raises(SymbolDefinitionError, match="must be a list"):
            symbol_from_dict({"name": "s", "sections": [{"pins": "a"}]})

    def test_error_context_locates_pin(self):
        with pytest.raises(SymbolDefinitionError) as exc_info:
            symbol_from_dict(
                {"name": "s", "sections": [{"pins": [{"name": "a", "direction": "up"}]}]},
                source="x.yaml",
            )
        context = exc_info.value.context
        assert context["file"] == "x.yaml"
        assert context["section"] == 0
        assert context["pin"] == "a"


class TestLoadSymbol:
    """Tests for loading description files."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "fifo.yaml"
        path.write_text(FIFO_YAML)
        symbol = load_symbol(path)

        assert symbol.name == "fifo"
        data, ctrl = symbol.sections
        assert [p.name for p in data.left_pins()] == ["i_data"]
        assert [p.name for p in data.right_pins()] == ["o_data"]
        assert ctrl.pins[1] == Pin("sda", PinDirection.INOUT)

    def test_load_json(self, tmp_path):
        path = tmp_path / "s.json"
        path.write_text(
            json.dumps({"name": "j", "sections": [{"pins": [{"name": "a", "direction": "out"}]}]})
        )
        symbol = load_symbol(path)
        assert symbol.sections[0].pins == [Pin("a", PinDirection.OUT)]

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("name: [unclosed\n")
        with pytest.raises(SymbolDefinitionError) as exc_info:
            load_symbol(path)
        assert exc_info.value.context["file"] == str(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SymbolDefinitionError, match="Cannot read"):
            load_symbol(tmp_path / "nope.yaml")
