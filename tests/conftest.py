"""Pytest fixtures for symbol-tools tests."""

import pytest

from symbol_tools.symbol import Pin, PinDirection, Section, Symbol
from symbol_tools.symbol.metrics import TextExtents

# Fake font: every glyph is 6 wide, every non-empty line 10 high with an 8 unit ascent
CHAR_WIDTH = 6
LINE_HEIGHT = 10
ASCENT = 8


class FakeMetrics:
    """Deterministic text metrics independent of installed fonts."""

    def __init__(self):
        self.queries: list[str] = []

    def text_extents(self, text: str) -> TextExtents:
        self.queries.append(text)
        width = CHAR_WIDTH * len(text)
        if not text:
            return TextExtents(0, 0, 0, 0, 0, 0)
        return TextExtents(0, -ASCENT, width, LINE_HEIGHT, width, 0)


class RecordingContext:
    """
    Records the cairo primitives it receives.

    Tracks the graphics state (line width, colour, current point) through a
    save/restore stack so tests can check that drawing never leaks state.
    """

    def __init__(self, fail_on_text: str | None = None):
        self.calls: list[tuple] = []
        self.metrics = FakeMetrics()
        self.line_width = 2.0
        self.color = (0.0, 0.0, 0.0)
        self.point = None
        self._stack: list[tuple] = []
        self.fail_on_text = fail_on_text

    @property
    def depth(self) -> int:
        return len(self._stack)

    def save(self):
        self.calls.append(("save",))
        self._stack.append((self.line_width, self.color, self.point))

    def restore(self):
        self.calls.append(("restore",))
        self.line_width, self.color, self.point = self._stack.pop()

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))
        self.point = (x, y)

    def line_to(self, x, y):
        self.calls.append(("line_to", x, y, self.line_width))
        self.point = (x, y)

    def rectangle(self, x, y, width, height):
        self.calls.append(("rectangle", x, y, width, height, self.line_width))

    def stroke(self):
        self.calls.append(("stroke",))
        self.point = None

    def set_line_width(self, width):
        self.calls.append(("set_line_width", width))
        self.line_width = width

    def set_source_rgb(self, red, green, blue):
        self.calls.append(("set_source_rgb", red, green, blue))
        self.color = (red, green, blue)

    def show_text(self, text):
        if text == self.fail_on_text:
            raise RuntimeError(f"backend failure painting {text!r}")
        x, y = self.point
        self.calls.append(("show_text", text, x, y, self.color))
        self.point = (x + CHAR_WIDTH * len(text), y)

    def text_extents(self, text):
        return self.metrics.text_extents(text)

    # Helpers for assertions

    def texts(self) -> list[tuple]:
        """(text, x, y) for every painted string, in paint order."""
        return [(c[1], c[2], c[3]) for c in self.calls if c[0] == "show_text"]

    def text_at(self, text: str) -> tuple[float, float]:
        for painted, x, y in self.texts():
            if painted == text:
                return x, y
        raise AssertionError(f"{text!r} was not painted")

    def lines(self) -> list[tuple]:
        """((x0, y0), (x1, y1), width) for every line segment."""
        result = []
        start = None
        for call in self.calls:
            if call[0] == "move_to":
                start = (call[1], call[2])
            elif call[0] == "line_to":
                result.append((start, (call[1], call[2]), call[3]))
                start = (call[1], call[2])
        return result

    def rectangles(self) -> list[tuple]:
        return [c[1:] for c in self.calls if c[0] == "rectangle"]


@pytest.fixture
def metrics():
    return FakeMetrics()


@pytest.fixture
def ctx():
    return RecordingContext()


@pytest.fixture
def make_ctx():
    """Factory for extra recording contexts."""
    return RecordingContext


@pytest.fixture
def sample_section():
    """The four pin section from the sample symbol."""
    section = Section()
    section.add_pin(Pin("i_foo", PinDirection.IN, is_bus=True, type="logic [15:0]"))
    section.add_pin(Pin("o_bar", PinDirection.OUT, is_bus=False, type="logic"))
    section.add_pin(Pin("i_foobar", PinDirection.IN, is_bus=False, type="logic"))
    section.add_pin(Pin("i_barfoo", PinDirection.IN, is_bus=True, type="logic [15:0]"))
    return section


@pytest.fixture
def two_section_symbol():
    """A symbol whose sections need different widths."""
    narrow = Section("ctrl")
    narrow.add_pin(Pin("clk", PinDirection.IN, type="logic"))
    narrow.add_pin(Pin("q", PinDirection.OUT, type="logic"))

    wide = Section("data")
    wide.add_pin(Pin("i_data_long", PinDirection.IN, is_bus=True, type="logic [31:0]"))
    wide.add_pin(Pin("o_valid", PinDirection.OUT, type="logic"))
    wide.add_pin(Pin("io_sda", PinDirection.INOUT, type="wire"))

    symbol = Symbol("fifo")
    symbol.add_section(narrow)
    symbol.add_section(wide)
    return symbol


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from real user config files."""
    monkeypatch.setattr(
        "symbol_tools.config.USER_CONFIG_PATH", tmp_path / "no-user-config" / "config.toml"
    )
