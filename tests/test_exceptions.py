"""Tests for symbol_tools.exceptions module."""

import pytest

from symbol_tools.exceptions import (
    ConfigError,
    RenderError,
    SymbolDefinitionError,
    SymbolToolsError,
)


class TestSymbolToolsError:
    """Tests for the base exception class."""

    def test_basic_message(self):
        err = SymbolToolsError("Something went wrong")
        assert str(err) == "Something went wrong"
        assert err.message == "Something went wrong"
        assert err.context == {}
        assert err.suggestions == []

    def test_with_context(self):
        err = SymbolToolsError("Render failed", context={"file": "a.pdf", "format": "pdf"})
        msg = str(err)
        assert "Context:" in msg
        assert "file: a.pdf" in msg
        assert "format: pdf" in msg

    def test_with_suggestions(self):
        err = SymbolToolsError("Bad input", suggestions=["Check the file", "Try again"])
        msg = str(err)
        assert "Suggestions:" in msg
        assert "  - Check the file" in msg
        assert "  - Try again" in msg

    @pytest.mark.parametrize("cls", [SymbolDefinitionError, RenderError, ConfigError])
    def test_subclasses_share_base(self, cls):
        with pytest.raises(SymbolToolsError):
            raise cls("boom")


class TestSymbolDefinitionError:
    def test_file_path_added_to_context(self):
        err = SymbolDefinitionError("Bad pin", file_path="fifo.yaml")
        assert err.context["file"] == "fifo.yaml"

    def test_explicit_file_context_kept(self):
        err = SymbolDefinitionError("Bad pin", context={"file": "a.yaml"}, file_path="b.yaml")
        assert err.context["file"] == "a.yaml"
