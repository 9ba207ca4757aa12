"""
Custom exception hierarchy for symbol-tools.

Provides consistent error handling with context, suggestions, and actionable guidance.
All exceptions include:
- Context information (file paths, offending values, etc.)
- Suggestions for how to fix the issue

Errors raised by the cairo backend while measuring or painting are not wrapped;
they propagate unchanged and abort the render.

Example::

    from symbol_tools.exceptions import SymbolDefinitionError

    raise SymbolDefinitionError(
        "Unknown pin direction",
        context={"file": "fifo.yaml", "pin": "i_data", "direction": "sideways"},
        suggestions=["Use one of: in, out, inout"],
    )
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class SymbolToolsError(Exception):
    """
    Base exception for all symbol-tools errors.

    Provides consistent formatting with context and suggestions.

    Attributes:
        context: Dictionary of contextual information (file, key, etc.)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class SymbolDefinitionError(SymbolToolsError):
    """
    A symbol description could not be turned into a Symbol.

    Raised by the description loader for missing names, unknown pin
    directions and malformed section lists.

    Example::

        raise SymbolDefinitionError(
            "Pin is missing a name",
            context={"file": "fifo.yaml", "section": 0, "pin": 3},
        )
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        file_path: Optional[Union[str, Path]] = None,
    ):
        ctx = context or {}
        if file_path and "file" not in ctx:
            ctx["file"] = str(file_path)

        super().__init__(message, ctx, suggestions)


class RenderError(SymbolToolsError):
    """
    An output page could not be produced.

    Raised for unsupported output formats or unusable output paths.

    Example::

        raise RenderError(
            "Unsupported output format",
            context={"format": "bmp"},
            suggestions=["Use one of: pdf, svg, png"],
        )
    """

    pass


class ConfigError(SymbolToolsError):
    """
    Configuration file could not be loaded.

    Raised for invalid TOML or unreadable config files.
    """

    pass
