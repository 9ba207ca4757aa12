"""
Render a symbol to a single PDF, SVG or PNG page.

The page is sized from the symbol's measured extent plus a margin, so text
is measured on a scratch surface before the output surface is created.

Usage::

    from symbol_tools.render import render_symbol

    path = render_symbol(symbol, "fifo.svg")
    render_symbol(symbol, "fifo.out", fmt="png", margin=20)
"""

from __future__ import annotations

import logging
import math
import os
import tempfile
from pathlib import Path

from symbol_tools.exceptions import RenderError
from symbol_tools.symbol.metrics import CairoTextMetrics, import_cairo, select_font
from symbol_tools.symbol.style import DEFAULT_STYLE, SymbolStyle
from symbol_tools.symbol.surface import saved_state
from symbol_tools.symbol.symbol import Symbol

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("pdf", "svg", "png")


def detect_format(path: str | Path, fmt: str | None = None) -> str:
    """
    Resolve the output format from an explicit name or the file suffix.

    Raises:
        RenderError: If the format is not one of :data:`SUPPORTED_FORMATS`
    """
    resolved = (fmt or Path(path).suffix.lstrip(".")).lower()
    if resolved not in SUPPORTED_FORMATS:
        raise RenderError(
            "Unsupported output format",
            context={"file": str(path), "format": resolved or "(none)"},
            suggestions=[
                f"Use one of: {', '.join(SUPPORTED_FORMATS)}",
                "Pass the format explicitly with --format",
            ],
        )
    return resolved


def page_size(
    symbol: Symbol,
    metrics,
    style: SymbolStyle = DEFAULT_STYLE,
    margin: float = 10,
) -> tuple[int, int]:
    """Whole-unit page size that fits the symbol and the margin on every side."""
    width, height = symbol.size(metrics, style)
    return math.ceil(width + 2 * margin), math.ceil(height + 2 * margin)


def _create_surface(cairo, fmt: str, path: Path, width: int, height: int):
    if fmt == "pdf":
        return cairo.PDFSurface(str(path), width, height)
    if fmt == "svg":
        return cairo.SVGSurface(str(path), width, height)
    return cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)


def _draw_page(cairo, symbol, fmt, path, size, metrics, style, margin) -> None:
    surface = _create_surface(cairo, fmt, path, *size)
    try:
        ctx = cairo.Context(surface)

        if fmt == "png":
            # Raster pages start transparent
            with saved_state(ctx):
                ctx.set_source_rgb(1, 1, 1)
                ctx.paint()

        with saved_state(ctx):
            ctx.translate(margin, margin)
            select_font(ctx, style)
            symbol.draw(ctx, metrics, style)

        if fmt == "png":
            surface.write_to_png(str(path))
        else:
            ctx.show_page()
    finally:
        surface.finish()


def render_symbol(
    symbol: Symbol,
    path: str | Path,
    fmt: str | None = None,
    style: SymbolStyle | None = None,
    margin: float = 10,
) -> Path:
    """
    Draw ``symbol`` on a single page written to ``path``.

    ``path`` is only replaced once the page is complete; if drawing fails
    the exception propagates and ``path`` is left untouched.

    Args:
        symbol: Symbol to render
        path: Output file
        fmt: "pdf", "svg" or "png"; inferred from the suffix when omitted
        style: Layout constants and font
        margin: Blank border around the symbol

    Returns:
        Path of the written file

    Raises:
        RenderError: If the output format is unsupported
    """
    style = style or DEFAULT_STYLE
    path = Path(path)
    fmt = detect_format(path, fmt)
    cairo = import_cairo()

    metrics = CairoTextMetrics.for_style(style)
    width, height = page_size(symbol, metrics, style, margin)
    logger.debug("Page size for %r: %sx%s (%s)", symbol.name, width, height, fmt)

    # Only a finished page may reach path
    fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    os.close(fd)
    temp_path = Path(temp_name)
    try:
        _draw_page(cairo, symbol, fmt, temp_path, (width, height), metrics, style, margin)
        os.replace(temp_path, path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise

    logger.info("Wrote %s file %s", fmt.upper(), path)
    return path
