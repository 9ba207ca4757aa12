"""
symbol-tools logging configuration.

Module loggers live under the ``symbol_tools`` logger, which is silent
until verbose output is enabled. At DEBUG the layout modules report the
shared widths of a symbol, the rows of each section and the anchor of every
pin, and each record names the module that produced it
(``symbol_tools.symbol.pin``, ``symbol_tools.render``, ...).
"""

import logging

DEFAULT_FORMAT = "[%(levelname)s] %(message)s"
LAYOUT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_logger = logging.getLogger("symbol_tools")
_logger.addHandler(logging.NullHandler())  # Default: no output


def _remove_stream_handlers() -> None:
    for handler in _logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            _logger.removeHandler(handler)


def enable_verbose(level: str = "INFO", format: str | None = None) -> None:
    """Enable verbose logging for debugging layout and rendering.

    Args:
        level: Logging level - "DEBUG", "INFO", "WARNING", "ERROR"
        format: Optional custom format string. Defaults to
            :data:`LAYOUT_FORMAT` at DEBUG and :data:`DEFAULT_FORMAT` otherwise.

    Example:
        enable_verbose("DEBUG")
        render_symbol(symbol, "image.pdf")  # Logs widths, rows and anchors
        disable_verbose()
    """
    numeric = getattr(logging, level.upper())
    _logger.setLevel(numeric)
    _remove_stream_handlers()

    if format is None:
        format = LAYOUT_FORMAT if numeric <= logging.DEBUG else DEFAULT_FORMAT

    handler = logging.StreamHandler()
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(format))
    _logger.addHandler(handler)


def disable_verbose() -> None:
    """Disable verbose logging."""
    _logger.setLevel(logging.WARNING)
    _remove_stream_handlers()
