"""
Command-line interface for symbol-tools.

Provides CLI commands via the `symbol-tools` command:

    symbol-tools render <file>    - Render a YAML/JSON symbol description
    symbol-tools demo             - Render the built-in sample symbol
    symbol-tools config           - Show or initialize configuration

Examples:
    symbol-tools render fifo.yaml -o fifo.pdf
    symbol-tools render fifo.yaml --format svg --margin 20
    symbol-tools demo
    symbol-tools config --init
"""

import argparse
from typing import List, Optional

from symbol_tools import __version__

from .config_cmd import add_config_parser, run_config
from .render_cmd import add_render_parser, run_demo, run_render

__all__ = ["main"]

COMMANDS = {
    "render": run_render,
    "demo": run_demo,
    "config": run_config,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for symbol-tools CLI."""
    parser = argparse.ArgumentParser(
        prog="symbol-tools",
        description="Schematic symbol renderer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"symbol-tools {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    add_render_parser(subparsers)
    add_config_parser(subparsers)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    return COMMANDS[args.command](args)
