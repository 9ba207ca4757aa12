"""
Render commands for symbol-tools CLI.

Usage:
    symbol-tools render fifo.yaml -o fifo.pdf
    symbol-tools render fifo.yaml --format svg
    symbol-tools demo -o image.pdf
"""

import argparse
import sys
from pathlib import Path

from symbol_tools.config import OUTPUT_FORMATS, Config
from symbol_tools.exceptions import SymbolToolsError
from symbol_tools.loader import load_symbol
from symbol_tools.logging import enable_verbose
from symbol_tools.render import detect_format, render_symbol
from symbol_tools.sample import build_sample_symbol


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-o", "--output", help="Output file")
    parser.add_argument("--format", choices=list(OUTPUT_FORMATS), help="Output format")
    parser.add_argument("--margin", type=float, help="Blank margin around the symbol")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log layout details")


def add_render_parser(subparsers) -> None:
    render_parser = subparsers.add_parser("render", help="Render a symbol description file")
    render_parser.add_argument("symbol", help="Path to a .yaml or .json symbol description")
    _add_output_arguments(render_parser)

    demo_parser = subparsers.add_parser("demo", help="Render the built-in sample symbol")
    _add_output_arguments(demo_parser)


def _output_path(args: argparse.Namespace, default: Path, config: Config) -> Path:
    if args.output:
        return Path(args.output)
    fmt = args.format or config.output.format
    return default.with_suffix(f".{fmt}")


def _render(args: argparse.Namespace, from_file: bool) -> int:
    if args.verbose:
        enable_verbose("DEBUG")

    try:
        config = Config.load()
        if from_file:
            symbol = load_symbol(args.symbol)
            default = Path(args.symbol)
        else:
            symbol = build_sample_symbol()
            default = Path(config.output.default_filename)

        out = _output_path(args, default, config)
        # A suffix-less output name falls back to the configured format
        fmt = args.format or (None if out.suffix else config.output.format)
        path = render_symbol(
            symbol,
            out,
            fmt=fmt,
            style=config.style,
            margin=config.output.margin if args.margin is None else args.margin,
        )
    except SymbolToolsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    fmt = detect_format(path, fmt)
    print(f'Wrote {fmt.upper()} file "{path}"')
    return 0


def run_render(args: argparse.Namespace) -> int:
    """Render a symbol description file."""
    return _render(args, from_file=True)


def run_demo(args: argparse.Namespace) -> int:
    """Render the built-in sample symbol."""
    return _render(args, from_file=False)
