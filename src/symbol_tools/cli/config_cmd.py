"""
Config command for symbol-tools CLI.

Provides commands to view and initialize configuration.

Usage:
    symbol-tools config --show     Show effective configuration with sources
    symbol-tools config --init     Create template config file
    symbol-tools config --paths    Show config file paths
"""

import argparse
import sys
from pathlib import Path

from symbol_tools.config import (
    CONFIG_FILENAMES,
    USER_CONFIG_PATH,
    Config,
    config_items,
    generate_template,
    get_config_paths,
)
from symbol_tools.exceptions import ConfigError


def add_config_parser(subparsers) -> None:
    config_parser = subparsers.add_parser("config", help="Manage configuration")
    action_group = config_parser.add_mutually_exclusive_group()
    action_group.add_argument(
        "--show",
        action="store_true",
        help="Show effective configuration with sources",
    )
    action_group.add_argument(
        "--init",
        action="store_true",
        help="Create template config file in current directory",
    )
    action_group.add_argument(
        "--paths",
        action="store_true",
        help="Show config file paths",
    )
    config_parser.add_argument(
        "--user",
        action="store_true",
        help="Use user config (~/.config/symbol-tools/config.toml) for --init",
    )


def run_config(args: argparse.Namespace) -> int:
    """Run the config command."""
    try:
        if args.init:
            return _init_config(args.user)
        elif args.paths:
            return _show_paths()
        else:
            return _show_config()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _show_config() -> int:
    """Show effective configuration with sources."""
    config = Config.load()

    print("# Effective symbol-tools configuration")
    section = None
    for key, value in config_items(config):
        table, name = key.split(".", 1)
        if table != section:
            print()
            print(f"[{table}]")
            section = table
        _print_value(name, value, config.get_source(key))

    return 0


def _print_value(key: str, value, source: str) -> None:
    """Print a config value with its source."""
    if isinstance(value, str):
        formatted = f'"{value}"'
    elif isinstance(value, bool):
        formatted = "true" if value else "false"
    elif isinstance(value, tuple):
        formatted = "[" + ", ".join(str(v) for v in value) + "]"
    elif value is None:
        formatted = "# not set"
    else:
        formatted = str(value)

    if source != "default":
        # Show just filename for brevity
        source_display = Path(source).name
    else:
        source_display = source

    print(f"{key} = {formatted}  # from: {source_display}")


def _show_paths() -> int:
    """Show config file paths."""
    paths = get_config_paths()

    print("Config file paths:")
    print()

    print(f"User config: {USER_CONFIG_PATH}")
    if paths["user"]:
        print("  Status: exists")
    else:
        print("  Status: not found")
    print()

    print(f"Project config search: {', '.join(CONFIG_FILENAMES)}")
    if paths["project"]:
        print(f"  Found: {paths['project']}")
    else:
        print("  Status: not found")

    return 0


def _init_config(user: bool) -> int:
    """Write the template config file."""
    path = USER_CONFIG_PATH if user else Path.cwd() / CONFIG_FILENAMES[0]

    if path.exists():
        print(f"Config file already exists: {path}", file=sys.stderr)
        return 1

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generate_template())
    print(f"Created config file: {path}")
    return 0
