"""
Configuration file support for symbol-tools.

Provides hierarchical configuration loading from:
1. Project config: .symbol-tools.toml or symbol-tools.toml in project root
2. User config: ~/.config/symbol-tools/config.toml

CLI arguments override config file values, and project config overrides user config.
"""

import sys
import warnings
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from symbol_tools.exceptions import ConfigError
from symbol_tools.symbol.style import DEFAULT_STYLE, SymbolStyle

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]

# Config file names to search for in project directories
CONFIG_FILENAMES = [".symbol-tools.toml", "symbol-tools.toml"]

# User-level config path
USER_CONFIG_PATH = Path.home() / ".config" / "symbol-tools" / "config.toml"

OUTPUT_FORMATS = ("pdf", "svg", "png")

# All known config keys for validation
KNOWN_KEYS = {
    "style": SymbolStyle.field_names(),
    "output": {"format", "margin", "default_filename"},
}


@dataclass
class OutputConfig:
    """Output page options."""

    format: str = "pdf"
    margin: float = 10
    default_filename: str = "image.pdf"


@dataclass
class Config:
    """Merged configuration from all sources."""

    style: SymbolStyle = field(default_factory=SymbolStyle)
    output: OutputConfig = field(default_factory=OutputConfig)

    # Track which file each setting came from (for --show)
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, start_dir: Path | None = None) -> "Config":
        """
        Load configuration with precedence: project > user > defaults.

        Args:
            start_dir: Directory to start searching from (default: current directory)

        Returns:
            Merged configuration object
        """
        if start_dir is None:
            start_dir = Path.cwd()

        config = cls()
        sources: dict[str, str] = {}

        # Load user config first (lower precedence)
        if USER_CONFIG_PATH.exists():
            user_data = _load_toml_file(USER_CONFIG_PATH)
            if user_data:
                _merge_config(config, user_data, str(USER_CONFIG_PATH), sources)

        # Load project config (higher precedence)
        project_config = _find_project_config(start_dir)
        if project_config:
            project_data = _load_toml_file(project_config)
            if project_data:
                _merge_config(config, project_data, str(project_config), sources)

        config._sources = sources
        return config

    def get_source(self, key: str) -> str:
        """Get the source file for a config key."""
        return self._sources.get(key, "default")


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Find project config by walking up the directory tree.

    Stops at .git directory or filesystem root.

    Args:
        start_dir: Directory to start searching from

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        # Stop at .git directory (project root)
        if (current / ".git").exists():
            break

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def _load_toml_file(path: Path) -> dict[str, Any] | None:
    """
    Load a TOML file safely.

    Args:
        path: Path to TOML file

    Returns:
        Parsed TOML data or None if no TOML parser is available

    Raises:
        ConfigError: If TOML is invalid or the file cannot be read
    """
    if tomllib is None:
        warnings.warn(
            "tomli package not installed. Config file support requires 'pip install tomli' for Python < 3.11.",
            stacklevel=2,
        )
        return None

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}", context={"file": str(path)}) from e
    except OSError as e:
        raise ConfigError(
            f"Cannot read config file {path}: {e}", context={"file": str(path)}
        ) from e


def _merge_config(
    config: Config, data: dict[str, Any], source: str, sources: dict[str, str]
) -> None:
    """
    Merge loaded config data into Config object.

    Args:
        config: Config object to update
        data: Raw config data from TOML
        source: Source file path (for tracking)
        sources: Dict to update with source info
    """
    for key in data:
        if key not in KNOWN_KEYS:
            warnings.warn(f"Unknown config key '{key}' in {source}", stacklevel=3)

    if "style" in data:
        style_data = data["style"]
        _warn_unknown_keys(style_data, KNOWN_KEYS["style"], "style", source)

        overrides = {k: v for k, v in style_data.items() if k in KNOWN_KEYS["style"]}
        for key, value in overrides.items():
            _check_style_value(key, value, source)
        if overrides:
            config.style = config.style.with_overrides(**overrides)
            for key in overrides:
                sources[f"style.{key}"] = source

    if "output" in data:
        output_data = data["output"]
        _warn_unknown_keys(output_data, KNOWN_KEYS["output"], "output", source)

        if "format" in output_data:
            fmt = str(output_data["format"]).lower()
            if fmt not in OUTPUT_FORMATS:
                raise ConfigError(
                    f"Unsupported output format '{fmt}' in {source}",
                    context={"file": source, "key": "output.format"},
                    suggestions=[f"Use one of: {', '.join(OUTPUT_FORMATS)}"],
                )
            config.output.format = fmt
            sources["output.format"] = source
        if "margin" in output_data:
            if not _is_number(output_data["margin"]):
                raise ConfigError(
                    f"Invalid value {output_data['margin']!r} for output.margin in {source}",
                    context={"file": source, "key": "output.margin"},
                    suggestions=["Set output.margin to a number, e.g. 10"],
                )
            config.output.margin = output_data["margin"]
            sources["output.margin"] = source
        if "default_filename" in output_data:
            config.output.default_filename = output_data["default_filename"]
            sources["output.default_filename"] = source


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_style_value(key: str, value: Any, source: str) -> None:
    """
    Check a [style] value against the type of its default.

    Raises:
        ConfigError: If the value has the wrong type or shape
    """
    default = getattr(DEFAULT_STYLE, key)
    if isinstance(default, tuple):
        valid = (
            isinstance(value, (list, tuple))
            and len(value) == len(default)
            and all(_is_number(v) for v in value)
        )
        expected = f"a list of {len(default)} numbers, e.g. {list(default)}"
    elif isinstance(default, str):
        valid = isinstance(value, str)
        expected = f"a string, e.g. \"{default}\""
    else:
        valid = _is_number(value)
        expected = f"a number, e.g. {default}"

    if not valid:
        raise ConfigError(
            f"Invalid value {value!r} for style.{key} in {source}",
            context={"file": source, "key": f"style.{key}"},
            suggestions=[f"Set style.{key} to {expected}"],
        )


def _warn_unknown_keys(data: dict[str, Any], known: set[str], section: str, source: str) -> None:
    """Warn about unknown keys in a config section."""
    for key in data:
        if key not in known:
            warnings.warn(f"Unknown config key '{section}.{key}' in {source}", stacklevel=4)


def config_items(config: Config) -> list[tuple[str, Any]]:
    """Flatten a config into ``(dotted_key, value)`` pairs in display order."""
    items: list[tuple[str, Any]] = []
    for f in fields(config.style):
        items.append((f"style.{f.name}", getattr(config.style, f.name)))
    for f in fields(config.output):
        items.append((f"output.{f.name}", getattr(config.output, f.name)))
    return items


def generate_template() -> str:
    """
    Generate a template config file with all options documented.

    Returns:
        Template TOML string
    """
    return """# symbol-tools configuration file
# Place as .symbol-tools.toml in project root or ~/.config/symbol-tools/config.toml for user defaults

[style]
# Gap from the section border to the type label
# stem_length = 15

# Stem stroke widths for single-bit wires and buses
# wire_stem_width = 1
# bus_stem_width = 2

# Gap between border/stem and adjacent text
# text_padding = 5

# Vertical margin inside each section
# top_bottom_padding = 10

# Gap between pin rows
# pin_spacing = 5

# Gap between the left and right name columns
# text_separator = 10

# Gap between the symbol name and the first section
# name_spacing = 5

# Section border stroke width
# border_width = 1.5

# RGB colour of pin type labels
# type_color = [0.5, 0.5, 0.5]

# Font used for measuring and painting
# font_family = "sans-serif"
# font_size = 10

# String whose height sets the row pitch
# reference_text = "Hello world"

[output]
# Output format: pdf, svg, png
# format = "pdf"

# Blank margin around the symbol
# margin = 10

# File written by 'symbol-tools demo' when no -o is given
# default_filename = "image.pdf"
"""


def get_config_paths() -> dict[str, Path | None]:
    """
    Get paths to config files that would be loaded.

    Returns:
        Dict with 'user' and 'project' keys
    """
    project_config = _find_project_config(Path.cwd())

    return {
        "user": USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None,
        "project": project_config,
    }
