import argparse
from pathlib import Path
from typing import Optional

import yaml

from .models import FileError, PoolMode


DEFAULT_FORMAT = "table"
DEFAULT_OUTPUT = "."

OUTPUT_FORMATS = ["table", "csv", "markdown", "json", "yaml"]


CONFIG_SEARCH_PATHS = [
    ".reviewassignrc",
    "review_assigner.yaml",
]


def get_home_config_paths() -> list[Path]:
    """Get config file paths in user's home directory."""
    home = Path.home()
    return [
        home / ".config" / "review_assigner" / "config.yaml",
        home / ".reviewassignrc",
    ]


def find_config_file(config_path: Optional[str]) -> Optional[Path]:
    """Find config file from explicit path or search default locations.

    Search order:
    1. Explicit path (-c argument)
    2. ./.reviewassignrc
    3. ./review_assigner.yaml
    4. ~/.config/review_assigner/config.yaml
    5. ~/.reviewassignrc
    """
    if config_path:
        path = Path(config_path)
        if path.exists():
            return path
        return None

    for rel_path in CONFIG_SEARCH_PATHS:
        path = Path(rel_path)
        if path.exists():
            return path

    for abs_path in get_home_config_paths():
        if abs_path.exists():
            return abs_path

    return None


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise FileError(f"Error parsing config file {config_path}: {e}")
    except OSError as e:
        raise FileError(f"Error reading config file: {e}")

    if not data:
        return {}
    if not isinstance(data, dict):
        raise FileError(f"Config file {config_path} must contain a mapping")
    return data


def parse_seed(value) -> Optional[int]:
    """Convert a config seed value to int, None when unset."""
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise FileError(f"Invalid seed in config: {value!r} (expected an integer)")


def parse_verbose(value) -> int:
    """Convert a config verbose value to int, 0 when unset."""
    if value is None or value == "":
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        raise FileError(f"Invalid verbose in config: {value!r} (expected an integer or true/false)")


def merge_config(config: dict, args: argparse.Namespace) -> argparse.Namespace:
    """Merge config file with CLI arguments.

    CLI args > Config file > Defaults

    Config keys map to args:
    - mode -> args.mode
    - format -> args.format
    - output -> args.output
    - seed -> args.seed
    - verbose -> args.verbose (adjusts based on value)
    """
    defaults = {
        "mode": None,
        "format": DEFAULT_FORMAT,
        "output": DEFAULT_OUTPUT,
        "seed": None,
    }

    for key, default in defaults.items():
        if getattr(args, key, None) is not None:
            continue
        value = config.get(key)
        if value is None:
            setattr(args, key, default)
        elif key == "seed":
            setattr(args, key, parse_seed(value))
        else:
            setattr(args, key, str(value))

    if args.mode is not None and args.mode not in [m.value for m in PoolMode]:
        raise FileError(f"Invalid mode in config: {args.mode} (choose from single, dual)")

    if args.format not in OUTPUT_FORMATS:
        raise FileError(f"Invalid format in config: {args.format} (choose from {', '.join(OUTPUT_FORMATS)})")

    if args.verbose is None:
        verbose_config = config.get("verbose")
        if isinstance(verbose_config, bool):
            args.verbose = 1 if verbose_config else 0
        else:
            args.verbose = parse_verbose(verbose_config)

    if args.quiet is None:
        args.quiet = 0

    return args
