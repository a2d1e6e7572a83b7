#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the doxy2md CLI.

Renderer options can be stored in ``.doxy2md.toml``, ``.doxy2md.yaml``,
``.doxy2md.yml``, ``.doxy2md.json`` or in the ``[tool.doxy2md]`` table of a
``pyproject.toml``. Keys are :class:`~doxy2md.options.RendererOptions` field
names; dashes are accepted in place of underscores.
"""

import argparse
import json
import sys
from dataclasses import fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from doxy2md.exceptions import ValidationError
from doxy2md.options import RendererOptions

CONFIG_FILENAMES = [".doxy2md.toml", ".doxy2md.yaml", ".doxy2md.yml", ".doxy2md.json"]


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.doxy2md] table from a pyproject.toml file.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get("doxy2md", {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.doxy2md] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file in ``start_dir`` or one of its parents.

    Dedicated config files win over ``pyproject.toml``; a ``pyproject.toml``
    only counts when it has a ``[tool.doxy2md]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        First config file found, or None

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # unrelated broken pyproject, keep walking up
                pass

        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is missing, unreadable, or not a mapping

    Examples
    --------
    >>> config = load_config_file(".doxy2md.toml")
    >>> config.get("max_heading_level")
    4

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    ext = config_path.suffix.lower()
    try:
        if config_path.name.lower() == "pyproject.toml":
            return _load_pyproject_section(config_path)
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
        elif ext == ".json":
            with open(config_path, encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError, OSError) as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}"
        )
    return config


def options_from_config(config: Dict[str, Any], base: Optional[RendererOptions] = None) -> RendererOptions:
    """Build renderer options from a configuration dictionary.

    Parameters
    ----------
    config : dict
        Option names to values
    base : RendererOptions, optional
        Options to start from, defaults to ``RendererOptions()``

    Returns
    -------
    RendererOptions
        Options with the configured values applied

    Raises
    ------
    ValidationError
        If a key is not a renderer option or a value is out of range

    """
    known = {f.name for f in fields(RendererOptions)}
    updates: Dict[str, Any] = {}
    for key, value in config.items():
        name = key.replace("-", "_")
        if name not in known:
            raise ValidationError(f"Unknown renderer option '{key}'", parameter_name=key, parameter_value=value)
        updates[name] = value

    try:
        return (base or RendererOptions()).create_updated(**updates)
    except (TypeError, ValueError) as e:
        raise ValidationError(str(e), original_error=e) from e
