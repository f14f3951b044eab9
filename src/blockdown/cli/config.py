#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the blockdown CLI.

Configuration files hold flat option tables whose keys are the field names of
:class:`~blockdown.options.MarkdownParserOptions` and
:class:`~blockdown.options.XhtmlRendererOptions`::

    # .blockdown.toml
    dump_references = true
    max_nesting_depth = 8
    paragraph_tag = "para"

The same table may live under ``[tool.blockdown]`` in ``pyproject.toml``.
Every loading failure is reported as :class:`argparse.ArgumentTypeError` so the
CLI can treat it like any other bad argument.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import IO, Any, Callable, Dict, Iterator, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from blockdown.constants import CONFIG_FILENAMES

PYPROJECT = "pyproject.toml"

# Suffix -> (open mode, loader)
_LOADERS: Dict[str, tuple[str, Callable[[IO[Any]], Any]]] = {
    ".toml": ("rb", tomllib.load),
    ".yaml": ("r", yaml.safe_load),
    ".yml": ("r", yaml.safe_load),
    ".json": ("r", json.load),
}

_DECODE_ERRORS = (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError)


def _parse_file(path: Path) -> Any:
    """Parse ``path`` with the loader registered for its suffix."""
    suffix = path.suffix.lower()
    if suffix not in _LOADERS:
        raise argparse.ArgumentTypeError(
            f"Unsupported config file format: {suffix or path.name}. Use .json, .toml, or .yaml"
        )

    mode, loader = _LOADERS[suffix]
    try:
        if mode == "rb":
            with path.open("rb") as f:
                return loader(f)
        with path.open("r", encoding="utf-8") as f:
            return loader(f)
    except _DECODE_ERRORS as e:
        raise argparse.ArgumentTypeError(f"Invalid config file {path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Cannot read config file {path}: {e}") from e


def _as_table(value: Any, where: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise argparse.ArgumentTypeError(f"{where} must be a table/mapping, got {type(value).__name__}")
    return value


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Return the ``[tool.blockdown]`` table of ``pyproject_path``, or ``{}``."""
    data = _parse_file(pyproject_path)
    section = data.get("tool", {}).get("blockdown")
    return _as_table(section, f"[tool.blockdown] in {pyproject_path}")


def _candidates(directory: Path) -> Iterator[Path]:
    for filename in CONFIG_FILENAMES:
        yield directory / filename


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file in ``start_dir`` or one of its parents.

    Each directory is checked for ``.blockdown.toml``, ``.blockdown.yaml``,
    ``.blockdown.yml``, ``.blockdown.json``, then for a ``pyproject.toml``
    holding a non-empty ``[tool.blockdown]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Directory to start from, defaults to the current working directory

    Returns
    -------
    Path or None
        The first configuration file found

    """
    start = (start_dir or Path.cwd()).resolve()

    for directory in (start, *start.parents):
        for candidate in _candidates(directory):
            if candidate.is_file():
                return candidate

        pyproject = directory / PYPROJECT
        if not pyproject.is_file():
            continue
        try:
            if _load_pyproject_section(pyproject):
                return pyproject
        except argparse.ArgumentTypeError:
            # An unrelated broken pyproject.toml does not stop the search
            continue

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the parent chain, then in the home directory."""
    found = find_config_in_parents(start_dir)
    if found is not None:
        return found
    return next((path for path in _candidates(Path.home()) if path.is_file()), None)


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load a JSON, TOML, YAML, or pyproject.toml configuration file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Option values keyed by field name. An empty file gives ``{}``.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is missing, unreadable, malformed, or not a mapping

    """
    path = Path(config_path)
    if not path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {path}")
    if not path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {path}")

    if path.name.lower() == PYPROJECT:
        return _load_pyproject_section(path)
    return _as_table(_parse_file(path), f"Config file {path} root")


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load the configuration that applies to this run.

    The first of these wins: ``explicit_path`` (``--config``), ``env_var_path``
    (``BLOCKDOWN_CONFIG``), then a discovered file. Without any, ``{}``.

    Raises
    ------
    argparse.ArgumentTypeError
        If the selected file cannot be loaded

    """
    chosen = explicit_path or env_var_path or discover_config_file()
    return load_config_file(chosen) if chosen else {}
