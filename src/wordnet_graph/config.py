"""
YAML configuration for loading WordNet data.

Example file::

    wordnet:
      file_prefix: data
      strict_redefinition: true
      verify_offsets: false
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from wordnet_graph.exceptions import ConfigError


@dataclass
class LoaderConfig:
    """Options controlling how data files are found and checked."""
    file_prefix: str = "data"
    strict_redefinition: bool = False
    validate_targets: bool = True
    verify_offsets: bool = False
    source_file: Path | None = None


_OPTION_TYPES: dict[str, type] = {
    f.name: (str if f.name == "file_prefix" else bool)
    for f in fields(LoaderConfig)
    if f.name != "source_file"
}


def load_config(
    source: str | Path | dict[str, Any] | None = None,
) -> LoaderConfig:
    """Load loader options from a YAML file, YAML string or dictionary.

    Args:
        source: Path to YAML file, YAML string, or parsed dictionary.
            None gives the defaults.

    Returns:
        LoaderConfig object

    Raises:
        ConfigError: If the configuration cannot be parsed or is invalid
        FileNotFoundError: If the file does not exist
    """
    source_path: Path | None = None

    if source is None:
        return LoaderConfig()
    if isinstance(source, dict):
        data = source
    elif isinstance(source, Path) or (isinstance(source, str) and _is_file_path(source)):
        source_path = Path(source)
        if not source_path.exists():
            raise FileNotFoundError(f"File not found: {source_path}")
        with open(source_path, "r", encoding="utf-8") as f:
            data = _load_yaml(f)
    else:
        data = _load_yaml(source)

    return _parse_config(data, source_path)


def _is_file_path(s: str) -> bool:
    """Check if a string looks like a file path."""
    if "\n" in s:
        return False
    if "/" in s or "\\" in s:
        return True
    return s.endswith((".yaml", ".yml"))


def _load_yaml(stream: Any) -> dict[str, Any]:
    try:
        data = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        where = f" (line {mark.line + 1})" if mark else ""
        raise ConfigError(f"Invalid YAML{where}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("YAML root must be a mapping (dictionary)")
    return data


def _parse_config(
    data: dict[str, Any],
    source_path: Path | None = None,
) -> LoaderConfig:
    """Validate a dictionary of options into a LoaderConfig."""
    if "wordnet" in data:
        if len(data) != 1:
            raise ConfigError("Field 'wordnet' must be the only top-level key")
        data = data["wordnet"] or {}
        if not isinstance(data, dict):
            raise ConfigError("Field 'wordnet' must be a mapping")

    options: dict[str, Any] = {}
    for name, value in data.items():
        expected = _OPTION_TYPES.get(name)
        if expected is None:
            raise ConfigError(f"Unknown option: {name!r}")
        if not isinstance(value, expected):
            raise ConfigError(
                f"Option {name!r} must be a {expected.__name__}, "
                f"got {type(value).__name__}"
            )
        options[name] = value

    if options.get("file_prefix") == "":
        raise ConfigError("Option 'file_prefix' cannot be empty")

    return LoaderConfig(source_file=source_path, **options)
