"""
Configuration loader — reads kss-config.yml into a StyleguideConfig.

YAML and JSON files are both read with PyYAML (JSON is a YAML subset),
validated against the Pydantic model, and have their path settings
resolved relative to the config file's directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from kssgen.core.models.config import StyleguideConfig

logger = logging.getLogger(__name__)

# Searched in order in every directory while walking up
CONFIG_FILE_NAMES = ("kss-config.yml", "kss-config.yaml", "kss-config.json")

# Keys holding filesystem paths, resolved against the config file's dir
_PATH_KEYS = ("destination", "template")
_PATH_LIST_KEYS = ("source",)


class ConfigError(Exception):
    """Raised when style guide configuration is invalid or missing."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for a kss config file starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to the config file, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        for name in CONFIG_FILE_NAMES:
            candidate = current / name
            if candidate.is_file():
                return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def read_config_data(path: Path) -> dict[str, Any]:
    """Read a config file into a raw mapping.

    Raises:
        ConfigError: If the file is missing, unreadable, or not a mapping.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading style guide config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML/JSON in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")
    return data


def resolve_paths(data: dict[str, Any], base_dir: Path) -> dict[str, Any]:
    """Return a copy of ``data`` with relative path settings anchored at ``base_dir``."""
    resolved = dict(data)

    for key in _PATH_KEYS:
        value = resolved.get(key)
        if isinstance(value, str) and value:
            resolved[key] = str((base_dir / value).resolve())

    for key in _PATH_LIST_KEYS:
        value = resolved.get(key)
        if isinstance(value, str):
            value = [value]
        if isinstance(value, list):
            resolved[key] = [
                str((base_dir / item).resolve()) if isinstance(item, str) else item
                for item in value
            ]

    return resolved


def build_config(data: dict[str, Any], source: str = "<arguments>") -> StyleguideConfig:
    """Validate a raw mapping into a StyleguideConfig.

    Raises:
        ConfigError: If the mapping fails validation.
    """
    try:
        return StyleguideConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid style guide configuration in {source}: {e}") from e


def load_config(
    path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> StyleguideConfig:
    """Load and validate style guide configuration.

    Args:
        path: Explicit config file. If None, searches upward from cwd;
            a missing file is not an error (defaults + overrides are used).
        overrides: Values that win over the file (CLI flags). Paths in
            overrides are taken as given.

    Returns:
        Validated StyleguideConfig.

    Raises:
        ConfigError: If an explicit file is missing or any input is invalid.
    """
    data: dict[str, Any] = {}
    origin = "<arguments>"

    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No kss config file found; using defaults")
    if path is not None:
        data = resolve_paths(read_config_data(path), path.parent.resolve())
        origin = str(path)

    for key, value in (overrides or {}).items():
        if value is None:
            continue
        data[key] = value

    config = build_config(data, origin)
    logger.info(
        "Loaded style guide config (%d source path(s), destination=%s)",
        len(config.source),
        config.destination,
    )
    return config
