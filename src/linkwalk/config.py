"""
Configuration for traversal and search behavior.

Every public graph operation accepts an optional TraversalConfig. When none
is given, default_config() is consulted: it reads the YAML file named by the
LINKWALK_CONFIG environment variable if set, and otherwise returns defaults.

Configuration is resolved per call and never cached, so there is no engine
state shared between invocations.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal

import yaml

from .errors import ConfigError

CONFIG_ENV_VAR = "LINKWALK_CONFIG"

RecursionPolicy = Literal["warn", "raise", "off"]
_RECURSION_POLICIES = ("warn", "raise", "off")


@dataclass
class TraversalConfig:
    """Configuration for traversal behavior."""

    # Input validation
    validate_inputs: bool = True  # Check adjacency and vertex ids before running

    # Recursion guard for recursive reference variants
    recursion_guard: RecursionPolicy = "warn"
    recursion_headroom: int = 50  # Frames kept free below sys.getrecursionlimit()

    # Safety limits
    max_vertices: int | None = None  # None = unlimited

    def __post_init__(self) -> None:
        if not isinstance(self.validate_inputs, bool):
            raise ConfigError(
                f"validate_inputs must be true or false, got {self.validate_inputs!r}"
            )
        if not _is_int(self.recursion_headroom):
            raise ConfigError(
                f"recursion_headroom must be an integer, got {self.recursion_headroom!r}"
            )
        if self.max_vertices is not None and not _is_int(self.max_vertices):
            raise ConfigError(
                f"max_vertices must be an integer or null, got {self.max_vertices!r}"
            )
        if self.recursion_guard not in _RECURSION_POLICIES:
            raise ConfigError(
                f"recursion_guard must be one of {', '.join(_RECURSION_POLICIES)}, "
                f"got {self.recursion_guard!r}"
            )
        if self.recursion_headroom < 0:
            raise ConfigError(
                f"recursion_headroom must be >= 0, got {self.recursion_headroom}"
            )
        if self.max_vertices is not None and self.max_vertices < 0:
            raise ConfigError(f"max_vertices must be >= 0, got {self.max_vertices}")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def config_from_mapping(data: dict[str, Any]) -> TraversalConfig:
    """
    Build a TraversalConfig from a plain mapping.

    Accepts either the settings directly or nested under a top-level
    ``linkwalk`` key.

    Args:
        data: Mapping of setting name to value

    Returns:
        TraversalConfig with the given overrides applied

    Raises:
        ConfigError: If the mapping has unknown keys or invalid values
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")

    if "linkwalk" in data:
        data = data["linkwalk"] or {}
        if not isinstance(data, dict):
            raise ConfigError("'linkwalk' section must be a mapping")

    known = {f.name for f in fields(TraversalConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")

    # YAML 1.1 reads an unquoted `off` as boolean false
    if data.get("recursion_guard") is False:
        data = {**data, "recursion_guard": "off"}

    return TraversalConfig(**data)


def load_config(path: Path | str) -> TraversalConfig:
    """
    Load configuration from a YAML file.

    Example file::

        linkwalk:
          validate_inputs: true
          recursion_guard: raise
          max_vertices: 100000

    Args:
        path: Path to the YAML file

    Returns:
        TraversalConfig loaded from the file

    Raises:
        ConfigError: If the file is missing, unparseable, or invalid
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise ConfigError(f"Configuration file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc

    # An empty file means "all defaults"
    if data is None:
        return TraversalConfig()

    return config_from_mapping(data)


def default_config() -> TraversalConfig:
    """Return the environment-selected configuration, or defaults."""
    config_path = os.getenv(CONFIG_ENV_VAR)
    if config_path:
        return load_config(config_path)
    return TraversalConfig()


def resolve_config(config: TraversalConfig | None) -> TraversalConfig:
    """Return ``config`` unchanged, or default_config() when it is None."""
    return config if config is not None else default_config()
