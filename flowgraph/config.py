"""Configuration classes for flowgraph components."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from flowgraph.lib.errors import FlowGraphError


class ConfigError(FlowGraphError, ValueError):
    """Raised for a malformed configuration file."""


SYMBOL_FIELDS = ("grass", "rocks", "fruit", "meat", "workplace")


@dataclass(frozen=True)
class WorldConfig:
    """Symbols and limits used when reading an ant world grid."""

    grass: str = "."
    rocks: str = "X"
    fruit: str = "F"
    meat: str = "M"
    workplace: str = "W"

    # Overrides the walking distance given in the world header when set.
    max_distance: Optional[int] = None

    def symbols(self) -> Dict[str, str]:
        """Map each cell symbol to its field name."""
        return {
            self.grass: "grass",
            self.rocks: "rocks",
            self.fruit: "fruit",
            self.meat: "meat",
            self.workplace: "workplace",
        }

    def validate(self) -> None:
        """Check symbols are distinct single characters.

        Raises:
            ConfigError: On an invalid symbol or distance.
        """
        values = [getattr(self, name) for name in SYMBOL_FIELDS]
        for name, value in zip(SYMBOL_FIELDS, values):
            if not isinstance(value, str) or len(value) != 1 or value.isspace():
                raise ConfigError(
                    f"Symbol '{name}' must be a single visible character, "
                    f"got {value!r}."
                )
        if len(set(values)) != len(values):
            raise ConfigError(f"Cell symbols must be distinct, got {values}.")
        if self.max_distance is not None and (
            isinstance(self.max_distance, bool)
            or not isinstance(self.max_distance, int)
            or self.max_distance < 0
        ):
            raise ConfigError(
                "max_distance must be a non-negative integer, "
                f"got {self.max_distance!r}."
            )


def _normalize_keys(data: Dict[Any, Any]) -> Dict[str, Any]:
    # YAML 1.1 turns keys like `yes`/`on` into booleans; keep them as strings.
    return {str(key): value for key, value in data.items()}


def config_from_dict(data: Dict[str, Any]) -> WorldConfig:
    """Build a `WorldConfig` from a parsed mapping.

    Args:
        data: Mapping with an optional ``world`` section.

    Returns:
        WorldConfig: Defaults overridden by the given values.

    Raises:
        ConfigError: On unknown keys or invalid values.
    """
    data = _normalize_keys(data)
    unknown = set(data) - {"world"}
    if unknown:
        raise ConfigError(f"Unknown top-level config keys: {sorted(unknown)}")

    section = data.get("world") or {}
    if not isinstance(section, dict):
        raise ConfigError("'world' section must be a mapping.")
    section = _normalize_keys(section)

    allowed = {f.name for f in fields(WorldConfig)}
    unknown = set(section) - allowed
    if unknown:
        raise ConfigError(f"Unknown keys in 'world' section: {sorted(unknown)}")

    # Unquoted YAML scalars such as `rocks: 0` load as numbers.
    for name in SYMBOL_FIELDS:
        value = section.get(name)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            section[name] = str(value)

    config = replace(DEFAULT_CONFIG, **section)
    config.validate()
    return config


def load_config(path: Union[str, Path]) -> WorldConfig:
    """Load a `WorldConfig` from a YAML file.

    Args:
        path: YAML file path.

    Raises:
        ConfigError: If the file is not a YAML mapping or has invalid values.
        OSError: If the file cannot be read.
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return DEFAULT_CONFIG
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping.")
    return config_from_dict(data)


# Global configuration instance
DEFAULT_CONFIG = WorldConfig()
