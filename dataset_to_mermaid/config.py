from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .cardinality import CardinalityFormat
from .errors import ConfigError

# --------
# Defaults
# --------
DEFAULT_DIRECTION = "LR"
DEFAULT_MAX_ATTRIBUTES = 10
DEFAULT_MAX_METHODS = 5
DIRECTIONS = {"LR", "RL", "TB", "TD", "BT"}
ENV_PREFIX = "DIAGRAM_"

BOOL_CONFIG_KEYS = {"show_attributes", "show_methods", "show_cardinality", "preserve_table_case"}
INT_CONFIG_KEYS = {"max_attributes", "max_methods"}
STR_CONFIG_KEYS = {"direction", "cardinality_format"}
ALLOWED_CONFIG_KEYS = BOOL_CONFIG_KEYS | INT_CONFIG_KEYS | STR_CONFIG_KEYS


@dataclass(frozen=True)
class DiagramOptions:
    show_attributes: bool = True
    show_methods: bool = False
    show_cardinality: bool = True
    max_attributes: int = DEFAULT_MAX_ATTRIBUTES
    max_methods: int = DEFAULT_MAX_METHODS
    direction: str = DEFAULT_DIRECTION
    preserve_table_case: bool = True
    cardinality_format: CardinalityFormat = CardinalityFormat.SIMPLE

    def __post_init__(self) -> None:
        if self.max_attributes < 0 or self.max_methods < 0:
            raise ConfigError("max_attributes and max_methods must not be negative")
        direction = str(self.direction).upper()
        if direction not in DIRECTIONS:
            raise ConfigError(
                f"Invalid direction '{self.direction}'. Expected one of: {', '.join(sorted(DIRECTIONS))}"
            )
        try:
            fmt = CardinalityFormat(self.cardinality_format)
        except ValueError as exc:
            raise ConfigError(
                f"Invalid cardinality_format '{self.cardinality_format}'. Expected 'standard' or 'simple'"
            ) from exc
        object.__setattr__(self, "direction", direction)
        object.__setattr__(self, "cardinality_format", fmt)

    def with_overrides(self, **overrides: Any) -> "DiagramOptions":
        return replace(self, **_coerce(overrides))

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["cardinality_format"] = self.cardinality_format.value
        return data


def _coerce_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
    raise ConfigError(f"Option '{key}' must be a boolean, got {value!r}")


def _coerce_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"Option '{key}' must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Option '{key}' must be an integer, got {value!r}") from exc


def _coerce(values: Mapping[str, Any]) -> Dict[str, Any]:
    unknown = set(values) - ALLOWED_CONFIG_KEYS
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(sorted(unknown))}")
    coerced: Dict[str, Any] = {}
    for key, value in values.items():
        if value is None:
            continue
        if key in BOOL_CONFIG_KEYS:
            coerced[key] = _coerce_bool(key, value)
        elif key in INT_CONFIG_KEYS:
            coerced[key] = _coerce_int(key, value)
        elif isinstance(value, CardinalityFormat):
            coerced[key] = value.value
        else:
            coerced[key] = str(value)
    return coerced


def _parse_config_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse config file {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError("Top-level config must be a mapping")
    # Allow the options to live under a "diagram" section.
    if isinstance(data.get("diagram"), dict):
        data = data["diagram"]
    return data


def _env_values(environ: Mapping[str, str]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for key in ALLOWED_CONFIG_KEYS:
        raw = environ.get(ENV_PREFIX + key.upper())
        if raw is None or not raw.strip():
            continue
        values[key] = raw.strip()
    return values


def load_diagram_options(
    config_path: Optional[Path] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> DiagramOptions:
    """
    Resolve diagram options.
    Precedence: defaults < config file < DIAGRAM_* environment < overrides.
    """
    merged: Dict[str, Any] = {}
    if config_path is not None:
        merged.update(_coerce(_parse_config_file(config_path)))
    merged.update(_coerce(_env_values(os.environ if environ is None else environ)))
    if overrides:
        merged.update(_coerce(overrides))
    return DiagramOptions(**merged)
