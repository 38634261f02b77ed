"""Runtime settings.

Values are resolved from, in increasing order of precedence: the
defaults below, an optional YAML file, ``IL_*`` environment variables
and finally explicit overrides (command-line flags or the ``options``
block of a puzzle file).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from .errors import ConfigError

DEFAULT_AXIS = 16
MIN_AXIS = 3

# setting name -> environment variable
ENV_VARS = {
    "axis": "IL_AXIS",
    "seed": "IL_SEED",
    "max_solutions": "IL_MAX_SOLUTIONS",
    "render_capacity": "IL_RENDER_CAPACITY",
    "log_level": "IL_LOG_LEVEL",
}


@dataclass(frozen=True)
class Settings:
    axis: int = DEFAULT_AXIS
    seed: int | None = None
    max_solutions: int | None = None
    render_capacity: int | None = None
    log_level: str = "WARNING"

    def merged(self, overrides: Mapping[str, Any]) -> "Settings":
        """Return a copy with every non-``None`` override applied."""
        values = _coerce({k: v for k, v in overrides.items() if v is not None})
        return replace(self, **values)


def _as_int(name: str, value: Any, minimum: int) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from exc
    if number < minimum:
        raise ConfigError(f"{name} must be at least {minimum}, got {number}")
    return number


def _coerce(raw: Mapping[str, Any]) -> Dict[str, Any]:
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"unknown setting(s): {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for name, value in raw.items():
        if name == "axis":
            values[name] = _as_int(name, value, MIN_AXIS)
        elif name == "seed":
            values[name] = None if value is None else _as_int(name, value, 0)
        elif name in ("max_solutions", "render_capacity"):
            # zero and null both mean "no limit"
            number = None if value is None else _as_int(name, value, 0)
            values[name] = number or None
        elif name == "log_level":
            level = str(value).upper()
            if not isinstance(logging.getLevelName(level), int):
                raise ConfigError(f"unknown log level {value!r}")
            values[name] = level
    return values


def _from_env(environ: Mapping[str, str]) -> Dict[str, Any]:
    raw = {}
    for name, var in ENV_VARS.items():
        value = environ.get(var, "").strip()
        if value:
            raw[name] = value
    return raw


def load_settings(
    path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    **overrides: Any,
) -> Settings:
    """Build :class:`Settings` from a YAML file, the environment and overrides."""
    settings = Settings()

    if path is not None:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            raise ConfigError(f"cannot read settings from {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"settings file {path} must contain a mapping")
        settings = replace(settings, **_coerce(data))

    env = os.environ if environ is None else environ
    settings = replace(settings, **_coerce(_from_env(env)))
    return settings.merged(overrides)


__all__ = ["Settings", "load_settings", "DEFAULT_AXIS", "MIN_AXIS", "ENV_VARS"]
