"""Service configuration loaded from JSON."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sort_trace.sim.registry import DEFAULT_ALGORITHMS

CONFIG_ENV_VAR = "SORT_TRACE_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "data" / "config.json"


class ConfigError(ValueError):
    """Error loading or validating configuration."""


@dataclass(frozen=True)
class ServiceConfig:
    default_algorithm: str = "bubble"
    max_array_length: int = 2000
    max_generate_count: int = 2000
    cors_origins: tuple[str, ...] = ("*",)
    algorithms: tuple[str, ...] = tuple(DEFAULT_ALGORITHMS)


def resolve_config_path(path: Path | None = None) -> Path:
    if path is not None:
        return path
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def load_config(path: Path | None = None) -> ServiceConfig:
    """Load config from ``path``, ``$SORT_TRACE_CONFIG`` or the bundled default."""
    resolved = resolve_config_path(path)
    data = _load_json(resolved)
    defaults = ServiceConfig()

    algorithms = data.get("algorithms", list(defaults.algorithms))
    if not isinstance(algorithms, list) or not all(isinstance(k, str) for k in algorithms):
        raise ConfigError(f"{resolved}: algorithms must be an array of strings")
    unknown = [k for k in algorithms if k not in DEFAULT_ALGORITHMS]
    if unknown:
        raise ConfigError(f"{resolved}: unknown algorithms {unknown}")
    if not algorithms:
        raise ConfigError(f"{resolved}: at least one algorithm must be enabled")

    default_algorithm = data.get("default_algorithm", defaults.default_algorithm)
    if default_algorithm not in algorithms:
        raise ConfigError(f"{resolved}: default_algorithm {default_algorithm!r} is not enabled")

    cors_origins = data.get("cors_origins", list(defaults.cors_origins))
    if not isinstance(cors_origins, list):
        raise ConfigError(f"{resolved}: cors_origins must be an array")

    return ServiceConfig(
        default_algorithm=str(default_algorithm),
        max_array_length=_positive_int(data, "max_array_length", defaults.max_array_length, resolved),
        max_generate_count=_positive_int(data, "max_generate_count", defaults.max_generate_count, resolved),
        cors_origins=tuple(str(o) for o in cors_origins),
        algorithms=tuple(algorithms),
    )


def _positive_int(data: dict[str, Any], key: str, default: int, path: Path) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{path}: {key} must be a positive integer")
    return value


def _load_json(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be an object")
    return data
