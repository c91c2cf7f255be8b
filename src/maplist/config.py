"""YAML configuration for transformation plans and logging."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

import yaml

from .errors import ConfigError
from .functional import mapcycle, maplist
from .transforms import resolve_all
from .types import Transform

MODES = ("list", "cycle")


@dataclass
class PlanConfig:
    """Which transformations to apply and how to select them."""

    mode: str = "cycle"
    transforms: List[Optional[str]] = field(default_factory=lambda: ["identity"])
    tokens: bool = False


@dataclass
class LoggingConfig:
    """Logging verbosity and formatting options."""

    level: str = "INFO"
    rich_tracebacks: bool = True


@dataclass
class AppConfig:
    """Top-level configuration object composed of sub-configurations."""

    plan: PlanConfig = field(default_factory=PlanConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


@dataclass
class TransformPlan:
    """Resolved transformations bound to a selection mode."""

    mode: str
    transforms: List[Optional[Transform]]

    def apply(self, values: Iterable[Any]) -> List[Any]:
        if self.mode == "cycle":
            return mapcycle(self.transforms, values)
        return maplist(self.transforms, values)


def _check_mode(mode: str) -> str:
    if mode not in MODES:
        raise ConfigError(f"mode must be one of {', '.join(MODES)}, got '{mode}'")
    return mode


def _section(raw: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = raw.get(name)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"'{name}' section must be a mapping")
    return value


def load_yaml(path: Path) -> Mapping[str, Any]:
    """Load a YAML document and return a mapping."""

    try:
        with Path(path).open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"{path} must contain a mapping")
    return data


def parse_app_config(raw: Mapping[str, Any]) -> AppConfig:
    """Build :class:`AppConfig` from an already loaded mapping."""

    plan = _section(raw, "plan")
    logging_cfg = _section(raw, "logging")

    names = plan.get("transforms", ["identity"])
    if not isinstance(names, list):
        raise ConfigError("'plan.transforms' must be a list of names")

    return AppConfig(
        plan=PlanConfig(
            mode=_check_mode(str(plan.get("mode", "cycle"))),
            transforms=[None if name is None else str(name) for name in names],
            tokens=bool(plan.get("tokens", False)),
        ),
        logging=LoggingConfig(
            level=str(logging_cfg.get("level", "INFO")),
            rich_tracebacks=bool(logging_cfg.get("rich_tracebacks", True)),
        ),
    )


def load_app_config(path: Path) -> AppConfig:
    """Load :class:`AppConfig` from ``path``."""

    return parse_app_config(load_yaml(path))


def build_plan(plan: PlanConfig) -> TransformPlan:
    """Resolve the transformation names of ``plan``."""

    return TransformPlan(mode=_check_mode(plan.mode), transforms=resolve_all(plan.transforms))


__all__ = [
    "MODES",
    "PlanConfig",
    "LoggingConfig",
    "AppConfig",
    "TransformPlan",
    "load_yaml",
    "parse_app_config",
    "load_app_config",
    "build_plan",
]
