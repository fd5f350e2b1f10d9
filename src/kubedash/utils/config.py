"""Dashboard configuration loaded from YAML."""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

CONFIG_ENV_VAR = "KUBEDASH_CONFIG"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when the configuration file is unreadable or invalid."""


@dataclass(frozen=True)
class LayoutConfig:
    """Row heights and column widths of the overview screen."""

    status_bar_height: int = 9
    filter_bar_height: int = 3
    resource_tabs_min_height: int = 10
    namespaces_width: int = 35
    context_min_width: int = 10
    cli_width: int = 30
    logo_width: int = 32


@dataclass(frozen=True)
class DashboardConfig:
    """Top-level dashboard settings."""

    tick_rate: float = 0.25
    enhanced_graphics: bool = True
    light_theme: bool = False
    log_level: str = "INFO"
    log_file: str = "/tmp/kubedash.log"
    layout: LayoutConfig = field(default_factory=LayoutConfig)


def load_config(path: str | Path | None = None) -> DashboardConfig:
    """Load configuration from ``path``, $KUBEDASH_CONFIG, or defaults."""
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None
    if path is None:
        return DashboardConfig()

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e

    if raw is None:
        return DashboardConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    return _parse_config(raw)


def _parse_config(raw: dict[str, Any]) -> DashboardConfig:
    """Validate a raw mapping and build the config dataclasses."""
    layout_raw = raw.get("layout") or {}
    if not isinstance(layout_raw, dict):
        raise ConfigError("'layout' must be a mapping")

    _reject_unknown_keys(raw, DashboardConfig, "config")
    _reject_unknown_keys(layout_raw, LayoutConfig, "layout")

    for key, value in layout_raw.items():
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise ConfigError(f"layout.{key} must be a positive integer, got {value!r}")
    layout = LayoutConfig(**layout_raw)

    tick_rate = raw.get("tick_rate", DashboardConfig.tick_rate)
    if not isinstance(tick_rate, (int, float)) or isinstance(tick_rate, bool) or tick_rate <= 0:
        raise ConfigError(f"tick_rate must be a positive number, got {tick_rate!r}")

    log_level = str(raw.get("log_level", DashboardConfig.log_level)).upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    return DashboardConfig(
        tick_rate=float(tick_rate),
        enhanced_graphics=bool(raw.get("enhanced_graphics", DashboardConfig.enhanced_graphics)),
        light_theme=bool(raw.get("light_theme", DashboardConfig.light_theme)),
        log_level=log_level,
        log_file=str(raw.get("log_file", DashboardConfig.log_file)),
        layout=layout,
    )


def _reject_unknown_keys(raw: dict[str, Any], cls: type, section: str) -> None:
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"Unknown {section} keys: {', '.join(unknown)}")
