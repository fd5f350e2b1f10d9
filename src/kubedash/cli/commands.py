"""CLI command implementations."""

import logging
from pathlib import Path

import yaml
from rich.console import Console

from kubedash.core.models import AppState, StateFileError
from kubedash.tui.tabs import OverviewTab
from kubedash.utils import DashboardConfig, load_config, setup_logging

logger = logging.getLogger(__name__)


def load_state(path: str | Path | None, config: DashboardConfig) -> AppState:
    """Load a state snapshot from YAML; no path means an empty, loading state."""
    raw = None
    if path is not None:
        try:
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except OSError as e:
            raise StateFileError(f"Cannot read state file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise StateFileError(f"Invalid YAML in state file {path}: {e}") from e

    return AppState.from_dict(raw, enhanced_graphics=config.enhanced_graphics, light_theme=config.light_theme)


def prepare(config_path: str | None, state_path: str | None) -> tuple[DashboardConfig, AppState]:
    """Load config, switch on file logging, then load the snapshot."""
    config = load_config(config_path)
    setup_logging(config.log_level, config.log_file)
    state = load_state(state_path, config)
    logger.info("Loaded state from %s", state_path or "<empty>")
    return config, state


def render_overview(config: DashboardConfig, state: AppState, console: Console) -> None:
    """Print one overview frame, sized to the console."""
    frame = OverviewTab.render(state, layout_config=config.layout)
    console.print(frame.renderable)
