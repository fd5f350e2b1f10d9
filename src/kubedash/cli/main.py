"""Main CLI entry point."""

import sys

import click
from rich.console import Console

from kubedash.cli.commands import prepare, render_overview
from kubedash.core.models import StateFileError
from kubedash.utils import ConfigError

console = Console()

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    help="YAML configuration file (defaults to $KUBEDASH_CONFIG)",
)
state_option = click.option(
    "--state",
    "-s",
    "state_path",
    type=click.Path(dir_okay=False),
    help="YAML state snapshot to display",
)


@click.group()
@click.version_option(package_name="kubedash")
def cli() -> None:
    """kubedash - Terminal dashboard for Kubernetes clusters."""
    pass


@cli.command("tui")
@config_option
@state_option
def tui(config_path: str | None, state_path: str | None) -> None:
    """Launch the Terminal User Interface."""
    from kubedash.tui import run

    try:
        config, state = prepare(config_path, state_path)
    except (ConfigError, StateFileError) as e:
        console.print(f"Error: {e}", markup=False)
        sys.exit(1)

    run(lambda: state, config)


@cli.command("render")
@config_option
@state_option
@click.option("--width", type=click.IntRange(min=20), default=140, show_default=True, help="Frame width")
@click.option("--height", type=click.IntRange(min=10), default=40, show_default=True, help="Frame height")
def render(config_path: str | None, state_path: str | None, width: int, height: int) -> None:
    """Print a single overview frame."""
    try:
        config, state = prepare(config_path, state_path)
    except (ConfigError, StateFileError) as e:
        console.print(f"Error: {e}", markup=False)
        sys.exit(1)

    render_overview(config, state, Console(width=width, height=height))


if __name__ == "__main__":
    cli()
