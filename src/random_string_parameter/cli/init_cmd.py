"""Initialize command - write a default configuration file."""

from pathlib import Path

import typer
from rich.console import Console

from random_string_parameter.config.loader import DEFAULT_CONFIG_PATH, save_config
from random_string_parameter.config.schema import PluginConfig

console = Console()


def init_command(force: bool = False, config_path: str | None = None) -> None:
    """Write the default configuration.

    Args:
        force: Overwrite existing config if present
        config_path: Destination; defaults to the standard location
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if path.exists() and not force:
        console.print(f"[yellow]Config already exists at {path}[/yellow]")
        console.print("Use [bold]--force[/bold] to overwrite.")
        raise typer.Exit(0)

    save_config(PluginConfig(), path)
    console.print(f"[green]Wrote default config to {path}[/green]")
