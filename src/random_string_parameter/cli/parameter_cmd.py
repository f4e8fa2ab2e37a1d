"""Parameter commands: generate, validate and list types."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

console = Console()


def generate_command(count: int = 1) -> None:
    """Print freshly generated random strings.

    Args:
        count: Number of strings to print
    """
    from random_string_parameter.parameters import create_random_string

    for _ in range(count):
        console.print(create_random_string())


def validate_command(
    value: str,
    message: str | None = None,
    pattern: str | None = None,
    config_path: str | None = None,
) -> None:
    """Validate a value the way the form callback does.

    Args:
        value: Candidate value
        message: Custom failed validation message
        pattern: Regular expression; defaults to the configured one
        config_path: Optional path to config file

    Raises:
        typer.Exit: With code 1 when the value is rejected
    """
    from random_string_parameter.config.loader import ConfigError, load_config
    from random_string_parameter.parameters import validate

    if pattern is None:
        try:
            config = load_config(Path(config_path) if config_path else None)
        except ConfigError as e:
            console.print(f"[red]Failed to load config: {e}[/red]")
            raise typer.Exit(1) from e
        pattern = config.random_string.regex

    result = validate(pattern, value, message)
    if result.is_ok:
        console.print("[green]OK[/green]")
        return

    # Messages may contain brackets from the pattern
    console.print(result.message, style="red", markup=False)
    raise typer.Exit(1)


def types_command(config_path: str | None = None) -> None:
    """List registered parameter types, including installed extensions.

    Args:
        config_path: Optional path to config file
    """
    from random_string_parameter.config.loader import ConfigError, load_config
    from random_string_parameter.parameters import discover_extensions, get_all_descriptors

    try:
        config = load_config(Path(config_path) if config_path else None)
    except ConfigError as e:
        console.print(f"[red]Failed to load config: {e}[/red]")
        raise typer.Exit(1) from e

    if config.extensions.discover:
        discover_extensions(blocked=config.extensions.blocked)

    descriptors = get_all_descriptors()
    if not descriptors:
        console.print("[dim]No parameter types registered.[/dim]")
        return

    table = Table(title="Parameter Types")
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Display Name")
    table.add_column("Help")

    for descriptor in descriptors.values():
        table.add_row(descriptor.type_name, descriptor.display_name, descriptor.help_file)

    console.print(table)
