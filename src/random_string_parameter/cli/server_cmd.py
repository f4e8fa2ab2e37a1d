"""Server command."""

from pathlib import Path

import typer
from rich.console import Console

console = Console()


def serve_command(config_path: str | None = None) -> None:
    """Run the API server in the foreground.

    Args:
        config_path: Optional path to config file
    """
    import uvicorn

    from random_string_parameter.config.loader import ConfigError, load_config
    from random_string_parameter.server.app import create_app

    path = Path(config_path) if config_path else None
    try:
        config = load_config(path)
    except ConfigError as e:
        console.print(f"[red]Failed to load config: {e}[/red]")
        console.print("Run [bold]rsparam init[/bold] to create a config file.")
        raise typer.Exit(1) from e

    app = create_app(config)

    console.print(
        f"[green]Starting server on {config.server.host}:{config.server.port}[/green]"
    )
    console.print(f"Validation pattern: {config.random_string.regex}", markup=False)
    console.print("\nPress Ctrl+C to stop")

    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=config.logging.level.lower(),
    )
