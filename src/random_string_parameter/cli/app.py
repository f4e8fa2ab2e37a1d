"""Main CLI application using Typer."""

import sys

import typer
from rich.console import Console

from random_string_parameter import __version__

app = typer.Typer(
    name="rsparam",
    help="Random string build parameter - generate tokens and validate overrides",
    no_args_is_help=True,
)

console = Console()


@app.command()
def version():
    """Show rsparam version."""
    console.print(f"rsparam version {__version__}")


@app.command()
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: ~/.random-string-parameter/config.yaml)",
    ),
):
    """Write a default configuration file."""
    from random_string_parameter.cli.init_cmd import init_command

    init_command(force=force, config_path=config_path)


@app.command()
def generate(
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of strings to generate"),
):
    """Generate random strings."""
    from random_string_parameter.cli.parameter_cmd import generate_command

    generate_command(count=count)


@app.command()
def validate(
    value: str = typer.Argument(..., help="Value to validate"),
    message: str = typer.Option(
        None,
        "--message",
        "-m",
        help="Message shown when the value does not match",
    ),
    pattern: str = typer.Option(
        None,
        "--pattern",
        "-p",
        help="Regular expression (default: configured pattern)",
    ),
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
):
    """Validate a value against the regular expression."""
    from random_string_parameter.cli.parameter_cmd import validate_command

    validate_command(value=value, message=message, pattern=pattern, config_path=config_path)


@app.command("types")
def list_types(
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
):
    """List registered parameter types."""
    from random_string_parameter.cli.parameter_cmd import types_command

    types_command(config_path=config_path)


@app.command()
def serve(
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
):
    """Start the form validation API server."""
    from random_string_parameter.cli.server_cmd import serve_command

    serve_command(config_path=config_path)


def main():
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
