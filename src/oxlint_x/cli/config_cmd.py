"""Config subcommand group for inspecting resolved oxlint configuration."""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel

from oxlint_x.cli.options import parse_options
from oxlint_x.config import get_settings
from oxlint_x.core.config_resolver import resolve_config

app = typer.Typer(help="Configuration management")
console = Console()


@app.command()
def show(
    path: Path = typer.Argument(..., help="File whose configuration should be resolved"),
    options: str | None = typer.Option(None, "--options", "-o", help="Inline oxlint config as a JSON object"),
    json_output: bool = typer.Option(False, "--json", help="Output raw JSON instead of formatted panel"),
):
    """Show the merged configuration oxlint would run with for PATH."""
    inline = parse_options(options)
    settings = get_settings()
    resolved = resolve_config(path, inline, settings.files.config_file_name)

    if json_output:
        typer.echo(json.dumps(resolved.config, indent=2))
        return

    source = str(resolved.source_path) if resolved.source_path else "inline options only"
    panel = Panel(JSON(json.dumps(resolved.config)), title=f"Configuration: {source}", border_style="cyan")
    console.print(panel)


@app.command()
def locate(
    path: Path = typer.Argument(..., help="File to start the search from"),
):
    """Print the config file that applies to PATH."""
    settings = get_settings()
    resolved = resolve_config(path, None, settings.files.config_file_name)
    if resolved.source_path is None:
        console.print(f"[yellow]No {settings.files.config_file_name} found[/yellow]")
        raise typer.Exit(code=1)
    typer.echo(str(resolved.source_path))
