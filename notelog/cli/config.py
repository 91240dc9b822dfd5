"""Configuration management CLI commands."""

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from .helpers import NEWLINE_CHOICES

console = Console()

config_app = typer.Typer(help="Manage Notelog configuration")


@config_app.command("show")
def config_show():
    """Show current configuration."""
    from notelog.config import get_config_path, load_config

    config_path = get_config_path()
    config = load_config()

    console.print(f"[cyan]Configuration file:[/cyan] [dim]{config_path}[/dim]\n")

    if config.default_prefix:
        console.print(f"[bold]Default Prefix:[/bold] {escape(config.default_prefix)}")
    else:
        console.print("[dim]No default prefix set[/dim]")

    console.print(f"[bold]Newline:[/bold] {config.newline or 'auto'}")
    console.print(f"[bold]Color:[/bold] {'on' if config.color else 'off'}")


@config_app.command("set-prefix")
def config_set_prefix(
    prefix: str = typer.Argument(..., help="Prefix tag for new messages (use '' to clear)"),
):
    """Set the default prefix.

    Examples:
        notelog config set-prefix APP
    """
    from notelog.config import get_config_path, set_default_prefix

    try:
        set_default_prefix(prefix)
    except OSError as e:
        console.print(f"[red]Failed to set default prefix: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓ Default prefix set to:[/green] {escape(prefix.strip()) or '(none)'}")
    console.print(f"[dim]Saved to: {get_config_path()}[/dim]")


@config_app.command("set-newline")
def config_set_newline(
    newline: str = typer.Argument(..., help="auto, lf or crlf"),
):
    """Set the line terminator used when rendering."""
    from notelog.config import get_config_path, set_newline

    if newline not in NEWLINE_CHOICES:
        console.print(f"[red]Invalid newline '{escape(newline)}': choose from {', '.join(NEWLINE_CHOICES)}[/red]")
        raise typer.Exit(1)

    try:
        set_newline(None if newline == "auto" else newline)
    except (OSError, ValidationError) as e:
        console.print(f"[red]Failed to set newline: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓ Newline set to:[/green] {newline}")
    console.print(f"[dim]Saved to: {get_config_path()}[/dim]")
