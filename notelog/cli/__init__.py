"""Notelog CLI application - main entry point."""

import sys
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.traceback import install

from notelog.config import load_config
from notelog.console import get_stderr_console, get_stdout_console, print_log, summary_line
from notelog.log import MessageLog

from .config import config_app
from .helpers import NEWLINE_CHOICES, add_entries, newline_from_choice

# Install rich traceback handler for better error messages
install(show_locals=False, width=None, word_wrap=True)

app = typer.Typer(
    name="notelog",
    help="Collect categorized messages and print them as one report",
    no_args_is_help=True,
)

# Global console for CLI messages (version, help, errors) - uses stdout
console = Console()


@app.command()
def render(
    entries: Optional[List[str]] = typer.Argument(None, help="Messages as category:text (info, warning, error, ...)"),
    prefix: Optional[str] = typer.Option(None, "--prefix", "-p", help="Prefix tag (default: from config)"),
    newline: Optional[str] = typer.Option(None, "--newline", help="Line terminator: auto, lf or crlf"),
    color: Optional[bool] = typer.Option(None, "--color/--no-color", help="Color output by category"),
    stdin: bool = typer.Option(False, "--stdin", help="Also read one entry per line from stdin"),
    summary: bool = typer.Option(False, "--summary", help="Print the prevailing category to stderr"),
    fail_on_error: bool = typer.Option(False, "--fail-on-error", help="Exit with status 1 if any error was added"),
):
    """Render messages as a report.

    Examples:
        notelog render -p APP "info:started" "error:disk full" "success:recovered"

        some-tool | notelog render --stdin --no-color --fail-on-error
    """
    if newline is not None and newline not in NEWLINE_CHOICES:
        console.print(f"[red]Invalid newline '{escape(newline)}': choose from {', '.join(NEWLINE_CHOICES)}[/red]")
        raise typer.Exit(1)

    config = load_config()
    log = MessageLog(
        prefix=config.default_prefix if prefix is None else prefix,
        newline=config.resolved_newline() if newline is None else newline_from_choice(newline),
    )

    add_entries(log, entries or [])
    if stdin:
        add_entries(log, (line.rstrip("\r\n") for line in sys.stdin))

    use_color = config.color if color is None else color
    if use_color:
        print_log(log, get_stdout_console())
    else:
        # Bytes, so a text-mode stdout can't rewrite the log's terminators
        sys.stdout.flush()
        sys.stdout.buffer.write(log.render().encode(sys.stdout.encoding or "utf-8"))
        sys.stdout.buffer.flush()

    if summary:
        get_stderr_console(no_color=True).print(summary_line(log))

    if fail_on_error and log.has_errors():
        raise typer.Exit(1)


@app.command()
def version():
    """Show version information."""
    from notelog import __version__

    console.print(f"Notelog version {__version__}")


app.add_typer(config_app, name="config")
