"""Centralized console creation and colored log output."""

import sys
from typing import Dict

from rich.console import Console
from rich.text import Text

from .log import Category, MessageLog

CATEGORY_STYLES: Dict[Category, str] = {
    Category.INFO: "cyan",
    Category.WARNING: "yellow",
    Category.ERROR: "red",
    Category.FATAL: "bold red",
    Category.SUCCESS: "green",
    Category.PLAIN: "",
}

CATEGORY_LABELS: Dict[Category, str] = {
    Category.INFO: "info",
    Category.WARNING: "warning",
    Category.ERROR: "error",
    Category.FATAL: "fatal",
    Category.SUCCESS: "success",
    Category.PLAIN: "none",
}


def get_stderr_console(no_color: bool = False) -> Console:
    """Get console for error/warning output to stderr.

    Args:
        no_color: Disable color output

    Returns:
        Console instance configured for stderr
    """
    return Console(file=sys.stderr, no_color=no_color)


def get_stdout_console(no_color: bool = False) -> Console:
    """Get console for standard output to stdout.

    Args:
        no_color: Disable color output

    Returns:
        Console instance configured for stdout
    """
    return Console(file=sys.stdout, no_color=no_color)


def print_log(log: MessageLog, console: Console) -> None:
    """Print each message of a log on its own line, styled by category.

    Message text is printed literally; Rich markup in it is not interpreted.
    """
    for message in log:
        console.print(Text(message.render(), style=CATEGORY_STYLES[message.category]), soft_wrap=True)


def summary_line(log: MessageLog) -> str:
    """Describe the prevailing category of a log in one line."""
    return f"Prevailing: {CATEGORY_LABELS[log.prevailing()]} ({len(log)} message(s))"
