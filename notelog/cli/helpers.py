"""Helper functions for CLI commands."""

from typing import Dict, Iterable, Optional, Tuple

from notelog.config import NEWLINE_NAMES
from notelog.log import Category, Message, MessageLog

CATEGORY_ALIASES: Dict[str, Category] = {
    "info": Category.INFO,
    "inf": Category.INFO,
    "warning": Category.WARNING,
    "warn": Category.WARNING,
    "wrn": Category.WARNING,
    "error": Category.ERROR,
    "err": Category.ERROR,
    "fatal": Category.FATAL,
    "ftl": Category.FATAL,
    "success": Category.SUCCESS,
    "suc": Category.SUCCESS,
    "plain": Category.PLAIN,
    "app": Category.PLAIN,
}

NEWLINE_CHOICES = ("auto", *NEWLINE_NAMES)


def parse_entry(entry: str) -> Tuple[Category, str]:
    """Split a ``category:text`` entry.

    Entries without a recognized category are plain text, kept whole.

    Examples:
        >>> parse_entry("error:disk full")
        (<Category.ERROR: 'ERR'>, 'disk full')
        >>> parse_entry("no category here")
        (<Category.PLAIN: ''>, 'no category here')
    """
    name, sep, text = entry.partition(":")
    if sep:
        category = CATEGORY_ALIASES.get(name.strip().lower())
        if category is not None:
            return category, text
    return Category.PLAIN, entry


def add_entries(log: MessageLog, entries: Iterable[str]) -> None:
    """Add parsed entries to a log in order."""
    adders = {
        Category.INFO: log.add_info,
        Category.WARNING: log.add_warning,
        Category.ERROR: log.add_error,
        Category.SUCCESS: log.add_success,
        Category.PLAIN: log.add_plain,
    }
    for entry in entries:
        category, text = parse_entry(entry)
        if category is Category.FATAL:
            # Fatal has no add method; build the message the way add_* would
            log.append(Message(category=category, prefix=log.prefix, text=text.strip()))
        else:
            adders[category](text)


def newline_from_choice(choice: Optional[str]) -> Optional[str]:
    """Map an auto/lf/crlf choice to a terminator, None for auto."""
    if choice is None or choice == "auto":
        return None
    return NEWLINE_NAMES[choice]
