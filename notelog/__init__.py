"""Notelog: ordered message accumulator for command-line tools."""

import logging
import os
import sys

from .exceptions import InvalidNewlineError, NotelogError
from .log import DELIMITER, Category, Message, MessageLog, fmt, resolve_newline

__version__ = "0.1.0"

# Diagnostics go to stderr (keep stdout clean for piping)
_log_level = os.environ.get("NOTELOG_LOG_LEVEL", "WARNING").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.WARNING),
    format="%(levelname)s: %(name)s: %(message)s",
    stream=sys.stderr,
)

__all__ = [
    "Category",
    "DELIMITER",
    "InvalidNewlineError",
    "Message",
    "MessageLog",
    "NotelogError",
    "fmt",
    "resolve_newline",
]
