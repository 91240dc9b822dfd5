"""Custom exception classes for Notelog."""

from typing import Any


class NotelogError(Exception):
    """Base class for Notelog errors."""


class InvalidNewlineError(NotelogError, ValueError):
    """Raised when a MessageLog is given a line terminator it cannot use.

    Attributes:
        newline: The rejected value
    """

    def __init__(self, newline: Any):
        """Initialize InvalidNewlineError.

        Args:
            newline: The rejected line terminator
        """
        super().__init__(f"Unsupported newline {newline!r}: expected '\\n', '\\r\\n' or None")
        self.newline = newline
