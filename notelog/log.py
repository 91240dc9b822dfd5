"""Ordered, categorized message log with text rendering.

A MessageLog is owned by a single caller. It is not synchronized:
concurrent mutation is undefined behavior. Collect per worker and merge
the logs at a synchronization point instead.
"""

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

from .exceptions import InvalidNewlineError

logger = logging.getLogger(__name__)

DELIMITER = ": "

NEWLINES = ("\n", "\r\n")


class Category(str, Enum):
    """Message category, valued by the short code used in rendered output."""

    INFO = "INF"
    WARNING = "WRN"
    ERROR = "ERR"
    FATAL = "FTL"  # reserved: no add method, predicate or tally weight
    SUCCESS = "SUC"
    PLAIN = ""

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def taggable(cls) -> Tuple["Category", ...]:
        """Categories counted when looking for the prevailing one."""
        return (cls.INFO, cls.WARNING, cls.ERROR, cls.SUCCESS)


@dataclass(frozen=True)
class Message:
    """A single log entry."""

    category: Category
    prefix: str
    text: str

    def __post_init__(self):
        # Raw codes such as "INF" become members; unknown values raise ValueError
        object.__setattr__(self, "category", Category(self.category))

    def render(self) -> str:
        """Render as ``CODE[PREFIX]: TEXT``, or just the text for plain messages."""
        if self.category is Category.PLAIN:
            return self.text

        head = self.category.code
        if self.prefix:
            head += f"[{self.prefix}]"
        return head + DELIMITER + self.text

    def __str__(self) -> str:
        return self.render()


def resolve_newline(platform: Optional[str] = None) -> str:
    """Return the line terminator for a platform.

    Args:
        platform: A ``sys.platform`` style name. Defaults to the host's.

    Returns:
        "\\r\\n" for the Windows family, "\\n" otherwise
    """
    if platform is None:
        platform = sys.platform
    return "\r\n" if platform.startswith("win") else "\n"


def fmt(format_string: str, *args) -> str:
    """Format printf-style message text.

    Formatting is always applied, so a literal percent sign is written ``%%``
    even when no arguments are given.
    """
    return format_string % args


class MessageLog:
    """Accumulates messages in insertion order and renders them as one block.

    Args:
        prefix: Tag applied to every message added through the add_* methods
        newline: "\\n" or "\\r\\n". None picks the host's terminator once, here.

    Raises:
        InvalidNewlineError: If newline is not one of the supported terminators
    """

    def __init__(self, prefix: str = "", newline: Optional[str] = None):
        if newline is None:
            newline = resolve_newline()
            logger.debug("Resolved newline %r for platform %s", newline, sys.platform)
        elif newline not in NEWLINES:
            raise InvalidNewlineError(newline)

        self.prefix = prefix
        self._newline = newline
        self._messages: list[Message] = []

    @property
    def newline(self) -> str:
        return self._newline

    def __repr__(self) -> str:
        return f"MessageLog(prefix={self.prefix!r}, messages={len(self._messages)})"

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.notes())

    def __str__(self) -> str:
        return self.render()

    def _add(self, category: Category, texts: Tuple[str, ...]) -> None:
        for text in texts:
            self._messages.append(Message(category=category, prefix=self.prefix, text=text.strip()))

    def add_info(self, *texts: str) -> None:
        self._add(Category.INFO, texts)

    def add_warning(self, *texts: str) -> None:
        self._add(Category.WARNING, texts)

    def add_error(self, *texts: str) -> None:
        self._add(Category.ERROR, texts)

    def add_success(self, *texts: str) -> None:
        self._add(Category.SUCCESS, texts)

    def add_plain(self, *texts: str) -> None:
        """Add untagged application messages."""
        self._add(Category.PLAIN, texts)

    def append(self, *messages: Message) -> None:
        """Append prebuilt messages as-is, keeping their own prefix and category."""
        self._messages.extend(messages)

    def merge(self, other: "MessageLog") -> None:
        """Append every message of another log, in its order."""
        notes = other.notes()
        logger.debug("Merging %d message(s) from %r", len(notes), other)
        self.append(*notes)

    def clear(self) -> None:
        """Drop all messages. Prefix and newline are kept."""
        logger.debug("Clearing %d message(s)", len(self._messages))
        self._messages = []

    def _has(self, category: Category) -> bool:
        return any(message.category is category for message in self._messages)

    def has_infos(self) -> bool:
        return self._has(Category.INFO)

    def has_warnings(self) -> bool:
        return self._has(Category.WARNING)

    def has_errors(self) -> bool:
        return self._has(Category.ERROR)

    def has_successes(self) -> bool:
        return self._has(Category.SUCCESS)

    def prevailing(self) -> Category:
        """Return the dominant category.

        A category prevails only when its count is strictly greater than the
        count of each other taggable category. Ties, including an empty log,
        give ``Category.PLAIN``. Plain and fatal messages are not counted.
        """
        counts = dict.fromkeys(Category.taggable(), 0)
        for message in self._messages:
            if message.category in counts:
                counts[message.category] += 1

        for category, count in counts.items():
            if all(count > other for other_category, other in counts.items() if other_category is not category):
                return category
        return Category.PLAIN

    def notes(self) -> Tuple[Message, ...]:
        """Return all messages in insertion order."""
        return tuple(self._messages)

    def render(self) -> str:
        """Render every message on its own line, each ending with the log's newline."""
        return "".join(message.render() + self._newline for message in self._messages)
