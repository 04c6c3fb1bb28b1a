"""Defines classes for representing notes, plus the rules for what counts as a usable note name.

The most important class is :class:`Note`.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from termnotes.conf import HEAD_SEP, MAX_NAME_LENGTH

INVALID_NAME_CHARS = '<>:"/\\|?*'
"""Characters that are unsafe in filenames on at least one common platform."""


def is_valid_name(name: str) -> bool:
    """Returns True if the name can be used as a note's filename (before the extension is added).

    Names are rejected if they contain any of :data:`INVALID_NAME_CHARS` or are
    :data:`termnotes.conf.MAX_NAME_LENGTH` characters or longer.
    """
    if any(c in INVALID_NAME_CHARS for c in name):
        return False
    return len(name) < MAX_NAME_LENGTH


def make_head(name: str, timestamp: str) -> str:
    return f'{name}{HEAD_SEP}{timestamp}'


def split_head(head: str) -> Tuple[str, Optional[str]]:
    """Splits a head line into name and timestamp.

    The timestamp is whatever follows the first separator; it is None if there is no separator.
    """
    name, sep, timestamp = head.rstrip('\n').partition(HEAD_SEP)
    return (name, timestamp) if sep else (name, None)


class LoadMode(Enum):
    APPEND = 'app'
    """Keep the existing body so new lines are added after it."""

    OVERWRITE = 'ow'
    """Discard the existing body, keeping only the head."""


@dataclass
class Note:
    """A named, timestamped text document.

    The :attr:`content` always starts with the head line (see :attr:`head`) followed by a blank line;
    whatever follows that is the body the user wrote. Use :meth:`rebuild` rather than assigning
    :attr:`content` directly, so the head is regenerated from :attr:`name` and :attr:`timestamp`.
    """

    name: str
    """Also the key the note is stored under."""

    timestamp: str
    """When the note was created, already formatted for display. It never changes after creation."""

    content: str = ''

    @classmethod
    def new(cls, name: str, timestamp: str) -> Note:
        """Returns a note with an empty body."""
        note = cls(name, timestamp)
        note.rebuild('')
        return note

    @property
    def head(self) -> str:
        return make_head(self.name, self.timestamp)

    @property
    def body(self) -> str:
        """The text after the first blank line of :attr:`content`, or empty if there is none."""
        _, sep, body = self.content.partition('\n\n')
        return body if sep else ''

    def rebuild(self, body: str) -> None:
        self.content = f'{self.head}\n\n{body}'


@dataclass
class NoteInfo:
    """Summary of a stored note, as shown by the tabular listing."""

    name: str

    timestamp: Optional[str] = None
    """None if the stored head could not be read or has no separator."""

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json."""
        return {
            'name': self.name,
            'timestamp': self.timestamp
        }
