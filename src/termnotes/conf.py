from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import datetime
import logging
import os

logger = logging.getLogger(__name__)

SAVE_DIR = 'savedNotes'
"""Directory that notes are saved to, relative to the working directory."""

NOTE_EXT = '.note'
"""Extension that notes are saved with."""

HEAD_SEP = ' | '
"""Separator between the name and the timestamp in the head of a note."""

TIMESTAMP_FORMAT = '%Y-%m-%d [%H:%M]'

SENTINEL = '!quit'
"""A line containing exactly this ends an editing session."""

MAX_NAME_LENGTH = 255
"""Names must be strictly shorter than this."""


@dataclass(frozen=True)
class NotesConf:
    """Fixed settings for a notebook.

    Instances are immutable; use :func:`dataclasses.replace` (or :meth:`with_save_dir`) to get a variant.
    """

    save_dir: str = SAVE_DIR
    """The folder holding one file per note. It is created by :meth:`ensure_save_dir` if absent."""

    extension: str = NOTE_EXT
    """Appended to a note's name to get its filename."""

    timestamp_format: str = TIMESTAMP_FORMAT
    """Passed to :meth:`datetime.strftime` when stamping a new note."""

    def with_save_dir(self, save_dir: str) -> NotesConf:
        return replace(self, save_dir=save_dir)

    def now(self) -> str:
        """Returns the current local time formatted for a note head."""
        return datetime.now().strftime(self.timestamp_format)

    def ensure_save_dir(self) -> None:
        if not os.path.isdir(self.save_dir):
            logger.debug('creating save directory %s', self.save_dir)
        os.makedirs(self.save_dir, exist_ok=True)

    def instantiate(self):
        from termnotes.store import NoteStore
        return NoteStore(self)
