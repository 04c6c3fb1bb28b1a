"""Provides the :class:`Editor` class, which collects lines typed by the user into a note."""

import logging
from typing import Callable

from termnotes.conf import SENTINEL
from termnotes.models import Note
from termnotes.store import NoteStore
from termnotes import term

logger = logging.getLogger(__name__)

UNREADABLE_LINE = 'ERROR: Could not read that line; it was skipped.'


class Editor:
    """Lets the user add lines to the end of a note's body, then saves it.

    The session ends when a line consisting of exactly :data:`termnotes.conf.SENTINEL` is entered
    (or input runs out). Every other line, including blank ones, becomes part of the body.
    """
    def __init__(self, store: NoteStore, read_line: Callable[[str], str] = term.read_line,
                 clear: Callable[[], None] = term.clear_screen):
        self.store = store
        self.read_line = read_line
        self.clear = clear

    def collect(self) -> str:
        """Reads lines until the sentinel and returns them joined, each ending with a newline."""
        added = ''
        while True:
            try:
                line = self.read_line('')
            except EOFError:
                break
            except UnicodeDecodeError as e:
                logger.warning('skipping undecodable line: %s', e)
                print(UNREADABLE_LINE)
                continue
            if line == SENTINEL:
                break
            added += line + '\n'
        return added

    def run(self, note: Note) -> Note:
        """Shows the note, appends whatever the user types to its body, and saves it.

        May raise :exc:`termnotes.errors.NoteIOError` if saving fails; the note's content is updated
        either way.
        """
        body = note.body
        self.clear()
        print(note.head)
        print(f'Type {SENTINEL} on a new line to exit.\n')
        print(body, end='')

        added = self.collect()
        logger.debug('collected %d characters for %s', len(added), note.name)
        note.rebuild(body + added)
        self.store.save(note)
        print(f'{note.name} successfully saved!\n')
        return note
