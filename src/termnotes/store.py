"""Provides the :class:`NoteStore` class, which keeps each note in its own file."""

import logging
import os
import os.path
from typing import List

from termnotes.conf import NotesConf
from termnotes.errors import NoteIOError, NoteNotFoundError, SaveDirMissingError
from termnotes.models import LoadMode, Note, NoteInfo, split_head

logger = logging.getLogger(__name__)


class NoteStore:
    """Reads and writes notes as files named ``<name><extension>`` directly inside the save directory.

    Every write replaces the whole file; appending to a note is done by loading it, adding to the
    body in memory, and saving it again.

    .. attribute:: conf
       :type: NotesConf
    """
    def __init__(self, conf: NotesConf):
        self.conf = conf

    def path_for(self, name: str) -> str:
        return os.path.join(self.conf.save_dir, name + self.conf.extension)

    def exists(self, name: str) -> bool:
        return os.path.exists(self.path_for(name))

    def save(self, note: Note) -> None:
        """Writes the note's content verbatim, replacing any existing file.

        Raises :exc:`termnotes.errors.NoteIOError` if the file cannot be written.
        """
        path = self.path_for(note.name)
        try:
            with open(path, 'w') as file:
                file.write(note.content)
        except (OSError, ValueError) as e:
            logger.warning('failed to save %s: %s', path, e)
            raise NoteIOError(note.name, e) from e
        logger.debug('saved %s (%d characters)', path, len(note.content))

    def load(self, name: str, mode: LoadMode = LoadMode.APPEND) -> Note:
        """Reads a stored note.

        The timestamp is taken from the stored head line; the head itself is regenerated. In
        :attr:`LoadMode.OVERWRITE` the stored body is discarded.

        Raises :exc:`termnotes.errors.NoteNotFoundError` if the note is missing, unreadable, or its head
        has no timestamp.
        """
        path = self.path_for(name)
        try:
            with open(path, 'r') as file:
                head = file.readline()
                rest = [line.rstrip('\n') + '\n' for line in file] if mode == LoadMode.APPEND else []
        except (OSError, ValueError) as e:
            logger.debug('failed to load %s: %s', path, e)
            raise NoteNotFoundError(name, e) from e

        _, timestamp = split_head(head)
        if timestamp is None:
            logger.warning('no timestamp in head of %s: %r', path, head)
            raise NoteNotFoundError(name)

        # the line after the head is the blank separator
        if rest and rest[0] == '\n':
            rest = rest[1:]
        note = Note(name, timestamp)
        note.rebuild(''.join(rest))
        return note

    def delete(self, name: str) -> bool:
        """Removes the note's file. Returns False if it did not exist or could not be removed."""
        path = self.path_for(name)
        try:
            os.remove(path)
        except FileNotFoundError:
            return False
        except (OSError, ValueError) as e:
            logger.warning('failed to delete %s: %s', path, e)
            return False
        logger.debug('deleted %s', path)
        return True

    def names(self) -> List[str]:
        """Returns the names of all stored notes, in the order the directory lists them (not sorted).

        Raises :exc:`termnotes.errors.SaveDirMissingError` if the save directory cannot be listed.
        """
        ext = self.conf.extension
        try:
            with os.scandir(self.conf.save_dir) as entries:
                return [e.name[:len(e.name) - len(ext)] for e in entries
                        if e.is_file() and e.name.endswith(ext) and len(e.name) > len(ext)]
        except OSError as e:
            logger.warning('cannot list %s: %s', self.conf.save_dir, e)
            raise SaveDirMissingError(self.conf.save_dir) from e

    def infos(self) -> List[NoteInfo]:
        """Like :meth:`names`, but also reads the timestamp from each note's head line."""
        result = []
        for name in self.names():
            info = NoteInfo(name)
            try:
                with open(self.path_for(name), 'r') as file:
                    info.timestamp = split_head(file.readline())[1]
            except (OSError, ValueError) as e:
                logger.debug('cannot read head of %s: %s', name, e)
            result.append(info)
        return result
