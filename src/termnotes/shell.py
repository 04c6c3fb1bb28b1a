"""Provides the interactive :class:`Shell`, which reads commands one line at a time."""

import logging
from typing import Callable, Optional, Tuple

from termnotes.editor import Editor, UNREADABLE_LINE
from termnotes.errors import Error, InvalidNameError, MissingArgumentError, NoteExistsError, UnknownCommandError
from termnotes.models import LoadMode, Note, is_valid_name
from termnotes.store import NoteStore
from termnotes import term

logger = logging.getLogger(__name__)

PROMPT = '$~ '

BANNER = """Welcome to termnotes!
Enter a command (new | app | ow | list | del | help | cls | exit)
"""

HELP = """- 'new [note]' to create a new note.
- 'app [note]' to append an existing note.
- 'ow [note]' to overwrite an existing note.
- 'del [note]' to delete an existing note.
- 'list' to list all notes.
- 'cls' to clear the screen.
- 'exit' to exit the program.
"""

NAME_KEYWORDS = ('del', 'new', 'app', 'ow')


def split_command(line: str) -> Tuple[int, str]:
    """Returns the number of whitespace-separated words in the line, and everything after its first space."""
    _, space, arg = line.partition(' ')
    return len(line.split()), arg if space else ''


class Shell:
    """The command loop.

    Each input line is one command: either a bare keyword (``exit``, ``help``, ``cls``, ``list``) or a keyword
    followed by a note name (``new``, ``app``, ``ow``, ``del``). Problems are printed and the loop carries on;
    only ``exit`` (or running out of input) ends it.

    .. attribute:: store
       :type: termnotes.store.NoteStore
    """
    def __init__(self, store: NoteStore, read_line: Callable[[str], str] = term.read_line,
                 clear: Callable[[], None] = term.clear_screen):
        self.store = store
        self.read_line = read_line
        self.clear = clear
        self.editor = Editor(store, read_line=read_line, clear=clear)

    def run(self) -> None:
        print(BANNER)
        while True:
            try:
                line = self.read_line(PROMPT)
            except EOFError:
                break
            except UnicodeDecodeError as e:
                logger.warning('undecodable command: %s', e)
                print(f'{UNREADABLE_LINE}\n')
                continue
            if not self.handle(line):
                break

    def handle(self, line: str) -> bool:
        """Executes one command. Returns False if the session should end."""
        logger.debug('command %r', line)
        try:
            return self._dispatch(line)
        except Error as e:
            print(f'{e.message}\n')
            return True

    def _dispatch(self, line: str) -> bool:
        if line == 'exit':
            return False
        if line == 'help':
            print(HELP)
        elif line == 'cls':
            self.clear()
        elif line == 'list':
            self.list()
        else:
            self._dispatch_name_command(line)
        return True

    def _dispatch_name_command(self, line: str) -> None:
        words, arg = split_command(line)
        if words == 2:
            if not is_valid_name(arg):
                raise InvalidNameError(arg)
            if line.startswith('del '):
                self.delete(arg)
                return
            elif line.startswith('new '):
                self.new(arg)
                return
            elif line.startswith('app '):
                self.open(arg, LoadMode.APPEND)
                return
            elif line.startswith('ow '):
                self.open(arg, LoadMode.OVERWRITE)
                return
        keyword = next((k for k in NAME_KEYWORDS if line.startswith(k)), None)
        if keyword:
            raise MissingArgumentError(keyword)
        raise UnknownCommandError(line)

    def list(self) -> None:
        names = self.store.names()
        if not names:
            print('No files found.\n')
            return
        for name in names:
            print(name)
        print()

    def delete(self, name: str) -> None:
        if self.store.delete(name):
            print(f'{name} successfully deleted!\n')
        else:
            print(f'ERROR: {name} not found or failed to delete.\n')

    def new(self, name: str, timestamp: Optional[str] = None) -> Note:
        if self.store.exists(name):
            raise NoteExistsError(name)
        note = Note.new(name, timestamp or self.store.conf.now())
        return self.editor.run(note)

    def open(self, name: str, mode: LoadMode) -> Note:
        note = self.store.load(name, mode)
        return self.editor.run(note)
