"""Command-line interface for termnotes."""


import argparse
import json
import logging
import sys
from terminaltables import AsciiTable
from termnotes.conf import NotesConf
from termnotes.errors import Error, InvalidNameError, NoteNotFoundError
from termnotes.models import is_valid_name
from termnotes.shell import Shell
from termnotes.store import NoteStore
from termnotes import term


def _check_name(name: str) -> str:
    if not is_valid_name(name):
        raise InvalidNameError(name)
    return name


def _shell(args, store: NoteStore) -> int:
    term.replace_undecodable_input()
    Shell(store).run()
    return 0


def _list(args, store: NoteStore) -> int:
    if args.json:
        print(json.dumps([i.as_json() for i in store.infos()]))
    elif args.table:
        infos = sorted(store.infos(), key=lambda i: i.name.lower())
        data = [('Name', 'Created')] + [(i.name, i.timestamp or '') for i in infos]
        print(AsciiTable(data).table)
    else:
        for name in store.names():
            print(name)
    return 0


def _show(args, store: NoteStore) -> int:
    name = _check_name(args.name[0])
    path = store.path_for(name)
    try:
        with open(path, 'r') as file:
            print(file.read(), end='')
    except (OSError, ValueError) as e:
        raise NoteNotFoundError(name, e) from e
    return 0


def _del(args, store: NoteStore) -> int:
    name = _check_name(args.name[0])
    if not store.delete(name):
        print(f'ERROR: {name} not found or failed to delete.', file=sys.stderr)
        return 1
    print(f'{name} successfully deleted!')
    return 0


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Terminal notebook. Starts the interactive shell by default.')
    parser.set_defaults(func=_shell)
    parser.add_argument('-d', '--dir', nargs=1,
                        help='Folder to keep notes in. Created if it does not exist. Defaults to ./savedNotes')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debugging details to stderr.')

    subs = parser.add_subparsers(title='Commands')

    p_shell = subs.add_parser('shell', help='Start the interactive shell (the default when no command is given).')
    p_shell.set_defaults(func=_shell)

    p_list = subs.add_parser('list', help='List saved notes. Without options, prints one name per line '
                                          'in no particular order.')
    p_list_formats = p_list.add_mutually_exclusive_group()
    p_list_formats.add_argument('-j', '--json', action='store_true',
                                help='Output as JSON: a list of objects with "name" and "timestamp" keys.')
    p_list_formats.add_argument('-t', '--table', action='store_true',
                                help='Format output as a table sorted by name.')
    p_list.set_defaults(func=_list)

    p_show = subs.add_parser('show', help='Print the full contents of a note.')
    p_show.add_argument('name', nargs=1)
    p_show.set_defaults(func=_show)

    p_del = subs.add_parser('del', help='Delete a note.')
    p_del.add_argument('name', nargs=1)
    p_del.set_defaults(func=_del)

    return parser


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    args = parser.parse_args(args)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')
    conf = NotesConf()
    if args.dir:
        conf = conf.with_save_dir(args.dir[0])
    try:
        conf.ensure_save_dir()
        return args.func(args, conf.instantiate())
    except Error as e:
        print(e.message, file=sys.stderr)
        return 1
    except OSError as e:
        print(f'ERROR: {e}', file=sys.stderr)
        return 1
