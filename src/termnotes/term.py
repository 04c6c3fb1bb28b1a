"""Thin wrappers around the terminal, so the shell and editor can be driven by other sources in tests."""

import logging
import os
import sys

logger = logging.getLogger(__name__)


def clear_screen() -> None:
    os.system('cls' if os.name == 'nt' else 'clear')


def read_line(prompt: str = '') -> str:
    """Blocks until a line is entered and returns it without the newline.

    Raises :exc:`EOFError` when input is exhausted.
    """
    return input(prompt)


def replace_undecodable_input() -> None:
    """Makes stdin substitute U+FFFD for bytes it cannot decode, instead of raising."""
    reconfigure = getattr(sys.stdin, 'reconfigure', None)
    if reconfigure:
        try:
            reconfigure(errors='replace')
        except (OSError, ValueError) as e:
            logger.debug('cannot reconfigure stdin: %s', e)
