"""Exceptions raised by the store and the command parser.

The interactive shell catches all of these and prints :attr:`Error.message`; none of them ends a session.
"""


class Error(Exception):
    """Base class for problems that should be reported to the user."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidNameError(Error):
    def __init__(self, name: str):
        super().__init__(f"'{name}' is not a valid filename.")
        self.name = name


class NoteExistsError(Error):
    def __init__(self, name: str):
        super().__init__(f"ERROR: '{name}' already exists.")
        self.name = name


class NoteNotFoundError(Error):
    """Raised when a note is missing or could not be read."""
    def __init__(self, name: str, cause: BaseException = None):
        super().__init__(f"ERROR: '{name}' does not exist or failed to load.")
        self.name = name
        self.cause = cause


class NoteIOError(Error):
    """Raised when a note could not be written."""
    def __init__(self, name: str, cause: BaseException = None):
        super().__init__(f'ERROR: {name} failed to save.')
        self.name = name
        self.cause = cause


class SaveDirMissingError(Error):
    def __init__(self, path: str):
        super().__init__('ERROR: Could not find save directory.')
        self.path = path


class MissingArgumentError(Error):
    def __init__(self, keyword: str):
        super().__init__('ERROR: Missing argument (filename).')
        self.keyword = keyword


class UnknownCommandError(Error):
    def __init__(self, line: str):
        super().__init__(f"'{line}' is not a valid command.")
        self.line = line
