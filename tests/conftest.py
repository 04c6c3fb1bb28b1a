import pytest


@pytest.fixture
def feed():
    """Returns a factory for ``read_line`` replacements that yield the given lines, then raise EOFError.

    Exception instances among the lines are raised in turn instead of being returned.
    """
    def make(*lines):
        remaining = iter(lines)

        def read_line(prompt=''):
            try:
                line = next(remaining)
            except StopIteration:
                raise EOFError()
            if isinstance(line, BaseException):
                raise line
            return line
        return read_line
    return make


@pytest.fixture
def bad_bytes():
    return UnicodeDecodeError('utf-8', b'\xff', 0, 1, 'invalid start byte')
