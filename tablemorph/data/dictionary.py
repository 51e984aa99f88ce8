"""Dictionary word loading."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger

from tablemorph.utils import expand_file_path


def strip_line_terminator(line: bytes) -> bytes:
    """Remove a trailing ``\\n`` and at most one trailing ``\\r``."""
    if line.endswith(b"\n"):
        line = line[:-1]
    if line.endswith(b"\r"):
        line = line[:-1]
    return line


@contextmanager
def open_dictionary(filepath: str) -> Iterator[Iterator[bytes]]:
    """Open a dictionary file and yield a lazy iterator over its words.

    Words are raw bytes with line terminators removed. The file stays open
    for the lifetime of the context and is closed on every exit path.

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be read
    """
    filepath = expand_file_path(filepath) or filepath
    try:
        f = open(filepath, "rb")  # pylint: disable=consider-using-with
    except FileNotFoundError:
        logger.error(f"✗ Dictionary file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading dictionary: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except IsADirectoryError:
        logger.error(f"✗ Dictionary path is a directory: {filepath}")
        raise

    with f:
        yield (strip_line_terminator(line) for line in f)
