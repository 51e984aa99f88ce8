"""Substitution table loading and decoding.

A table file is line oriented. Each line that is neither blank nor a ``#``
comment has the form ``KEY=VALUE``. Either side may be written literally or
as hashcat-style ``$HEX[...]`` notation, which is the only way to register a
pattern or replacement containing ``=`` itself. Several table files merge
into one :class:`SubstitutionTable`, concatenating replacement options per
key in the order the files were given.
"""

from __future__ import annotations

import binascii
from collections.abc import Iterable, Iterator, Mapping

from loguru import logger

from tablemorph.utils import Constants, expand_file_path


class TableLineError(ValueError):
    """A substitution table line that cannot be parsed."""


class SubstitutionTable(Mapping[bytes, tuple[bytes, ...]]):
    """Read-only mapping from pattern to its ordered replacement options.

    The table is frozen at construction time, so it can be shared between
    threads and pickled into worker processes without synchronization.
    """

    __slots__ = ("_entries", "_lengths")

    def __init__(self, entries: Mapping[bytes, Iterable[bytes]] | None = None):
        self._entries: dict[bytes, tuple[bytes, ...]] = {}
        for pattern, options in (entries or {}).items():
            if not pattern:
                raise ValueError("pattern cannot be empty")
            self._entries[bytes(pattern)] = tuple(bytes(option) for option in options)
        # Distinct pattern lengths, longest first, for longest-match scanning
        self._lengths: tuple[int, ...] = tuple(
            sorted({len(pattern) for pattern in self._entries}, reverse=True)
        )

    def __getitem__(self, pattern: bytes) -> tuple[bytes, ...]:
        return self._entries[pattern]

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SubstitutionTable({self._entries!r})"

    def __reduce__(self):
        return (SubstitutionTable, (self._entries,))

    @property
    def pattern_lengths(self) -> tuple[int, ...]:
        """Distinct pattern lengths, longest first."""
        return self._lengths

    @property
    def option_count(self) -> int:
        """Total number of replacement options across all patterns."""
        return sum(len(options) for options in self._entries.values())

    @classmethod
    def merge(cls, tables: Iterable[Mapping[bytes, Iterable[bytes]]]) -> SubstitutionTable:
        """Merge tables, concatenating replacement options per pattern in order."""
        merged: dict[bytes, list[bytes]] = {}
        for table in tables:
            for pattern, options in table.items():
                merged.setdefault(pattern, []).extend(options)
        return cls(merged)


def decode_hex_notation(value: bytes) -> bytes:
    """Decode a ``$HEX[...]`` field into raw bytes.

    Fields that are not wrapped in ``$HEX[`` and ``]`` are returned as-is.
    Spaces inside the brackets are ignored.

    Raises:
        TableLineError: If the bracketed text is not valid hex
    """
    if (
        len(value) < Constants.HEX_MIN_LENGTH
        or not value.startswith(Constants.HEX_PREFIX)
        or not value.endswith(Constants.HEX_SUFFIX)
    ):
        return value

    hex_str = value[len(Constants.HEX_PREFIX) : -len(Constants.HEX_SUFFIX)].replace(b" ", b"")
    try:
        return binascii.unhexlify(hex_str)
    except (binascii.Error, ValueError) as e:
        raise TableLineError(f"invalid hex string {hex_str!r}: {e}") from e


def parse_table_line(line: bytes) -> tuple[bytes, bytes] | None:
    """Parse one table line into a (pattern, replacement) pair.

    Returns:
        The decoded pair, or None for blank and comment lines

    Raises:
        TableLineError: If the line is malformed
    """
    line = line.strip()
    if not line or line.startswith(Constants.TABLE_COMMENT):
        return None

    separators = line.count(Constants.TABLE_SEPARATOR)
    if separators != 1:
        raise TableLineError(f"expected exactly one '=', found {separators}")

    key_part, value_part = line.split(Constants.TABLE_SEPARATOR)
    try:
        pattern = decode_hex_notation(key_part)
    except TableLineError as e:
        raise TableLineError(f"key: {e}") from e
    try:
        replacement = decode_hex_notation(value_part)
    except TableLineError as e:
        raise TableLineError(f"value: {e}") from e

    if not pattern:
        raise TableLineError("pattern cannot be empty")
    return pattern, replacement


def parse_table_lines(lines: Iterable[bytes], source: str = "<table>") -> dict[bytes, list[bytes]]:
    """Build a pattern -> options mapping from table lines, skipping bad lines."""
    substitutions: dict[bytes, list[bytes]] = {}
    for line_number, line in enumerate(lines, start=1):
        try:
            parsed = parse_table_line(line)
        except TableLineError as e:
            logger.warning(f"Skipping line {line_number} in {source}: {e} ({line.strip()!r})")
            continue
        if parsed is None:
            continue
        pattern, replacement = parsed
        substitutions.setdefault(pattern, []).append(replacement)
    return substitutions


def read_substitution_table(filepath: str) -> dict[bytes, list[bytes]]:
    """Read a single substitution table file.

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be read
    """
    filepath = expand_file_path(filepath) or filepath
    try:
        with open(filepath, "rb") as f:
            return parse_table_lines(f, source=filepath)
    except FileNotFoundError:
        logger.error(f"✗ Substitution table not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading substitution table: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except IsADirectoryError:
        logger.error(f"✗ Substitution table is a directory: {filepath}")
        raise


def load_substitution_tables(filepaths: Iterable[str], verbose: bool = False) -> SubstitutionTable:
    """Load and merge substitution tables in the order given."""
    filepaths = list(filepaths)
    table = SubstitutionTable.merge(read_substitution_table(path) for path in filepaths)

    if verbose:
        logger.info(f"  Loaded {len(filepaths)} substitution table file(s)")
        logger.info(f"  Patterns: {len(table)}, replacement options: {table.option_count}")
        if table.pattern_lengths:
            logger.info(f"  Longest pattern: {table.pattern_lengths[0]} bytes")

    return table
