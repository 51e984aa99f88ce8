"""Locating substitution table patterns inside a word.

All lookups are exact byte-substring matches against the patterns of a
:class:`~tablemorph.data.table.SubstitutionTable`. Patterns whose option list
is empty are invisible to the matcher, so they never contribute a branch to
any generation algorithm.
"""

from collections.abc import Iterator

from tablemorph.core.types import Occurrence
from tablemorph.data.table import SubstitutionTable


class SubstitutionMatcher:
    """Pure occurrence and pattern queries over a fixed substitution table.

    The matcher holds no per-word state and may be shared across threads.
    """

    def __init__(self, table: SubstitutionTable):
        """Initialize the matcher for a table.

        Args:
            table: Substitution table to match against
        """
        self.table = table
        self._longest_first = table.pattern_lengths
        self._shortest_first = tuple(reversed(table.pattern_lengths))

    def _match(self, word: bytes, offset: int, length: int) -> Occurrence | None:
        if offset + length > len(word):
            return None
        options = self.table.get(word[offset : offset + length])
        if not options:
            return None
        return Occurrence(offset, length, options)

    def occurrences_at(self, word: bytes, offset: int) -> list[Occurrence]:
        """Return the patterns matching at ``offset``, longest first."""
        occurrences = []
        for length in self._longest_first:
            occurrence = self._match(word, offset, length)
            if occurrence is not None:
                occurrences.append(occurrence)
        return occurrences

    def find_occurrences_from(self, word: bytes, start: int) -> Iterator[Occurrence]:
        """Yield every occurrence starting at or after ``start``.

        Occurrences are ordered by offset; at a given offset the longest
        pattern comes first.
        """
        for offset in range(start, len(word)):
            yield from self.occurrences_at(word, offset)

    def find_all_occurrences(self, word: bytes) -> list[Occurrence]:
        """Return every occurrence in the word, overlapping ones included.

        Occurrences are ordered by offset, then by pattern length ascending.
        """
        occurrences = []
        for offset in range(len(word)):
            for length in self._shortest_first:
                occurrence = self._match(word, offset, length)
                if occurrence is not None:
                    occurrences.append(occurrence)
        return occurrences

    def find_distinct_patterns(self, word: bytes) -> list[bytes]:
        """Return the patterns present at least once in the word, sorted."""
        return sorted(
            pattern for pattern, options in self.table.items() if options and pattern in word
        )
