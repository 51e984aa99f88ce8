"""Index-subset enumeration for the reverse occurrence algorithm."""

import itertools
from collections.abc import Iterator, Sequence

from tablemorph.core.types import Occurrence


def combinations(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """Lazily yield every size-``k`` subset of ``range(n)``.

    Subsets are built from the top index downward: each subset lists its
    indices in descending order, and subsets are produced in descending
    lexicographic order. ``list(combinations(3, 2))`` is
    ``[(2, 1), (2, 0), (1, 0)]``.

    Yields:
        ``()`` once for ``k == 0``, nothing for ``k > n``, otherwise each subset once
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    return itertools.combinations(range(n - 1, -1, -1), k)


def is_non_overlapping(subset: Sequence[int], occurrences: Sequence[Occurrence]) -> bool:
    """Check that the selected occurrences cover disjoint spans of the word."""
    spans = sorted((occurrences[i].start, occurrences[i].end) for i in subset)
    for (_, previous_end), (start, _) in zip(spans, spans[1:]):
        if start < previous_end:
            return False
    return True
