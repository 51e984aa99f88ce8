"""Substitution variant generation algorithms.

Four traversals share one contract: given a word, a substitution table and
inclusive ``[min_subs, max_subs]`` bounds, lazily yield every variant whose
substitution count falls inside the bounds.

Occurrence-level algorithms count replaced spans. Pattern-level algorithms
count distinct patterns, each applied to every occurrence in the word at
once. A minimum of zero is treated as one everywhere, so the unmodified
word is never emitted.

The reverse occurrence algorithm and both pattern-level algorithms use
only the first replacement option of a pattern. Forward occurrence
generation is the only mode that explores every option.
"""

from collections.abc import Callable, Iterator

from tablemorph.core.combinations import combinations, is_non_overlapping
from tablemorph.core.types import Direction, Occurrence, SubstitutionMode, Variant
from tablemorph.data.table import SubstitutionTable
from tablemorph.matching import SubstitutionMatcher

GeneratorFunc = Callable[[bytes, SubstitutionTable, int, int], Iterator[Variant]]


def effective_minimum(min_subs: int) -> int:
    """A zero-substitution variant is the input word itself, so 0 means 1."""
    return max(min_subs, 1)


def replace_all(word: bytes, selection: tuple[tuple[bytes, bytes], ...]) -> bytes:
    """Apply each (pattern, replacement) pair to every occurrence, in order."""
    for pattern, replacement in selection:
        word = word.replace(pattern, replacement)
    return word


def apply_occurrences(word: bytes, selected: list[Occurrence]) -> bytes:
    """Replace non-overlapping occurrences with their first option.

    Occurrences are applied left to right; the running offset delta keeps
    later spans aligned after earlier replacements change the word length.
    """
    result = word
    delta = 0
    for occurrence in sorted(selected, key=lambda o: o.start):
        replacement = occurrence.options[0]
        start = occurrence.start + delta
        result = result[:start] + replacement + result[start + occurrence.length :]
        delta += len(replacement) - occurrence.length
    return result


def generate_forward(
    word: bytes, table: SubstitutionTable, min_subs: int, max_subs: int
) -> Iterator[Variant]:
    """Yield variants from fewest to most substituted spans, depth first.

    Every matching pattern and every replacement option is explored at
    each span. After a substitution the scan resumes past the inserted
    replacement, so spans substituted along one path never overlap.

    The traversal keeps one lazy branch iterator per substitution depth on
    an explicit stack, so ``max_subs`` is not limited by Python recursion.
    """
    min_subs = effective_minimum(min_subs)
    matcher = SubstitutionMatcher(table)

    def branches(current: bytes, start: int) -> Iterator[tuple[bytes, int]]:
        for occurrence in matcher.find_occurrences_from(current, start):
            head = current[: occurrence.start]
            tail = current[occurrence.end :]
            for replacement in occurrence.options:
                yield head + replacement + tail, occurrence.start + len(replacement)

    if max_subs < 1:
        return
    # Each entry is (branches of a word, substitution count of those branches).
    stack = [(branches(word, 0), 1)]
    while stack:
        pending, count = stack[-1]
        step = next(pending, None)
        if step is None:
            stack.pop()
            continue
        candidate, resume = step
        if count >= min_subs:
            yield candidate
        if count < max_subs:
            stack.append((branches(candidate, resume), count + 1))


def generate_reverse(
    word: bytes, table: SubstitutionTable, min_subs: int, max_subs: int
) -> Iterator[Variant]:
    """Yield variants from most to fewest substituted spans.

    Each size-k selection of non-overlapping occurrences is applied using
    the first replacement option of every selected occurrence.
    """
    min_subs = effective_minimum(min_subs)
    occurrences = SubstitutionMatcher(table).find_all_occurrences(word)
    if len(occurrences) < min_subs:
        return

    for count in range(min(max_subs, len(occurrences)), min_subs - 1, -1):
        for subset in combinations(len(occurrences), count):
            if not is_non_overlapping(subset, occurrences):
                continue
            yield apply_occurrences(word, [occurrences[i] for i in subset])


def generate_all_toggle(
    word: bytes, table: SubstitutionTable, min_subs: int, max_subs: int
) -> Iterator[Variant]:
    """Yield variants where each selected pattern replaces all its occurrences.

    Patterns are decided in sorted order; for each one the "substitute"
    branches (one per replacement option) come before the "leave" branch.
    Branches that would exceed ``max_subs`` or can no longer reach
    ``min_subs`` are not explored.
    """
    min_subs = effective_minimum(min_subs)
    patterns = SubstitutionMatcher(table).find_distinct_patterns(word)

    # Frames are (selection, next pattern index), popped last in first out.
    stack: list[tuple[tuple[tuple[bytes, bytes], ...], int]] = [((), 0)]
    while stack:
        selection, pos = stack.pop()
        if len(selection) + len(patterns) - pos < min_subs:
            continue
        if pos == len(patterns):
            yield replace_all(word, selection)
            continue

        pattern = patterns[pos]
        stack.append((selection, pos + 1))
        if len(selection) >= max_subs:
            continue
        for replacement in reversed(table[pattern]):
            stack.append((selection + ((pattern, replacement),), pos + 1))


def generate_all_toggle_reverse(
    word: bytes, table: SubstitutionTable, min_subs: int, max_subs: int
) -> Iterator[Variant]:
    """Yield pattern-level variants starting from every pattern substituted.

    Patterns are removed one at a time, each removal index greater than or
    equal to the previous one, so every subset is visited once.
    """
    min_subs = effective_minimum(min_subs)
    patterns = SubstitutionMatcher(table).find_distinct_patterns(word)
    if len(patterns) < min_subs:
        return

    selection = tuple((pattern, table[pattern][0]) for pattern in patterns)
    if len(selection) <= max_subs:
        yield replace_all(word, selection)
    if len(selection) <= min_subs:
        return

    # Each entry is (selection, remaining removal indices for it).
    stack = [(selection, iter(range(len(selection))))]
    while stack:
        selection, removals = stack[-1]
        i = next(removals, None)
        if i is None:
            stack.pop()
            continue
        reduced = selection[:i] + selection[i + 1 :]
        if len(reduced) <= max_subs:
            yield replace_all(word, reduced)
        if len(reduced) > min_subs:
            stack.append((reduced, iter(range(i, len(reduced)))))


_GENERATORS: dict[tuple[SubstitutionMode, Direction], GeneratorFunc] = {
    (SubstitutionMode.OCCURRENCE, Direction.FORWARD): generate_forward,
    (SubstitutionMode.OCCURRENCE, Direction.REVERSE): generate_reverse,
    (SubstitutionMode.PATTERN, Direction.FORWARD): generate_all_toggle,
    (SubstitutionMode.PATTERN, Direction.REVERSE): generate_all_toggle_reverse,
}


def select_generator(mode: SubstitutionMode, direction: Direction) -> GeneratorFunc:
    """Return the generation algorithm for a mode and direction."""
    return _GENERATORS[(mode, direction)]
