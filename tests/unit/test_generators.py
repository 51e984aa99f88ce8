"""Unit tests for the variant generation algorithms.

Tests verify generation behavior. Each test has exactly one assertion.
"""

import itertools

from tablemorph.core.generators import (
    apply_occurrences,
    generate_all_toggle,
    generate_all_toggle_reverse,
    generate_forward,
    generate_reverse,
    replace_all,
    select_generator,
)
from tablemorph.core.types import Direction, SubstitutionMode
from tablemorph.data.table import SubstitutionTable
from tablemorph.matching import SubstitutionMatcher

LEET_O = SubstitutionTable({b"o": [b"0"]})
LEET_AO = SubstitutionTable({b"a": [b"4", b"@"], b"o": [b"0"]})
ALL_GENERATORS = [generate_forward, generate_reverse, generate_all_toggle, generate_all_toggle_reverse]
PAIR_ALPHABET = bytes(range(ord("0"), ord("0") + 40))
PAIR_TABLE = SubstitutionTable({bytes([a, b]): [b"#"] for a in PAIR_ALPHABET for b in PAIR_ALPHABET})
# Every one of the 1600 two-byte patterns occurs in this word.
PAIR_WORD = b"".join(PAIR_TABLE)


class TestGenerateForward:
    """Test forward occurrence-level generation."""

    def test_foo_with_one_to_two_substitutions(self) -> None:
        """Table o=0 on 'foo' yields exactly f0o, f00 and fo0."""
        assert list(generate_forward(b"foo", LEET_O, 1, 2)) == [b"f0o", b"f00", b"fo0"]

    def test_max_one_substitutes_single_spans_only(self) -> None:
        """With max 1 only one span is replaced per variant."""
        assert list(generate_forward(b"foo", LEET_O, 1, 1)) == [b"f0o", b"fo0"]

    def test_min_zero_behaves_like_min_one(self) -> None:
        """Minimum zero never re-emits the input word."""
        assert list(generate_forward(b"foo", LEET_O, 0, 2)) == list(
            generate_forward(b"foo", LEET_O, 1, 2)
        )

    def test_min_two_skips_single_substitutions(self) -> None:
        """Variants below the minimum are not emitted."""
        assert list(generate_forward(b"foo", LEET_O, 2, 2)) == [b"f00"]

    def test_explores_every_replacement_option(self) -> None:
        """Each option is tried at each span, depth first."""
        expected = [b"4a", b"44", b"4@", b"@a", b"@4", b"@@", b"a4", b"a@"]
        assert list(generate_forward(b"aa", SubstitutionTable({b"a": [b"4", b"@"]}), 1, 2)) == expected

    def test_tries_longest_pattern_first(self) -> None:
        """At one offset the longer pattern is substituted before the shorter."""
        table = SubstitutionTable({b"a": [b"1"], b"ab": [b"2"]})
        assert list(generate_forward(b"ab", table, 1, 1)) == [b"2", b"1b"]

    def test_never_substitutes_overlapping_spans(self) -> None:
        """A span consumed by one substitution is not substituted again."""
        table = SubstitutionTable({b"ab": [b"X"], b"b": [b"Y"]})
        assert list(generate_forward(b"ab", table, 1, 2)) == [b"X", b"aY"]

    def test_resumes_after_inserted_replacement(self) -> None:
        """A replacement containing a pattern is not substituted again."""
        table = SubstitutionTable({b"o": [b"oo"]})
        assert list(generate_forward(b"o", table, 1, 5)) == [b"oo"]

    def test_word_without_patterns_yields_nothing(self) -> None:
        """Words with no registered pattern produce no variants."""
        assert not list(generate_forward(b"xyz", LEET_O, 1, 15))


class TestGenerateReverse:
    """Test reverse occurrence-level generation."""

    def test_most_substituted_variants_come_first(self) -> None:
        """Variants are produced from the highest count downwards."""
        assert list(generate_reverse(b"foo", LEET_O, 1, 2)) == [b"f00", b"fo0", b"f0o"]

    def test_max_is_clipped_to_occurrence_count(self) -> None:
        """A maximum above the occurrence count changes nothing."""
        assert list(generate_reverse(b"foo", LEET_O, 1, 10)) == list(
            generate_reverse(b"foo", LEET_O, 1, 2)
        )

    def test_fewer_occurrences_than_min_yields_nothing(self) -> None:
        """Words that cannot reach the minimum produce no variants."""
        assert not list(generate_reverse(b"foo", LEET_O, 3, 5))

    def test_overlapping_occurrences_are_not_combined(self) -> None:
        """Occurrences sharing bytes are never applied together."""
        table = SubstitutionTable({b"a": [b"1"], b"ab": [b"2"]})
        assert list(generate_reverse(b"ab", table, 1, 2)) == [b"2", b"1b"]

    def test_uses_first_replacement_option_only(self) -> None:
        """Only the first registered option is applied."""
        assert list(generate_reverse(b"a", SubstitutionTable({b"a": [b"4", b"@"]}), 1, 1)) == [b"4"]

    def test_length_changing_replacements_compose_left_to_right(self) -> None:
        """Later spans stay aligned after earlier replacements change length."""
        table = SubstitutionTable({b"a": [b"xy"], b"c": [b"z"]})
        assert list(generate_reverse(b"aca", table, 3, 3)) == [b"xyzxy"]

    def test_variants_match_brute_force_selection(self) -> None:
        """Each count yields the same set as filtering every subset of that size."""
        table = SubstitutionTable({b"a": [b"4"], b"ab": [b"|3"], b"b": [b"8"]})
        word = b"abba"
        occurrences = SubstitutionMatcher(table).find_all_occurrences(word)
        expected = set()
        for subset in itertools.combinations(occurrences, 2):
            spans = sorted((o.start, o.end) for o in subset)
            if spans[0][1] <= spans[1][0]:
                expected.add(apply_occurrences(word, list(subset)))
        assert set(generate_reverse(word, table, 2, 2)) == expected


class TestGenerateAllToggle:
    """Test forward pattern-level generation."""

    def test_foo_replaces_both_occurrences_at_once(self) -> None:
        """Selecting 'o' once replaces every 'o' in 'foo'."""
        assert list(generate_all_toggle(b"foo", LEET_O, 1, 1)) == [b"f00"]

    def test_count_is_patterns_not_occurrences(self) -> None:
        """Four occurrences of one pattern count as a single substitution."""
        assert list(generate_all_toggle(b"foofoo", LEET_O, 1, 1)) == [b"f00f00"]

    def test_substitute_branches_precede_leave_branch(self) -> None:
        """Patterns are decided in sorted order, substituting before skipping."""
        expected = [b"b04", b"bo4", b"b0@", b"bo@", b"b0a"]
        assert list(generate_all_toggle(b"boa", LEET_AO, 1, 2)) == expected

    def test_max_limits_selected_patterns(self) -> None:
        """With max 1 only one pattern is substituted per variant."""
        assert list(generate_all_toggle(b"boa", LEET_AO, 1, 1)) == [b"bo4", b"bo@", b"b0a"]

    def test_min_limits_selected_patterns(self) -> None:
        """With min 2 both patterns must be substituted."""
        assert list(generate_all_toggle(b"boa", LEET_AO, 2, 2)) == [b"b04", b"b0@"]


class TestGenerateAllToggleReverse:
    """Test reverse pattern-level generation."""

    def test_starts_from_every_pattern_substituted(self) -> None:
        """The fully substituted word comes first, then reduced selections."""
        assert list(generate_all_toggle_reverse(b"boa", LEET_AO, 1, 2)) == [b"b04", b"b0a", b"bo4"]

    def test_selections_above_max_are_not_emitted(self) -> None:
        """States larger than the maximum are skipped but still reduced."""
        assert list(generate_all_toggle_reverse(b"boa", LEET_AO, 1, 1)) == [b"b0a", b"bo4"]

    def test_stops_at_minimum(self) -> None:
        """No state smaller than the minimum is visited."""
        assert list(generate_all_toggle_reverse(b"boa", LEET_AO, 2, 2)) == [b"b04"]

    def test_fewer_patterns_than_min_yields_nothing(self) -> None:
        """Words with too few distinct patterns produce no variants."""
        assert not list(generate_all_toggle_reverse(b"boa", LEET_AO, 3, 3))

    def test_visits_every_subset_once(self) -> None:
        """Three patterns produce the seven non-empty selections exactly once."""
        table = SubstitutionTable({b"a": [b"1"], b"b": [b"2"], b"c": [b"3"]})
        variants = list(generate_all_toggle_reverse(b"abc", table, 1, 3))
        assert len(variants) == len(set(variants)) == 7


class TestEmptyInputs:
    """Test that every algorithm is total over degenerate inputs."""

    def test_empty_table_yields_nothing(self) -> None:
        """No algorithm emits anything for an empty table."""
        table = SubstitutionTable()
        assert not any(list(generate(b"foo", table, 0, 15)) for generate in ALL_GENERATORS)

    def test_pattern_without_options_yields_nothing(self) -> None:
        """A key with an empty option list contributes no branches."""
        table = SubstitutionTable({b"o": []})
        assert not any(list(generate(b"foo", table, 1, 15)) for generate in ALL_GENERATORS)

    def test_empty_word_yields_nothing(self) -> None:
        """The empty word has no occurrences."""
        assert not any(list(generate(b"", LEET_AO, 1, 15)) for generate in ALL_GENERATORS)


class TestLargeInputs:
    """Test that traversal depth is not bounded by the interpreter stack."""

    def test_all_toggle_handles_more_patterns_than_recursion_limit(self) -> None:
        """A word with 1600 distinct patterns yields one variant per pattern at max 1."""
        assert len(list(generate_all_toggle(PAIR_WORD, PAIR_TABLE, 1, 1))) == 1600

    def test_all_toggle_reverse_descends_past_recursion_limit(self) -> None:
        """Removing 1599 of 1600 patterns first leaves only the last sorted pattern."""
        last = bytes([PAIR_ALPHABET[-1]] * 2)
        assert next(
            generate_all_toggle_reverse(PAIR_WORD, PAIR_TABLE, 1, 1)
        ) == replace_all(PAIR_WORD, ((last, b"#"),))

    def test_forward_reaches_max_beyond_recursion_limit(self) -> None:
        """Substituting 2000 spans along one path does not exhaust the stack."""
        table = SubstitutionTable({b"a": [b"b"]})
        assert next(generate_forward(b"a" * 2000, table, 2000, 2000)) == b"b" * 2000


class TestHelpers:
    """Test substitution helpers and algorithm selection."""

    def test_replace_all_applies_pairs_in_order(self) -> None:
        """Each pair is applied to the output of the previous one."""
        assert replace_all(b"ab", ((b"a", b"b"), (b"b", b"c"))) == b"cc"

    def test_select_generator_for_pattern_reverse(self) -> None:
        """Pattern mode in reverse maps to the reverse toggle algorithm."""
        assert (
            select_generator(SubstitutionMode.PATTERN, Direction.REVERSE)
            is generate_all_toggle_reverse
        )

    def test_select_generator_for_occurrence_forward(self) -> None:
        """Occurrence mode forward maps to the forward algorithm."""
        assert select_generator(SubstitutionMode.OCCURRENCE, Direction.FORWARD) is generate_forward
