"""Pattern matching for tablemorph."""

from tablemorph.matching.pattern_matcher import SubstitutionMatcher

__all__ = ["SubstitutionMatcher"]
