"""Type definitions for tablemorph."""

from enum import Enum
from typing import NamedTuple


class SubstitutionMode(Enum):
    """What a single substitution decision applies to."""

    OCCURRENCE = "occurrence"  # Each matched span is substituted independently
    PATTERN = "pattern"  # One decision per pattern, applied to every occurrence


class Direction(Enum):
    """Order in which substitution counts are explored."""

    FORWARD = "forward"  # Fewest substitutions first
    REVERSE = "reverse"  # Most substitutions first


class Occurrence(NamedTuple):
    """A place in a specific word where a registered pattern matches."""

    start: int
    length: int
    options: tuple[bytes, ...]

    @property
    def end(self) -> int:
        """Offset one past the last matched byte."""
        return self.start + self.length


# Type alias for emitted words: raw bytes, never decoded
Variant = bytes
