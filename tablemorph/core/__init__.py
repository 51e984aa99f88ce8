"""Core domain logic for tablemorph."""

from .types import Direction, Occurrence, SubstitutionMode, Variant
from .combinations import combinations, is_non_overlapping
from .config import Config, load_config
from .generators import (
    generate_all_toggle,
    generate_all_toggle_reverse,
    generate_forward,
    generate_reverse,
    select_generator,
)

__all__ = [
    "Config",
    "Direction",
    "Occurrence",
    "SubstitutionMode",
    "Variant",
    "combinations",
    "generate_all_toggle",
    "generate_all_toggle_reverse",
    "generate_forward",
    "generate_reverse",
    "is_non_overlapping",
    "load_config",
    "select_generator",
]
