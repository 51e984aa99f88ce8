"""tablemorph - substitution table variant generator.

Expand a wordlist into every variant reachable by replacing registered
patterns with their alternates (leetspeak, transliteration tables).
"""

from tablemorph.core import Config, Direction, SubstitutionMode, load_config
from tablemorph.data import SubstitutionTable, load_substitution_tables
from tablemorph.processing import GenerationResult, run_pipeline
from tablemorph.utils.logging import setup_logger

__version__ = "0.2.0"
__all__ = [
    "Config",
    "Direction",
    "GenerationResult",
    "SubstitutionMode",
    "SubstitutionTable",
    "load_config",
    "load_substitution_tables",
    "run_pipeline",
    "setup_logger",
]
