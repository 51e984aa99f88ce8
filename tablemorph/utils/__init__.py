"""Utility functions for tablemorph."""

from tablemorph.utils.constants import Constants
from tablemorph.utils.helpers import expand_file_path, format_time, resolve_jobs
from tablemorph.utils.logging import setup_logger

__all__ = [
    "Constants",
    "expand_file_path",
    "format_time",
    "resolve_jobs",
    "setup_logger",
]
