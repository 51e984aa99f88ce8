"""Shared utility functions for tablemorph."""

import os
from multiprocessing import cpu_count

from tablemorph.utils.constants import Constants


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def resolve_jobs(jobs: int | None) -> int | None:
    """Translate the "all cores" thread count into the actual core count."""
    if jobs == Constants.ALL_CORES:
        return cpu_count()
    return jobs


def format_time(seconds: float) -> str:
    """Format elapsed seconds for log output."""
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes, seconds = divmod(seconds, 60)
    return f"{int(minutes)}m {seconds:.1f}s"
