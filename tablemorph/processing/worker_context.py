"""Worker context for multiprocessing without global state."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from tablemorph.core.types import Direction, SubstitutionMode
from tablemorph.data.table import SubstitutionTable

if TYPE_CHECKING:
    from tablemorph.core.config import Config


@dataclass(frozen=True)
class WorkerContext:
    """Immutable context for generation workers.

    This encapsulates everything a worker needs to expand a word. The frozen
    dataclass and the read-only table make it safe to share between threads
    and cheap to ship to worker processes once, at pool start-up.

    Attributes:
        table: Merged substitution table
        min_substitutions: Lower substitution bound (0 behaves like 1)
        max_substitutions: Upper substitution bound
        mode: Occurrence-level or pattern-level substitution
        direction: Forward or reverse enumeration
    """

    table: SubstitutionTable
    min_substitutions: int
    max_substitutions: int
    mode: SubstitutionMode
    direction: Direction

    @classmethod
    def from_config(cls, table: SubstitutionTable, config: Config) -> WorkerContext:
        """Create WorkerContext from a loaded table and the run configuration."""
        return cls(
            table=table,
            min_substitutions=config.min_substitutions,
            max_substitutions=config.max_substitutions,
            mode=config.mode,
            direction=config.direction,
        )


# Thread-local storage for worker context
_worker_context = threading.local()


def init_worker(context: WorkerContext, output_queue: Any = None) -> None:
    """Initialize a worker with its context and the shared output queue.

    Args:
        context: WorkerContext to store in thread-local storage
        output_queue: Queue that receives batches of variants, if any
    """
    _worker_context.value = context
    _worker_context.output_queue = output_queue


def get_worker_context() -> WorkerContext:
    """Get the current worker's context from thread-local storage.

    Raises:
        RuntimeError: If called before init_worker
    """
    try:
        return _worker_context.value
    except AttributeError as e:
        raise RuntimeError("Worker context not initialized. Call init_worker first.") from e


def get_output_queue() -> Any:
    """Get the output queue registered for the current worker.

    Raises:
        RuntimeError: If no queue was registered
    """
    queue = getattr(_worker_context, "output_queue", None)
    if queue is None:
        raise RuntimeError("Worker output queue not initialized. Call init_worker first.")
    return queue
