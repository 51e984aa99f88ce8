"""Per-word variant generation, in-process or inside pool workers."""

from collections.abc import Callable, Iterable, Iterator
import multiprocessing
import threading
from typing import Any

from loguru import logger

from tablemorph.core.generators import select_generator
from tablemorph.core.types import Variant
from tablemorph.processing.sink import OutputSink
from tablemorph.processing.worker_context import (
    WorkerContext,
    get_output_queue,
    get_worker_context,
    init_worker,
)
from tablemorph.utils import Constants


def iter_variants(word: bytes, context: WorkerContext) -> Iterator[Variant]:
    """Run the configured generation algorithm on one word."""
    generate = select_generator(context.mode, context.direction)
    return generate(word, context.table, context.min_substitutions, context.max_substitutions)


def expand_word(
    word: bytes,
    context: WorkerContext,
    emit: Callable[[list[bytes]], Any],
    batch_size: int = Constants.OUTPUT_BATCH_SIZE,
) -> int:
    """Stream a word's variants to ``emit`` in order, in batches.

    Returns:
        Number of variants emitted
    """
    emitted = 0
    batch: list[bytes] = []
    for variant in iter_variants(word, context):
        batch.append(variant)
        if len(batch) >= batch_size:
            emit(batch)
            emitted += len(batch)
            batch = []
    if batch:
        emit(batch)
        emitted += len(batch)
    return emitted


def generate_word_worker(word: bytes) -> int:
    """Worker function for multiprocessing.

    Pushes the word's variants onto the shared output queue, blocking while
    the queue is full.

    Returns:
        Number of variants emitted for the word
    """
    return expand_word(word, get_worker_context(), get_output_queue().put)


class _DispatchState:
    """Bookkeeping shared between the dispatcher and pool callbacks."""

    def __init__(self, jobs: int):
        self.permits = threading.BoundedSemaphore(jobs)
        self.lock = threading.Lock()
        self.variants = 0
        self.failures: list[BaseException] = []

    def completed(self, emitted: int) -> None:
        with self.lock:
            self.variants += emitted
        self.permits.release()

    def failed(self, error: BaseException) -> None:
        logger.error(f"✗ Variant generation failed: {error!r}")
        with self.lock:
            self.failures.append(error)
        self.permits.release()


def process_multiprocessing(
    words: Iterable[bytes],
    context: WorkerContext,
    sink: OutputSink,
    jobs: int,
) -> tuple[int, int, list[BaseException]]:
    """Expand words on a process pool with at most ``jobs`` words in flight.

    Workers stream batches onto a bounded queue that ``sink`` drains on its
    own thread. The sink is started only after the pool has forked its
    workers and is closed once every dispatched word has completed. No
    further words are read once the sink has failed to write.

    Returns:
        Tuple of (words dispatched, variants emitted, worker failures)
    """
    state = _DispatchState(jobs)
    dispatched = 0
    output_queue = multiprocessing.Queue(maxsize=Constants.OUTPUT_QUEUE_SIZE)

    with multiprocessing.Pool(
        processes=jobs,
        initializer=init_worker,
        initargs=(context, output_queue),
    ) as pool:
        sink.start(output_queue)
        try:
            for word in words:
                state.permits.acquire()  # pylint: disable=consider-using-with
                if sink.failed:
                    state.permits.release()
                    logger.warning("Output is no longer writable, stopping dispatch")
                    break
                pool.apply_async(
                    generate_word_worker,
                    (word,),
                    callback=state.completed,
                    error_callback=state.failed,
                )
                dispatched += 1
            pool.close()
            pool.join()
        finally:
            sink.close()

    output_queue.close()
    output_queue.join_thread()

    logger.debug(f"Dispatched {dispatched} words to {jobs} workers")
    return dispatched, state.variants, state.failures


def process_single_threaded(
    words: Iterable[bytes],
    context: WorkerContext,
    sink: OutputSink,
) -> tuple[int, int, list[BaseException]]:
    """Expand words one after another, writing straight to the sink."""
    processed = 0
    variants = 0
    try:
        for word in words:
            variants += expand_word(word, context, sink.write_batch)
            processed += 1
    finally:
        sink.close()
    return processed, variants, []
