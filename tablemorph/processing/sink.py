"""Single-writer output sink for generated variants."""

import threading
from typing import Any, BinaryIO

from loguru import logger

from tablemorph.utils import Constants

# Marks the end of the variant stream on the output queue
SENTINEL = None


class OutputSink:
    """Serializes every variant write to one binary stream.

    Variants arrive in batches and are written newline-terminated. The sink
    either receives batches directly from the caller or drains them from a
    queue on a dedicated thread, which is then the only writer.
    """

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self._thread: threading.Thread | None = None
        self._queue: Any = None
        self._error: BaseException | None = None
        self.variants_written = 0

    @property
    def failed(self) -> bool:
        """True once a write has failed and further batches are discarded."""
        return self._error is not None

    def write_batch(self, batch: list[bytes]) -> None:
        """Write a batch of variants, one per line."""
        terminator = Constants.LINE_TERMINATOR
        self._stream.write(b"".join(variant + terminator for variant in batch))
        self.variants_written += len(batch)

    def flush(self) -> None:
        """Flush the underlying stream."""
        self._stream.flush()

    def start(self, output_queue: Any) -> None:
        """Start draining ``output_queue`` on a background thread."""
        if self._thread is not None:
            raise RuntimeError("Output sink already started")
        self._queue = output_queue
        self._thread = threading.Thread(target=self._drain, name="tablemorph-sink", daemon=True)
        self._thread.start()

    def _drain(self) -> None:
        while True:
            batch = self._queue.get()
            if batch is SENTINEL:
                return
            if self._error is not None:
                # Keep consuming so producers blocked on a full queue can finish
                continue
            try:
                self.write_batch(batch)
            except Exception as e:  # pylint: disable=broad-exception-caught
                logger.error(f"✗ Failed writing variants: {e}")
                self._error = e

    def close(self) -> None:
        """Stop the drain thread once the queue is empty, then flush.

        Raises:
            BaseException: The error that stopped the sink from writing, if any
        """
        if self._thread is not None:
            self._queue.put(SENTINEL)
            self._thread.join()
            self._thread = None
        if self._error is not None:
            raise self._error
        self.flush()

