"""Main processing pipeline orchestration."""

import sys
import time
from typing import BinaryIO

from loguru import logger
from tqdm import tqdm

from tablemorph.core import Config
from tablemorph.data import load_substitution_tables, open_dictionary
from tablemorph.processing.data_models import GenerationResult
from tablemorph.processing.generation import process_multiprocessing, process_single_threaded
from tablemorph.processing.sink import OutputSink
from tablemorph.processing.worker_context import WorkerContext
from tablemorph.utils import format_time


def _log_run_info(config: Config) -> None:
    """Log the selected algorithm and bounds if verbose."""
    if config.verbose:
        logger.info(f"Mode: {config.mode.value}, direction: {config.direction.value}")
        logger.info(f"Substitutions: {config.effective_min}..{config.max_substitutions}")
        logger.info("")


def run_pipeline(config: Config, output: BinaryIO | None = None) -> GenerationResult:
    """Expand every dictionary word into its substitution variants.

    Tables are loaded and merged first, so a bad table path fails the run
    before the dictionary is opened or any worker is started. Words are then
    read one at a time and expanded with at most ``config.jobs`` words in
    flight; a single sink writes the variants.

    Args:
        config: Configuration object containing all settings
        output: Binary stream receiving the variants (defaults to stdout)

    Returns:
        GenerationResult with word and variant counts

    Raises:
        ValueError: If the dictionary or table paths are missing
        RuntimeError: If generation failed for any word
    """
    start_time = time.time()
    verbose = config.verbose

    if not config.dictionary:
        raise ValueError("A dictionary file is required")
    if not config.tables:
        raise ValueError("At least one substitution table is required")

    _log_run_info(config)

    # Stage 1: Load substitution tables
    if verbose:
        logger.info("Loading substitution tables...")
    table = load_substitution_tables(config.tables, verbose)
    context = WorkerContext.from_config(table, config)

    # Stage 2: Generate variants
    sink = OutputSink(output if output is not None else sys.stdout.buffer)
    with open_dictionary(config.dictionary) as words:
        if verbose:
            logger.info(f"Generating variants from {config.dictionary}...")
            words = tqdm(words, desc="Processing words", unit="word")

        if config.jobs > 1:
            if verbose:
                logger.info(f"  Using {config.jobs} parallel workers")
            processed, variants, failures = process_multiprocessing(
                words, context, sink, config.jobs
            )
        else:
            processed, variants, failures = process_single_threaded(words, context, sink)

    result = GenerationResult(
        words_processed=processed,
        variants_emitted=variants,
        failed_words=len(failures),
        elapsed_time=time.time() - start_time,
    )

    if verbose:
        logger.info("")
        logger.info(f"Words processed: {result.words_processed}")
        logger.info(f"Variants emitted: {result.variants_emitted}")
        logger.info(f"Total time: {format_time(result.elapsed_time)}")

    if failures:
        raise RuntimeError(f"Variant generation failed for {len(failures)} word(s)") from failures[0]

    return result
