"""Batch cleaning of many selections with multiprocessing support."""

import threading
import time
from multiprocessing import Pool

from loguru import logger
from tqdm import tqdm

from glossfix.core import Config
from glossfix.core.pipeline import ReconstructionResult, TextReconstructor
from glossfix.utils.logging import setup_logger

# Thread-local storage for the reconstructor (built once per worker)
_worker_state = threading.local()


def init_worker(config: Config) -> None:
    """Set up logging and build the worker's reconstructor.

    Spawned workers start with loguru's default DEBUG sink, so the sink is
    replaced to match the parent's --verbose and --debug flags. The
    reconstructor is built eagerly so the first task does not stall.

    Args:
        config: Configuration shared by all workers
    """
    setup_logger(verbose=config.verbose, debug=config.debug)
    _worker_state.reconstructor = TextReconstructor(config)


def reconstruct_worker(item: tuple[int, str]) -> tuple[int, ReconstructionResult]:
    """Worker function for multiprocessing.

    Args:
        item: Tuple of (input position, raw text)

    Returns:
        Tuple of (input position, reconstruction result)
    """
    position, text = item
    return position, _worker_state.reconstructor.reconstruct(text)


def clean_many(texts: list[str], config: Config | None = None) -> list[ReconstructionResult]:
    """Reconstruct every selection, returning results in input order.

    Args:
        texts: Raw selections
        config: Configuration (jobs > 1 enables a worker pool, verbose a progress bar)

    Returns:
        One ReconstructionResult per input text
    """
    config = config or Config()
    start_time = time.time()
    results: list[ReconstructionResult | None] = [None] * len(texts)

    if config.jobs > 1 and len(texts) > 1:
        if config.verbose:
            logger.info(f"  Using {config.jobs} parallel workers")

        with Pool(processes=config.jobs, initializer=init_worker, initargs=(config,)) as pool:
            completed = pool.imap_unordered(reconstruct_worker, enumerate(texts))

            if config.verbose:
                completed = tqdm(completed, total=len(texts), desc="Cleaning", unit="text")

            for position, result in completed:
                results[position] = result
    else:
        reconstructor = TextReconstructor(config)
        items = enumerate(texts)
        if config.verbose:
            items = tqdm(items, total=len(texts), desc="Cleaning", unit="text")

        for position, text in items:
            results[position] = reconstructor.reconstruct(text)

    elapsed_time = time.time() - start_time
    if config.verbose:
        logger.info(f"  Cleaned {len(texts)} selections in {elapsed_time:.2f}s")

    return [result for result in results if result is not None]
