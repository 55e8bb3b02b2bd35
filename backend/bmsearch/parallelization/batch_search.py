from multiprocessing import Pool
from typing import List, Sequence, Tuple

from loguru import logger

from ..core.config import settings
from ..models.search import SearchResult
from ..searcher.searcher import BoyerMooreSearcher

_ALPHABET_SIZE: int = None


def _init_worker(alphabetSize: int):
    global _ALPHABET_SIZE

    _ALPHABET_SIZE = alphabetSize


def process_search_batch(batch) -> List[Tuple[int, SearchResult]]:
    """Search a batch of (index, (text, pattern)) pairs in a worker"""
    searcher = BoyerMooreSearcher(_ALPHABET_SIZE)
    results = []
    for i, (text, pattern) in batch:
        results.append((i, searcher.search(text, pattern)))
    return results


def search_batch(pairs: Sequence[Tuple[object, object]],
                 processes: int = None,
                 alphabet_size: int = None) -> List[SearchResult]:
    """
    Search many independent (text, pattern) pairs in parallel.

    Args:
    pairs: (text, pattern) tuples
    processes: worker processes, 1 searches in this process (default: settings.NUM_PROCESSES)
    alphabet_size: alphabet for every search (default: settings.ALPHABET_SIZE)

    Returns:
    One SearchResult per pair, in input order
    """
    processes = processes if processes is not None else settings.NUM_PROCESSES
    alphabetSize = alphabet_size if alphabet_size is not None else settings.ALPHABET_SIZE
    if processes < 1:
        raise ValueError(f"processes must be positive, got {processes}")

    indexedPairs = list(enumerate(pairs))
    if not indexedPairs:
        return []

    if processes == 1:
        searcher = BoyerMooreSearcher(alphabetSize)
        return [searcher.search(text, pattern) for _, (text, pattern) in indexedPairs]

    batchSize = max(1, len(indexedPairs) // (processes * 3))

    # Split into batches
    batches = []
    for i in range(0, len(indexedPairs), batchSize):
        batches.append(indexedPairs[i:i + batchSize])

    logger.debug("Searching {} pairs in {} batches on {} processes", len(indexedPairs), len(batches), processes)

    results: List[SearchResult] = [None] * len(indexedPairs)
    with Pool(
        processes=processes,
        initializer=_init_worker,
        initargs=(alphabetSize,),
        ) as pool:
        batchResults = pool.map(process_search_batch, batches)
        # Flatten the results
        for batchResult in batchResults:
            for i, result in batchResult:
                results[i] = result

    return results
