"""
main.py:
Command line entry point, prints the step by step trace of a search
"""

import argparse
import os
import sys
import time

import psutil
from loguru import logger

from .constants.constants import DEFAULT_PATTERN, DEFAULT_TEXT
from .core.config import settings
from .core.logging import setup_logger
from .models.search import SearchResult
from .searcher.searcher import BoyerMooreSearcher
from .trace.writer import TraceWriter


def get_memory_usage():
    """Get current memory usage in bytes using psutil"""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Boyer-Moore substring search')

    parser.add_argument('text', nargs='?', default=None, help=f'Text to search (default: {DEFAULT_TEXT})')
    parser.add_argument('pattern', nargs='?', default=None, help=f'Pattern to look for (default: {DEFAULT_PATTERN})')

    # Optional arguments
    parser.add_argument('--text-file', help='Read the text from a file instead')
    parser.add_argument('--pattern-file', help='Read the pattern from a file instead')
    parser.add_argument('-q', '--quiet', action='store_true', help='Only print the summary')
    parser.add_argument('-a', '--alphabet-size', type=int, default=settings.ALPHABET_SIZE, help='Number of symbol values')
    parser.add_argument('-m', '--memory', action='store_true', help='Track memory usage')
    parser.add_argument('--log-level', default=settings.LOG_LEVEL, help='loguru log level')

    return parser.parse_args(argv)


def _read(path: str) -> str:
    with open(path, "r") as f:
        return f.read().rstrip("\r\n")


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logger(level=args.log_level)

    text = _read(args.text_file) if args.text_file else args.text
    pattern = _read(args.pattern_file) if args.pattern_file else args.pattern
    if text is None:
        text = DEFAULT_TEXT
    if pattern is None:
        pattern = DEFAULT_PATTERN

    startTime = time.perf_counter()
    if args.memory:
        baseline_memory = get_memory_usage()

    writer = TraceWriter(sys.stdout, text=text, pattern=pattern)
    try:
        searcher = BoyerMooreSearcher(args.alphabet_size)
        if not args.quiet:
            writer.header()
        result: SearchResult = searcher.search(text, pattern, on_step=None if args.quiet else writer)
    # SymbolOutOfRangeError or a bad alphabet size
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    writer.summary(result)

    elapsed = time.perf_counter() - startTime
    logger.info("Search finished in {:.6f}s with {} matches", elapsed, len(result.matches))

    if args.memory:
        search_memory_used = get_memory_usage() - baseline_memory
        print(f"\nMemory used by the search: {search_memory_used / 10**6:.2f} MB")

    return 0


if __name__ == "__main__":
    sys.exit(main())
