"""Boyer-Moore exact substring search with bad character and good suffix heuristics."""

from loguru import logger

from .heuristics import build_bad_character_table, build_good_suffix_table, compute_border_positions
from .models.errors import BMSearchError, EmptyPatternOrTextTooShortError, SymbolOutOfRangeError
from .models.search import PatternTables, SearchResult, ShiftDecision, StepEvent
from .searcher.searcher import ASearcher, BoyerMooreSearcher, search

__version__ = "0.1.0"

# silent as a library until setup_logger() is called
logger.disable("bmsearch")

__all__ = [
    "ASearcher",
    "BMSearchError",
    "BoyerMooreSearcher",
    "EmptyPatternOrTextTooShortError",
    "PatternTables",
    "SearchResult",
    "ShiftDecision",
    "StepEvent",
    "SymbolOutOfRangeError",
    "build_bad_character_table",
    "build_good_suffix_table",
    "compute_border_positions",
    "search",
]
