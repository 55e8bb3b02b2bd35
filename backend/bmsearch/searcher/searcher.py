from abc import ABC, abstractmethod
from typing import List, Optional

from loguru import logger

from ..alphabet.symbols import encode_symbols
from ..core.config import settings
from ..engine.boyer_moore import StepCallback, boyer_moore_search, ensure_searchable
from ..heuristics.bad_character import build_bad_character_table
from ..heuristics.good_suffix import build_good_suffix_table
from ..models.errors import EmptyPatternOrTextTooShortError
from ..models.search import PatternTables, SearchResult, StepEvent


class ASearcher(ABC):
    @abstractmethod
    def search(self, text, pattern, on_step: Optional[StepCallback] = None,
               record_steps: bool = False) -> SearchResult:
        pass


class BoyerMooreSearcher(ASearcher):
    """
    Exact substring search with the bad character and good suffix heuristics.

    Text and pattern may be str, bytes or sequences of symbol values; every
    symbol must lie in [0, alphabet_size). Each call builds its own tables,
    so one instance can be shared freely.
    """
    def __init__(self, alphabet_size: int = None):
        self.alphabet_size = alphabet_size if alphabet_size is not None else settings.ALPHABET_SIZE
        if self.alphabet_size < 1:
            raise ValueError(f"alphabet_size must be positive, got {self.alphabet_size}")

    def preprocess(self, pattern) -> PatternTables:
        """Build both heuristic tables for a pattern."""
        symbols = encode_symbols(pattern, self.alphabet_size)
        return self._build_tables(symbols)

    def search(self, text, pattern, on_step: Optional[StepCallback] = None,
               record_steps: bool = False) -> SearchResult:
        """
        Find every (possibly overlapping) occurrence of pattern in text.

        Args:
        text: text to search
        pattern: pattern to look for
        on_step: observer called with each StepEvent
        record_steps: also keep the StepEvents on the result

        Returns:
        SearchResult, with searched=False when the pattern is empty or longer than the text

        Raises:
        SymbolOutOfRangeError if either input has a symbol outside the alphabet
        """
        textSymbols = encode_symbols(text, self.alphabet_size)
        patternSymbols = encode_symbols(pattern, self.alphabet_size)

        steps: List[StepEvent] = []
        if record_steps:
            def observe(event: StepEvent):
                steps.append(event)
                if on_step is not None:
                    on_step(event)
            callback = observe
        else:
            callback = on_step

        try:
            ensure_searchable(len(textSymbols), len(patternSymbols))
        except EmptyPatternOrTextTooShortError as e:
            logger.info("No search performed: {}", e)
            return SearchResult(searched=False)

        tables = self._build_tables(patternSymbols)
        matches, skipped = boyer_moore_search(textSymbols, patternSymbols, tables, callback)

        return SearchResult(
            matches=tuple(matches),
            skipped_count=skipped,
            searched=True,
            steps=tuple(steps),
        )

    def _build_tables(self, patternSymbols) -> PatternTables:
        return PatternTables(
            bad_character=build_bad_character_table(patternSymbols, self.alphabet_size),
            good_suffix=build_good_suffix_table(patternSymbols),
        )


def search(text, pattern, *, on_step: Optional[StepCallback] = None,
           record_steps: bool = False, alphabet_size: int = None) -> SearchResult:
    """Search text for pattern with a fresh BoyerMooreSearcher."""
    return BoyerMooreSearcher(alphabet_size).search(text, pattern, on_step=on_step, record_steps=record_steps)
