from typing import Callable, List, Optional, Tuple

from loguru import logger

from ..constants.constants import BAD_CHARACTER, GOOD_SUFFIX, MATCH, MISMATCH
from ..models.errors import EmptyPatternOrTextTooShortError, SymbolOutOfRangeError
from ..models.search import PatternTables, ShiftDecision, StepEvent

StepCallback = Callable[[StepEvent], None]


def ensure_searchable(text_length: int, pattern_length: int):
    """Raise EmptyPatternOrTextTooShortError unless at least one alignment exists."""
    if pattern_length == 0 or text_length < pattern_length:
        raise EmptyPatternOrTextTooShortError(pattern_length, text_length)


def boyer_moore_search(text,
                       pattern,
                       tables: PatternTables,
                       on_step: Optional[StepCallback] = None) -> Tuple[List[int], int]:
    """
    Boyer-Moore alignment loop.

    :param text:     encoded text symbols
    :param pattern:  encoded pattern symbols, the ones the tables were built from
    :param tables:   bad character and good suffix tables for the pattern
    :param on_step:  called with a StepEvent after every alignment, only observes
    :return: (ascending match indices, total characters skipped)
    :raises EmptyPatternOrTextTooShortError: if the pattern is empty or longer than the text
    """
    n = len(text)
    m = len(pattern)
    ensure_searchable(n, m)

    if tables.pattern_length != m:
        raise ValueError(
            f"Tables were built for a pattern of length {tables.pattern_length}, got {m}"
        )

    bad_char = tables.bad_character
    alphabet_size = len(bad_char)
    good_suffix = tables.good_suffix
    last = n - m

    matches: List[int] = []
    shift = 0
    skipped = 0
    step = 1

    while shift <= last:
        # compare right to left
        j = m - 1
        while j >= 0 and pattern[j] == text[shift + j]:
            j -= 1

        if j < 0:
            matches.append(shift)
            final_shift = good_suffix[0]
            decision = ShiftDecision(
                kind=MATCH,
                bad_char_shift=None,
                good_suffix_shift=final_shift,
                chosen_heuristic=GOOD_SUFFIX,
                shift_amount=final_shift,
            )
        else:
            c = text[shift + j]
            if c < 0 or c >= alphabet_size:
                raise SymbolOutOfRangeError(c, shift + j, alphabet_size)
            # at least 1 even when the symbol's last occurrence is right of j
            bad_char_shift = max(1, j - int(bad_char[c]))
            good_suffix_shift = good_suffix[j + 1]
            final_shift = max(bad_char_shift, good_suffix_shift)
            decision = ShiftDecision(
                kind=MISMATCH,
                bad_char_shift=bad_char_shift,
                good_suffix_shift=good_suffix_shift,
                chosen_heuristic=BAD_CHARACTER if bad_char_shift >= good_suffix_shift else GOOD_SUFFIX,
                shift_amount=final_shift,
            )

        offset = shift
        shift += final_shift
        # the step that leaves the search range is not counted
        if final_shift > 1 and shift <= last:
            skipped += final_shift - 1

        if on_step is not None:
            on_step(StepEvent(
                step_number=step,
                alignment_offset=offset,
                decision=decision,
                next_offset=shift,
            ))
        step += 1

    logger.debug("Searched {} alignments, {} matches, {} skipped", step - 1, len(matches), skipped)
    return matches, skipped
