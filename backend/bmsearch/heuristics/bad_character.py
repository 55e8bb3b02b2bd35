import numpy as np

from ..constants.constants import ABSENT, NUM_CHARS
from ..models.errors import SymbolOutOfRangeError


def build_bad_character_table(pattern, alphabet_size: int = NUM_CHARS) -> np.ndarray:
    """
    Bad character heuristic table.

    Slot c holds the last index at which symbol c occurs in the pattern, or -1
    when it does not occur. On a mismatch against text symbol c at pattern
    index j the pattern can move so that this last occurrence lines up with c,
    or completely past c when it is absent.

    Args:
    pattern: sequence of symbol values, each in [0, alphabet_size)
    alphabet_size: number of slots in the table

    Returns:
    int64 array with exactly alphabet_size entries

    Raises:
    SymbolOutOfRangeError if a pattern symbol falls outside [0, alphabet_size)
    """
    table = np.full(alphabet_size, ABSENT, dtype=np.int64)

    # later occurrences overwrite earlier ones so each slot ends up with the last index
    for i, symbol in enumerate(pattern):
        if symbol < 0 or symbol >= alphabet_size:
            raise SymbolOutOfRangeError(symbol, i, alphabet_size)
        table[symbol] = i

    return table
