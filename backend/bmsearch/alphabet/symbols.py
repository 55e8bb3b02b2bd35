from typing import Tuple

from ..constants.constants import NUM_CHARS
from ..models.errors import SymbolOutOfRangeError


def encode_symbols(sequence, alphabet_size: int = NUM_CHARS) -> Tuple[int, ...]:
    """
    Turn a text or pattern into the symbol values the tables are indexed by.

    Args:
    sequence: str (code points), bytes-like (byte values) or an iterable of ints
    alphabet_size: number of symbol values, every symbol must be below it

    Returns:
    Tuple of symbol values

    Raises:
    SymbolOutOfRangeError if a symbol falls outside [0, alphabet_size)
    """
    if alphabet_size < 1:
        raise ValueError(f"alphabet_size must be positive, got {alphabet_size}")

    if isinstance(sequence, str):
        symbols = tuple(ord(c) for c in sequence)
    elif isinstance(sequence, (bytes, bytearray, memoryview)):
        symbols = tuple(bytes(sequence))
    else:
        symbols = tuple(_as_symbol(s) for s in sequence)

    for position, symbol in enumerate(symbols):
        if symbol < 0 or symbol >= alphabet_size:
            raise SymbolOutOfRangeError(symbol, position, alphabet_size)

    return symbols


def _as_symbol(value) -> int:
    # numpy integers and the like are fine, floats and strings are not
    if isinstance(value, bool) or not hasattr(value, "__index__"):
        raise TypeError(f"Symbols must be integers, got {type(value).__name__}")
    return value.__index__()


def decode_symbols(symbols) -> str:
    """Render symbol values back as text, one character per symbol."""
    return "".join(chr(s) for s in symbols)
