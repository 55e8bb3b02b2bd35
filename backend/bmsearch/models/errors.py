class BMSearchError(Exception):
    """Base class for every error raised by bmsearch."""


class EmptyPatternOrTextTooShortError(BMSearchError, ValueError):
    """
    The pattern is empty or longer than the text, so no alignment exists.

    This is not a failure: it tells the caller that no search was performed
    and that there are trivially no matches.
    """
    def __init__(self, pattern_length: int, text_length: int):
        self.pattern_length = pattern_length
        self.text_length = text_length
        super().__init__(
            f"Pattern is empty or longer than the text "
            f"(pattern length {pattern_length}, text length {text_length})"
        )

    def __reduce__(self):
        return (self.__class__, (self.pattern_length, self.text_length))


class SymbolOutOfRangeError(BMSearchError, ValueError):
    """A symbol value falls outside [0, alphabet_size)."""
    def __init__(self, symbol: int, position: int, alphabet_size: int):
        self.symbol = symbol
        self.position = position
        self.alphabet_size = alphabet_size
        super().__init__(
            f"Symbol {symbol} at position {position} is outside the alphabet "
            f"[0, {alphabet_size})"
        )

    def __reduce__(self):
        return (self.__class__, (self.symbol, self.position, self.alphabet_size))
