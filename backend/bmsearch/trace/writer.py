from typing import IO

from ..alphabet.symbols import decode_symbols
from ..constants.constants import MATCH
from ..core.config import settings
from ..models.search import SearchResult, StepEvent


class TraceWriter:
    """
    Human readable trace of a search.

    Pass the instance as the on_step observer of a search; every StepEvent is
    written as the alignment, the shift decision and, while the pattern is
    still inside the text, a diagram of the next alignment. Call summary()
    with the result once the search returns.
    """
    def __init__(self, outputFile: IO, text, pattern, width: int = None):
        """
        Parameters
        ----------
        outputFile : IO
            An open writable text handle, e.g. sys.stdout
        text, pattern : str, bytes or sequence of symbol values
            The searched text and pattern, anything but str is shown one
            character per symbol
        width : int
            Length of the separator under each alignment diagram
        """
        self.outputFile = outputFile
        self.text = text if isinstance(text, str) else decode_symbols(text)
        self.pattern = pattern if isinstance(pattern, str) else decode_symbols(pattern)
        self.width = width if width is not None else settings.TRACE_WIDTH
        self.lastOffset = len(self.text) - len(self.pattern)

    def header(self):
        self._line(f"Text:    {self.text}")
        self._line(f"Pattern: {self.pattern}")
        self._line("-" * 34)

    def __call__(self, event: StepEvent):
        self.writeStep(event)

    def writeStep(self, event: StepEvent):
        decision = event.decision
        self._line(f"Step {event.step_number}: Pattern aligned at index {event.alignment_offset}")

        inBounds = event.next_offset <= self.lastOffset
        if decision.kind == MATCH:
            self._line(f"Pattern found at index: {event.alignment_offset}")
            if inBounds:
                self._line(
                    f"- Shifting right by: {decision.shift_amount}"
                    f"      - Chosen Heuristic: {decision.chosen_heuristic}"
                )
        else:
            self._line(
                f"- Bad character shift: {decision.bad_char_shift}"
                f"      - Good suffix shift: {decision.good_suffix_shift}"
                f"      - Heuristic Chosen: {decision.chosen_heuristic}"
                f"      - Shifting right by: {decision.shift_amount}"
            )

        if inBounds:
            self.writeAlignment(event.next_offset)

    def writeAlignment(self, offset: int):
        self._line("")
        self._line(f"Text:    {self.text}")
        self._line("Pattern: " + " " * offset + self.pattern)
        self._line("-" * self.width)

    def summary(self, result: SearchResult):
        if not result.searched:
            self._line("Pattern is empty or longer than the text.")
            return
        if not result.found:
            self._line("Pattern not found in the text.")

        self._line("")
        self._line("=" * 48)
        self._line("The pattern matched the text at index: " + "".join(f"{i} " for i in result.matches))
        self._line(f"Total Skipped Characters: {result.skipped_count}")

    def _line(self, s: str):
        self.outputFile.write(s + "\n")
