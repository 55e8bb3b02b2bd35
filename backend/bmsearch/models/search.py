from dataclasses import dataclass, field
from typing import Optional, Tuple, List

import numpy as np


@dataclass(frozen=True, eq=False)
class PatternTables:
    bad_character: np.ndarray       # symbol value -> last index in pattern, -1 if absent
    good_suffix: List[int]          # m+1 entries, [0] is the shift after a full match

    @property
    def pattern_length(self) -> int:
        return len(self.good_suffix) - 1

    @property
    def alphabet_size(self) -> int:
        return len(self.bad_character)


@dataclass(frozen=True)
class ShiftDecision:
    kind: str                           # "match" or "mismatch"
    bad_char_shift: Optional[int]       # None when the whole pattern matched
    good_suffix_shift: int
    chosen_heuristic: str               # "Bad Character" or "Good Suffix"
    shift_amount: int


@dataclass(frozen=True)
class StepEvent:
    step_number: int            # 1-based
    alignment_offset: int       # where the pattern was compared
    decision: ShiftDecision
    next_offset: int            # alignment after the shift, may be past n-m

    def to_dict(self) -> dict:
        return {
            "step_number": self.step_number,
            "alignment_offset": self.alignment_offset,
            "next_offset": self.next_offset,
            "decision": {
                "kind": self.decision.kind,
                "bad_char_shift": self.decision.bad_char_shift,
                "good_suffix_shift": self.decision.good_suffix_shift,
                "chosen_heuristic": self.decision.chosen_heuristic,
                "shift_amount": self.decision.shift_amount,
            },
        }


@dataclass(frozen=True)
class SearchResult:
    matches: Tuple[int, ...] = ()       # ascending start indices
    skipped_count: int = 0              # characters skipped by shifts > 1
    searched: bool = True               # False when the pattern is empty or longer than the text
    steps: Tuple[StepEvent, ...] = field(default=(), compare=False)

    @property
    def found(self) -> bool:
        return len(self.matches) > 0
