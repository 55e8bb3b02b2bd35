from typing import List


def compute_border_positions(pattern) -> List[int]:
    """
    Start position of the widest border of every suffix of the pattern.

    border[i] is where the widest border of pattern[i:] starts; m+1 marks the
    empty suffix. A border is a substring that is both a proper prefix and a
    proper suffix.
    """
    return _preprocess(pattern)[0]


def build_good_suffix_table(pattern) -> List[int]:
    """
    Good suffix heuristic table.

    shifts[k] is the shift to apply when pattern[k:] (a suffix of length m-k)
    matched the text and pattern[k-1] did not; shifts[0] is the shift after a
    complete match. Two cases fill it:

    1. the matched suffix occurs elsewhere in the pattern preceded by a
       different symbol, shift to line that occurrence up
    2. otherwise line up the widest border of the whole pattern that fits in
       the matched suffix, or move past the pattern entirely

    Returns:
    List with m+1 entries, [0] for an empty pattern
    """
    if len(pattern) == 0:
        return [0]
    return _preprocess(pattern)[1]


def _preprocess(pattern):
    m = len(pattern)
    # 0 marks a slot not set yet, a real shift is always >= 1
    shifts = [0] * (m + 1)
    border = [0] * (m + 1)

    i = m
    j = m + 1
    border[i] = j

    # 1) borders of every suffix, right to left
    while i > 0:
        # pattern[i-1] cannot extend the border starting at j, so the suffix
        # pattern[j:] reoccurs at i preceded by a different symbol
        while j <= m and pattern[i - 1] != pattern[j - 1]:
            if shifts[j] == 0:
                shifts[j] = j - i
            # try the next narrower border
            j = border[j]
        i -= 1
        j -= 1
        border[i] = j

    # 2) remaining slots use the widest border of the whole pattern,
    # switching to the next narrower one once the suffix gets shorter than it
    j = border[0]
    for i in range(m + 1):
        if shifts[i] == 0:
            shifts[i] = j
        if i == j:
            j = border[j]

    return border, shifts
