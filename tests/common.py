from typing import List

from hypothesis import strategies as st

# Small alphabets make repeats, borders and overlapping matches likely
small_text = st.text(alphabet="AB", max_size=40)
small_pattern = st.text(alphabet="AB", min_size=1, max_size=6)
abc_text = st.text(alphabet="ABC", max_size=60)
abc_pattern = st.text(alphabet="ABC", min_size=1, max_size=8)


def naive_find(text, pattern) -> List[int]:
    m = len(pattern)
    return [i for i in range(len(text) - m + 1) if text[i:i + m] == pattern]


def brute_force_good_suffix(pattern) -> List[int]:
    """Smallest shift for every slot, straight from the strong good suffix rule."""
    m = len(pattern)
    shifts = []
    for k in range(m + 1):
        for s in range(1, m + 1):
            suffix_ok = all(pattern[p - s] == pattern[p] for p in range(k, m) if p - s >= 0)
            if k == 0:
                mismatch_ok = True
            else:
                mismatch_ok = k - 1 - s < 0 or pattern[k - 1 - s] != pattern[k - 1]
            if suffix_ok and mismatch_ok:
                shifts.append(s)
                break
    return shifts
