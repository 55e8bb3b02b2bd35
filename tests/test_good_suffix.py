from common import brute_force_good_suffix
from hypothesis import given, strategies as st

from bmsearch import build_good_suffix_table, compute_border_positions


def test_textbook_table_for_ab():
    assert build_good_suffix_table("AB") == [2, 2, 1]


def test_periodic_pattern():
    assert build_good_suffix_table("ABAB") == [2, 2, 2, 4, 1]
    assert compute_border_positions("ABAB") == [2, 3, 4, 4, 5]


def test_repeated_symbol():
    assert build_good_suffix_table("AA") == [1, 1, 2]


def test_single_symbol():
    assert build_good_suffix_table("A") == [1, 1]


def test_empty_pattern():
    assert build_good_suffix_table("") == [0]


def test_no_internal_repetition_shifts_past_the_pattern():
    shifts = build_good_suffix_table("ABCD")
    # a full match or any matched suffix moves the whole pattern on
    assert shifts[:4] == [4, 4, 4, 4]
    assert shifts[4] == 1


def test_works_on_symbol_values():
    assert build_good_suffix_table([0, 1]) == build_good_suffix_table("AB")


@given(st.text(alphabet="AB", max_size=12))
def test_table_has_m_plus_one_positive_entries(pattern):
    shifts = build_good_suffix_table(pattern)
    assert len(shifts) == len(pattern) + 1
    if pattern:
        assert all(1 <= s <= len(pattern) for s in shifts)


@given(st.text(alphabet="ABC", min_size=1, max_size=10))
def test_equals_strong_good_suffix_rule(pattern):
    assert build_good_suffix_table(pattern) == brute_force_good_suffix(pattern)


@given(st.text(alphabet="AB", min_size=1, max_size=10))
def test_full_match_shift_is_the_period(pattern):
    m = len(pattern)
    period = min(p for p in range(1, m + 1) if pattern[p:] == pattern[:m - p])
    assert build_good_suffix_table(pattern)[0] == period
    assert compute_border_positions(pattern)[0] == period
