import numpy as np
import pytest
from hypothesis import given, strategies as st

from bmsearch import SymbolOutOfRangeError, build_bad_character_table


def test_textbook_table_for_ab():
    table = build_bad_character_table([ord("A"), ord("B")])

    assert table[ord("A")] == 0
    assert table[ord("B")] == 1
    others = np.delete(table, [ord("A"), ord("B")])
    assert (others == -1).all()


def test_one_slot_per_symbol():
    assert len(build_bad_character_table([1, 2, 3], alphabet_size=256)) == 256
    assert len(build_bad_character_table([1, 2, 3], alphabet_size=4)) == 4


def test_empty_pattern_is_all_absent():
    table = build_bad_character_table([], alphabet_size=16)
    assert (table == -1).all()


def test_last_occurrence_wins():
    # "ABCAB"
    table = build_bad_character_table([0, 1, 2, 0, 1], alphabet_size=3)
    assert table.tolist() == [3, 4, 2]


def test_symbol_outside_table_is_rejected():
    with pytest.raises(SymbolOutOfRangeError) as excinfo:
        build_bad_character_table([0, 5], alphabet_size=4)

    assert excinfo.value.symbol == 5
    assert excinfo.value.position == 1
    assert excinfo.value.alphabet_size == 4


def test_negative_symbol_is_rejected_not_wrapped():
    with pytest.raises(SymbolOutOfRangeError) as excinfo:
        build_bad_character_table([-1], alphabet_size=4)

    assert excinfo.value.symbol == -1
    assert excinfo.value.position == 0


@given(st.lists(st.integers(0, 7), max_size=30))
def test_matches_last_index(pattern):
    table = build_bad_character_table(pattern, alphabet_size=8)
    for symbol in range(8):
        expected = max((i for i, s in enumerate(pattern) if s == symbol), default=-1)
        assert table[symbol] == expected
