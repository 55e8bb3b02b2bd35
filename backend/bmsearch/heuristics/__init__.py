from .bad_character import build_bad_character_table
from .good_suffix import build_good_suffix_table, compute_border_positions

__all__ = [
    "build_bad_character_table",
    "build_good_suffix_table",
    "compute_border_positions",
]
