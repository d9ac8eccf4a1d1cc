from .scoring import GREEN, YELLOW, GRAY, compute_clue, pattern_key, all_green, is_solved, to_letters
from .partition import partition, select_largest, worst_bucket
from .constraints import filter_candidates
from .validation import guess_problem

__all__ = [
    "GREEN", "YELLOW", "GRAY",
    "compute_clue", "pattern_key", "all_green", "is_solved", "to_letters",
    "partition", "select_largest", "worst_bucket",
    "filter_candidates", "guess_problem",
]
