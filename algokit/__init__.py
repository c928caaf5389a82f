"""Classic recursion, backtracking, sorting, subarray and hashing algorithms."""

__version__ = "0.1.0"

__all__ = [
    "board_search",
    "combinatorial",
    "hashtable",
    "recursion",
    "sorting",
    "subarrays",
    "wordplay",
]