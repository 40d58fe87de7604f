from helpers.naive_diff import (
    NaiveLCS,
    is_subsequence,
    lcs,
    lcs_length,
    min_modifications,
)


__all__ = [
    "NaiveLCS",
    "is_subsequence",
    "lcs",
    "lcs_length",
    "min_modifications",
]
