"""
entropy.py

Contains entropy calculations for a single guess against a candidate set.
"""

from collections import Counter
import math

import numpy as np

from .patterns import encode_pattern


# Pattern rows whose codes all fall below this are tallied with bincount;
# larger pattern spaces (long words) are tallied by sorting instead.
BINCOUNT_LIMIT = 3**10


def entropy_from_counts(counts):
    """
    Compute Shannon entropy from bucket counts.

    Counts are sorted before summing so two guesses that split the
    candidates into the same bucket sizes get bit-identical entropies.
    """
    counts = np.asarray(counts, dtype=np.float64)
    counts = np.sort(counts[counts > 0])
    total = counts.sum()
    if total == 0:
        return 0.0
    probs = counts / total
    return max(0.0, float(-np.sum(probs * np.log2(probs))))


def single_guess_entropy(matrix_row):
    """Entropy of one guess across all candidates of a pattern-matrix row."""
    if matrix_row.size <= 1:
        return 0.0
    if int(matrix_row.max()) < BINCOUNT_LIMIT:
        counts = np.bincount(matrix_row)
    else:
        _, counts = np.unique(matrix_row, return_counts=True)
    return entropy_from_counts(counts)


def pattern_distribution(guess, candidates) -> dict[int, int]:
    """Number of candidates falling under each pattern code for this guess."""
    return dict(Counter(encode_pattern(guess, cand) for cand in candidates))


def guess_entropy(guess, candidates) -> float:
    """
    Expected bits of information from guessing `guess` when the answer is
    drawn uniformly from `candidates`.

    With one candidate or none there is nothing left to learn, so the
    result is 0.0 without comparing anything.
    """
    if len(candidates) <= 1:
        return 0.0
    return entropy_from_counts(list(pattern_distribution(guess, candidates).values()))


def expected_remaining(guess, candidates) -> float:
    """Expected candidate count left after the guess (lower is better)."""
    if len(candidates) <= 1:
        return 0.0
    dist = pattern_distribution(guess, candidates)
    total = len(candidates)
    return sum(count * count for count in dist.values()) / total


def max_entropy(n_candidates):
    """Upper bound on entropy: every candidate lands in its own bucket."""
    if n_candidates <= 1:
        return 0.0
    return math.log2(n_candidates)


def explain_entropy(bits):
    if bits == 0:
        return "No information gain - only one possibility remains"
    if bits < 1:
        return "Low information gain - eliminates few possibilities"
    if bits < 2:
        return "Moderate information gain - roughly halves possibilities"
    if bits < 3:
        return "Good information gain - reduces possibilities significantly"
    if bits < 4:
        return "High information gain - eliminates many possibilities"
    return "Excellent information gain - maximum uncertainty reduction"
