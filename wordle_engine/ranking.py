"""
ranking.py

Scores every dictionary word as a next guess against the current
candidate set and orders the results.

Ordering is entropy descending, then word ascending, so the top
suggestion is reproducible when several guesses split the candidates
equally well.
"""

from collections import namedtuple

import numba
import numpy as np
from tqdm import tqdm

from .entropy import single_guess_entropy
from .patterns import pattern_matrix
from .words import normalize_words


TOP_STRATEGIC = 10
TOP_ANSWERS = 20

# Guess rows per pattern-matrix block; bounds memory for large dictionaries.
RANK_CHUNK_ROWS = 512


RankedWord = namedtuple("RankedWord", ["word", "entropy", "bits"])


def set_workers(workers):
    """Set the number of threads the parallel pattern kernel may use."""
    workers = max(1, min(int(workers), numba.config.NUMBA_NUM_THREADS))
    numba.set_num_threads(workers)
    return workers


def _ranked(word, entropy):
    return RankedWord(word, entropy, round(entropy, 2))


def _sort_key(item):
    return (-item.entropy, item.word)


def compute_entropies(dictionary, candidates, progress=False, chunk_size=RANK_CHUNK_ROWS):
    """
    Entropy of every dictionary word against the candidates, in
    dictionary order, as a float array.

    Both lists must be normalised to the same length already.
    """
    n_words = len(dictionary)
    entropies = np.zeros(n_words, dtype=np.float64)
    if len(candidates) <= 1 or n_words == 0:
        return entropies

    starts = range(0, n_words, chunk_size)
    if progress:
        print(f"Scoring {n_words:,} guesses against {len(candidates):,} candidates...")
        starts = tqdm(starts, desc="Guess blocks", unit="block")

    for start in starts:
        block = pattern_matrix(dictionary[start:start + chunk_size], candidates)
        for offset in range(block.shape[0]):
            entropies[start + offset] = single_guess_entropy(block[offset])

    return entropies


def rank_words(dictionary, candidates, progress=False, chunk_size=RANK_CHUNK_ROWS):
    """
    Rank every dictionary word by expected information against the
    candidates.

    Returns one RankedWord per dictionary word, best first. A dictionary
    word whose length differs from the candidates raises
    LengthMismatchError naming that word; callers decide whether to drop
    it and retry.
    """
    candidates = normalize_words(candidates)
    length = len(candidates[0]) if candidates else None
    dictionary = normalize_words(dictionary, length)

    entropies = compute_entropies(
        dictionary, candidates, progress=progress, chunk_size=chunk_size
    )
    results = [_ranked(word, float(h)) for word, h in zip(dictionary, entropies)]
    results.sort(key=_sort_key)
    return results


def top_words(dictionary, candidates, n=TOP_STRATEGIC, progress=False):
    return rank_words(dictionary, candidates, progress=progress)[:n]


def advise(
    dictionary,
    candidates,
    strategic_n=TOP_STRATEGIC,
    answers_n=TOP_ANSWERS,
    progress=False,
):
    """
    Bundle everything needed to pick the next guess.

    strategic: best information-gathering guesses from the whole dictionary
    possible_answers: remaining candidates ranked among themselves
    solved: exactly one candidate is left
    """
    candidates = normalize_words(candidates)
    return {
        "candidates": candidates,
        "strategic": top_words(dictionary, candidates, strategic_n, progress=progress),
        "possible_answers": top_words(candidates, candidates, answers_n),
        "solved": len(candidates) == 1,
    }
