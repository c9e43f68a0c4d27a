"""
patterns.py

Encodes Wordle feedback patterns, one at a time or as a full matrix.

Each pattern is an integer 0..3**L - 1 encoding the L-tile feedback in
base-3, first tile most significant:

    0 = absent (gray)
    1 = present elsewhere (yellow)
    2 = exact (green)

The matrix form lets ranking score thousands of guesses at once, since
every guess/answer pattern in a block is computed in one parallel pass.
"""

import numpy as np
from numba import njit, prange

from .words import ALPHABET_SIZE, LengthMismatchError, normalize_word, normalize_words


ABSENT = 0
PRESENT = 1
EXACT = 2

SYMBOLS = "BYG"
_SYMBOL_DIGITS = {
    "B": ABSENT,
    "K": ABSENT,
    "X": ABSENT,
    ".": ABSENT,
    "-": ABSENT,
    "0": ABSENT,
    "Y": PRESENT,
    "1": PRESENT,
    "G": EXACT,
    "2": EXACT,
}


def encode_pattern(guess: str, target: str) -> int:
    """
    Encode Wordle feedback for a (guess, target) pair as a base-3 integer.

    This implementation matches standard Wordle duplicate-letter rules:

    1. First mark exact matches (correct letter in correct position).
       Each exact match consumes one instance of that letter from the target.

    2. Then mark present letters only if unused instances of that letter
       remain in the target.

    Letter availability is tracked in one counter per alphabet letter, so
    there is no ceiling on word length.
    """
    guess = normalize_word(guess)
    target = normalize_word(target)
    if len(guess) != len(target):
        raise LengthMismatchError(
            f"cannot compare {guess} ({len(guess)} letters) "
            f"with {target} ({len(target)} letters)"
        )

    length = len(guess)
    result = [ABSENT] * length
    counts = [0] * ALPHABET_SIZE
    for ch in target:
        counts[ord(ch) - 65] += 1

    # First pass: mark exact matches and consume letters
    for i in range(length):
        if guess[i] == target[i]:
            result[i] = EXACT
            counts[ord(guess[i]) - 65] -= 1

    # Second pass: mark present letters where unused instances remain
    for i in range(length):
        if result[i] == ABSENT:
            idx = ord(guess[i]) - 65
            if counts[idx] > 0:
                result[i] = PRESENT
                counts[idx] -= 1

    # Convert base-3 digit list to a single integer code
    code = 0
    for r in result:
        code = code * 3 + r

    return code


def solved_pattern(length: int) -> int:
    """Code of the all-exact pattern for words of this length."""
    return 3**length - 1


def decode_pattern(code: int, length: int) -> list[int]:
    """Split a pattern code back into per-position digits, first tile first."""
    if code < 0 or code > solved_pattern(length):
        raise ValueError(f"pattern code {code} out of range for length {length}")
    digits = [ABSENT] * length
    for i in range(length - 1, -1, -1):
        code, digits[i] = divmod(code, 3)
    return digits


def pattern_to_symbols(code: int, length: int) -> str:
    """Render a pattern code as a G/Y/B string for display."""
    return "".join(SYMBOLS[d] for d in decode_pattern(code, length))


def parse_pattern(text: str) -> int:
    """
    Parse typed feedback into a pattern code.

    Accepts G/Y/B symbols (K, X, '.' and '-' also mean absent) or the
    digits 2/1/0.
    """
    cleaned = text.strip().upper()
    if not cleaned:
        raise ValueError("empty feedback pattern")
    code = 0
    for ch in cleaned:
        try:
            digit = _SYMBOL_DIGITS[ch]
        except KeyError as exc:
            raise ValueError(f"invalid feedback symbol {ch!r} in: {text}") from exc
        code = code * 3 + digit
    return code


def words_to_array(words) -> np.ndarray:
    """
    Convert equal-length uppercase words to an (n, L) array of letter
    indices 0..25 for the jitted kernel.
    """
    if not words:
        return np.zeros((0, 0), dtype=np.int64)
    length = len(words[0])
    raw = np.frombuffer("".join(words).encode("ascii"), dtype=np.uint8)
    return (raw.reshape(len(words), length) - ord("A")).astype(np.int64)


def pattern_dtype(length: int):
    """Smallest integer dtype that holds every pattern code for this length."""
    top = solved_pattern(length)
    if top <= np.iinfo(np.uint8).max:
        return np.uint8
    if top <= np.iinfo(np.uint16).max:
        return np.uint16
    if top <= np.iinfo(np.int32).max:
        return np.int32
    return np.int64


@njit(cache=True)
def _feedback_code(guess, answer, counts, marks):
    length = guess.shape[0]
    counts[:] = 0
    marks[:] = ABSENT

    for i in range(length):
        counts[answer[i]] += 1

    for i in range(length):
        if guess[i] == answer[i]:
            marks[i] = EXACT
            counts[guess[i]] -= 1

    for i in range(length):
        if marks[i] == ABSENT:
            c = guess[i]
            if counts[c] > 0:
                marks[i] = PRESENT
                counts[c] -= 1

    code = 0
    for i in range(length):
        code = code * 3 + marks[i]
    return code


@njit(parallel=True, cache=True)
def _fill_matrix(guess_chars, answer_chars, out):
    n_guesses = guess_chars.shape[0]
    n_answers = answer_chars.shape[0]
    length = guess_chars.shape[1]

    for i in prange(n_guesses):
        counts = np.zeros(26, dtype=np.int64)
        marks = np.zeros(length, dtype=np.int64)
        for j in range(n_answers):
            out[i, j] = _feedback_code(guess_chars[i], answer_chars[j], counts, marks)


def pattern_matrix(guesses, answers) -> np.ndarray:
    """
    Compute the pattern of every guess against every answer.

    Words are normalised first, so lowercase input is accepted and any
    word outside A-Z or of a different length raises before the kernel
    runs. Matrix shape:

        (len(guesses), len(answers))
    """
    guesses = normalize_words(guesses)
    answers = normalize_words(answers, len(guesses[0]) if guesses else None)
    guess_chars = words_to_array(guesses)
    answer_chars = words_to_array(answers)
    length = guess_chars.shape[1] if len(guesses) else answer_chars.shape[1]

    out = np.zeros((len(guesses), len(answers)), dtype=pattern_dtype(length))
    if out.size:
        _fill_matrix(guess_chars, answer_chars, out)
    return out
