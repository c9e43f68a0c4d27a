"""
constraints.py

Prunes a word list down to the words consistent with observed feedback.

Feedback accumulates into three kinds of constraint:

    green   position -> letter fixed there
    yellow  letter -> positions it is known not to occupy (but it occurs)
    gray    letters absent from the word entirely

The gray bucket cannot say "exactly one E": a guess with two Es against
an answer with one marks the second E absent, and putting E in gray would
then reject the answer itself. constraints_from_feedback() therefore also
derives per-letter minimum and maximum occurrence counts and only puts a
letter in gray when no feedback ever showed it in the word.
"""

from collections import Counter, namedtuple

from .patterns import ABSENT, EXACT, PRESENT, decode_pattern, encode_pattern
from .words import normalize_word


Constraints = namedtuple(
    "Constraints", ["green", "yellow", "gray", "min_counts", "max_counts"]
)


def _single_letter(letter):
    letter = normalize_word(letter)
    if len(letter) != 1:
        raise ValueError(f"constraint letter must be a single letter, got: {letter}")
    return letter


def _normalize_green(green):
    return {
        int(pos): _single_letter(letter)
        for pos, letter in (green or {}).items()
        if letter
    }


def _normalize_yellow(yellow):
    return {
        _single_letter(letter): tuple(int(p) for p in positions)
        for letter, positions in (yellow or {}).items()
    }


def _normalize_gray(gray):
    # A string such as "RA" means the letters R and A, never the substring
    return frozenset(ch for entry in (gray or ()) for ch in normalize_word(entry))


def _normalize_counts(counts):
    return {_single_letter(letter): n for letter, n in (counts or {}).items()}


def _letters_ok(word, green, yellow, gray, min_counts, max_counts):
    length = len(word)

    for pos, letter in green.items():
        # Positions outside the word carry no information
        if 0 <= pos < length and word[pos] != letter:
            return False

    for letter, excluded in yellow.items():
        if letter not in word:
            return False
        for pos in excluded:
            if 0 <= pos < length and word[pos] == letter:
                return False

    for letter in gray:
        if letter in word:
            return False

    if min_counts or max_counts:
        counts = Counter(word)
        for letter, low in min_counts.items():
            if counts[letter] < low:
                return False
        for letter, high in max_counts.items():
            if counts[letter] > high:
                return False

    return True


def matches_constraints(
    word, green, yellow, gray, min_counts=None, max_counts=None
) -> bool:
    """True if one word satisfies every active constraint."""
    return _letters_ok(
        word.upper(),
        _normalize_green(green),
        _normalize_yellow(yellow),
        _normalize_gray(gray),
        _normalize_counts(min_counts),
        _normalize_counts(max_counts),
    )


def filter_words(
    words, green, yellow, gray, min_counts=None, max_counts=None
) -> list[str]:
    """
    Keep the words that satisfy all constraints, preserving input order.

    Checks short-circuit per word in the order green, yellow, gray, then
    occurrence counts. Malformed positions (negative or past the end of
    the word) are ignored rather than raising. Green, yellow and count
    keys must be single letters; gray entries are split into letters.
    The input list is never modified; a new list is returned.
    """
    green = _normalize_green(green)
    yellow = _normalize_yellow(yellow)
    gray = _normalize_gray(gray)
    min_counts = _normalize_counts(min_counts)
    max_counts = _normalize_counts(max_counts)

    return [
        word
        for word in words
        if _letters_ok(word.upper(), green, yellow, gray, min_counts, max_counts)
    ]


def apply_constraints(words, constraints: Constraints) -> list[str]:
    return filter_words(
        words,
        constraints.green,
        constraints.yellow,
        constraints.gray,
        constraints.min_counts,
        constraints.max_counts,
    )


def constraints_from_feedback(history) -> Constraints:
    """
    Derive constraints from a sequence of (guess, pattern_code) pairs.

    For each guess, a letter marked exact or present n times occurs at
    least n times; if the same guess also marks it absent, it occurs
    exactly n times. Absent marks on such a letter only rule out that
    position.
    """
    green = {}
    yellow = {}
    seen_in_word = set()
    absent_letters = set()
    min_counts = {}
    max_counts = {}

    for guess, code in history:
        guess = normalize_word(guess)
        digits = decode_pattern(code, len(guess))

        marked = Counter()
        absent_here = set()
        for pos, (letter, digit) in enumerate(zip(guess, digits)):
            if digit == EXACT:
                green[pos] = letter
                marked[letter] += 1
            elif digit == PRESENT:
                yellow.setdefault(letter, set()).add(pos)
                marked[letter] += 1
            else:
                absent_here.add(letter)

        for letter, n in marked.items():
            seen_in_word.add(letter)
            min_counts[letter] = max(min_counts.get(letter, 0), n)

        for pos, (letter, digit) in enumerate(zip(guess, digits)):
            if digit == ABSENT and marked[letter]:
                yellow.setdefault(letter, set()).add(pos)

        for letter in absent_here:
            cap = marked[letter]
            max_counts[letter] = min(max_counts.get(letter, cap), cap)
            absent_letters.add(letter)

    gray = frozenset(absent_letters - seen_in_word)
    # Gray already rules these out; keep the count bounds for the rest
    max_counts = {k: v for k, v in max_counts.items() if k not in gray}

    return Constraints(
        green=green,
        yellow={letter: tuple(sorted(pos)) for letter, pos in yellow.items()},
        gray=gray,
        min_counts=min_counts,
        max_counts=max_counts,
    )


def filter_by_history(words, history) -> list[str]:
    """
    Keep the words that would have produced exactly the observed pattern
    for every past guess.
    """
    history = [(normalize_word(guess), code) for guess, code in history]
    return [
        word
        for word in words
        if all(encode_pattern(guess, word) == code for guess, code in history)
    ]
