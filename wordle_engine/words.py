"""
words.py

Word normalisation and word-list loading.
No numpy here, just clean text handling.
"""

from string import ascii_uppercase


ALPHABET = ascii_uppercase
ALPHABET_SIZE = len(ALPHABET)


class WordError(ValueError):
    """Base error for words that cannot be compared."""


class AlphabetError(WordError):
    """A word contains a character outside A-Z."""


class LengthMismatchError(WordError):
    """Two words (or a word and the game length) differ in length."""


def normalize_word(word: str) -> str:
    """Uppercase a word and check every letter is in the alphabet."""
    upper = word.strip().upper()
    for ch in upper:
        if ch not in ALPHABET:
            raise AlphabetError(f"unsupported character {ch!r} in word: {word}")
    return upper


def check_length(word: str, length: int) -> None:
    if len(word) != length:
        raise LengthMismatchError(
            f"word {word} has length {len(word)}, expected {length}"
        )


def normalize_words(words, length=None) -> list[str]:
    """
    Normalise a sequence of words and enforce a common length.

    If length is None the first word sets it. Raises on the first bad word.
    """
    result = []
    for word in words:
        upper = normalize_word(word)
        if length is None:
            length = len(upper)
        check_length(upper, length)
        result.append(upper)
    return result


def load_word_list(path):
    """Load a newline-separated word list into a Python list."""
    with open(path, "r") as f:
        return [line.strip() for line in f if line.strip()]


def load_dictionary(path, length):
    """
    Returns:
        words: uppercased words of the requested length, file order kept.

    Lines with the wrong length or non A-Z characters are dropped
    rather than raising, since public word lists are rarely clean.
    """
    words = []
    seen = set()
    for line in load_word_list(path):
        upper = line.upper()
        if len(upper) != length or not all(ch in ALPHABET for ch in upper):
            continue
        if upper in seen:
            continue
        seen.add(upper)
        words.append(upper)
    return words
