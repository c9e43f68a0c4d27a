"""
entropy_advisor.py

Command line advisor for a Wordle-style game.

Modes:
-dictionary PATH (default): narrow the candidates with any feedback given,
  then list the best information-gathering guesses and the most likely
  answers.
-entropy GUESS: score one guess against the current candidates.
-pattern GUESS TARGET: show the feedback a guess would get; no dictionary
  needed.
-openers: show precomputed starting words for -length; no dictionary needed.

Feedback:
-feedback GUESS PATTERN (repeatable): PATTERN uses G/Y/B (or 2/1/0), e.g.
  -feedback CRANE BYBBG. Letter counts are derived so repeated letters are
  handled exactly.
-green POS:LETTER, -yellow LETTER:POS,POS, -gray LETTERS: raw constraints,
  positions counted from 0.
"""

import argparse

from wordle_engine.constraints import (
    apply_constraints,
    constraints_from_feedback,
    filter_words,
)
from wordle_engine.entropy import (
    expected_remaining,
    explain_entropy,
    guess_entropy,
    max_entropy,
)
from wordle_engine.openers import DEFAULT_LENGTH, starting_words
from wordle_engine.patterns import encode_pattern, parse_pattern, pattern_to_symbols
from wordle_engine.ranking import TOP_ANSWERS, TOP_STRATEGIC, advise, set_workers
from wordle_engine.words import check_length, load_dictionary, normalize_word


def parse_green(items):
    green = {}
    for item in items or ():
        pos, sep, letter = item.partition(":")
        if not sep or len(letter) != 1:
            raise ValueError(f"green constraint must look like POS:LETTER, got: {item}")
        green[int(pos)] = normalize_word(letter)
    return green


def parse_yellow(items):
    yellow = {}
    for item in items or ():
        letter, sep, positions = item.partition(":")
        if len(letter) != 1:
            raise ValueError(f"yellow constraint must look like LETTER:POS,POS, got: {item}")
        letter = normalize_word(letter)
        excluded = yellow.setdefault(letter, [])
        if sep and positions:
            excluded.extend(int(p) for p in positions.split(","))
    return yellow


def parse_feedback(items, length):
    history = []
    for guess, pattern in items or ():
        guess = normalize_word(guess)
        if len(guess) != length or len(pattern) != length:
            raise ValueError(
                f"feedback {guess} {pattern} does not match word length {length}"
            )
        history.append((guess, parse_pattern(pattern)))
    return history


def narrow_candidates(words, args):
    candidates = words
    history = parse_feedback(args.feedback, args.length)
    if history:
        candidates = apply_constraints(candidates, constraints_from_feedback(history))

    green = parse_green(args.green)
    yellow = parse_yellow(args.yellow)
    gray = normalize_word(args.gray) if args.gray else ""
    if green or yellow or gray:
        candidates = filter_words(candidates, green, yellow, gray)

    return candidates


def run_pattern(guess, target):
    guess = normalize_word(guess)
    code = encode_pattern(guess, target)
    print(f"{guess} vs {normalize_word(target)}: {pattern_to_symbols(code, len(guess))} (code {code})")


def run_openers(length):
    print(f"Suggested starting words for length {length}:")
    for word in starting_words(length):
        print(f"  {word}")


def run_entropy(guess, candidates, length):
    guess = normalize_word(guess)
    check_length(guess, length)
    h = guess_entropy(guess, candidates)
    print(f"{guess}: {h:.4f} bits (max {max_entropy(len(candidates)):.4f})")
    print(f"Expected remaining candidates: {expected_remaining(guess, candidates):.2f}")
    print(explain_entropy(h))


def run_advice(words, candidates, top, answers, progress):
    result = advise(
        words, candidates, strategic_n=top, answers_n=answers, progress=progress
    )

    if result["solved"]:
        print(f"\nSolved: {result['candidates'][0]}")
        return

    print(f"\nTop {len(result['strategic'])} strategic guesses:")
    print("Legend: word [flag]: entropy bits")
    print("flag: [+] still a possible answer, [-] information only")
    candidate_set = set(result["candidates"])
    for ranked in result["strategic"]:
        flag = "+" if ranked.word in candidate_set else "-"
        print(f"{ranked.word} [{flag}]: {ranked.entropy:.4f} bits ({ranked.bits:.2f})")

    print(f"\nTop {len(result['possible_answers'])} possible answers:")
    for ranked in result["possible_answers"]:
        print(f"{ranked.word}: {ranked.entropy:.4f} bits ({ranked.bits:.2f})")


def parse_args():
    parser = argparse.ArgumentParser(
        description="Entropy-based guess advisor for Wordle-style games."
    )
    parser.add_argument(
        "-dictionary",
        type=str,
        default=None,
        help="Newline-separated word list; words of other lengths are skipped.",
    )
    parser.add_argument(
        "-length",
        type=int,
        default=DEFAULT_LENGTH,
        help=f"Word length of the game (default: {DEFAULT_LENGTH}).",
    )
    parser.add_argument(
        "-top",
        type=int,
        default=TOP_STRATEGIC,
        help=f"Number of strategic guesses to show (default: {TOP_STRATEGIC}).",
    )
    parser.add_argument(
        "-answers",
        type=int,
        default=TOP_ANSWERS,
        help=f"Number of possible answers to show (default: {TOP_ANSWERS}).",
    )
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "-pattern",
        nargs=2,
        metavar=("GUESS", "TARGET"),
        help="Show the feedback GUESS would get against TARGET.",
    )
    mode_group.add_argument(
        "-entropy",
        metavar="GUESS",
        help="Score one guess against the current candidates.",
    )
    mode_group.add_argument(
        "-openers",
        action="store_true",
        help="Show precomputed starting words for -length.",
    )
    parser.add_argument(
        "-feedback",
        nargs=2,
        action="append",
        metavar=("GUESS", "PATTERN"),
        help="Observed feedback, e.g. -feedback CRANE BYBBG. Repeatable.",
    )
    parser.add_argument(
        "-green",
        action="append",
        metavar="POS:LETTER",
        help="Letter fixed at a 0-based position. Repeatable.",
    )
    parser.add_argument(
        "-yellow",
        action="append",
        metavar="LETTER:POS,POS",
        help="Letter in the word but not at these 0-based positions. Repeatable.",
    )
    parser.add_argument(
        "-gray",
        type=str,
        default=None,
        metavar="LETTERS",
        help="Letters absent from the word.",
    )
    parser.add_argument(
        "-workers",
        type=int,
        default=None,
        help="Threads for the pattern kernel (default: all cores).",
    )
    parser.add_argument(
        "-progress",
        action="store_true",
        help="Show a progress bar while ranking.",
    )
    return parser, parser.parse_args()


def main():
    parser, args = parse_args()

    if args.workers is not None:
        print(f"Using {set_workers(args.workers)} worker thread(s).")

    if args.pattern is not None:
        try:
            run_pattern(*args.pattern)
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc
        return

    if args.openers:
        run_openers(args.length)
        return

    if args.dictionary is None:
        parser.error("-dictionary is required unless -pattern or -openers is given")

    words = load_dictionary(args.dictionary, args.length)
    if not words:
        raise SystemExit(f"no {args.length}-letter words found in {args.dictionary}")
    print(f"Loaded {len(words):,} words of length {args.length}.")

    try:
        candidates = narrow_candidates(words, args)
        print(f"{len(candidates):,} candidate(s) remain.")
        if not candidates:
            return

        if args.entropy is not None:
            run_entropy(args.entropy, candidates, args.length)
            return

        run_advice(words, candidates, args.top, args.answers, args.progress)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
