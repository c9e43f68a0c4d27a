import itertools

import pytest

from wordle_engine.constraints import (
    Constraints,
    apply_constraints,
    constraints_from_feedback,
    filter_by_history,
    filter_words,
    matches_constraints,
)
from wordle_engine.patterns import encode_pattern, parse_pattern


WORDS = [
    "CRANE", "SLATE", "TRACE", "CRATE", "SPEED", "ERASE", "THESE", "THOSE",
    "GEESE", "ABBEY", "KEBAB", "EASEL", "STEEL", "SHEET", "LEASE", "TEASE",
]


def test_green_constraint():
    assert filter_words(WORDS, {0: "C"}, {}, "") == ["CRANE", "CRATE"]


def test_yellow_requires_letter_away_from_excluded_positions():
    result = filter_words(WORDS, {}, {"S": [0]}, "")
    assert result == ["ERASE", "THESE", "THOSE", "GEESE", "EASEL", "LEASE", "TEASE"]


def test_gray_excludes_letter_everywhere():
    result = filter_words(WORDS, {}, {}, "EA")
    assert result == []
    assert filter_words(["CRANE", "THOSE", "SPOOK"], {}, {}, "E") == ["SPOOK"]


def test_all_three_constraints_together():
    result = filter_words(WORDS, {4: "E"}, {"A": [1]}, "CT")
    assert result == ["ERASE", "LEASE"]


def test_lowercase_constraints_are_normalised():
    assert filter_words(WORDS, {0: "c"}, {"t": [4]}, "n") == ["CRATE"]


def test_out_of_range_positions_are_ignored():
    assert filter_words(WORDS, {9: "Z", -1: "Q"}, {"C": [7, -3]}, "") == ["CRANE", "TRACE", "CRATE"]


def test_filter_preserves_order_and_input():
    words = list(reversed(WORDS))
    snapshot = list(words)
    result = filter_words(words, {}, {"E": []}, "")
    assert words == snapshot
    assert result == [w for w in words if "E" in w]
    assert result is not words


def test_filtering_is_idempotent():
    once = filter_words(WORDS, {4: "E"}, {"S": [0]}, "C")
    twice = filter_words(once, {4: "E"}, {"S": [0]}, "C")
    assert once == twice


def test_count_bounds():
    assert matches_constraints("GEESE", {}, {}, "", min_counts={"E": 3})
    assert not matches_constraints("THESE", {}, {}, "", min_counts={"E": 3})
    assert not matches_constraints("GEESE", {}, {}, "", max_counts={"E": 2})


def test_plain_gray_bucket_rejects_repeated_letter_answer():
    # GEESE vs THESE marks the second E absent; a plain gray E rejects THESE itself
    assert filter_words(["THESE"], {2: "E", 3: "S", 4: "E"}, {}, "GE") == []


def test_derived_constraints_keep_repeated_letter_answer():
    code = encode_pattern("GEESE", "THESE")
    constraints = constraints_from_feedback([("GEESE", code)])
    assert constraints.gray == frozenset("G")
    assert constraints.min_counts["E"] == 2
    assert constraints.max_counts["E"] == 2
    assert apply_constraints(["THESE", "THOSE", "GEESE"], constraints) == ["THESE"]


def test_derived_constraints_for_speed_erase():
    constraints = constraints_from_feedback([("SPEED", parse_pattern("YBYYB"))])
    assert constraints == Constraints(
        green={},
        yellow={"S": (0,), "E": (2, 3)},
        gray=frozenset("PD"),
        min_counts={"S": 1, "E": 2},
        max_counts={},
    )
    assert "ERASE" in apply_constraints(WORDS, constraints)


def test_derived_constraints_agree_with_pattern_replay():
    for guess, target in itertools.product(WORDS, repeat=2):
        history = [(guess, encode_pattern(guess, target))]
        derived = apply_constraints(WORDS, constraints_from_feedback(history))
        assert derived == filter_by_history(WORDS, history), (guess, target)


def test_history_accumulates():
    target = "EASEL"
    history = [(g, encode_pattern(g, target)) for g in ("CRANE", "STEEL")]
    result = apply_constraints(WORDS, constraints_from_feedback(history))
    assert target in result
    assert result == filter_by_history(WORDS, history)


def test_filter_by_history_output_is_subset():
    history = [("CRANE", encode_pattern("CRANE", "TRACE"))]
    result = filter_by_history(WORDS, history)
    assert "TRACE" in result
    assert set(result) <= set(WORDS)


def test_gray_string_entries_mean_separate_letters():
    words = ["CRANE", "BRINK", "SPOIL", "ADOPT"]
    assert filter_words(words, {}, {}, ["RA"]) == ["SPOIL"]
    assert filter_words(words, {}, {}, ["r", "a"]) == ["SPOIL"]


def test_multi_letter_keys_are_rejected():
    with pytest.raises(ValueError):
        filter_words(WORDS, {}, {"RA": [1]}, "")
    with pytest.raises(ValueError):
        filter_words(WORDS, {0: "CR"}, {}, "")
    with pytest.raises(ValueError):
        matches_constraints("GEESE", {}, {}, "", min_counts={"EE": 1})
