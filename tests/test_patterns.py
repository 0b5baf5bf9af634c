import numpy as np
import pytest

from termwordle.patterns import (
    LetterResult,
    decode_pattern,
    encode_pattern,
    evaluate,
    pattern_row,
)

C = LetterResult.CORRECT
P = LetterResult.PRESENT
A = LetterResult.ABSENT


def test_apply_against_apple():
    assert evaluate("apple", "apply") == [C, C, C, C, A]


def test_repeated_letter_marked_present_every_time():
    assert evaluate("apple", "allez") == [C, P, P, P, A]


def test_repeated_letter_with_duplicate_rules():
    assert evaluate("apple", "allez", duplicates=True) == [C, P, A, P, A]


def test_duplicate_rules_resolve_correct_before_present():
    assert evaluate("plant", "llama", duplicates=True) == [A, C, C, A, A]
    assert evaluate("plant", "llama") == [P, C, C, A, P]


def test_exact_match_is_all_correct():
    assert evaluate("crane", "crane") == [C] * 5


def test_no_common_letters():
    assert evaluate("crane", "zzzzz") == [A] * 5


def test_correct_iff_same_letter_in_same_slot():
    secret, guess = "abcde", "aecxb"
    results = evaluate(secret, guess)
    assert len(results) == len(secret)
    for i, r in enumerate(results):
        assert (r == C) == (guess[i] == secret[i])


def test_evaluate_is_pure():
    assert evaluate("apple", "paper") == evaluate("apple", "paper")


def test_case_sensitive():
    assert evaluate("apple", "APPLE") == [A] * 5


def test_length_mismatch_rejected():
    with pytest.raises(ValueError):
        evaluate("apple", "cat")


def test_encode_pattern():
    assert encode_pattern([A, A, A, A, A]) == 0
    assert encode_pattern([C, C, C, C, C]) == 242
    assert encode_pattern([A, A, A, A, P]) == 1
    assert encode_pattern([P, A, A, A, A]) == 81


def test_decode_pattern_inverts_encode():
    results = [C, P, A, P, A]
    assert decode_pattern(encode_pattern(results), 5) == results


def test_decode_pattern_out_of_range():
    with pytest.raises(ValueError):
        decode_pattern(243, 5)


def test_pattern_row():
    row = pattern_row("crane", ["crane", "zzzzz", "nacre"])
    assert isinstance(row, np.ndarray)
    assert row[0] == 242
    assert row[1] == 0
    assert row[2] == encode_pattern(evaluate("nacre", "crane"))
