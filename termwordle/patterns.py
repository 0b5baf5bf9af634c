"""
patterns.py

Per-letter feedback for a guess against the secret word.

Each position of a guess is classified as:

    0 = absent   (letter not in the word)
    1 = present  (letter in the word, wrong slot)
    2 = correct  (letter in the right slot)

The integer values double as base-3 digits, so a whole feedback row can be
packed into a single pattern code. Pattern codes are what the hint tracker
buckets candidates by.
"""

from collections import Counter
from enum import IntEnum

import numpy as np


class LetterResult(IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


def evaluate(secret: str, guess: str, duplicates: bool = False) -> list[LetterResult]:
    """
    Classify every letter of `guess` against `secret`.

    With the default rules a letter is PRESENT whenever the secret contains
    it anywhere, so a repeated guess letter is marked PRESENT on every copy.

    With `duplicates=True` standard Wordle duplicate-letter rules apply:

    1. First mark correct letters. Each one consumes one instance of that
       letter from the secret.

    2. Then mark present letters left to right, only while unused instances
       of that letter remain in the secret.
    """
    if len(guess) != len(secret):
        raise ValueError(
            f"guess has {len(guess)} letters but the word has {len(secret)}"
        )

    if not duplicates:
        return [
            LetterResult.CORRECT if g == s
            else LetterResult.PRESENT if g in secret
            else LetterResult.ABSENT
            for g, s in zip(guess, secret)
        ]

    result = [LetterResult.ABSENT] * len(secret)
    counts = Counter(secret)

    # First pass: mark correct letters and consume them
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            result[i] = LetterResult.CORRECT
            counts[g] -= 1

    # Second pass: mark present letters where copies remain unused
    for i, g in enumerate(guess):
        if result[i] == LetterResult.ABSENT and counts[g] > 0:
            result[i] = LetterResult.PRESENT
            counts[g] -= 1

    return result


def encode_pattern(results) -> int:
    """Pack a feedback row into a base-3 integer, first letter most significant."""
    code = 0
    for r in results:
        code = code * 3 + int(r)
    return code


def decode_pattern(code: int, length: int) -> list[LetterResult]:
    """Inverse of encode_pattern for a word of the given length."""
    if code < 0 or code >= 3**length:
        raise ValueError(f"pattern code {code} out of range for length {length}")

    digits = []
    for _ in range(length):
        code, digit = divmod(code, 3)
        digits.append(LetterResult(digit))
    return digits[::-1]


def pattern_row(guess: str, candidates: list[str], duplicates: bool = False) -> np.ndarray:
    """
    Pattern code of `guess` against every candidate secret.

    Candidates must all have the same length as the guess. The result is an
    int64 array aligned with `candidates`.
    """
    row = np.zeros(len(candidates), dtype=np.int64)
    for j, candidate in enumerate(candidates):
        row[j] = encode_pattern(evaluate(candidate, guess, duplicates))
    return row
