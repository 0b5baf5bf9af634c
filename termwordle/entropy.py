"""
entropy.py

Hint calculations: how much a guess narrowed down the word pool.
"""

import numpy as np

from termwordle.patterns import encode_pattern, pattern_row


def entropy_from_counts(counts):
    """Compute Shannon entropy from bucket counts."""
    total = counts.sum()
    if total == 0:
        return 0.0
    probs = counts[counts > 0] / total
    return float(-np.sum(probs * np.log2(probs)))


def single_guess_entropy(matrix_row):
    """Entropy of one guess across all remaining candidates."""
    counts = np.bincount(matrix_row)
    return entropy_from_counts(counts)


class CandidateTracker:
    """
    Keeps the pool of words still consistent with every piece of feedback.

    Only words with the same length as the secret take part, since no other
    word could ever be the answer.
    """

    def __init__(self, words, length: int, duplicates: bool = False):
        self.duplicates = duplicates
        self.candidates = sorted({w for w in words if len(w) == length})

    @property
    def remaining(self) -> int:
        return len(self.candidates)

    def update(self, guess: str, results):
        """
        Filter the pool by the feedback for `guess`.

        Returns (bits, remaining): the expected information of the guess over
        the pool before filtering, and the pool size after it.
        """
        if not self.candidates:
            return 0.0, 0

        row = pattern_row(guess, self.candidates, self.duplicates)
        bits = single_guess_entropy(row)
        keep = row == encode_pattern(results)
        self.candidates = [w for w, k in zip(self.candidates, keep) if k]
        return bits, self.remaining
