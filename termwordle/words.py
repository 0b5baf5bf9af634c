"""
words.py

Handles picking the secret word: an explicit word, a random entry from a
user-supplied list, or a random entry from the bundled list.
No numpy here, just clean text handling.
"""

import random
from pathlib import Path


DATA_DIR = Path(__file__).resolve().parent / "data"
WORDS_PATH = DATA_DIR / "words.txt"


class WordSourceError(ValueError):
    """Raised when a word source yields nothing to play with."""


def load_word_list(path, separator="\n"):
    """Load a separator-delimited word list, skipping blank entries."""
    if not separator:
        raise ValueError("separator must not be empty")

    with open(path, "r", encoding="utf-8") as f:
        raw = f.read()

    words = [entry.strip() for entry in raw.split(separator) if entry.strip()]
    if not words:
        raise WordSourceError(f"no words found in {path}")
    return words


def load_builtin_words():
    """The bundled newline-separated word list."""
    return load_word_list(WORDS_PATH)


def choose_word(words, rng=random):
    if not words:
        raise WordSourceError("cannot choose from an empty word list")
    return rng.choice(words)


def resolve_word(word=None, list_file=None, separator="\n", rng=random):
    """
    Returns:
        secret: the word to play
        source: short label of where it came from

    An explicit word wins over a list file, which wins over the bundled list.
    """
    if word:
        return word, "given word"

    if list_file:
        return choose_word(load_word_list(list_file, separator), rng), "external word list"

    return choose_word(load_builtin_words(), rng), "internal word list"
