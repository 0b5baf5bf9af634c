"""
wordle.py

Wordle clone for the terminal.
Uses the internal word list by default.

Word source (first match wins):
-word WORD: play a specific word.
-list-file PATH: pick a random word from a file, split on -separator.
otherwise: pick a random word from the bundled list.

Optional:
-guesses N: number of guesses available (default: 6).
-duplicates: count repeated letters like the official game, so a letter is
  only marked present as many times as it occurs in the word.
-hints: after each guess, show how many words are still possible.
-no-color: plain text tiles, [x] correct and (x) present.
-debug: print diagnostic lines, including the secret word.
"""

import argparse
import sys

from termwordle.entropy import CandidateTracker
from termwordle.game import DEFAULT_GUESSES, play
from termwordle.render import Renderer
from termwordle.words import load_builtin_words, load_word_list, resolve_word


SEPARATOR_ESCAPES = {"\\n": "\n", "\\t": "\t", "\\r\\n": "\r\n"}


def positive_int(value):
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {value}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return number


def unescape_separator(value):
    return SEPARATOR_ESCAPES.get(value, value)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Wordle clone for the terminal. Uses the internal word list by default."
    )
    parser.add_argument(
        "-word",
        default=None,
        help="Specific word to use.",
    )
    parser.add_argument(
        "-list-file",
        default=None,
        help="Path to a word list file.",
    )
    parser.add_argument(
        "-separator",
        type=unescape_separator,
        default="\n",
        help="Word separator for the word list (default: newline).",
    )
    parser.add_argument(
        "-guesses",
        type=positive_int,
        default=DEFAULT_GUESSES,
        help=f"Amount of guesses available (default: {DEFAULT_GUESSES}).",
    )
    parser.add_argument(
        "-duplicates",
        action="store_true",
        help="Only mark a letter present as many times as it occurs in the word.",
    )
    parser.add_argument(
        "-hints",
        action="store_true",
        help="Show how many words are still possible after each guess.",
    )
    parser.add_argument(
        "-no-color",
        action="store_true",
        help="Plain text output without ANSI colours.",
    )
    parser.add_argument(
        "-debug",
        action="store_true",
        help="Print debug information, including the secret word.",
    )
    return parser.parse_args(argv)


def build_tracker(args, secret):
    if args.list_file:
        pool = load_word_list(args.list_file, args.separator)
    else:
        pool = load_builtin_words()
    return CandidateTracker(pool + [secret], len(secret), args.duplicates)


def main(argv=None, read_guess=input):
    args = parse_args(argv)
    renderer = Renderer(color=not args.no_color and sys.stdout.isatty(), debug=args.debug)
    renderer.debug("Debug mode is enabled")

    try:
        secret, source = resolve_word(args.word, args.list_file, args.separator)
        tracker = build_tracker(args, secret) if args.hints else None
    except (OSError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc

    renderer.debug(f"Word source: {source}")

    try:
        play(
            secret,
            args.guesses,
            read_guess=read_guess,
            renderer=renderer,
            duplicates=args.duplicates,
            tracker=tracker,
        )
    except (EOFError, KeyboardInterrupt):
        print(f'\nGame aborted. The word was "{secret}".')
        raise SystemExit(1)


if __name__ == "__main__":
    main()
