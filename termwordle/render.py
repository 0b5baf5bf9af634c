"""
render.py

Terminal output for the game: coloured letter tiles and status lines.
Classification happens in patterns.py; this module only draws it.
"""

import sys

from termwordle.patterns import LetterResult


RESET = "\033[0m"
BOLD = "\033[1m"
FG_WHITE = "\033[97m"
BG_RED = "\033[41m"

TILE_BACKGROUNDS = {
    LetterResult.CORRECT: "\033[42m",          # green
    LetterResult.PRESENT: "\033[48;5;208m",    # orange
    LetterResult.ABSENT: "\033[100m",          # grey
}


def plain_tile(letter, result):
    if result == LetterResult.CORRECT:
        return f"[{letter}]"
    if result == LetterResult.PRESENT:
        return f"({letter})"
    return letter


def color_tile(letter, result):
    return f"{FG_WHITE}{TILE_BACKGROUNDS[result]}{BOLD}{letter}{RESET}"


class Renderer:
    """Writes game output to a text stream, with or without ANSI styling."""

    def __init__(self, color=True, debug=False, stream=None):
        self.color = color
        self.debug_enabled = debug
        self.stream = stream if stream is not None else sys.stdout

    def _print(self, text=""):
        print(text, file=self.stream)

    def debug(self, text):
        if not self.debug_enabled:
            return
        if self.color:
            self._print(f"{FG_WHITE}{BG_RED}{text}{RESET}")
        else:
            self._print(f"[debug] {text}")

    def intro(self, length, guesses):
        self._print(
            f"The word has {length} letters, and you have {guesses} guesses. Good luck!"
        )

    def prompt(self):
        return "Your guess: "

    def clear_input_line(self):
        """Replace the echoed guess line with what comes next."""
        if not self.color:
            return
        self.stream.write("\033[1A\033[J")
        self.stream.flush()

    def length_mismatch(self, expected, got):
        self._print(
            f"The word has {expected} letters, but your guess had {got}... 👀"
        )

    def tiles(self, guess, results):
        draw = color_tile if self.color else plain_tile
        self._print("".join(draw(letter, r) for letter, r in zip(guess, results)))

    def hint(self, bits, remaining):
        noun = "word" if remaining == 1 else "words"
        self._print(f"  {bits:.2f} bits of information, {remaining} {noun} still possible")

    def won(self, used, guesses):
        if used == 1:
            self._print(" Holy 🐮, you got it on the first try! 🍀")
        else:
            self._print(f"You got it in {used} guesses out of {guesses}!\n Well done! 🥳")

    def lost(self, secret):
        self._print(f'The word was "{secret}"!\n Better luck next time. 😔')
