"""
game.py

The turn-by-turn game: a small state machine that accepts guesses, scores
them and decides between win, loss and another round.

Guesses of the wrong length are free: they are reported and ignored without
using up any of the budget.
"""

from dataclasses import dataclass, field
from enum import Enum

from termwordle.patterns import LetterResult, evaluate
from termwordle.render import Renderer


DEFAULT_GUESSES = 6


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class GameOverError(RuntimeError):
    """Raised when a guess is submitted to a game that has already ended."""


@dataclass
class GameState:
    secret: str
    budget: int
    guesses_remaining: int
    outcome: Outcome = Outcome.IN_PROGRESS

    @property
    def guesses_used(self) -> int:
        return self.budget - self.guesses_remaining

    @property
    def finished(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS

    @property
    def first_try(self) -> bool:
        return self.outcome is Outcome.WON and self.guesses_used == 1


@dataclass
class TurnResult:
    guess: str
    accepted: bool
    results: list[LetterResult] = field(default_factory=list)
    outcome: Outcome = Outcome.IN_PROGRESS


class Game:
    def __init__(self, secret: str, guesses: int = DEFAULT_GUESSES, duplicates: bool = False):
        if not secret:
            raise ValueError("secret word must not be empty")
        if isinstance(guesses, bool) or not isinstance(guesses, int) or guesses < 1:
            raise ValueError(f"guess budget must be a positive integer, got {guesses!r}")

        self.duplicates = duplicates
        self.state = GameState(secret=secret, budget=guesses, guesses_remaining=guesses)

    def submit(self, guess: str) -> TurnResult:
        """
        Play one guess.

        A guess whose length differs from the secret is rejected with
        accepted=False and leaves the state untouched. Any other guess is
        scored and costs exactly one unit of budget.
        """
        state = self.state
        if state.finished:
            raise GameOverError(f"game is already {state.outcome.value}")

        if len(guess) != len(state.secret):
            return TurnResult(guess=guess, accepted=False, outcome=state.outcome)

        results = evaluate(state.secret, guess, self.duplicates)
        state.guesses_remaining -= 1

        if guess == state.secret:
            state.outcome = Outcome.WON
        elif state.guesses_remaining == 0:
            state.outcome = Outcome.LOST

        return TurnResult(guess=guess, accepted=True, results=results, outcome=state.outcome)


def play(secret, guesses=DEFAULT_GUESSES, read_guess=input, renderer=None,
         duplicates=False, tracker=None):
    """
    Run a full game to completion and return its final GameState.

    `read_guess` is called with the prompt text and must block until the
    player enters a line. `tracker`, when given, is a CandidateTracker whose
    narrowing is reported after every scored guess.
    """
    if renderer is None:
        renderer = Renderer()

    game = Game(secret, guesses, duplicates)
    renderer.debug(f"The word is: {secret}")
    renderer.intro(len(secret), guesses)

    while not game.state.finished:
        guess = read_guess(renderer.prompt()).strip()
        renderer.clear_input_line()

        turn = game.submit(guess)
        if not turn.accepted:
            renderer.length_mismatch(len(secret), len(guess))
            continue

        renderer.tiles(guess, turn.results)
        if tracker is not None:
            bits, remaining = tracker.update(guess, turn.results)
            renderer.hint(bits, remaining)

    state = game.state
    if state.outcome is Outcome.WON:
        renderer.won(state.guesses_used, state.budget)
    else:
        renderer.lost(state.secret)
    return state
