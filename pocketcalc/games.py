"""Number guessing and rock-paper-scissors."""

from __future__ import annotations

import enum
import random
from typing import Callable

from pocketcalc.console import Console


class Move(enum.IntEnum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3


class Outcome(enum.Enum):
    TIE = "Its a TIE"
    WIN = "You WIN"
    LOSE = "You LOSE"


_BEATS = {
    Move.ROCK: Move.SCISSORS,
    Move.PAPER: Move.ROCK,
    Move.SCISSORS: Move.PAPER,
}


def decide(user: Move | int, computer: Move | int) -> Outcome:
    """Outcome of a round from the user's side."""
    user, computer = Move(user), Move(computer)
    if user == computer:
        return Outcome.TIE
    return Outcome.WIN if _BEATS[user] == computer else Outcome.LOSE


class GuessingGame:
    """Counts guesses at a hidden number and says whether each is too low or too high."""

    def __init__(self, answer: int, low: int = 1, high: int = 100) -> None:
        if low > high:
            raise ValueError(f"empty range {low} - {high}")
        if not low <= answer <= high:
            raise ValueError(f"answer {answer} is outside {low} - {high}")
        self.answer = answer
        self.low = low
        self.high = high
        self.tries = 0
        self.solved = False

    def guess(self, value: int) -> str:
        """Record a guess and return the hint for it."""
        self.tries += 1
        if value < self.answer:
            return "TOO LOW!"
        if value > self.answer:
            return "TOO HIGH!"
        self.solved = True
        return "CORRECT"


def _guessing(console: Console, rng: random.Random) -> int:
    low, high = 1, 100
    game = GuessingGame(rng.randint(low, high), low, high)
    console.write("NUMBER GUESSING GAME!\n")
    while not game.solved:
        value = console.read_int(f"Guess a Number between {low} - {high}: ")
        console.write(game.guess(value) + "\n")
    console.write(f"The answer is {game.answer}\n")
    console.write(f"The number of tries: {game.tries}")
    return 0


_RPS_MENU = (
    "Choose an Option\n"
    "1. ROCK\n"
    "1. PAPER\n"
    "1. SCISSORS\n"
    "Enter your choice: "
)


def _read_move(console: Console) -> Move:
    while True:
        choice = console.read_int(_RPS_MENU)
        if Move.ROCK <= choice <= Move.SCISSORS:
            return Move(choice)


def _rock_paper_scissors(console: Console, rng: random.Random) -> int:
    console.write("ROCK PAPER SCISSORS\n")
    user = _read_move(console)
    computer = Move(rng.randint(Move.ROCK, Move.SCISSORS))
    console.write(f"You chose {user.name}\n")
    console.write(f"Computer chose {computer.name}\n")
    console.write(decide(user, computer).value)
    return 0


_PROGRAMS: dict[str, Callable[[Console, random.Random], int]] = {
    "guess": _guessing,
    "rps": _rock_paper_scissors,
}


def run(program: str, console: Console, rng: random.Random | None = None) -> int:
    """Play the named game ("guess" or "rps") and return its exit status."""
    try:
        handler = _PROGRAMS[program]
    except KeyError:
        raise ValueError(f"unknown game: {program!r}") from None
    return handler(console, rng if rng is not None else random.Random())