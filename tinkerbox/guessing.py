"""Guess-the-number game played over lines of input."""

from __future__ import annotations

import argparse
import random
import re
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass

LOWEST = 1
HIGHEST = 100

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Guess:
    """A player's guess.

    A value outside 1..100 is still accepted, but a warning is written to
    standard error.
    """

    value: int

    def __post_init__(self) -> None:
        if not LOWEST <= self.value <= HIGHEST:
            print(
                f"Guess value must be between {LOWEST} and {HIGHEST}, got {self.value}.\n",
                file=sys.stderr,
            )


def _parse_guess_value(line: str) -> int | None:
    text = line.strip()
    if not _INTEGER.fullmatch(text):
        return None
    number = int(text)
    if not _I32_MIN <= number <= _I32_MAX:
        return None
    return number


def judge(value: int, secret: int) -> str:
    """Return the reply to a guess: ``Less!``, ``Greater!`` or ``Correct!``."""
    if value < secret:
        return "Less!"
    if value > secret:
        return "Greater!"
    return "Correct!"


def play(lines: Iterable[str], secret: int, write: Callable[[str], object]) -> bool:
    """Play one game, reading guesses from ``lines`` and passing replies to ``write``.

    Lines that are not integers are skipped. Returns True once the secret is
    guessed, False if the input runs out first.
    """
    for line in lines:
        value = _parse_guess_value(line)
        if value is None:
            continue
        guess = Guess(value)
        reply = judge(guess.value, secret)
        write(reply)
        if guess.value == secret:
            return True
    return False


def main(argv: list[str] | None = None) -> int:
    """Play guess-the-number on standard input."""
    parser = argparse.ArgumentParser(description="Guess a number between 1 and 100.")
    parser.parse_args(argv)

    print("Guess the number!")
    secret = random.randint(LOWEST, HIGHEST)
    return 0 if play(sys.stdin, secret, print) else 1


if __name__ == "__main__":
    raise SystemExit(main())