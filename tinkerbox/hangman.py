"""Hangman: guess the secret word one letter at a time."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field

MAX_ERRORS = 7
SECRET_WORD = "floppa"


@dataclass
class Hangman:
    """State of one hangman game."""

    secret_word: str = SECRET_WORD
    max_errors: int = MAX_ERRORS
    guessed: list[str] = field(default_factory=list)
    tries: int = 0

    @property
    def tries_left(self) -> int:
        return self.max_errors - self.tries

    @property
    def hanged(self) -> bool:
        return self.tries == self.max_errors

    @property
    def won(self) -> bool:
        return all(c in self.guessed for c in self.secret_word)

    def guess(self, character: str) -> str | None:
        """Record a guess; return a message when it was a new wrong guess."""
        if character in self.guessed:
            return None
        self.guessed.append(character)
        if character not in self.secret_word:
            self.tries += 1
            return f"Incorrect guess! Tries left {self.tries_left}"
        return None

    def render(self) -> str:
        """Show guessed letters and a blank for each letter still hidden."""
        return "".join(f"{c} " if c in self.guessed else "_ " for c in self.secret_word)


def parse_guess(text: str) -> str:
    """Turn a line of input into a single lower-case character.

    Raises ``ValueError`` unless the trimmed input is exactly one byte long.
    """
    trimmed = text.strip().lower()
    if len(trimmed.encode("utf-8")) != 1:
        raise ValueError("Please enter a valid single character.")
    return trimmed


def _banner() -> str:
    return (
        "Welcome to hangman, Can you guess what the secret word is?\n"
        f"Max errors: {MAX_ERRORS}\n"
    )


def main(argv: list[str] | None = None) -> int:
    """Play hangman on standard input."""
    parser = argparse.ArgumentParser(description="Play hangman.")
    parser.parse_args(argv)

    print(_banner())
    game = Hangman()
    while True:
        print(game.render())
        print()
        while True:
            line = sys.stdin.readline()
            if not line:
                return 1
            try:
                character = parse_guess(line)
            except ValueError as err:
                print(err)
                continue
            break
        message = game.guess(character)
        if message is not None:
            print(message)
        if game.hanged:
            print("\nYou hanged, try again!")
            return 0
        if game.won:
            print(f"\nYou won! The Secret word was {game.secret_word}")
            return 0


if __name__ == "__main__":
    raise SystemExit(main())