"""Work with lists and strings: mapping, appending, trimming and composing text."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed-size tuple and a list that hold the same numbers."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Double every value by appending to a new list."""
    output: list[int] = []
    for element in values:
        output.append(element * 2)
    return output


def vec_map_example(values: Iterable[int]) -> list[int]:
    """Add one to every value."""
    return [element + 1 for element in values]


def vec_map(values: Iterable[int]) -> list[int]:
    """Double every value with a mapping."""
    return list(map(lambda element: element * 2, values))


def fill_vec(values: Iterable[int]) -> list[int]:
    """Return a new list with the given values followed by 88.

    The list passed in is left untouched.
    """
    return [*values, 88]


def last_char(data: str) -> str:
    """Return the last character of a non-empty string."""
    if not data:
        raise ValueError("cannot take the last character of an empty string")
    return data[-1]


def string_uppercase(data: str) -> str:
    return data.upper()


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Tell whether the word is one of the known colour words."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends of the text."""
    return text.strip()


def compose_me(text: str) -> str:
    return f"{text} world!"


def replace_me(text: str) -> str:
    return text.replace("cars", "balloons")


class CommandKind(enum.Enum):
    """What a command does to its string."""

    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A transformation to apply to a string.

    ``times`` is only meaningful for ``CommandKind.APPEND``: the number of
    times ``"bar"`` is appended.
    """

    kind: CommandKind
    times: int = 0

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError(f"append count must not be negative, got {self.times}")
        if self.kind is not CommandKind.APPEND and self.times:
            raise ValueError(f"{self.kind.value} takes no count")

    @classmethod
    def uppercase(cls) -> Command:
        return cls(CommandKind.UPPERCASE)

    @classmethod
    def trim(cls) -> Command:
        return cls(CommandKind.TRIM)

    @classmethod
    def append(cls, times: int) -> Command:
        return cls(CommandKind.APPEND, times)

    def apply(self, text: str) -> str:
        """Return the text with this command applied."""
        if self.kind is CommandKind.UPPERCASE:
            return text.upper()
        if self.kind is CommandKind.TRIM:
            return text.strip()
        return text + "bar" * self.times


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and collect the results in order."""
    return [command.apply(text) for text, command in items]


def _demo_strings() -> Sequence[str]:
    return [
        "blue",
        "red",
        "hi",
        "rust is fun!",
        "nice weather",
        "Interpolation {}".format("Station"),
        "abc"[0:1],
        "  hello there ".strip(),
        "Happy Monday!".replace("Mon", "Tues"),
        "mY sHiFt KeY iS sTiCkY".lower(),
    ]