"""Small warm-up routines: variables, functions, conditionals and primitive types."""

from __future__ import annotations

import argparse
import time

NUMBER = 3

_FRUIT = "Pear"
_VEGGIE = "Cucumber"

_HABITATS = {
    "crab": "Beach",
    "gopher": "Burrow",
    "snake": "Desert",
}


def welcome_message() -> str:
    """Return the greeting shown when the exercises start."""
    lines = [
        "       Welcome to...",
        "  _   _       _              _",
        " | |_(_)_ __ | | _____ _ __ | |__   _____  __",
        " | __| | '_ \\| |/ / _ \\ '__|| '_ \\ / _ \\ \\/ /",
        " | |_| | | | |   <  __/ |   | |_) | (_) >  <",
        "  \\__|_|_| |_|_|\\_\\___|_|   |_.__/ \\___/_/\\_\\",
        "",
        "This exercise runs successfully. The remaining exercises each hold a",
        "small puzzle. The central idea is to solve them one after another.",
        "Good luck!",
    ]
    return "\n".join(lines)


def ring_calls(num: int) -> list[str]:
    """Return one ring line per call, numbered from one."""
    return [f"Ring! Call number {i}" for i in range(1, num + 1)]


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a >= b else b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    """Return where an animal lives, or ``"Unknown"``."""
    return _HABITATS.get(animal, "Unknown")


def describe_char(character: str) -> str:
    """Classify a single character as alphabetic, numeric or neither."""
    if len(character) != 1:
        raise ValueError(f"expected a single character, got {character!r}")
    if character.isalpha():
        return "Alphabetical!"
    if character.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def _get_secret_recipe() -> str:
    return "Ginger"


def make_sausage() -> str:
    _get_secret_recipe()
    return "sausage!"


def favorite_snacks() -> tuple[str, str]:
    """Return the favourite fruit and vegetable."""
    return _FRUIT, _VEGGIE


def seconds_since_epoch() -> int:
    """Return whole seconds elapsed since 1970-01-01 00:00:00 UTC."""
    now = time.time()
    if now < 0:
        raise RuntimeError("SystemTime before UNIX EPOCH!")
    return int(now)


def calculate_price_of_apples(value: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return value * 2 if value <= 40 else value


def main(argv: list[str] | None = None) -> int:
    """Print a walk through the warm-up exercises."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)

    print(welcome_message())
    print()
    print("Hello world!")

    x = 5
    print(f"x has the value {x}")
    x = 10
    print("x is ten!" if x == 10 else "x is not ten!")
    print(f"Number {1337}")
    x = 3
    print(f"Number {x}")
    x = 5
    print(f"Number {x}")

    number = "T-H-R-E-E"
    print(f"Spell a number: {number}")
    count = 3
    print(f"Number plus two is: {count + 2}")
    print(f"Number: {NUMBER}")

    for line in ring_calls(3) + ring_calls(5):
        print(line)
    print(f"Your sale price is {sale_price(51)}")
    print(f"The square of 3 is {square(3)}")
    print(f"Number: {bigger(10, 8)}")

    is_morning = True
    if is_morning:
        print("Good morning!")
    if not is_morning:
        print("Good evening!")

    print(describe_char("C"))
    print(describe_char("x"))

    big_array = ["x"] * 100
    if len(big_array) < 100:
        raise RuntimeError("Array not big enough, more elements needed")
    print("Wow, that's a big array!")

    name, age = ("Furry McFurson", 3.5)
    print(f"{name} is {age} years old")

    print(make_sausage())
    fruit, veggie = favorite_snacks()
    print(f"favorite snacks: {fruit} and {veggie}")
    print(f"1970-01-01 00:00:00 UTC was {seconds_since_epoch()} seconds ago!")
    return 0