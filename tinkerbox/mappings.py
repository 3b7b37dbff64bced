"""Dictionaries and optional values: fruit baskets, score tables and icecream."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_U8_MAX = 255
_U16_MAX = 65535
_GOALS = re.compile(r"\+?[0-9]+")


def fruit_basket() -> dict[str, int]:
    """Return a basket of at least three kinds and five pieces of fruit."""
    return {"banana": 2, "apple": 10, "mango": 27}


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add ten of every fruit kind that the basket does not hold yet.

    Kinds already present keep their count.
    """
    for fruit in Fruit:
        basket.setdefault(fruit, 10)


@dataclass
class TeamScores:
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not _GOALS.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    goals = int(text)
    if goals > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return goals


def _add_goals(total: int, goals: int) -> int:
    result = total + goals
    if result > _U8_MAX:
        raise OverflowError("goal total exceeds 255")
    return result


def build_scores_table(results: str) -> dict[str, TeamScores]:
    """Build a table of goals scored and conceded per team.

    Each line has the form ``team_1,team_2,team_1_goals,team_2_goals``.
    Malformed lines raise ``ValueError``.
    """
    scores: dict[str, TeamScores] = {}
    lines = results.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    for raw in lines:
        line = raw[:-1] if raw.endswith("\r") else raw
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1 = _parse_goals(fields[2])
        goals_2 = _parse_goals(fields[3])

        first = scores.setdefault(team_1, TeamScores())
        first.goals_scored = _add_goals(first.goals_scored, goals_1)
        first.goals_conceded = _add_goals(first.goals_conceded, goals_2)

        second = scores.setdefault(team_2, TeamScores())
        second.goals_scored = _add_goals(second.goals_scored, goals_2)
        second.goals_conceded = _add_goals(second.goals_conceded, goals_1)

    return scores


def maybe_icecream(hour_of_day: int) -> int | None:
    """Return the scoops left at the given hour, or None for an hour past 23."""
    if not 0 <= hour_of_day <= _U16_MAX:
        raise ValueError(f"hour out of range: {hour_of_day}")
    if hour_of_day <= 21:
        return 5
    if hour_of_day <= 23:
        return 0
    return None


def drain_optional(values: list[int | None]) -> list[int]:
    """Pop values off the end of the list until it is empty or a None is popped.

    Returns the popped integers in the order they were taken. The list is
    modified in place; the None that stops the draining is removed too.
    """
    drained: list[int] = []
    while values:
        item = values.pop()
        if item is None:
            break
        drained.append(item)
    return drained