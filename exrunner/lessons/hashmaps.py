"""Dictionaries: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_U8_MAX = 255
_MISSING_FRUIT_COUNT = 78


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds and at least five fruits."""
    return {"banana": 2, "apple": 3, "mango": 8}


class Fruit(enum.Enum):
    """Kinds of fruit that may go into a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_basket(basket: dict[Fruit, int]) -> None:
    """Add every missing kind of fruit, leaving kinds already present untouched."""
    for fruit in Fruit:
        basket.setdefault(fruit, _MISSING_FRUIT_COUNT)


@dataclass
class Team:
    """A team's name with the goals it scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        self.goals_scored = _checked_add(self.goals_scored, scored)
        self.goals_conceded = _checked_add(self.goals_conceded, conceded)


def _checked_add(a: int, b: int) -> int:
    total = a + b
    if total > _U8_MAX:
        raise OverflowError("attempt to add with overflow")
    return total


def _parse_goals(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text.removeprefix("+")
    if not digits or not digits.isascii() or not digits.isdigit():
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _U8_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name, team_1_text, team_2_text = fields[:4]
        team_1_score = _parse_goals(team_1_text)
        team_2_score = _parse_goals(team_2_text)
        scores.setdefault(team_1_name, Team(team_1_name)).record(team_1_score, team_2_score)
        scores.setdefault(team_2_name, Team(team_2_name)).record(team_2_score, team_1_score)
    return scores