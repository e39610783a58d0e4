"""Small review quizzes: apple prices, a string machine and report cards."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass


def calculate_price_of_apples(quantity: int) -> int:
    """Two per apple, or one per apple when more than 40 are bought."""
    if quantity > 40:
        return quantity
    return quantity * 2


class _Action(enum.Enum):
    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """What to do with a string in the transformer."""

    action: _Action
    times: int = 0

    @classmethod
    def uppercase(cls) -> Command:
        return cls(_Action.UPPERCASE)

    @classmethod
    def trim(cls) -> Command:
        return cls(_Action.TRIM)

    @classmethod
    def append(cls, times: int) -> Command:
        if times < 0:
            raise ValueError("times must not be negative")
        return cls(_Action.APPEND, times)

    def apply(self, text: str) -> str:
        if self.action is _Action.UPPERCASE:
            return text.upper()
        if self.action is _Action.TRIM:
            return text.strip()
        # At least one "bar" is always appended.
        return text + "bar" * max(self.times, 1)


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string, keeping the order."""
    return [command.apply(text) for text, command in items]


def _format_grade(grade: float | str) -> str:
    if isinstance(grade, float) and grade.is_integer():
        return str(int(grade))
    return str(grade)


@dataclass
class ReportCard:
    """A report card with a numeric or alphabetical grade."""

    grade: float | str
    student_name: str
    student_age: int

    def render(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_format_grade(self.grade)}"
        )