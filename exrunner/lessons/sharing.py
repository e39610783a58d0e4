"""Recursive lists, shared owners, copy-on-write and work split across threads."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list: a value and the rest of the list."""

    value: int
    rest: Cons | Nil


def create_empty_list() -> Nil:
    """An empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding a single value."""
    return Cons(1, Nil())


class Sun:
    """The star that every planet revolves around."""

    def __repr__(self) -> str:
        return "Sun"


PLANET_NAMES = (
    "Mercury",
    "Venus",
    "Earth",
    "Mars",
    "Jupiter",
    "Saturn",
    "Uranus",
    "Neptune",
)


@dataclass(frozen=True)
class Planet:
    """A planet that shares ownership of its sun."""

    name: str
    sun: Sun

    def __post_init__(self) -> None:
        if self.name not in PLANET_NAMES:
            raise ValueError(f"unknown planet: {self.name!r}")

    def details(self) -> str:
        """Print and return a greeting from the planet."""
        text = f"Hi from {self.name}({self.sun!r})!"
        print(text)
        return text


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Absolute values; the input itself is returned when nothing needs changing."""
    if all(value >= 0 for value in values):
        return values
    return [abs(value) for value in values]


def offset_sums(numbers: Iterable[int], workers: int) -> list[int]:
    """Sum the numbers congruent to each offset modulo workers, one thread per offset."""
    if workers < 1:
        raise ValueError("workers must be at least 1")
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        return sum(n for n in shared if n % workers == offset)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))