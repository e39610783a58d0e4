"""Functions with parameters and return values, and a generic wrapper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def call_me(num: int) -> list[str]:
    """Ring num times, printing and returning each ring."""
    rings = [f"Ring! Call number {i + 1}" for i in range(num)]
    for ring in rings:
        print(ring)
    return rings


def is_even(num: int) -> bool:
    """True for even numbers."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off for an even price, three off for an odd one."""
    if is_even(price):
        return price - 10
    return price - 3


def square(num: int) -> int:
    """num times num."""
    return num * num


def shopping_list() -> list[str]:
    """A shopping list of strings."""
    items: list[str] = []
    items.append("milk")
    return items


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T