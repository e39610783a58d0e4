"""Reporting errors instead of failing silently: name tags, costs and positive integers."""

from __future__ import annotations

import operator
import re
from dataclasses import dataclass

_I32 = (-(2**31), 2**31 - 1)
_I64 = (-(2**63), 2**63 - 1)
_INTEGER = re.compile(r"[+-]?[0-9]+")

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, bounds: tuple[int, int]) -> int:
    """Parse a signed integer within bounds, with the usual integer-parsing messages."""
    low, high = bounds
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is refused with an explanation."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: five per item plus a fee of one."""
    quantity = _parse_int(item_quantity, _I32)
    return quantity * COST_PER_ITEM + PROCESSING_FEE


def purchase(tokens: int, item_quantity: str) -> int:
    """Spend tokens on the typed quantity and return what is left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationError(ValueError):
    """A PositiveNonzeroInteger could not be created."""


class NegativeError(CreationError):
    """The value was negative."""

    def __init__(self) -> None:
        super().__init__("number is negative")


class ZeroError(CreationError):
    """The value was zero."""

    def __init__(self) -> None:
        super().__init__("number is zero")


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        value = operator.index(self.value)
        if value < 0:
            raise NegativeError()
        if value == 0:
            raise ZeroError()
        object.__setattr__(self, "value", value)


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed into a PositiveNonzeroInteger.

    ``error`` holds the underlying problem: a CreationError, or the
    ValueError raised while parsing the integer.
    """

    def __init__(self, error: ValueError) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def is_creation(self) -> bool:
        return isinstance(self.error, CreationError)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError on failure."""
    try:
        value = _parse_int(text, _I64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err


def describe_positive(text: str) -> str:
    """Parse text and describe the resulting positive integer."""
    value = _parse_int(text, _I64)
    number = PositiveNonzeroInteger(value)
    return f"output=PositiveNonzeroInteger({number.value})"