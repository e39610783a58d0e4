"""Records of several kinds: classic, tuple-like and unit-like, orders and packages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass
class ColorClassic:
    """A colour with named components."""

    red: int
    green: int
    blue: int


class ColorTuple(NamedTuple):
    """A colour whose components are reached by position."""

    red: int
    green: int
    blue: int


class UnitLike:
    """A type that carries no data at all."""

    def __repr__(self) -> str:
        return "UnitLike"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitLike)

    def __hash__(self) -> int:
        return hash(UnitLike)


@dataclass
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """A template order to derive new orders from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A package sent from one country to another."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        """True when sender and recipient are in different countries."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Transport fee for the package's weight."""
        return cents_per_gram * self.weight_in_grams