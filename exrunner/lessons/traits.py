"""Shared behaviour: appending "Bar", licensing information and combined abilities."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Something that can report its licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both report the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class _SomeAbility:
    def some_function(self) -> bool:
        return True


class _OtherAbility:
    def other_function(self) -> bool:
        return True


class SomeStruct(_SomeAbility, _OtherAbility):
    """A type with both abilities."""


class OtherStruct(_SomeAbility, _OtherAbility):
    """Another type with both abilities."""


def some_func(item: _SomeAbility) -> bool:
    """True when the item's two abilities both answer True."""
    return item.some_function() and item.other_function()