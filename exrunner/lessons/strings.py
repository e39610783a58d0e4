"""Owned text and borrowed text: favourite colours, trimming, composing and replacing."""

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    """The current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """True for the colour words green, blue and red."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Text without leading and trailing whitespace."""
    return text.strip()


def compose_me(text: str) -> str:
    """Text followed by " world!"."""
    return text + " world!"


def replace_me(text: str) -> str:
    """Text with every "cars" replaced by "balloons"."""
    return text.replace("cars", "balloons")