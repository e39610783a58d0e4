"""Coloured status messages for the terminal."""

import os
import sys

_RED = "31"
_GREEN = "32"


def _styled(text: str, code: str) -> str:
    isatty = getattr(sys.stdout, "isatty", None)
    if isatty is not None and isatty():
        return f"\x1b[{code}m{text}\x1b[0m"
    return text


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def warn(message: str) -> None:
    """Print a warning line in red."""
    symbol = "!" if _no_emoji() else "⚠️ "
    print(f"{_styled(symbol, _RED)} {_styled(message, _RED)}")


def success(message: str) -> None:
    """Print a success line in green."""
    symbol = "✓" if _no_emoji() else "✅"
    print(f"{_styled(symbol, _GREEN)} {_styled(message, _GREEN)}")