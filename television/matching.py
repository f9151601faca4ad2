"""Application modes and search-pattern preprocessing."""

from __future__ import annotations

import enum
import re

# The ASCII whitespace characters: space, tab, line feed, form feed, carriage return.
_ASCII_WHITESPACE = re.compile(r"[ \t\n\x0c\r]+")


class Mode(enum.Enum):
    """Which picker the user is interacting with."""

    CHANNEL = "channel"
    REMOTE_CONTROL = "remote_control"


class MatchingMode(enum.Enum):
    """How the search pattern is matched against entries."""

    SUBSTRING = "substring"
    FUZZY = "fuzzy"


def preprocess_pattern(mode: MatchingMode, pattern: str) -> str:
    """Prepare a user pattern for the matcher.

    In substring mode every whitespace-separated word is prefixed with a
    quote so that it is matched exactly; runs of ASCII whitespace collapse
    to a single space. In fuzzy mode the pattern is returned unchanged.
    """
    if mode is MatchingMode.SUBSTRING:
        words = (word for word in _ASCII_WHITESPACE.split(pattern) if word)
        return " ".join(f"'{word}" for word in words)
    return pattern