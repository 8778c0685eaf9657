"""Strings: returning and checking words."""

from __future__ import annotations

COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    """The favourite colour of the moment."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colour words."""
    return attempt in COLOR_WORDS