"""Appending "Bar" to strings and to lists of strings."""

from __future__ import annotations

from functools import singledispatch

BAR = "Bar"


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or add "Bar" as a new element of a list."""
    raise TypeError(f"cannot append bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + BAR


@append_bar.register
def _(value: list) -> list:
    return [*value, BAR]