"""Primitive types: booleans, characters, arrays, slices and tuples."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

BIG_ARRAY_SIZE = 100


def greetings(is_morning: bool, is_evening: bool) -> list[str]:
    """The greetings that fit the time of day."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    return lines


def classify_char(character: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(character) != 1:
        raise ValueError(f"expected a single character, got {character!r}")
    if character.isalpha():
        return "Alphabetical!"
    if character.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def array_size_message(values: Sequence[Any]) -> str:
    """Comment on the size of an array."""
    if len(values) >= BIG_ARRAY_SIZE:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(values: Sequence[Any]) -> Sequence[Any]:
    """The second through fourth elements."""
    return values[1:4]


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a cat given as a (name, age) pair."""
    name, age = cat
    return f"{name} is {age} years old."


def second(numbers: Sequence[Any]) -> Any:
    """The second element of a tuple."""
    return numbers[1]