"""Optional values: unwrapping, popping and matching."""

from __future__ import annotations

from collections.abc import Iterator

from .enums import Point


def print_number(maybe_number: int | None) -> None:
    """Print the number; a missing number is an error."""
    if maybe_number is None:
        raise ValueError("called print_number on a missing number")
    print(f"printing: {maybe_number}")


def computed_numbers() -> list[int]:
    """Five numbers computed from their positions."""
    return [((i * 1235) + 2) // (4 * 16) for i in range(5)]


def describe_word(word: str | None) -> str:
    """Describe an optional word."""
    if word is not None:
        return f"The word is: {word}"
    return "The optional word doesn't contain anything"


def pop_all(values: list[int | None]) -> Iterator[int]:
    """Pop values from the end of the list until it is empty or a missing value is popped."""
    while values:
        value = values.pop()
        if value is None:
            return
        print(f"current value: {value}")
        yield value


def describe_point(point: Point | None) -> str:
    """Describe the co-ordinates of an optional point."""
    match point:
        case Point(x=x, y=y):
            return f"Co-ordinates are {x},{y} "
        case _:
            return "no match"