"""Ownership of lists: filling copies and updating through references."""

from __future__ import annotations

from collections.abc import Iterable

FILL_VALUES = (22, 44, 66)


def fill_vec(values: Iterable[int]) -> list[int]:
    """Return a new list with the given values followed by 22, 44 and 66."""
    return [*values, *FILL_VALUES]


def new_filled_vec() -> list[int]:
    """A freshly created list filled with 22, 44 and 66."""
    return fill_vec([])


def add_through_references(value: int) -> int:
    """Add 100 and then 1000 to the value, one step after the other."""
    total = value
    total += 100
    total += 1000
    return total