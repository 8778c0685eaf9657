"""Recursive cons lists and sums shared across worker threads."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value and the rest of the list, None being the empty list."""

    value: int
    rest: Cons | None = None


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons | None:
    """A short non-empty cons list."""
    return Cons(1, Cons(2))


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every workers-th number from each offset, one thread per offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")

    def sum_from(offset: int) -> int:
        total = sum(numbers[offset::workers])
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_from, range(workers)))