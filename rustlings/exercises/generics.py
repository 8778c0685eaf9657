"""Generics: lists of any item, wrappers and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
G = TypeVar("G")


def shopping_list() -> list[str]:
    """A shopping list with milk on it."""
    items: list[str] = []
    items.append("milk")
    return items


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@dataclass(frozen=True)
class ReportCard(Generic[G]):
    """A student's report card with a numeric or alphabetic grade."""

    grade: G
    student_name: str
    student_age: int

    def print(self) -> str:
        """The report card as a line of text."""
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"