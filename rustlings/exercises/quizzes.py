"""Quizzes on functions, strings, tests and macros."""

from __future__ import annotations

BULK_THRESHOLD = 40


def calculate_apple_price(quantity: int) -> int:
    """Price of an order: 2 per apple, or 1 per apple when more than 40 are bought."""
    if quantity > BULK_THRESHOLD:
        return quantity
    return quantity * 2


def string_slice(arg: str) -> None:
    """Print a borrowed string."""
    print(arg)


def string(arg: str) -> None:
    """Print an owned string."""
    print(arg)


def times_two(num: int) -> int:
    """Double a number."""
    return num * 2


def my_macro(text: str) -> str:
    """Greet the given text."""
    return f"Hello {text}"