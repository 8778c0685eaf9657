"""Small functions: calling, pricing, parity and squares."""

from __future__ import annotations


def call_me(num: int) -> None:
    """Print one ring line per call."""
    for i in range(num):
        print(f"Ring! Call number {i + 1}")


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price, 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num