"""Collections: fruit baskets in dictionaries and number lists."""

from __future__ import annotations

from enum import Enum


class Fruit(Enum):
    """Kinds of fruit a basket may hold."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


NEW_FRUIT_AMOUNT = 1


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five fruits."""
    return {"banana": 2, "apple": 2, "mango": 1}


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add every kind of fruit not already in the basket, leaving existing ones alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, NEW_FRUIT_AMOUNT)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: list[int]) -> list[int]:
    """Double every number."""
    return [value * 2 for value in values]