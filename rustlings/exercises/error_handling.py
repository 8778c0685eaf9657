"""Reporting errors: name tags, token costs and positive non-zero integers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

PROCESSING_FEE = 1
COST_PER_ITEM = 5

_SIGNED = re.compile(r"[+-]?[0-9]+", re.ASCII)
_UNSIGNED = re.compile(r"\+?[0-9]+", re.ASCII)


def _parse_int(text: str, bits: int = 32, signed: bool = True) -> int:
    """Parse an integer strictly: optional sign, ASCII digits, range checked."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    pattern = _SIGNED if signed else _UNSIGNED
    if not pattern.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if signed:
        low, high = -(2 ** (bits - 1)), 2 ** (bits - 1) - 1
    else:
        low, high = 0, 2**bits - 1
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raises ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed to buy the typed quantity of items, fee included."""
    quantity = _parse_int(item_quantity)
    return quantity * COST_PER_ITEM + PROCESSING_FEE


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the items if affordable, print the outcome and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """A value cannot make a positive non-zero integer."""

    class Kind(Enum):
        NEGATIVE = "number is negative"
        ZERO = "number is zero"

    def __init__(self, kind: "CreationError.Kind"):
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.Kind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.Kind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed into a positive non-zero integer."""

    class Kind(Enum):
        CREATION = "creation"
        PARSE_INT = "parse_int"

    def __init__(self, kind: "ParsePosNonzeroError.Kind", source: Exception):
        super().__init__(str(source))
        self.kind = kind
        self.source = source


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger, raising ParsePosNonzeroError."""
    try:
        value = _parse_int(text, bits=64)
    except ValueError as error:
        raise ParsePosNonzeroError(ParsePosNonzeroError.Kind.PARSE_INT, error) from error
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as error:
        raise ParsePosNonzeroError(ParsePosNonzeroError.Kind.CREATION, error) from error