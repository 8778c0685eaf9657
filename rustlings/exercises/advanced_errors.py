"""Custom error types: positive integers and climate records."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .error_handling import PositiveNonzeroInteger, _parse_int, parse_pos_nonzero

_FLOAT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.ASCII | re.IGNORECASE,
)


def _parse_float(text: str) -> float:
    """Parse a float strictly: no surrounding whitespace, no underscores."""
    if not text:
        raise ValueError("cannot parse float from empty string")
    if not _FLOAT.fullmatch(text):
        raise ValueError("invalid float literal")
    return float(text)


def parse_positive_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger, raising ParsePosNonzeroError."""
    return parse_pos_nonzero(text)


class ParseClimateError(ValueError):
    """Text could not be parsed into a Climate record."""

    class Kind(Enum):
        EMPTY = "empty input"
        BAD_LEN = "incorrect number of fields"
        NO_CITY = "no city name"
        PARSE_INT = "error parsing year"
        PARSE_FLOAT = "error parsing temperature"

    def __init__(self, kind: "ParseClimateError.Kind", source: Exception | None = None):
        message = kind.value if source is None else f"{kind.value}: {source}"
        super().__init__(message)
        self.kind = kind
        self.source = source


@dataclass(frozen=True)
class Climate:
    """A city's temperature in a given year."""

    city: str
    year: int
    temp: float


def parse_climate(text: str) -> Climate:
    """Parse "city,year,temp" into a Climate, raising ParseClimateError."""
    if not text:
        raise ParseClimateError(ParseClimateError.Kind.EMPTY)
    fields = text.split(",")
    if len(fields) != 3:
        raise ParseClimateError(ParseClimateError.Kind.BAD_LEN)
    city, year_text, temp_text = fields
    if not city:
        raise ParseClimateError(ParseClimateError.Kind.NO_CITY)
    try:
        year = _parse_int(year_text, bits=32, signed=False)
    except ValueError as error:
        raise ParseClimateError(ParseClimateError.Kind.PARSE_INT, error) from error
    try:
        temp = _parse_float(temp_text)
    except ValueError as error:
        raise ParseClimateError(ParseClimateError.Kind.PARSE_FLOAT, error) from error
    return Climate(city=city, year=year, temp=temp)