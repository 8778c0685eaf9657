"""Circle areas and adding an optional number."""

from __future__ import annotations

import math


def circle_area(radius: float) -> float:
    """Area of a circle with the given radius."""
    return math.pi * radius**2


def add_optional(total: int, option: int | None) -> int:
    """Add the optional number to the total when it is present."""
    if option is not None:
        total += option
    return total