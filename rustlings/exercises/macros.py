"""A greeting that behaves differently with and without an argument."""

from __future__ import annotations

from typing import Any


def my_macro(*args: Any) -> None:
    """Print a fixed message, or a message about the single value given."""
    match args:
        case ():
            print("Check out my macro!")
        case (value,):
            print(f"Look at this other macro: {value}")
        case _:
            raise TypeError(f"my_macro takes at most one argument, got {len(args)}")