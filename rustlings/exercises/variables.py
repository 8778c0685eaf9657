"""Variables: bindings, shadowing, late initialisation and constants."""

from __future__ import annotations

NUMBER = 3


def ten_check(x: int) -> str:
    """Say whether x is ten."""
    return "Ten!" if x == 10 else "Not ten!"


def number_lines() -> list[str]:
    """The lines the variable examples print, in order."""
    lines = []

    x = 5
    lines.append(f"x has the value {x}")

    lines.append(ten_check(10))

    x = 3
    lines.append(f"Number {x}")
    x = 5
    lines.append(f"Number {x}")

    x = 10
    lines.append(f"Number {x}")

    number: str | int = "T-H-R-E-E"
    lines.append(f"Spell a Number : {number}")
    number = 3
    lines.append(f"Number plus two is : {number + 2}")

    lines.append(f"Number {NUMBER}")
    return lines


def main() -> None:
    """Print the variable examples."""
    for line in number_lines():
        print(line)