"""The welcome text and a first greeting."""

from __future__ import annotations

_WELCOME = (
    "Hello and",
    r"       welcome to...                      ",
    r"                 _   _ _                  ",
    r"  _ __ _   _ ___| |_| (_)_ __   __ _ ___  ",
    r" | '__| | | / __| __| | | '_ \ / _` / __| ",
    r" | |  | |_| \__ \ |_| | | | | | (_| \__ \ ",
    r" |_|   \__,_|___/\__|_|_|_| |_|\__, |___/ ",
    r"                               |___/      ",
    "",
    "This exercise compiles successfully. The remaining exercises contain a compiler",
    "or logic error. The central concept behind Rustlings is to fix these errors and",
    "solve the exercises. Good luck!",
)


def welcome_banner() -> str:
    """The welcome banner and introduction, one line per row."""
    return "\n".join(_WELCOME)


def greeting(name: str) -> str:
    """Greet the given name."""
    return f"Hello {name}!"